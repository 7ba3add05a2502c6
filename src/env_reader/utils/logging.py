"""Logging configuration for the tool library.

Modules obtain loggers with get_logger(__name__). Nothing is configured at
import time; applications call setup_logging() (or
env_reader.config.configure_logging()) to attach handlers to the package
logger.
"""

import json
import logging
import sys
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

PACKAGE_LOGGER = "env_reader"


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogEntry(BaseModel):
    """Structured log entry.

    Attributes:
        timestamp: Log timestamp
        level: Log level
        message: Log message
        logger: Logger name
        context: Source location and exception details
    """

    timestamp: str
    level: str
    message: str
    logger: str
    context: dict[str, Any] = Field(default_factory=dict)


class StructuredFormatter(logging.Formatter):
    """Formatter for structured log output (JSON or plain text)."""

    def __init__(self, format_type: str = "json") -> None:
        super().__init__()
        self.format_type = format_type

    def format(self, record: logging.LogRecord) -> str:
        log_entry = LogEntry(
            timestamp=datetime.fromtimestamp(record.created).isoformat(),
            level=record.levelname,
            message=record.getMessage(),
            logger=record.name,
            context={
                "function": record.funcName,
                "line": record.lineno,
                "module": record.module,
            },
        )

        if record.exc_info:
            log_entry.context["exception"] = self.formatException(record.exc_info)

        if self.format_type == "json":
            return json.dumps(log_entry.model_dump())
        return f"{log_entry.timestamp} [{log_entry.level}] {log_entry.logger}: {log_entry.message}"


class ColoredFormatter(logging.Formatter):
    """Colored console formatter using ANSI color codes."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.COLORS.get(record.levelname, "")
        reset_color = self.COLORS["RESET"]

        # Format: [LEVEL] logger: message
        level_name = f"{level_color}{record.levelname}{reset_color}"
        return f"[{level_name}] {record.name}: {record.getMessage()}"


def setup_logging(
    level: str | LogLevel = "INFO",
    format_type: str = "text",
    use_colors: bool = True,
    log_file: str | None = None,
) -> logging.Logger:
    """Attach handlers to the package logger.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Output format ("json", "text")
        use_colors: Whether to use colors in console output
        log_file: Optional file to write logs to

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level.value if isinstance(level, LogLevel) else level.upper())

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    if use_colors and format_type == "text":
        console_handler.setFormatter(ColoredFormatter())
    else:
        console_handler.setFormatter(StructuredFormatter(format_type=format_type))
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter(format_type=format_type))
        package_logger.addHandler(file_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (usually __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
