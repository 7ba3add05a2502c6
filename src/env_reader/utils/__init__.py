"""Utility modules for the tool library."""

from .logging import ColoredFormatter, LogEntry, LogLevel, StructuredFormatter, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogEntry",
    "StructuredFormatter",
    "ColoredFormatter",
]
