"""Configuration loader for the tool library.

This module loads YAML and JSON configuration files and validates them
against the schemas in env_reader.config.schemas.
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..utils.logging import get_logger, setup_logging
from .schemas import LoggingConfig, ToolLibraryConfig, validate_tool_library_config

logger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be parsed or validated."""


def load_yaml_file(file_path: str | Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dictionary.

    Args:
        file_path: Path to the YAML file

    Returns:
        Dictionary containing the YAML contents

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file is not valid YAML
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config_file(file_path: str | Path, config_type: str = "auto") -> dict[str, Any]:
    """Load a configuration file (YAML or JSON).

    Args:
        file_path: Path to the configuration file
        config_type: Type of config ("yaml", "json", or "auto" to detect from extension)

    Returns:
        Dictionary containing the configuration

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the file type is unsupported or the content is invalid
    """
    path = Path(file_path)

    if config_type == "auto":
        suffix = path.suffix.lower()
        if suffix in [".yaml", ".yml"]:
            config_type = "yaml"
        elif suffix == ".json":
            config_type = "json"
        else:
            raise ConfigError(f"Unsupported configuration file type: {path.suffix}")

    try:
        if config_type == "yaml":
            data = load_yaml_file(path)
        elif config_type == "json":
            if not path.exists():
                raise FileNotFoundError(f"Configuration file not found: {file_path}")
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigError(f"Unsupported configuration type: {config_type}")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid configuration file {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {file_path} must contain a mapping")
    return data


def load_tool_library_config(file_path: str | Path | None = None) -> ToolLibraryConfig:
    """Load and validate the tool library configuration.

    Args:
        file_path: Path to a YAML or JSON file (None returns defaults)

    Returns:
        Validated ToolLibraryConfig

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the file is invalid
    """
    if file_path is None:
        return ToolLibraryConfig()

    data = load_config_file(file_path)
    try:
        config = validate_tool_library_config(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid tool library configuration in {file_path}: {e}") from e

    logger.debug("Loaded tool library configuration from %s", file_path)
    return config


def configure_logging(config: LoggingConfig) -> None:
    """Apply a LoggingConfig to the package logger.

    Args:
        config: Logging settings
    """
    setup_logging(
        level=config.level,
        format_type=config.format,
        use_colors=config.use_colors,
        log_file=config.log_file,
    )
