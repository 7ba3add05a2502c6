"""Configuration management for the tool library."""

from .loader import ConfigError, configure_logging, load_config_file, load_tool_library_config, load_yaml_file
from .schemas import LoggingConfig, ToolLibraryConfig, validate_tool_library_config

__all__ = [
    # Loader
    "ConfigError",
    "configure_logging",
    "load_config_file",
    "load_tool_library_config",
    "load_yaml_file",
    # Schemas
    "LoggingConfig",
    "ToolLibraryConfig",
    "validate_tool_library_config",
]
