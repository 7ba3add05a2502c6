"""Configuration schemas for the tool library.

This module defines Pydantic models for validating configuration data.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    format: Literal["text", "json"] = Field(default="text", description="Output format")
    use_colors: bool = Field(default=True, description="Colorize console output (text format only)")
    log_file: str | None = Field(default=None, description="Optional file to also write logs to")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v


class ToolLibraryConfig(BaseModel):
    """Top-level configuration for the tool library."""

    enabled_tools: list[str] | None = Field(
        default=None, description="Tool names to register (None registers all)"
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging settings")

    @field_validator("enabled_tools")
    @classmethod
    def validate_unique_tools(cls, v: list[str] | None) -> list[str] | None:
        """Validate that no tool is listed twice."""
        if v is not None and len(set(v)) != len(v):
            raise ValueError("enabled_tools contains duplicate names")
        return v


def validate_tool_library_config(data: dict) -> ToolLibraryConfig:
    """Validate tool library configuration data.

    Args:
        data: Raw configuration dictionary

    Returns:
        Validated ToolLibraryConfig

    Raises:
        pydantic.ValidationError: If the data is invalid
    """
    return ToolLibraryConfig(**data)
