"""Error types for built-in tool library.

This module defines the closed set of error kinds a tool result can carry,
the structured error record attached to results, and the exception raised
when tool parameters fail validation.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ToolErrorType(str, Enum):
    """Error kinds reported to the host alongside a tool result."""

    # Emitted by read_env_var
    ENV_VAR_NOT_FOUND = "env_var_not_found"

    # Emitted by the registry
    INVALID_TOOL_PARAMS = "invalid_tool_params"
    TOOL_NOT_REGISTERED = "tool_not_registered"


class ToolError(BaseModel):
    """Structured error attached to a ToolResult.

    Attributes:
        message: Human-readable error message
        type: Error kind
    """

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Human-readable error message")
    type: ToolErrorType = Field(..., description="Error kind")


class ToolValidationError(ValueError):
    """Raised when tool parameters are rejected before execution.

    The message is the plain validation string, suitable for returning to the
    caller unchanged.
    """

    def __init__(self, tool_name: str, message: str) -> None:
        super().__init__(message)
        self.tool_name = tool_name
        self.message = message
