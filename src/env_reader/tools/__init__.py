"""Tool integration for agents.

Builtin tools are local capabilities exposed to an LLM through the
function-calling format.
"""

from .builtin import (
    BaseTool,
    BuiltinRegistry,
    ToolError,
    ToolErrorType,
    ToolResult,
    ToolValidationError,
    register_builtin_tools,
    register_system_tools,
)

__all__ = [
    "BaseTool",
    "BuiltinRegistry",
    "ToolError",
    "ToolErrorType",
    "ToolResult",
    "ToolValidationError",
    "register_builtin_tools",
    "register_system_tools",
]
