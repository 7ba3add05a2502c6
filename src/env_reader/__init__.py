"""Environment variable reader tool for LLM agents.

Exposes read_env_var, a function-calling tool that reports whether an
environment variable is set and returns its value, masking the value in the
user-facing display when the name looks like a credential.
"""

from .config import LoggingConfig, ToolLibraryConfig, configure_logging, load_tool_library_config
from .tools import (
    BuiltinRegistry,
    ToolError,
    ToolErrorType,
    ToolResult,
    ToolValidationError,
    register_builtin_tools,
)
from .tools.builtin.system import MappingEnvironment, ProcessEnvironment, ReadEnvVarTool

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Tool
    "ReadEnvVarTool",
    "ProcessEnvironment",
    "MappingEnvironment",
    # Results
    "ToolResult",
    "ToolError",
    "ToolErrorType",
    "ToolValidationError",
    # Registry
    "BuiltinRegistry",
    "register_builtin_tools",
    # Configuration
    "ToolLibraryConfig",
    "LoggingConfig",
    "load_tool_library_config",
    "configure_logging",
]
