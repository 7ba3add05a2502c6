"""Built-in tool library.

This module provides ready-to-use tools organized by category:
- system: Process state retrieval (environment variables)

Example:
    >>> from env_reader.tools.builtin import register_builtin_tools
    >>> registry = register_builtin_tools()
    >>> tools = registry.to_llm_list()
    >>> print([t['function']['name'] for t in tools])
    ['read_env_var']
"""

from typing import Optional

from ...config.schemas import ToolLibraryConfig
from ...utils.logging import get_logger
from .base import BaseTool, BaseToolInvocation, ToolKind
from .errors import ToolError, ToolErrorType, ToolValidationError
from .registry import BuiltinRegistry
from .result import ToolResult
from .system import EnvironmentSource, register_system_tools

__all__ = [
    # Core classes
    "BaseTool",
    "BaseToolInvocation",
    "ToolKind",
    "ToolResult",
    "ToolError",
    "ToolErrorType",
    "ToolValidationError",
    "BuiltinRegistry",
    # Registration functions
    "register_builtin_tools",
    "register_system_tools",
    # Tool names
    "SYSTEM_READ_ENV_VAR",
]

logger = get_logger(__name__)

# Tool name constants for easy reference
SYSTEM_READ_ENV_VAR = "read_env_var"


def register_builtin_tools(
    config: Optional[ToolLibraryConfig] = None,
    environment: Optional[EnvironmentSource] = None,
) -> BuiltinRegistry:
    """Register built-in tools and return the registry.

    Args:
        config: Library configuration; enabled_tools limits which tools are
            registered (default: all)
        environment: Environment source for system tools (default: process)

    Returns:
        BuiltinRegistry instance with the selected tools registered

    Raises:
        ValueError: If enabled_tools names a tool that does not exist
    """
    config = config or ToolLibraryConfig()
    registry = BuiltinRegistry()

    available = {tool.name: tool for tool in register_system_tools(environment)}

    enabled = config.enabled_tools if config.enabled_tools is not None else list(available)
    unknown = sorted(set(enabled) - set(available))
    if unknown:
        raise ValueError(f"Unknown tools in enabled_tools: {', '.join(unknown)}")

    for name in enabled:
        registry.register(available[name])

    logger.debug("Registered %d builtin tools", len(registry.list_all()))
    return registry
