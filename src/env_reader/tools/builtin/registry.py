"""Tool registry for built-in tool library.

This module provides the BuiltinRegistry class for managing tool
registration, discovery, LLM integration and dispatch.
"""

import asyncio
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ...utils.logging import get_logger
from .base import BaseTool
from .errors import ToolError, ToolErrorType, ToolValidationError
from .result import ToolResult

logger = get_logger(__name__)


class BuiltinRegistry:
    """Simple registry for builtin tools.

    Provides tool registration, discovery, LLM integration,
    and parallel execution support.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._tools: Dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool instance.

        Args:
            tool: Tool instance

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if not hasattr(tool, "name"):
            raise ValueError("Tool must have a 'name' property")
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool
        logger.debug("Registered tool %s", tool.name)

    def get(self, name: str) -> Optional[BaseTool]:
        """Get tool by name.

        Args:
            name: Tool name

        Returns:
            Tool instance or None if not found
        """
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self._tools

    def list_all(self) -> List[BaseTool]:
        """List all registered tools."""
        return list(self._tools.values())

    def to_llm_list(self) -> List[Dict[str, Any]]:
        """Export all tools in LLM function calling format (OpenAI compatible).

        Returns:
            List of dictionaries in OpenAI function calling format:
            [
                {
                    "type": "function",
                    "function": {
                        "name": "tool_name",
                        "description": "Tool description",
                        "parameters": {...JSON Schema...}
                    }
                },
                ...
            ]
        """
        return [
            {
                "type": "function",
                "function": {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": tool.parameters,
                },
            }
            for tool in self._tools.values()
        ]

    def execute(self, name: str, args: Mapping[str, Any], signal: Any = None) -> ToolResult:
        """Validate arguments and execute a tool.

        Invalid arguments are rejected without running the tool.

        Args:
            name: Tool name
            args: Raw arguments from the LLM
            signal: Cancellation signal passed through to the invocation

        Returns:
            ToolResult from the tool, or an error result if the tool is
            unknown or the arguments are invalid
        """
        tool = self.get(name)
        if tool is None:
            message = f"Tool not found: {name}"
            return ToolResult(
                llm_content=message,
                error=ToolError(message=message, type=ToolErrorType.TOOL_NOT_REGISTERED),
            )

        try:
            invocation = tool.build(args)
        except ToolValidationError as e:
            logger.warning("Invalid parameters for %s: %s", name, e.message)
            return ToolResult(
                llm_content=e.message,
                error=ToolError(message=e.message, type=ToolErrorType.INVALID_TOOL_PARAMS),
            )

        logger.info("%s", invocation.get_description())
        return invocation.execute(signal)

    async def execute_batch(
        self, calls: List[Tuple[str, Dict[str, Any]]]
    ) -> List[ToolResult]:
        """Execute multiple builtin tools concurrently.

        Args:
            calls: List of (tool_name, arguments) tuples

        Returns:
            List of ToolResult objects in same order as calls
        """

        async def execute_one(name: str, args: Dict[str, Any]) -> ToolResult:
            return await asyncio.to_thread(self.execute, name, args)

        tasks = [execute_one(name, args) for name, args in calls]
        return list(await asyncio.gather(*tasks))
