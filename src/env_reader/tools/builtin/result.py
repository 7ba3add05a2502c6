"""ToolResult class for built-in tool library.

This module defines the ToolResult class which carries the two output
channels of a tool execution: content for the LLM and a display string for
the human watching the session.
"""

from typing import Any, Dict, Optional

from .errors import ToolError


class ToolResult:
    """Result of tool execution.

    Attributes:
        llm_content: Content returned to the LLM (never redacted)
        return_display: Content shown to the user (may be redacted)
        error: Structured error, present only when the tool reports a failure
    """

    def __init__(
        self,
        llm_content: str,
        return_display: Optional[str] = None,
        error: Optional[ToolError] = None,
    ):
        """Initialize a ToolResult.

        Args:
            llm_content: Content returned to the LLM
            return_display: Content shown to the user (defaults to llm_content)
            error: Structured error, if any
        """
        self.llm_content = llm_content
        self.return_display = llm_content if return_display is None else return_display
        self.error = error

    @property
    def success(self) -> bool:
        return self.error is None

    def to_content(self) -> str:
        """Format for LLM consumption.

        Returns:
            Formatted content string
        """
        return self.llm_content

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary with llm_content, return_display and error
        """
        return {
            "llm_content": self.llm_content,
            "return_display": self.return_display,
            "error": self.error.model_dump(mode="json") if self.error else None,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ToolResult):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        """String representation of the result."""
        if self.success:
            return f"ToolResult(success=True, len={len(self.llm_content)})"
        return f"ToolResult(success=False, error={self.error.type.value})"
