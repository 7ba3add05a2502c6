"""Base classes for built-in tools.

A tool is the declarative side of a capability: it describes itself to the
host (name, description, JSON Schema) and validates incoming arguments.
Validated arguments are bound into an invocation, which performs the work.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Type

from pydantic import BaseModel

from ...utils.logging import get_logger
from .errors import ToolValidationError
from .result import ToolResult

logger = get_logger(__name__)

# JSON Schema type name -> accepted Python types; undeclared types are not checked
_SCHEMA_TYPES: Dict[str, tuple] = {
    "string": (str,),
}


class ToolKind(str, Enum):
    """Broad category of what a tool does to its surroundings."""

    READ = "read"
    EDIT = "edit"
    EXECUTE = "execute"
    OTHER = "other"


class BaseToolInvocation(ABC):
    """A tool call bound to validated parameters."""

    def __init__(self, params: BaseModel) -> None:
        self.params = params

    @abstractmethod
    def get_description(self) -> str:
        """One-line description of the pending action."""

    def should_confirm_execute(self, signal: Any = None) -> bool:
        """Whether the host must ask the user before executing.

        Args:
            signal: Cancellation signal from the host (unused)

        Returns:
            True if confirmation is required
        """
        return False

    @abstractmethod
    def execute(self, signal: Any = None) -> ToolResult:
        """Run the invocation.

        Args:
            signal: Cancellation signal from the host

        Returns:
            ToolResult with the outcome
        """


class BaseTool(ABC):
    """Base class for declarative tools."""

    params_model: ClassVar[Type[BaseModel]]

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Name shown to the user."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description."""

    @property
    @abstractmethod
    def parameters(self) -> Dict[str, Any]:
        """Tool parameters schema (JSON Schema format)."""

    @property
    def kind(self) -> ToolKind:
        return ToolKind.OTHER

    @property
    def requires_confirmation(self) -> bool:
        """Whether invocations of this tool ever need user confirmation."""
        return False

    def validate_tool_params(self, params: Mapping[str, Any]) -> Optional[str]:
        """Validate raw arguments against the schema, then by value.

        Args:
            params: Raw arguments supplied by the host

        Returns:
            Error message, or None if the arguments are valid
        """
        error = self._check_schema(params)
        if error:
            return error
        return self.validate_tool_param_values(self.params_model.model_validate(dict(params)))

    def validate_tool_param_values(self, params: BaseModel) -> Optional[str]:
        """Tool-specific value checks run after the schema check."""
        return None

    def build(self, params: Mapping[str, Any]) -> BaseToolInvocation:
        """Validate arguments and bind them into an invocation.

        Args:
            params: Raw arguments supplied by the host

        Returns:
            Invocation ready to execute

        Raises:
            ToolValidationError: If the arguments are invalid
        """
        error = self.validate_tool_params(params)
        if error:
            logger.debug("Rejected %s call: %s", self.name, error)
            raise ToolValidationError(self.name, error)
        return self.create_invocation(self.params_model.model_validate(dict(params)))

    @abstractmethod
    def create_invocation(self, params: BaseModel) -> BaseToolInvocation:
        """Create an invocation from validated parameters."""

    def execute(self, signal: Any = None, **kwargs: Any) -> ToolResult:
        """Build and run an invocation in one step.

        Raises:
            ToolValidationError: If the arguments are invalid
        """
        return self.build(kwargs).execute(signal)

    def to_dict(self) -> Dict[str, Any]:
        """Convert tool to dictionary format for registration."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "description": self.description,
            "parameters": self.parameters,
            "kind": self.kind.value,
        }

    def _check_schema(self, params: Mapping[str, Any]) -> Optional[str]:
        if not isinstance(params, Mapping):
            return "params must be object"
        schema = self.parameters
        for prop in schema.get("required", []):
            if prop not in params:
                return f"params must have required property '{prop}'"
        for prop, spec in schema.get("properties", {}).items():
            if prop not in params or "type" not in spec:
                continue
            value = params[prop]
            accepted = _SCHEMA_TYPES.get(spec["type"], (object,))
            if not isinstance(value, accepted):
                return f"params/{prop} must be {spec['type']}"
        return None
