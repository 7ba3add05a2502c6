"""System read environment variable tool for built-in tool library."""

import re
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ....utils.logging import get_logger
from ..base import BaseTool, BaseToolInvocation
from ..errors import ToolError, ToolErrorType
from ..result import ToolResult
from .environment import EnvironmentSource, ProcessEnvironment

logger = get_logger(__name__)

VAR_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Lowercase substrings that mark a variable name as holding a credential
SENSITIVE_KEYWORDS = frozenset({"key", "secret", "password", "token", "api"})

MASK_CHAR = "*"
MAX_MASK_LENGTH = 20


def is_sensitive_name(name: str) -> bool:
    """Check whether a variable name suggests it holds a credential.

    Matching is case-insensitive substring containment, so SECRETARY is
    sensitive because it contains "secret".

    Args:
        name: Environment variable name

    Returns:
        True if any sensitive keyword occurs in the name
    """
    lowered = name.lower()
    return any(keyword in lowered for keyword in SENSITIVE_KEYWORDS)


def mask_value(value: str) -> str:
    """Replace a value with a placeholder capped at MAX_MASK_LENGTH characters."""
    return MASK_CHAR * min(len(value), MAX_MASK_LENGTH)


class ReadEnvVarParams(BaseModel):
    """Parameters for the read_env_var tool.

    Attributes:
        variable_name: Name of the environment variable to read
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    variable_name: str = Field(..., alias="variableName", description="Environment variable name")


class ReadEnvVarInvocation(BaseToolInvocation):
    """A single read of one environment variable."""

    params: ReadEnvVarParams

    def __init__(self, params: ReadEnvVarParams, environment: EnvironmentSource) -> None:
        super().__init__(params)
        self.environment = environment

    def get_description(self) -> str:
        return f"Reading environment variable: {self.params.variable_name}"

    def should_confirm_execute(self, signal: Any = None) -> bool:
        # Read-only, never needs approval
        return False

    def execute(self, signal: Any = None) -> ToolResult:
        """Read the variable and shape the result.

        Args:
            signal: Cancellation signal from the host; nothing here blocks,
                so it is never checked

        Returns:
            ToolResult with the true value for the LLM and a masked value for
            display when the name is sensitive, or a not-found error
        """
        name = self.params.variable_name
        value = self.environment.lookup(name)

        if value is None:
            logger.debug("Environment variable %s is not set", name)
            content = f'Environment variable "{name}" is not set.'
            return ToolResult(
                llm_content=content,
                return_display=content,
                error=ToolError(
                    message=f'Environment variable "{name}" not found',
                    type=ToolErrorType.ENV_VAR_NOT_FOUND,
                ),
            )

        sensitive = is_sensitive_name(name)
        display_value = mask_value(value) if sensitive else value
        logger.debug("Read environment variable %s (masked=%s)", name, sensitive)

        return ToolResult(
            llm_content=f'Environment variable "{name}" has value: "{value}"',
            return_display=f'Environment variable "{name}" has value: "{display_value}"',
        )


class ReadEnvVarTool(BaseTool):
    """Tool for reading a single environment variable.

    Args:
        environment: Where variables are looked up (default: the process
            environment)
    """

    params_model = ReadEnvVarParams

    def __init__(self, environment: Optional[EnvironmentSource] = None) -> None:
        self.environment = environment if environment is not None else ProcessEnvironment()

    @property
    def name(self) -> str:
        return "read_env_var"

    @property
    def display_name(self) -> str:
        return "ReadEnvVar"

    @property
    def description(self) -> str:
        return (
            "Reads the value of a specified environment variable. This tool only returns "
            "the value of the environment variable if it exists, otherwise it returns an "
            "error. For security reasons, sensitive environment variables (containing words "
            "like 'key', 'secret', 'password', 'token', or 'api') will be masked in the "
            "display but available to the model."
        )

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "variableName": {
                    "type": "string",
                    "description": (
                        "The name of the environment variable to read "
                        '(e.g., "PATH", "HOME", "JAVA_HOME").'
                    ),
                }
            },
            "required": ["variableName"],
        }

    def validate_tool_param_values(self, params: ReadEnvVarParams) -> Optional[str]:
        name = params.variable_name
        if not name or not name.strip():
            return "Environment variable name cannot be empty."

        if not VAR_NAME_PATTERN.fullmatch(name):
            return (
                f'Environment variable name "{name}" is not valid. Environment variable '
                "names must start with a letter or underscore and contain only letters, "
                "digits, and underscores."
            )

        return None

    def create_invocation(self, params: ReadEnvVarParams) -> ReadEnvVarInvocation:
        return ReadEnvVarInvocation(params, self.environment)
