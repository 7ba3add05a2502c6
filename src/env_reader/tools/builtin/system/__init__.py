"""System tools for reading process state."""

from typing import List, Optional

from .env import ReadEnvVarInvocation, ReadEnvVarParams, ReadEnvVarTool, is_sensitive_name, mask_value
from .environment import EnvironmentSource, MappingEnvironment, ProcessEnvironment

__all__ = [
    "ReadEnvVarTool",
    "ReadEnvVarInvocation",
    "ReadEnvVarParams",
    "is_sensitive_name",
    "mask_value",
    "EnvironmentSource",
    "ProcessEnvironment",
    "MappingEnvironment",
    "register_system_tools",
]


def register_system_tools(environment: Optional[EnvironmentSource] = None) -> List:
    """Return all system tool instances.

    Args:
        environment: Environment source shared by the tools (default: process)

    Returns:
        List of system tool instances
    """
    return [
        ReadEnvVarTool(environment=environment),
    ]
