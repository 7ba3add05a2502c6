"""Read-only access to environment variables.

Tools never touch os.environ directly; they read through an EnvironmentSource
so callers can substitute a fixed mapping instead of mutating process state.
"""

import os
from typing import Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentSource(Protocol):
    """Anything that can look up an environment variable by exact name."""

    def lookup(self, name: str) -> Optional[str]:
        ...


class ProcessEnvironment:
    """Environment of the running process.

    Each lookup reads os.environ at call time; nothing is cached.
    """

    def lookup(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MappingEnvironment:
    """Environment backed by a fixed mapping.

    Args:
        variables: Variable names to values
    """

    def __init__(self, variables: Optional[Mapping[str, str]] = None) -> None:
        self._variables = dict(variables or {})

    def lookup(self, name: str) -> Optional[str]:
        return self._variables.get(name)

    def __repr__(self) -> str:
        # Names only, values may be secrets
        return f"MappingEnvironment(names={sorted(self._variables)})"
