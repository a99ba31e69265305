from __future__ import annotations

import os
from types import MappingProxyType
from typing import Mapping, Optional


class EnvironmentResolver:
    """
    Read-only snapshot of the process environment.

    Fallback chains treat an empty value the same as a missing one. Callers that
    need to tell the two apart use `raw`.
    """

    def __init__(self, variables: Mapping[str, str]):
        self._variables = MappingProxyType(dict(variables))

    @classmethod
    def from_process(cls) -> "EnvironmentResolver":
        return cls(os.environ)

    def raw(self, name: str) -> Optional[str]:
        return self._variables.get(name)

    def lookup(self, name: str) -> Optional[str]:
        value = self._variables.get(name)
        return value if value else None

    def resolve_with_fallback(self, primary: str, secondary: str, default: str) -> str:
        """Return the first non-empty of `primary`, `secondary`, else `default`."""
        return self.lookup(primary) or self.lookup(secondary) or default

    def __contains__(self, name: object) -> bool:
        return name in self._variables
