from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple, Union

InputValue = Union[str, bool]
CommandSpec = Tuple[str, ...]


class ActionKind(str, Enum):
    BUILD = "build"
    CLEAN = "clean"
    PACK = "pack"
    PUBLISH = "publish"
    TEST = "test"


@dataclass(frozen=True)
class ResolvedInputs(Mapping[str, InputValue]):
    """Read-only view of the inputs resolved for one action run."""

    kind: ActionKind
    entries: Mapping[str, InputValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __getitem__(self, name: str) -> InputValue:
        return self.entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def text(self, name: str) -> str:
        value = self.entries.get(name, "")
        return value if isinstance(value, str) else ""

    def flag(self, name: str) -> bool:
        return self.entries.get(name) is True


@dataclass(frozen=True)
class ActionOutcome:
    command: CommandSpec
    exit_code: int
    succeeded: bool

    @classmethod
    def from_exit_code(cls, command: CommandSpec, exit_code: int) -> "ActionOutcome":
        return cls(command=tuple(command), exit_code=exit_code, succeeded=exit_code == 0)


@dataclass(frozen=True)
class CIContext:
    """CI detection result, computed once per run."""

    is_ci: bool
    vendor: Optional[str] = None
