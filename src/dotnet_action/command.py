from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from .constants import TOOLCHAIN
from .models import ActionKind, CommandSpec, ResolvedInputs


@dataclass(frozen=True)
class Switch:
    """Bare flag emitted when the input resolved to True."""

    input_name: str
    flag: str


@dataclass(frozen=True)
class Option:
    """Flag/value pair emitted when the input resolved to a non-empty string."""

    input_name: str
    flag: str


FlagRule = Union[Switch, Option]

NO_RESTORE_FLAG = Switch("no-restore", "--no-restore")
NO_BUILD_FLAG = Switch("no-build", "--no-build")
OUTPUT_FLAG = Option("output", "-o")

# Order here is the order on the command line.
FLAG_ORDER: Dict[ActionKind, Tuple[FlagRule, ...]] = {
    ActionKind.BUILD: (NO_RESTORE_FLAG,),
    ActionKind.CLEAN: (OUTPUT_FLAG,),
    ActionKind.PACK: (OUTPUT_FLAG, NO_RESTORE_FLAG, NO_BUILD_FLAG),
    ActionKind.PUBLISH: (NO_RESTORE_FLAG, NO_BUILD_FLAG, OUTPUT_FLAG, Option("runtime", "-r")),
    ActionKind.TEST: (
        NO_RESTORE_FLAG,
        NO_BUILD_FLAG,
        Option("filter", "--filter"),
        Option("logger", "--logger"),
    ),
}


def build_command(kind: ActionKind, resolved: ResolvedInputs) -> CommandSpec:
    args: List[str] = [
        TOOLCHAIN,
        kind.value,
        resolved.text("project"),
        "-c",
        resolved.text("configuration"),
    ]
    for rule in FLAG_ORDER[kind]:
        if isinstance(rule, Switch):
            if resolved.flag(rule.input_name):
                args.append(rule.flag)
        else:
            value = resolved.text(rule.input_name)
            if value:
                args.extend([rule.flag, value])
    return tuple(args)


def format_command(command: CommandSpec) -> str:
    return " ".join(command)
