from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Union

from .constants import (
    DEBUG_CONFIGURATION,
    DEFAULT_PROJECT,
    INPUT_PREFIX,
    RELEASE_CONFIGURATION,
)
from .environment import EnvironmentResolver
from .errors import InputError
from .models import ActionKind, InputValue, ResolvedInputs


@dataclass(frozen=True)
class FixedDefault:
    value: str = ""


@dataclass(frozen=True)
class CIDefault:
    when_ci: str
    otherwise: str


@dataclass(frozen=True)
class SwitchDefault:
    """
    Boolean switch such as `no-restore`.

    An explicit value is true only when it is exactly "true". Without one, the
    switch mirrors the CI context when `follows_ci` is set and is off otherwise.
    """

    follows_ci: bool = False


DefaultPolicy = Union[FixedDefault, CIDefault, SwitchDefault]


def env_name(input_name: str) -> str:
    return input_name.upper().replace("-", "_")


@dataclass(frozen=True)
class InputSpec:
    name: str
    policy: DefaultPolicy = FixedDefault()
    required: bool = False

    @property
    def ci_variable(self) -> str:
        return INPUT_PREFIX + env_name(self.name)

    @property
    def plain_variable(self) -> str:
        return env_name(self.name)


CONFIGURATION = InputSpec("configuration", CIDefault(RELEASE_CONFIGURATION, DEBUG_CONFIGURATION))
PROJECT = InputSpec("project", FixedDefault(DEFAULT_PROJECT))
NO_RESTORE = InputSpec("no-restore", SwitchDefault(follows_ci=True))
NO_BUILD = InputSpec("no-build", SwitchDefault(follows_ci=False))
OUTPUT = InputSpec("output")
RUNTIME = InputSpec("runtime")
FILTER = InputSpec("filter")
LOGGER = InputSpec("logger")

ACTION_INPUTS: Dict[ActionKind, Tuple[InputSpec, ...]] = {
    ActionKind.BUILD: (CONFIGURATION, PROJECT, NO_RESTORE),
    ActionKind.CLEAN: (CONFIGURATION, PROJECT, OUTPUT),
    ActionKind.PACK: (CONFIGURATION, PROJECT, NO_RESTORE, NO_BUILD, OUTPUT),
    ActionKind.PUBLISH: (CONFIGURATION, PROJECT, NO_RESTORE, NO_BUILD, OUTPUT, RUNTIME),
    ActionKind.TEST: (CONFIGURATION, PROJECT, NO_RESTORE, NO_BUILD, FILTER, LOGGER),
}


def resolve_input(spec: InputSpec, env: EnvironmentResolver, is_ci: bool) -> InputValue:
    policy = spec.policy
    if isinstance(policy, SwitchDefault):
        raw = env.resolve_with_fallback(spec.ci_variable, spec.plain_variable, "")
        if raw:
            return raw == "true"
        return is_ci if policy.follows_ci else False

    if isinstance(policy, CIDefault):
        default = policy.when_ci if is_ci else policy.otherwise
    else:
        default = policy.value

    value = env.resolve_with_fallback(spec.ci_variable, spec.plain_variable, default)
    if spec.required and not value:
        raise InputError(
            f"Input '{spec.name}' is required (set {spec.ci_variable} or {spec.plain_variable})"
        )
    return value


def resolve_inputs(kind: ActionKind, env: EnvironmentResolver, is_ci: bool) -> ResolvedInputs:
    """Resolve every input declared for `kind`, in declaration order."""
    values: Dict[str, InputValue] = {}
    for spec in ACTION_INPUTS[kind]:
        values[spec.name] = resolve_input(spec, env, is_ci)
    return ResolvedInputs(kind=kind, entries=values)
