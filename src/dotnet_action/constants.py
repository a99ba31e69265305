from __future__ import annotations

from enum import Enum


class ExitCode(int, Enum):
    """Exit codes synthesized by the action itself (toolchain codes pass through)."""

    SUCCESS = 0
    ERROR = 2
    NOT_EXECUTABLE = 126
    NOT_FOUND = 127


TOOLCHAIN = "dotnet"

# Input variables set by the CI host are namespaced with this prefix.
INPUT_PREFIX = "INPUT_"

CI_VARIABLE = "CI"

RELEASE_CONFIGURATION = "Release"
DEBUG_CONFIGURATION = "Debug"

DEFAULT_PROJECT = "."
