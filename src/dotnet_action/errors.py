from __future__ import annotations

from typing import Optional

from .constants import ExitCode


class DotnetActionError(Exception):
    """Base exception for all action errors."""

    exit_code: ExitCode = ExitCode.ERROR


class ConfigError(DotnetActionError):
    """Action settings are invalid or no action was selected."""

    exit_code = ExitCode.ERROR


class InputError(DotnetActionError):
    """A required action input resolved to an empty value."""

    exit_code = ExitCode.ERROR


class SpawnError(DotnetActionError):
    """The toolchain process could not be started."""

    def __init__(self, message: str, exit_code: Optional[ExitCode] = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code
