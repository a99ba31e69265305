from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional, Union

from .constants import ExitCode
from .errors import SpawnError
from .models import ActionOutcome, CommandSpec


async def run_command(
    command: CommandSpec,
    cwd: Optional[Union[str, Path]] = None,
) -> int:
    """
    Run `command` to completion and return its exit status.

    The child inherits this process's stdout/stderr, so toolchain output reaches
    the job log as it is produced. There is no timeout and no retry.
    """
    if cwd and not Path(cwd).is_dir():
        raise SpawnError(f"working directory not found: {cwd}")

    try:
        proc = await asyncio.create_subprocess_exec(
            *command,
            cwd=str(cwd) if cwd else None,
        )
    except FileNotFoundError as exc:
        raise SpawnError(f"{command[0]}: command not found", ExitCode.NOT_FOUND) from exc
    except PermissionError as exc:
        raise SpawnError(f"{command[0]}: permission denied", ExitCode.NOT_EXECUTABLE) from exc
    except OSError as exc:
        raise SpawnError(f"{command[0]}: failed to start ({exc})") from exc

    return int(await proc.wait())


async def execute(
    command: CommandSpec,
    cwd: Optional[Union[str, Path]] = None,
) -> ActionOutcome:
    exit_code = await run_command(command, cwd=cwd)
    return ActionOutcome.from_exit_code(command, exit_code)
