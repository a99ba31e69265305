from __future__ import annotations

import argparse
import asyncio
import sys
import uuid
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .ci import detect_context
from .command import build_command
from .config import ActionSettings
from .environment import EnvironmentResolver
from .errors import ConfigError, DotnetActionError
from .executor import execute
from .inputs import resolve_inputs
from .logging import ActionLogger
from .models import ActionKind, ActionOutcome
from .publish import write_outputs, write_step_summary


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dotnet-action",
        description="Run a dotnet lifecycle step configured from action inputs",
    )
    parser.add_argument(
        "action",
        nargs="?",
        choices=[kind.value for kind in ActionKind],
        help="Lifecycle step (falls back to INPUT_ACTION)",
    )
    return parser.parse_args(argv)


def _select_action(cli_action: Optional[str], settings: ActionSettings) -> ActionKind:
    if cli_action:
        return ActionKind(cli_action)
    if settings.action is not None:
        return settings.action
    raise ConfigError("No action selected; pass one of build, clean, pack, publish, test")


async def run_action(
    kind: ActionKind,
    env: EnvironmentResolver,
    logger: ActionLogger,
    *,
    cwd: Optional[Path] = None,
    step_summary: bool = True,
) -> ActionOutcome:
    """Resolve inputs for `kind`, run the dotnet command and publish the outcome."""
    ci = detect_context(env)
    resolved = resolve_inputs(kind, env, ci.is_ci)
    command = build_command(kind, resolved)

    logger.announce_command(
        command,
        action=kind.value,
        ci=ci.is_ci,
        ci_vendor=ci.vendor,
        inputs=dict(resolved),
    )

    with logger.group(f"dotnet {kind.value}"):
        outcome = await execute(command, cwd=cwd)

    if outcome.succeeded:
        logger.info(f"dotnet {kind.value} succeeded", exit_code=outcome.exit_code)
    else:
        logger.error(
            f"dotnet {kind.value} failed with exit code {outcome.exit_code}",
            exit_code=outcome.exit_code,
        )

    try:
        write_outputs(outcome, env)
        if step_summary:
            write_step_summary(kind, outcome, resolved, ci, env)
    except OSError as exc:
        logger.warning("Failed to publish workflow outputs", error=str(exc))
    return outcome


async def async_main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logger = ActionLogger(str(uuid.uuid4()))
    env = EnvironmentResolver.from_process()

    try:
        try:
            settings = ActionSettings.from_environment(env)
        except ValidationError as exc:
            raise ConfigError(f"Configuration error: {exc}") from exc

        kind = _select_action(args.action, settings)
        cwd = Path(settings.working_directory) if settings.working_directory else None
        outcome = await run_action(
            kind,
            env,
            logger,
            cwd=cwd,
            step_summary=settings.step_summary,
        )
    except DotnetActionError as exc:
        logger.error(str(exc), error_type=type(exc).__name__, exit_code=int(exc.exit_code))
        return int(exc.exit_code)

    return outcome.exit_code


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    return asyncio.run(async_main(argv))


if __name__ == "__main__":
    sys.exit(main())
