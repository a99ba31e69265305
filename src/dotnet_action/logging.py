from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Sequence


def escape_workflow_command(value: str) -> str:
    """Escape a string for use as a GitHub workflow command message."""
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionLogger:
    """
    Logger for one action run.

    Structured JSON records go to stderr. Lines meant for people reading the job
    log (the command banner and log groups) go to stdout, which the toolchain
    process shares, so stdout is flushed before anything is spawned.
    """

    def __init__(self, run_id: str):
        self.run_id = run_id

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit("error", message, **kwargs)

    def announce_command(self, command: Sequence[str], **decisions: Any) -> None:
        """Print the `Running: ...` banner and record how the command was derived."""
        line = " ".join(command)
        self._print(f"Running: {line}")
        self._emit("info", "command_built", command=list(command), **decisions)

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        """Fold everything printed inside the block into a collapsible log group."""
        start = datetime.now(timezone.utc)
        self._print(f"::group::{escape_workflow_command(title)}")
        status = "ok"
        try:
            yield
        except Exception as exc:
            status = "error"
            self.error("group_error", group=title, error=str(exc))
            raise
        finally:
            self._print("::endgroup::")
            duration_ms = int((datetime.now(timezone.utc) - start).total_seconds() * 1000)
            self.info("group_end", group=title, duration_ms=duration_ms, status=status)

    @staticmethod
    def _print(line: str) -> None:
        sys.stdout.write(line + "\n")
        sys.stdout.flush()

    def _emit(self, level: str, message: str, **kwargs: Any) -> None:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "run_id": self.run_id,
            "message": message,
        }
        payload.update(kwargs)

        sys.stderr.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
        if level in ("error", "warning"):
            sys.stderr.write(f"::{level}::{escape_workflow_command(message)}\n")
        sys.stderr.flush()
