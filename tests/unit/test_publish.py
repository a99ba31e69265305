from __future__ import annotations

from dotnet_action.environment import EnvironmentResolver
from dotnet_action.models import ActionKind, ActionOutcome, CIContext, ResolvedInputs
from dotnet_action.publish import write_outputs, write_step_summary


def _outcome(exit_code: int) -> ActionOutcome:
    return ActionOutcome.from_exit_code(("dotnet", "build", ".", "-c", "Debug"), exit_code)


def test_outputs_written(tmp_path) -> None:
    output_file = tmp_path / "output.txt"

    write_outputs(_outcome(1), EnvironmentResolver({"GITHUB_OUTPUT": str(output_file)}))

    lines = output_file.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "command=dotnet build . -c Debug",
        "exit_code=1",
        "succeeded=false",
    ]


def test_outputs_skipped_without_path(tmp_path, monkeypatch) -> None:
    output_file = tmp_path / "output.txt"
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

    write_outputs(_outcome(0), EnvironmentResolver({}))

    assert not output_file.exists()


def test_step_summary_writes_file(tmp_path) -> None:
    summary_file = tmp_path / "summary.md"
    env = EnvironmentResolver({"GITHUB_STEP_SUMMARY": str(summary_file)})

    resolved = ResolvedInputs(
        kind=ActionKind.BUILD,
        entries={"configuration": "Debug", "project": ".", "no-restore": False},
    )
    write_step_summary(
        ActionKind.BUILD,
        _outcome(0),
        resolved,
        CIContext(is_ci=True, vendor="github-actions"),
        env,
    )

    content = summary_file.read_text(encoding="utf-8")
    assert "dotnet build" in content
    assert "exit 0" in content
    assert "`dotnet build . -c Debug`" in content
    assert "github-actions" in content
    assert "| no-restore | false |" in content
