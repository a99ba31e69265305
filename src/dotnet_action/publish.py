from __future__ import annotations

from .command import format_command
from .environment import EnvironmentResolver
from .models import ActionKind, ActionOutcome, CIContext, ResolvedInputs


def write_outputs(outcome: ActionOutcome, env: EnvironmentResolver) -> None:
    """Write GitHub Actions outputs."""
    output_path = env.lookup("GITHUB_OUTPUT")
    if not output_path:
        return

    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"command={format_command(outcome.command)}\n")
        f.write(f"exit_code={outcome.exit_code}\n")
        f.write(f"succeeded={'true' if outcome.succeeded else 'false'}\n")


def _display(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return f"`{value}`" if value else "_(not set)_"


def write_step_summary(
    kind: ActionKind,
    outcome: ActionOutcome,
    resolved: ResolvedInputs,
    ci: CIContext,
    env: EnvironmentResolver,
) -> None:
    """Append a short Markdown summary of the run to the job summary."""
    summary_path = env.lookup("GITHUB_STEP_SUMMARY")
    if not summary_path:
        return

    status_icon = "✅" if outcome.succeeded else "❌"
    ci_label = ci.vendor or ("yes" if ci.is_ci else "no")
    md = [
        f"## dotnet {kind.value}: {status_icon} exit {outcome.exit_code}",
        "",
        f"**Command:** `{format_command(outcome.command)}`",
        f"**CI:** {ci_label}",
        "",
        "| Input | Value |",
        "|-------|-------|",
    ]
    for name, value in resolved.items():
        md.append(f"| {name} | {_display(value)} |")
    md.append("")

    with open(summary_path, "a", encoding="utf-8") as f:
        f.write("\n".join(md) + "\n")
