"""Human-readable summary rendering for $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from pathlib import Path

from .config import CheckOptions
from .models import CheckResult


def render_summary(result: CheckResult, options: CheckOptions) -> str:
    """Return a Markdown string with the outcome and a table of violations."""
    lines = []
    lines.append("# Dependency Check Summary")
    lines.append("")
    lines.append(f"Package type: `{options.package_type}`")
    lines.append("")

    if result.success:
        lines.append("✅ All dependency checks passed!")
        return "\n".join(lines) + "\n"

    lines.append(f"❌ Dependency check failed with {len(result.errors)} error(s).")
    lines.append("")

    if result.read_error is not None:
        lines.append(f"> {result.read_error}")
        return "\n".join(lines) + "\n"

    lines.append("| Section | Package | Problem |")
    lines.append("| --- | --- | --- |")
    for violation in result.violations:
        lines.append(f"| {violation.section} | `{violation.package}` | {violation.message} |")

    return "\n".join(lines) + "\n"


def write_step_summary(path: Path, result: CheckResult, options: CheckOptions) -> None:
    """Append the rendered summary to the job summary file at ``path``."""
    with path.open("a", encoding="utf-8") as fh:
        fh.write(render_summary(result, options))
