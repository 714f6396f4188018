"""GitHub Actions workflow commands and job summary output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pr_checker.models import format_labels

if TYPE_CHECKING:
    from pathlib import Path

    from pr_checker.checker import CheckResult

VIOLATION_TITLE = "PR validation failed"

# Order matters: '%' first so later escapes are not double-encoded.
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("%", "%25"),
    ("\r", "%0D"),
    ("\n", "%0A"),
    (":", "%3A"),
    (",", "%2C"),
)


def escape_annotation(value: str) -> str:
    """Percent-escape a workflow command title or message."""
    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)
    return value


def format_annotation(title: str, message: str, *, level: str = "error") -> str:
    """Return ``::<level> title=<title>::<message>`` with both parts escaped."""
    return f"::{level} title={escape_annotation(title)}::{escape_annotation(message)}"


def format_step_summary(result: CheckResult) -> str:
    """Render a Markdown section for ``$GITHUB_STEP_SUMMARY``."""
    pr = result.pull_request
    lines = [
        f"## PR checker: #{pr.number}",
        "",
        f"- **Title:** `{pr.title}`",
        f"- **Labels:** {format_labels(pr.labels)}",
        "",
    ]
    if result.passed:
        lines.append(":white_check_mark: All PR checks passed.")
    else:
        failures = [v for v in result.violations if v.rule_type != "context"]
        lines.append(f":x: {len(failures)} violation(s) found:")
        lines.append("")
        lines.extend(f"- {v.message}" for v in failures)
    lines.append("")
    return "\n".join(lines)


def write_step_summary(result: CheckResult, path: Path) -> None:
    """Append the job summary section to *path*."""
    with path.open("a", encoding="utf-8") as fh:
        fh.write(format_step_summary(result))
        fh.write("\n")
