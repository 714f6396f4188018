"""Tests for pr_checker.annotations — workflow commands and job summary."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pr_checker.annotations import (
    escape_annotation,
    format_annotation,
    format_step_summary,
    write_step_summary,
)
from pr_checker.checker import CheckResult
from pr_checker.models import PullRequest, Violation

if TYPE_CHECKING:
    from pathlib import Path


def test_escape_all_reserved_characters() -> None:
    assert escape_annotation("100%\r\na:b,c") == "100%25%0D%0Aa%3Ab%2Cc"


def test_percent_escaped_first() -> None:
    assert escape_annotation("%3A") == "%253A"


def test_format_annotation_escapes_title_and_message() -> None:
    line = format_annotation("PR validation failed", "Context -> title: 'a, b'")
    assert line == "::error title=PR validation failed::Context -> title%3A 'a%2C b'"


def test_format_annotation_level() -> None:
    assert format_annotation("t", "m", level="warning") == "::warning title=t::m"


def _result(violations: list[Violation]) -> CheckResult:
    return CheckResult(
        pull_request=PullRequest(number=42, title="feat: x", labels=()),
        violations=violations,
        rules_evaluated=1,
    )


def test_step_summary_passed() -> None:
    text = format_step_summary(_result([]))
    assert "## PR checker: #42" in text
    assert "- **Labels:** none" in text
    assert "All PR checks passed" in text


def test_step_summary_lists_failures_without_context() -> None:
    text = format_step_summary(
        _result(
            [
                Violation("Context -> ...", rule_type="context"),
                Violation("missing kind/feature", rule_type="labels"),
            ]
        )
    )
    assert "1 violation(s) found" in text
    assert "- missing kind/feature" in text
    assert "Context" not in text


def test_write_step_summary_appends(tmp_path: Path) -> None:
    path = tmp_path / "summary.md"
    path.write_text("# Earlier step\n", encoding="utf-8")
    write_step_summary(_result([]), path)
    content = path.read_text(encoding="utf-8")
    assert content.startswith("# Earlier step\n")
    assert "## PR checker: #42" in content
