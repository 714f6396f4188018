"""Cross rule: a conventional-commit title type needs its ``kind/*`` label.

The rule only fires for labels the policy itself lists as required, so a
repository that never asked for ``kind/docs`` is not nagged about it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from pr_checker.models import Violation, format_labels

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from pr_checker.models import LabelRule, RuleResult

RULE_TYPE = "title-label"

TITLE_TYPE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "feat": "kind/feature",
        "fix": "kind/bug",
        "docs": "kind/docs",
        "chore": "kind/chore",
        "refactor": "kind/refactor",
        "test": "kind/test",
        "perf": "kind/performance",
        "ci": "kind/ci",
        "build": "kind/build",
        "security": "kind/security",
        "dependencies": "kind/dependencies",
    }
)


def title_type(title: str) -> str:
    """Extract the lower-cased type token, e.g. ``feat`` from ``feat(api): x``.

    A title without a colon yields the whole (stripped, lower-cased) title.
    """
    prefix = title.split(":", 1)[0].strip()
    return prefix.split("(", 1)[0].strip().lower()


def expected_label_for_title(title: str) -> str | None:
    """Return the ``kind/*`` label implied by the title type, if any."""
    return TITLE_TYPE_LABELS.get(title_type(title))


def evaluate_cross(title: str, labels: Sequence[str], rule: LabelRule) -> RuleResult:
    """Return at most one violation tying the title type to a required label."""
    if not rule.required:
        return []

    expected = expected_label_for_title(title)
    if expected is None or expected not in rule.required:
        return []

    present = tuple(labels)
    if expected in present:
        return []

    return [
        Violation(
            message=(
                f"Title type '{title_type(title)}' requires label '{expected}', "
                f"current labels: [{format_labels(present)}], title: '{title}'"
            ),
            rule_type=RULE_TYPE,
        )
    ]
