"""Label rule: every required label must be present."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pr_checker.models import Violation, format_labels

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pr_checker.models import LabelRule, RuleResult

RULE_TYPE = "labels"


def evaluate_labels(labels: Sequence[str], rule: LabelRule) -> RuleResult:
    """Return one violation per missing required label, in declaration order."""
    if rule.required is None:
        return []

    present = tuple(labels)
    current = format_labels(present)
    return [
        Violation(
            message=f"PR is missing required label: '{required}'. Current labels: [{current}]",
            rule_type=RULE_TYPE,
        )
        for required in rule.required
        if required not in present
    ]
