"""Title rule: regex pattern and length bounds."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from pr_checker.models import Violation

if TYPE_CHECKING:
    from pr_checker.models import RuleResult, TitleRule

RULE_TYPE = "title"


def title_length(title: str) -> int:
    """Length used by the min/max checks: UTF-8 byte count of the raw title."""
    return len(title.encode("utf-8"))


def evaluate_title(title: str, rule: TitleRule) -> RuleResult:
    """Check *title* against *rule*.

    Checks run in a fixed order (pattern, min_length, max_length) and are
    independent of one another. An invalid pattern is reported as a violation
    instead of raising, so the length checks still run.
    """
    violations: RuleResult = []

    if rule.pattern is not None:
        try:
            compiled = re.compile(rule.pattern)
        except re.error as exc:
            violations.append(
                Violation(
                    message=f"Invalid regex pattern '{rule.pattern}': {exc}",
                    rule_type=RULE_TYPE,
                )
            )
        else:
            if compiled.search(title) is None:
                violations.append(
                    Violation(
                        message=(
                            f"PR title '{title}' does not match required pattern: "
                            f"{rule.pattern}"
                        ),
                        rule_type=RULE_TYPE,
                    )
                )

    length = title_length(title)

    if rule.min_length is not None and length < rule.min_length:
        violations.append(
            Violation(
                message=(
                    f"PR title '{title}' is too short ({length} chars), "
                    f"minimum required: {rule.min_length}"
                ),
                rule_type=RULE_TYPE,
            )
        )

    if rule.max_length is not None and length > rule.max_length:
        violations.append(
            Violation(
                message=(
                    f"PR title '{title}' is too long ({length} chars), "
                    f"maximum allowed: {rule.max_length}"
                ),
                rule_type=RULE_TYPE,
            )
        )

    return violations
