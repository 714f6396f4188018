"""Rule engine: run the title, label and cross rules and aggregate violations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pr_checker.models import Violation, format_labels
from pr_checker.rules.cross import evaluate_cross
from pr_checker.rules.labels import evaluate_labels
from pr_checker.rules.title import evaluate_title

if TYPE_CHECKING:
    from pr_checker.models import Policy, PullRequest, RuleResult

CONTEXT_RULE_TYPE = "context"


def context_violation(pr: PullRequest) -> Violation:
    """Summary line shown ahead of the real violations."""
    return Violation(
        message=f"Context -> title: '{pr.title}'; labels: [{format_labels(pr.labels)}]",
        rule_type=CONTEXT_RULE_TYPE,
    )


def aggregate(
    pr: PullRequest,
    title_result: RuleResult,
    label_result: RuleResult,
    cross_result: RuleResult,
) -> list[Violation]:
    """Concatenate title, label and cross violations, in that order.

    When anything was found, a context violation restating the title and
    labels is placed first. A clean run returns an empty list.
    """
    violations = [*title_result, *label_result, *cross_result]
    if not violations:
        return []
    return [context_violation(pr), *violations]


def evaluate(pr: PullRequest, policy: Policy) -> list[Violation]:
    """Evaluate every configured rule category against *pr*.

    A category missing from *policy* is skipped entirely.
    """
    title_result: RuleResult = []
    label_result: RuleResult = []
    cross_result: RuleResult = []

    if policy.title is not None:
        title_result = evaluate_title(pr.title, policy.title)

    if policy.labels is not None:
        label_result = evaluate_labels(pr.labels, policy.labels)
        cross_result = evaluate_cross(pr.title, pr.labels, policy.labels)

    return aggregate(pr, title_result, label_result, cross_result)
