"""Tests for pr_checker.rules.labels — required label checks."""

from __future__ import annotations

from pr_checker.models import LabelRule
from pr_checker.rules.labels import evaluate_labels


def test_all_required_labels_present() -> None:
    rule = LabelRule(required=("kind/bug", "priority/high"))
    assert evaluate_labels(["kind/bug", "priority/high"], rule) == []


def test_missing_required_label() -> None:
    rule = LabelRule(required=("kind/bug", "priority/high"))
    violations = evaluate_labels(["kind/bug"], rule)
    assert len(violations) == 1
    assert violations[0].message == (
        "PR is missing required label: 'priority/high'. Current labels: [kind/bug]"
    )
    assert violations[0].rule_type == "labels"


def test_no_labels_reports_none() -> None:
    violations = evaluate_labels([], LabelRule(required=("kind/bug",)))
    assert len(violations) == 1
    assert "Current labels: [none]" in violations[0].message


def test_no_required_labels() -> None:
    assert evaluate_labels(["kind/bug"], LabelRule(required=None)) == []


def test_empty_required_list() -> None:
    assert evaluate_labels([], LabelRule(required=())) == []


def test_violations_follow_declaration_order() -> None:
    rule = LabelRule(required=("zeta", "alpha", "mid"))
    violations = evaluate_labels(["other"], rule)
    assert [v.message.split("'")[1] for v in violations] == ["zeta", "alpha", "mid"]


def test_comparison_is_case_sensitive() -> None:
    violations = evaluate_labels(["Kind/Bug"], LabelRule(required=("kind/bug",)))
    assert len(violations) == 1


def test_current_labels_keep_api_order_and_duplicates() -> None:
    violations = evaluate_labels(["b", "a", "b"], LabelRule(required=("c",)))
    assert violations[0].message.endswith("Current labels: [b, a, b]")
