"""Rules domain: title, label and title-to-label checks plus aggregation."""

from pr_checker.rules.cross import (
    TITLE_TYPE_LABELS,
    evaluate_cross,
    expected_label_for_title,
    title_type,
)
from pr_checker.rules.engine import aggregate, context_violation, evaluate
from pr_checker.rules.labels import evaluate_labels
from pr_checker.rules.title import evaluate_title, title_length

__all__ = [
    "TITLE_TYPE_LABELS",
    "aggregate",
    "context_violation",
    "evaluate",
    "evaluate_cross",
    "evaluate_labels",
    "evaluate_title",
    "expected_label_for_title",
    "title_length",
    "title_type",
]
