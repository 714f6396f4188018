"""Tests for pr_checker.rules.cross — title type to kind/* label."""

from __future__ import annotations

import pytest

from pr_checker.models import LabelRule
from pr_checker.rules.cross import (
    TITLE_TYPE_LABELS,
    evaluate_cross,
    expected_label_for_title,
    title_type,
)


class TestTitleType:
    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("feat: add x", "feat"),
            ("feat(api-server): add x", "feat"),
            ("  Fix : y", "fix"),
            ("DOCS(readme): z", "docs"),
            ("no colon here", "no colon here"),
            ("", ""),
        ],
    )
    def test_extraction(self, title: str, expected: str) -> None:
        assert title_type(title) == expected

    def test_table_is_closed(self) -> None:
        assert dict(TITLE_TYPE_LABELS) == {
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
        with pytest.raises(TypeError):
            TITLE_TYPE_LABELS["style"] = "kind/style"  # type: ignore[index]

    def test_unknown_type_has_no_label(self) -> None:
        assert expected_label_for_title("style: tabs") is None
        assert expected_label_for_title("invalid title") is None

    def test_bare_type_without_colon_maps(self) -> None:
        assert expected_label_for_title("feat") == "kind/feature"


class TestEvaluateCross:
    def test_fires_when_expected_label_required_and_missing(self) -> None:
        violations = evaluate_cross("feat: x", [], LabelRule(required=("kind/feature",)))
        assert len(violations) == 1
        assert violations[0].message == (
            "Title type 'feat' requires label 'kind/feature', "
            "current labels: [none], title: 'feat: x'"
        )
        assert violations[0].rule_type == "title-label"

    def test_satisfied_when_label_present(self) -> None:
        rule = LabelRule(required=("kind/bug",))
        assert evaluate_cross("fix: y", ["kind/bug"], rule) == []

    def test_skipped_when_expected_label_not_required(self) -> None:
        rule = LabelRule(required=("priority/high",))
        assert evaluate_cross("feat: x", [], rule) == []

    @pytest.mark.parametrize("required", [None, ()])
    def test_never_fires_without_required_labels(self, required: tuple[str, ...] | None) -> None:
        assert evaluate_cross("feat: x", [], LabelRule(required=required)) == []

    def test_scope_is_ignored(self) -> None:
        rule = LabelRule(required=("kind/performance",))
        violations = evaluate_cross("perf(db): faster", ["kind/bug"], rule)
        assert len(violations) == 1
        assert "Title type 'perf'" in violations[0].message
        assert "current labels: [kind/bug]" in violations[0].message

    def test_unknown_type_never_fires(self) -> None:
        rule = LabelRule(required=tuple(TITLE_TYPE_LABELS.values()))
        assert evaluate_cross("wip: stuff", [], rule) == []

    def test_fires_at_most_once(self) -> None:
        rule = LabelRule(required=tuple(TITLE_TYPE_LABELS.values()))
        assert len(evaluate_cross("security: patch", [], rule)) == 1
