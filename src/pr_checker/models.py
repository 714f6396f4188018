"""Value types shared by the policy loader, the GitHub client and the rule engine."""

from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Pull request snapshot
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PullRequest:
    """Read-only view of the pull request fields the rules look at."""

    number: int
    title: str
    labels: tuple[str, ...] = ()  # API order, duplicates kept


# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TitleRule:
    """Constraints on the pull request title. ``None`` disables a check."""

    pattern: str | None = None
    min_length: int | None = None
    max_length: int | None = None


@dataclass(frozen=True)
class LabelRule:
    """Labels every pull request must carry."""

    required: tuple[str, ...] | None = None


@dataclass(frozen=True)
class Policy:
    """Combined title and label rules for one repository."""

    title: TitleRule | None = None
    labels: LabelRule | None = None

    @property
    def categories(self) -> int:
        """Number of rule categories that will be evaluated."""
        return sum(1 for section in (self.title, self.labels) if section is not None)


# ---------------------------------------------------------------------------
# Violations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Violation:
    """A single rule failure.

    Only ``message`` takes part in equality; ``rule_type`` is a tag for the
    output formatters ("context" | "title" | "labels" | "title-label").
    """

    message: str
    rule_type: str = field(default="", compare=False)


RuleResult = list[Violation]


def format_labels(labels: tuple[str, ...] | list[str]) -> str:
    """Render a label list for messages: comma-joined, or ``none`` when empty."""
    if not labels:
        return "none"
    return ", ".join(labels)
