"""Check orchestrator: load policy, read event, fetch PR, evaluate, format results."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pr_checker.annotations import VIOLATION_TITLE, format_annotation
from pr_checker.config import load_policy
from pr_checker.github.client import GitHubClient
from pr_checker.github.event import event_from_env
from pr_checker.models import format_labels
from pr_checker.rules.engine import evaluate

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from pr_checker.models import Policy, PullRequest, Violation

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class CheckResult:
    """Result of checking one pull request."""

    pull_request: PullRequest
    violations: list[Violation] = field(default_factory=list)
    rules_evaluated: int = 0
    elapsed_ms: float = 0.0

    @property
    def passed(self) -> bool:
        return not self.violations


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def check_pull_request(pr: PullRequest, policy: Policy) -> CheckResult:
    """Evaluate *policy* against an already-fetched pull request."""
    start = time.monotonic()
    violations = evaluate(pr, policy)
    elapsed = (time.monotonic() - start) * 1000
    return CheckResult(
        pull_request=pr,
        violations=violations,
        rules_evaluated=policy.categories,
        elapsed_ms=elapsed,
    )


def _fetch(client: GitHubClient, number: int) -> PullRequest:
    logger.info("Fetching PR #%d from %s", number, client.repository)
    return client.get_pull_request(number)


def run_check(
    config_path: Path,
    *,
    env: Mapping[str, str] | None = None,
    client: GitHubClient | None = None,
) -> CheckResult:
    """Run the full CI check for the pull request that triggered the workflow.

    Parameters
    ----------
    config_path:
        Policy file to load.
    env:
        Environment to read ``GITHUB_*`` variables from (default: ``os.environ``).
    client:
        Pre-built client; when *None* one is created from *env*.

    Raises
    ------
    ConfigError
        Invalid policy file or missing environment.
    EventParseError
        The event payload is unreadable or has no pull request number.
    ApiError
        The pull request could not be fetched.
    """
    start = time.monotonic()
    logger.info("Config path: %s", config_path)

    policy = load_policy(config_path)
    logger.info("Configuration loaded (%d rule categories)", policy.categories)

    event = event_from_env(env)
    logger.info("PR number: %d", event.pr_number)

    if client is None:
        # event_from_env guarantees a repository or raises.
        with GitHubClient.from_env(event.repository or "", env) as owned:
            pr = _fetch(owned, event.pr_number)
    else:
        pr = _fetch(client, event.pr_number)

    result = check_pull_request(pr, policy)
    result.elapsed_ms = (time.monotonic() - start) * 1000
    return result


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def format_annotations(result: CheckResult) -> str:
    """One ``::error`` workflow command per violation; empty string when clean."""
    return "\n".join(format_annotation(VIOLATION_TITLE, v.message) for v in result.violations)


def format_json(result: CheckResult) -> str:
    """Format a CheckResult as structured JSON."""
    pr = result.pull_request
    output: dict[str, object] = {
        "pull_request": {
            "number": pr.number,
            "title": pr.title,
            "labels": list(pr.labels),
        },
        "violations": [
            {"rule_type": v.rule_type, "message": v.message} for v in result.violations
        ],
        "summary": {
            "passed": result.passed,
            "rules_evaluated": result.rules_evaluated,
            "violations_count": len(result.violations),
            "elapsed_ms": result.elapsed_ms,
        },
    }
    return json.dumps(output, indent=2)


def format_rich(result: CheckResult) -> str:
    """Format a CheckResult as human-readable text.

    Example output with violations::

        PR #42: feat: add x
        Labels: none

        ✗ title-label
          Title type 'feat' requires label 'kind/feature', ...

        1 violation(s) found (2 rule categories evaluated)
    """
    pr = result.pull_request
    lines: list[str] = [
        f"PR #{pr.number}: {pr.title}",
        f"Labels: {format_labels(pr.labels)}",
        "",
    ]

    failures = [v for v in result.violations if v.rule_type != "context"]
    if not failures:
        lines.append(
            f"✓ All PR checks passed ({result.rules_evaluated} rule categories evaluated)"
        )
        return "\n".join(lines)

    for v in failures:
        lines.append(f"✗ {v.rule_type}")
        lines.append(f"  {v.message}")
        lines.append("")
    lines.append(
        f"{len(failures)} violation(s) found "
        f"({result.rules_evaluated} rule categories evaluated)"
    )
    return "\n".join(lines)
