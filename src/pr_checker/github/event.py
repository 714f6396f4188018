"""Read the GitHub Actions event payload that triggered the run."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pr_checker.errors import ConfigError, EventParseError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitHubEvent:
    """The parts of a ``pull_request`` event the checker needs."""

    pr_number: int
    repository: str | None  # "owner/name"


def _parse_repository(payload: dict[str, object]) -> str | None:
    repo = payload.get("repository")
    if not isinstance(repo, dict):
        return None
    owner = repo.get("owner")
    name = repo.get("name")
    login = owner.get("login") if isinstance(owner, dict) else None
    if not isinstance(login, str) or not isinstance(name, str):
        return None
    return f"{login}/{name}"


def parse_event(payload: object) -> GitHubEvent:
    """Extract the PR number and repository from a decoded event payload."""
    if not isinstance(payload, dict):
        msg = "event payload must be a JSON object"
        raise EventParseError(msg)

    pull_request = payload.get("pull_request")
    if not isinstance(pull_request, dict):
        msg = "Pull request not found in event"
        raise EventParseError(msg)

    number = pull_request.get("number")
    if isinstance(number, bool) or not isinstance(number, int):
        msg = f"pull_request.number must be an integer, got {number!r}"
        raise EventParseError(msg)

    return GitHubEvent(pr_number=number, repository=_parse_repository(payload))


def load_event(path: Path) -> GitHubEvent:
    """Read and parse the event JSON file at *path*."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"cannot read event file {path}: {exc}"
        raise EventParseError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"invalid JSON in event file {path}: {exc}"
        raise EventParseError(msg) from exc
    return parse_event(payload)


def event_from_env(env: Mapping[str, str] | None = None) -> GitHubEvent:
    """Load the event named by ``GITHUB_EVENT_PATH``.

    When the payload carries no ``repository`` block, ``GITHUB_REPOSITORY``
    is used instead.
    """
    env = os.environ if env is None else env

    event_path = env.get("GITHUB_EVENT_PATH")
    if not event_path:
        msg = "GITHUB_EVENT_PATH not set"
        raise ConfigError(msg)

    event = load_event(Path(event_path))
    if event.repository is not None:
        return event

    fallback = env.get("GITHUB_REPOSITORY")
    if not fallback:
        msg = "Repository information not found in event"
        raise EventParseError(msg)

    logger.debug("Event has no repository block, using GITHUB_REPOSITORY=%s", fallback)
    return GitHubEvent(pr_number=event.pr_number, repository=fallback)
