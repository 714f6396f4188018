"""Shared test fixtures for pr-checker."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import Mock

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture()
def write_policy(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes a policy YAML file and returns its path."""

    def _write(content: str) -> Path:
        path = tmp_path / ".github" / "pr-checker.yml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def event_file(tmp_path: Path) -> Path:
    """A minimal ``pull_request`` event payload for PR #42 in acme/widgets."""
    path = tmp_path / "event.json"
    path.write_text(
        json.dumps(
            {
                "action": "opened",
                "pull_request": {"number": 42},
                "repository": {"name": "widgets", "owner": {"login": "acme"}},
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def github_env(event_file: Path) -> dict[str, str]:
    """Environment as GitHub Actions would provide it."""
    return {
        "GITHUB_TOKEN": "ghs_test",
        "GITHUB_EVENT_PATH": str(event_file),
    }


@pytest.fixture()
def make_response() -> Callable[..., Mock]:
    """Return a factory for mock ``requests.Response`` objects.

    The JSON body is a trimmed ``GET /pulls/{n}`` response unless *payload*
    is given.
    """

    def _make(
        status_code: int = 200,
        *,
        title: str = "feat: add x",
        labels: list[str] | None = None,
        payload: object = None,
        reason: str = "OK",
    ) -> Mock:
        if payload is None:
            payload = {
                "number": 42,
                "title": title,
                "state": "open",
                "labels": [{"id": idx, "name": name} for idx, name in enumerate(labels or [])],
            }
        response = Mock()
        response.status_code = status_code
        response.reason = reason
        response.json.return_value = payload
        return response

    return _make
