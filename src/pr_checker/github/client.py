"""Minimal GitHub REST client: fetch one pull request's title and labels."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

import requests

from pr_checker import __version__
from pr_checker.errors import ApiError, ConfigError
from pr_checker.models import PullRequest

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS = 30.0
GITHUB_API_VERSION = "2022-11-28"


def parse_pull_request(payload: Any) -> PullRequest:
    """Turn a ``GET /pulls/{n}`` response body into a :class:`PullRequest`."""
    if not isinstance(payload, dict):
        msg = "pull request payload must be a JSON object"
        raise ApiError(msg)

    number = payload.get("number")
    title = payload.get("title")
    labels_raw = payload.get("labels", [])

    if isinstance(number, bool) or not isinstance(number, int):
        msg = f"pull request payload has invalid 'number': {number!r}"
        raise ApiError(msg)
    if not isinstance(title, str):
        msg = f"pull request payload has invalid 'title': {title!r}"
        raise ApiError(msg)
    if not isinstance(labels_raw, list):
        msg = "pull request payload has invalid 'labels'"
        raise ApiError(msg)

    labels: list[str] = []
    for item in labels_raw:
        name = item.get("name") if isinstance(item, dict) else None
        if not isinstance(name, str):
            msg = f"pull request payload has a label without a name: {item!r}"
            raise ApiError(msg)
        labels.append(name)

    return PullRequest(number=number, title=title, labels=tuple(labels))


class GitHubClient:
    """Read-only access to the pull requests of a single repository."""

    def __init__(
        self,
        token: str,
        repository: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.repository = repository
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
                "User-Agent": f"pr-checker/{__version__}",
            }
        )

    @classmethod
    def from_env(cls, repository: str, env: Mapping[str, str] | None = None) -> GitHubClient:
        """Build a client from ``GITHUB_TOKEN`` and ``GITHUB_API_URL``."""
        env = os.environ if env is None else env
        token = env.get("GITHUB_TOKEN")
        if not token:
            msg = "GITHUB_TOKEN not set"
            raise ConfigError(msg)
        api_url = env.get("GITHUB_API_URL") or DEFAULT_API_URL
        return cls(token, repository, api_url=api_url)

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def pull_request_url(self, number: int) -> str:
        return f"{self.api_url}/repos/{self.repository}/pulls/{number}"

    def get_pull_request(self, number: int) -> PullRequest:
        """Fetch pull request *number*. Single attempt, no retry."""
        url = self.pull_request_url(number)
        logger.debug("GET %s", url)
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            msg = f"Failed to fetch PR #{number}: {exc}"
            raise ApiError(msg) from exc

        if not 200 <= response.status_code < 300:
            msg = f"Failed to fetch PR #{number}: {response.status_code} {response.reason}"
            raise ApiError(msg)

        try:
            payload = response.json()
        except ValueError as exc:
            msg = f"Failed to decode PR #{number} response: {exc}"
            raise ApiError(msg) from exc

        return parse_pull_request(payload)
