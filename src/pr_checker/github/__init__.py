"""GitHub collaborators: event payload reader and REST client."""

from pr_checker.github.client import GitHubClient, parse_pull_request
from pr_checker.github.event import GitHubEvent, event_from_env, load_event, parse_event

__all__ = [
    "GitHubClient",
    "GitHubEvent",
    "event_from_env",
    "load_event",
    "parse_event",
    "parse_pull_request",
]
