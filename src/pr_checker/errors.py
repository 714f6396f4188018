"""Exception hierarchy. Each class maps to one process exit code."""

from __future__ import annotations


class PrCheckerError(Exception):
    """Base class for failures that stop a check before any rule is reported."""

    exit_code: int = 10
    title: str = "Internal error"


class ConfigError(PrCheckerError):
    """Policy file unreadable or invalid, or required environment missing."""

    exit_code = 2
    title = "Configuration error"


class EventParseError(PrCheckerError):
    """The CI event payload is unreadable, malformed, or incomplete."""

    exit_code = 2
    title = "Event parsing error"


class ApiError(PrCheckerError):
    """Fetching the pull request failed or returned an unusable payload."""

    exit_code = 3
    title = "GitHub API error"


class InternalError(PrCheckerError):
    """Anything else (I/O, serialization, unexpected bugs)."""

    exit_code = 10
    title = "Internal error"
