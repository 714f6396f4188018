"""Policy file loader: parse ``.github/pr-checker.yml`` into a :class:`Policy`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import yaml

from pr_checker.errors import ConfigError
from pr_checker.models import LabelRule, Policy, TitleRule

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = ".github/pr-checker.yml"

# ---------------------------------------------------------------------------
# Section parsers
# ---------------------------------------------------------------------------


def _parse_length(data: dict[str, object], key: str) -> int | None:
    raw = data.get(key)
    if raw is None:
        return None
    # bool is an int subclass; `min_length: yes` is a typo, not a length.
    if isinstance(raw, bool) or not isinstance(raw, int):
        msg = f"title.{key} must be an integer, got {raw!r}"
        raise ConfigError(msg)
    if raw < 0:
        msg = f"title.{key} must be non-negative, got {raw}"
        raise ConfigError(msg)
    return raw


def _parse_title_rule(data: object) -> TitleRule:
    """Parse the ``title`` section."""
    if not isinstance(data, dict):
        msg = "'title' must be a mapping"
        raise ConfigError(msg)

    pattern = data.get("pattern")
    if pattern is not None and not isinstance(pattern, str):
        msg = f"title.pattern must be a string, got {pattern!r}"
        raise ConfigError(msg)

    return TitleRule(
        pattern=pattern,
        min_length=_parse_length(data, "min_length"),
        max_length=_parse_length(data, "max_length"),
    )


def _parse_label_rule(data: object) -> LabelRule:
    """Parse the ``labels`` section."""
    if not isinstance(data, dict):
        msg = "'labels' must be a mapping"
        raise ConfigError(msg)

    required_raw = data.get("required")
    if required_raw is None:
        return LabelRule(required=None)

    if not isinstance(required_raw, list):
        msg = "labels.required must be a list of label names"
        raise ConfigError(msg)

    for idx, item in enumerate(required_raw):
        if not isinstance(item, str):
            msg = f"labels.required[{idx}] must be a string, got {item!r}"
            raise ConfigError(msg)

    return LabelRule(required=tuple(required_raw))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_policy(data: object) -> Policy:
    """Build a :class:`Policy` from an already-parsed YAML document.

    Unknown keys are ignored. A missing or null section disables that rule
    category. An empty document is an empty policy.
    """
    if data is None:
        return Policy()
    if not isinstance(data, dict):
        msg = "policy file must be a YAML mapping"
        raise ConfigError(msg)

    title_data = data.get("title")
    labels_data = data.get("labels")

    return Policy(
        title=_parse_title_rule(title_data) if title_data is not None else None,
        labels=_parse_label_rule(labels_data) if labels_data is not None else None,
    )


def load_policy(path: Path) -> Policy:
    """Read and validate the policy file at *path*.

    Raises :class:`ConfigError` when the file is missing, is not valid YAML,
    or has ill-typed values.
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"cannot read config file {path}: {exc}"
        raise ConfigError(msg) from exc
    except yaml.YAMLError as exc:
        msg = f"invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc

    policy = parse_policy(data)
    logger.debug("Loaded policy from %s: %s", path, policy)
    return policy
