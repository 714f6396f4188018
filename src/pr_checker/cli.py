"""pr-checker CLI entry point."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn

import click

from pr_checker import __version__
from pr_checker.annotations import format_annotation, write_step_summary
from pr_checker.checker import (
    CheckResult,
    check_pull_request,
    format_annotations,
    format_json,
    format_rich,
    run_check,
)
from pr_checker.config import DEFAULT_CONFIG_PATH, load_policy
from pr_checker.errors import ConfigError, InternalError, PrCheckerError
from pr_checker.models import PullRequest

logger = logging.getLogger(__name__)
_package_logger = logging.getLogger("pr_checker")

_FORMATTERS = {
    "annotations": format_annotations,
    "json": format_json,
    "rich": format_rich,
}

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class _ClickEchoHandler(logging.Handler):
    """Send log records to stderr via click, keeping stdout for annotations."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # noqa: BLE001
            self.handleError(record)


def _configure_logging(*, verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        env_level = os.environ.get("PR_CHECKER_LOG", "info").lower()
        level = _LOG_LEVELS.get(env_level, logging.INFO)

    _package_logger.setLevel(level)
    if not any(isinstance(h, _ClickEchoHandler) for h in _package_logger.handlers):
        handler = _ClickEchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        _package_logger.addHandler(handler)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _resolve_format(fmt: str | None) -> str:
    # Explicit flag > TTY detection.
    if fmt is not None:
        return fmt
    return "rich" if sys.stdout.isatty() else "annotations"


def _fail(exc: PrCheckerError) -> NoReturn:
    """Report a pre-evaluation failure as one annotation and exit."""
    logger.error("%s: %s", exc.title, exc)
    click.echo(format_annotation(exc.title, str(exc)))
    sys.exit(exc.exit_code)


def _report(result: CheckResult, fmt: str) -> None:
    if result.passed:
        logger.info("All PR checks passed!")
    else:
        logger.error("Found %d violation(s)", len(result.violations))

    output = _FORMATTERS[fmt](result)
    if output:
        click.echo(output)


_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="INPUT_CONFIG",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Policy file (also read from INPUT_CONFIG).",
)

_format_option = click.option(
    "--format",
    "fmt",
    type=click.Choice(["annotations", "json", "rich"]),
    default=None,
    help="Output format (default: rich on a TTY, annotations otherwise).",
)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="pr-checker")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output (errors only).")
def main(*, verbose: bool, quiet: bool) -> None:
    """pr-checker - validate pull request titles and labels."""
    _configure_logging(verbose=verbose, quiet=quiet)


def _write_summary(result: CheckResult) -> None:
    summary_path = os.environ.get("GITHUB_STEP_SUMMARY")
    if not summary_path:
        logger.warning("--summary given but GITHUB_STEP_SUMMARY is not set")
        return
    try:
        write_step_summary(result, Path(summary_path))
    except OSError as exc:
        logger.warning("Could not write job summary to %s: %s", summary_path, exc)


@main.command()
@_config_option
@_format_option
@click.option(
    "--summary/--no-summary",
    envvar="INPUT_SUMMARY",
    default=False,
    help="Append a Markdown report to $GITHUB_STEP_SUMMARY.",
)
def check(*, config_path: Path, fmt: str | None, summary: bool) -> None:
    """Check the pull request that triggered the current workflow run.

    Exit codes: 0 = no violations, 1 = violations, 2 = configuration or
    event error, 3 = GitHub API error, 10 = internal error.
    """
    fmt = _resolve_format(fmt)
    logger.info("Starting PR checker...")

    try:
        result = run_check(config_path)
    except PrCheckerError as exc:
        _fail(exc)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected failure")
        _fail(InternalError(str(exc)))

    _report(result, fmt)
    if summary:
        _write_summary(result)
    if not result.passed:
        sys.exit(1)


@main.command()
@_config_option
@_format_option
@click.option("--title", required=True, help="Pull request title to check.")
@click.option("--label", "labels", multiple=True, help="Label on the pull request (repeatable).")
@click.option("--number", default=0, show_default=True, help="Pull request number to report.")
def evaluate(
    *,
    config_path: Path,
    fmt: str | None,
    title: str,
    labels: tuple[str, ...],
    number: int,
) -> None:
    """Evaluate a title and label set locally, without calling GitHub.

    Exit codes: 0 = no violations, 1 = violations, 2 = configuration error,
    10 = internal error.
    """
    fmt = _resolve_format(fmt)

    try:
        policy = load_policy(config_path)
        pr = PullRequest(number=number, title=title, labels=labels)
        result = check_pull_request(pr, policy)
    except PrCheckerError as exc:
        _fail(exc)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected failure")
        _fail(InternalError(str(exc)))

    _report(result, fmt)
    if not result.passed:
        sys.exit(1)


@main.command("validate-config")
@_config_option
def validate_config(*, config_path: Path) -> None:
    """Validate a policy file and show the rules it configures.

    Exit codes: 0 = valid, 2 = configuration error, 10 = internal error.
    """
    from rich.console import Console
    from rich.table import Table

    try:
        policy = load_policy(config_path)
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(exc.exit_code)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected failure")
        click.echo(f"Error: {exc}", err=True)
        sys.exit(InternalError.exit_code)

    table = Table(title=str(config_path), show_header=True)
    table.add_column("rule", style="cyan")
    table.add_column("setting")

    if policy.title is not None:
        table.add_row("title.pattern", policy.title.pattern or "-")
        table.add_row("title.min_length", _opt(policy.title.min_length))
        table.add_row("title.max_length", _opt(policy.title.max_length))
    if policy.labels is not None:
        required = policy.labels.required
        table.add_row("labels.required", ", ".join(required) if required else "-")

    console = Console()
    if policy.categories == 0:
        console.print("[yellow]No rules configured; every pull request will pass.[/]")
        return
    console.print(table)
    console.print(f"[green]OK[/] {policy.categories} rule categories configured")


def _opt(value: int | None) -> str:
    return "-" if value is None else str(value)
