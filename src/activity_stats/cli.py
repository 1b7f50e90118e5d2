"""Command-line interface for activity log statistics."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from .aggregation import (
    activity_count_per_day,
    activity_days,
    count_by_activity_type,
    days_of_monitoring,
)
from .config import ParserSettings
from .errors import ActivityLogError
from .parser import ParseOutcome, load_records
from .paths import get_default_log_path
from .reporting import SummaryPrinter, build_summary

logger = logging.getLogger(__name__)

app = typer.Typer(help="Statistics over tab-delimited activity logs.")

PATH_ARGUMENT = typer.Argument(
    None,
    help="Activity log to read. Defaults to Activities.txt in the app data directory.",
)
SKIP_INVALID_OPTION = typer.Option(
    False,
    "--skip-invalid",
    help="Log and skip malformed lines instead of aborting on the first one.",
)
ENCODING_OPTION = typer.Option("utf-8", "--encoding", help="Text encoding of the log.")


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@app.command()
def summary(
    path: Optional[Path] = PATH_ARGUMENT,
    skip_invalid: bool = SKIP_INVALID_OPTION,
    encoding: str = ENCODING_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON."),
) -> None:
    """Print span, activity counts and per-day activity counts."""
    log_path = path or get_default_log_path()
    outcome = _load(log_path, skip_invalid, encoding)
    try:
        result = build_summary(outcome.records, outcome.skipped, source=log_path)
    except ActivityLogError as exc:
        _fail(exc)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        SummaryPrinter().print_summary(result)


@app.command()
def span(
    path: Optional[Path] = PATH_ARGUMENT,
    skip_invalid: bool = SKIP_INVALID_OPTION,
    encoding: str = ENCODING_OPTION,
) -> None:
    """Print the number of whole days covered by the log."""
    outcome = _load(path or get_default_log_path(), skip_invalid, encoding)
    try:
        days = days_of_monitoring(outcome.records)
    except ActivityLogError as exc:
        _fail(exc)
    typer.echo(f"{days} days.")


@app.command()
def counts(
    path: Optional[Path] = PATH_ARGUMENT,
    skip_invalid: bool = SKIP_INVALID_OPTION,
    encoding: str = ENCODING_OPTION,
) -> None:
    """Print how often each activity occurs."""
    outcome = _load(path or get_default_log_path(), skip_invalid, encoding)
    SummaryPrinter().print_activity_counts(count_by_activity_type(outcome.records))


@app.command()
def daily(
    path: Optional[Path] = PATH_ARGUMENT,
    skip_invalid: bool = SKIP_INVALID_OPTION,
    encoding: str = ENCODING_OPTION,
) -> None:
    """Print activity counts for each day an activity started on."""
    outcome = _load(path or get_default_log_path(), skip_invalid, encoding)
    per_day = activity_count_per_day(activity_days(outcome.records), outcome.records)
    SummaryPrinter().print_daily_counts(per_day)


def _load(path: Path, skip_invalid: bool, encoding: str) -> ParseOutcome:
    settings = ParserSettings.from_options(skip_invalid=skip_invalid, encoding=encoding)
    try:
        return load_records(path, settings)
    except ActivityLogError as exc:
        _fail(exc)


def _fail(exc: ActivityLogError) -> NoReturn:
    logger.error("%s", exc)
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)
