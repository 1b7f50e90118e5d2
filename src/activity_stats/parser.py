"""Parsing of tab-delimited activity log lines into records."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from .config import ParserSettings
from .errors import LogFileNotFoundError, ParseError
from .models import MonitoredData
from .normalization import normalize_timestamp_text, strip_line_terminator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParseOutcome:
    records: list[MonitoredData] = field(default_factory=list)
    skipped: list[ParseError] = field(default_factory=list)


def parse_line(
    line: str,
    settings: Optional[ParserSettings] = None,
    *,
    line_number: Optional[int] = None,
) -> MonitoredData:
    """Convert one raw log line into a record."""
    settings = settings or ParserSettings()
    text = strip_line_terminator(line)
    fields = text.split(settings.delimiter)
    if len(fields) < settings.min_fields:
        raise ParseError(
            f"expected at least {settings.min_fields} fields, got {len(fields)}",
            text,
            line_number,
        )

    start_time = _parse_timestamp(
        fields[settings.start_field], "start", text, line_number, settings
    )
    end_time = _parse_timestamp(
        fields[settings.end_field], "end", text, line_number, settings
    )
    label = fields[settings.label_field]
    if not label:
        raise ParseError("activity label is empty", text, line_number)

    return MonitoredData(start_time=start_time, end_time=end_time, activity_label=label)


def _parse_timestamp(
    value: str,
    field_name: str,
    line: str,
    line_number: Optional[int],
    settings: ParserSettings,
) -> datetime:
    text = normalize_timestamp_text(value)
    reason = f"invalid {field_name} timestamp {value!r}"
    if not re.fullmatch(settings.timestamp_pattern, text):
        raise ParseError(reason, line, line_number)
    try:
        return datetime.strptime(text, settings.timestamp_format)
    except ValueError:
        raise ParseError(reason, line, line_number) from None


def parse_lines(
    lines: Iterable[str], settings: Optional[ParserSettings] = None
) -> ParseOutcome:
    """Parse every line, stopping at the first failure unless skipping."""
    settings = settings or ParserSettings()
    outcome = ParseOutcome()
    for line_number, line in enumerate(lines, start=1):
        try:
            record = parse_line(line, settings, line_number=line_number)
        except ParseError as exc:
            if not settings.skip_invalid:
                raise
            logger.warning("Skipping invalid line: %s", exc)
            outcome.skipped.append(exc)
            continue
        logger.debug("Parsed %r", record)
        outcome.records.append(record)
    return outcome


def load_records(path: Path, settings: Optional[ParserSettings] = None) -> ParseOutcome:
    """Read the whole activity log at ``path`` and parse it."""
    settings = settings or ParserSettings()
    path = Path(path)
    try:
        with path.open("r", encoding=settings.encoding) as handle:
            lines = handle.readlines()
    except FileNotFoundError:
        raise LogFileNotFoundError(path) from None
    except (IsADirectoryError, PermissionError) as exc:
        raise LogFileNotFoundError(path, exc.strerror) from exc
    except (UnicodeDecodeError, LookupError) as exc:
        raise LogFileNotFoundError(path, str(exc)) from exc

    outcome = parse_lines(lines, settings)
    logger.info("Loaded %d records from %s", len(outcome.records), path)
    if outcome.skipped:
        logger.warning("Skipped %d invalid line(s) in %s", len(outcome.skipped), path)
    return outcome
