"""Aggregate statistics over parsed activity records.

Every function here is a pure computation over an in-memory sequence of
records. Records are attributed to the day their activity started on, keyed
by ordinal day-of-year; the year is ignored.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from .errors import EmptyInputError
from .models import MonitoredData

_ONE_DAY = timedelta(days=1)


def first_activity_time(records: Sequence[MonitoredData]) -> datetime:
    """Earliest start time across all records."""
    if not records:
        raise EmptyInputError("Cannot find the first activity of an empty log.")
    return min(records, key=lambda record: record.start_time).start_time


def last_activity_time(records: Sequence[MonitoredData]) -> datetime:
    """Latest end time across all records."""
    if not records:
        raise EmptyInputError("Cannot find the last activity of an empty log.")
    return max(records, key=lambda record: record.end_time).end_time


def days_of_monitoring(records: Sequence[MonitoredData]) -> int:
    """Whole days between the earliest start and the latest end."""
    if not records:
        raise EmptyInputError("Cannot compute the monitoring span of an empty log.")
    span = last_activity_time(records) - first_activity_time(records)
    days = abs(span) // _ONE_DAY
    return days if span >= timedelta(0) else -days


def count_by_activity_type(records: Iterable[MonitoredData]) -> dict[str, int]:
    """Number of occurrences of each activity label."""
    counts: defaultdict[str, int] = defaultdict(int)
    for record in records:
        counts[record.activity_label] += 1
    return dict(counts)


def activity_days(records: Iterable[MonitoredData]) -> set[int]:
    """Distinct days-of-year on which at least one activity started."""
    return {record.start_day for record in records}


def activity_count_per_day(
    days: Iterable[int], records: Sequence[MonitoredData]
) -> dict[int, dict[str, int]]:
    """Activity counts for each requested day, restricted to records starting on it."""
    return {
        day: count_by_activity_type(
            record for record in records if record.start_day == day
        )
        for day in days
    }
