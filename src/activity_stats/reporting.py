"""Summary assembly and console rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .aggregation import (
    activity_count_per_day,
    activity_days,
    count_by_activity_type,
    days_of_monitoring,
    first_activity_time,
    last_activity_time,
)
from .errors import EmptyInputError, ParseError
from .models import ActivitySummary, MonitoredData


def build_summary(
    records: Sequence[MonitoredData],
    skipped: Sequence[ParseError] = (),
    source: Optional[Path | str] = None,
) -> ActivitySummary:
    if not records:
        raise EmptyInputError("The activity log contains no records.")
    return ActivitySummary(
        record_count=len(records),
        first_activity=first_activity_time(records),
        last_activity=last_activity_time(records),
        monitoring_days=days_of_monitoring(records),
        activity_counts=count_by_activity_type(records),
        activity_counts_per_day=activity_count_per_day(activity_days(records), records),
        skipped_lines=len(skipped),
        source=str(source) if source is not None else None,
    )


class SummaryPrinter:
    """Render human-readable summaries in the console."""

    def print_summary(self, summary: ActivitySummary) -> None:
        if summary.source:
            print(f"Summary for {summary.source}")
            print("-" * 40)
        print(f"Records: {summary.record_count}")
        print(f"First activity: {summary.first_activity:%Y-%m-%d %H:%M:%S}")
        print(f"Last activity:  {summary.last_activity:%Y-%m-%d %H:%M:%S}")
        print()
        self.print_span(summary)
        print()
        print("Activity counts:")
        self.print_activity_counts(summary.activity_counts, indent="  ")
        print()
        print("Activity counts per day:")
        self.print_daily_counts(summary.activity_counts_per_day, indent="  ")
        if summary.skipped_lines:
            print()
            print(f"Skipped {summary.skipped_lines} invalid line(s).")

    def print_span(self, summary: ActivitySummary) -> None:
        elapsed = (summary.last_activity - summary.first_activity).total_seconds()
        print(
            f"Monitoring span: {summary.monitoring_days} days "
            f"({format_duration(elapsed)} total)"
        )

    def print_activity_counts(self, counts: dict[str, int], indent: str = "") -> None:
        if not counts:
            print(f"{indent}No activities recorded.")
            return
        width = max(len(label) for label in counts)
        for label, count in counts.items():
            print(f"{indent}{label:<{width}}  {count}")

    def print_daily_counts(
        self, per_day: dict[int, dict[str, int]], indent: str = ""
    ) -> None:
        for day in sorted(per_day):
            print(f"{indent}Day {day}: {format_counts(per_day[day])}")


def format_counts(counts: dict[str, int]) -> str:
    return ", ".join(f"{label}={count}" for label, count in counts.items())


def format_duration(seconds: float) -> str:
    total_seconds = int(round(seconds))
    sign = "-" if total_seconds < 0 else ""
    hours, remainder = divmod(abs(total_seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"
