"""Domain models for monitored activity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict

LINE_TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class MonitoredData:
    """A single observed activity occurrence."""

    start_time: datetime
    end_time: datetime
    activity_label: str

    @property
    def start_day(self) -> int:
        """Ordinal day-of-year the activity started on."""
        return self.start_time.timetuple().tm_yday

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time

    def to_line(self, delimiter: str = "\t") -> str:
        """Render the record in the activity log's five-field layout."""
        start = self.start_time.strftime(LINE_TIMESTAMP_FMT)
        end = self.end_time.strftime(LINE_TIMESTAMP_FMT)
        return delimiter.join((start, "", end, "", self.activity_label))


class ActivitySummary(BaseModel):
    """Aggregate statistics computed over one activity log."""

    record_count: int
    first_activity: datetime
    last_activity: datetime
    monitoring_days: int
    activity_counts: dict[str, int]
    activity_counts_per_day: dict[int, dict[str, int]]
    skipped_lines: int = 0
    source: Optional[str] = None

    model_config = ConfigDict(extra="forbid")
