"""Configuration models and helpers for activity log parsing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ParserSettings:
    """Runtime configuration for reading an activity log."""

    delimiter: str = "\t"
    start_field: int = 0
    end_field: int = 2
    label_field: int = 4
    min_fields: int = 5
    timestamp_format: str = "%Y-%m-%dT%H:%M:%S"
    timestamp_pattern: str = r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}"
    encoding: str = "utf-8"
    skip_invalid: bool = False

    @classmethod
    def from_options(
        cls,
        skip_invalid: bool = False,
        encoding: str | None = None,
    ) -> "ParserSettings":
        return cls(
            encoding=encoding or "utf-8",
            skip_invalid=skip_invalid,
        )
