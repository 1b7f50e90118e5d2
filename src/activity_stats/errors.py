"""Exceptions raised while loading and aggregating activity logs."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ActivityLogError(Exception):
    """Base class for all activity log failures."""


class LogFileNotFoundError(ActivityLogError, FileNotFoundError):
    """The activity log does not exist or cannot be read."""

    def __init__(self, path: Path, detail: Optional[str] = None) -> None:
        self.path = Path(path)
        if detail:
            message = f"Cannot read activity log {self.path} ({detail})"
        else:
            message = f"Activity log not found: {self.path}"
        super().__init__(message)


class ParseError(ActivityLogError, ValueError):
    """A line could not be turned into a record."""

    def __init__(
        self,
        reason: str,
        line: str,
        line_number: Optional[int] = None,
    ) -> None:
        self.reason = reason
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {reason}"
        else:
            message = reason
        super().__init__(message)


class EmptyInputError(ActivityLogError, ValueError):
    """An aggregation that needs at least one record received none."""
