"""Utilities to normalize raw activity log text."""

from __future__ import annotations

_CANONICAL_SEPARATOR = "T"


def strip_line_terminator(line: str) -> str:
    """Drop a trailing newline without touching other whitespace."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line


def normalize_timestamp_text(text: str) -> str:
    """Swap the date/time space for the canonical ``T`` separator."""
    return text.replace(" ", _CANONICAL_SEPARATOR)
