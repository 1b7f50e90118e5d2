"""Helpers for locating application directories."""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs


APP_NAME = "ActivityStats"
APP_AUTHOR = "ActivityStats"
DEFAULT_LOG_NAME = "Activities.txt"


def get_data_dir() -> Path:
    """Return the base directory for activity logs."""
    dirs = PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR, roaming=True)
    path = Path(dirs.user_data_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_default_log_path() -> Path:
    return get_data_dir() / DEFAULT_LOG_NAME
