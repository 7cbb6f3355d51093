"""Centralized path management for hrtracker.

All state (config, schedules, logs) is stored under a single base directory.
The base directory can be overridden with the HRTRACKER_HOME environment
variable.

Default location: ~/.hrtracker
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "HRTRACKER_HOME"


@lru_cache(maxsize=1)
def get_tracker_home() -> Path:
    """Get the base directory for all hrtracker data.

    Resolution order:
    1. HRTRACKER_HOME environment variable (if set)
    2. ~/.hrtracker

    Returns:
        Path to the hrtracker home directory.
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()

    return Path.home() / ".hrtracker"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_tracker_home() / "config.toml"


def get_schedule_file() -> Path:
    """Get the default schedule file path (JSONL, one schedule per line)."""
    return get_tracker_home() / "schedules.jsonl"


def get_logs_path() -> Path:
    """Get the default logs directory path."""
    return get_tracker_home() / "logs"


def get_all_paths() -> dict[str, Path]:
    """Get all standard paths for debugging/display."""
    return {
        "home": get_tracker_home(),
        "config": get_config_path(),
        "schedules": get_schedule_file(),
        "logs": get_logs_path(),
    }
