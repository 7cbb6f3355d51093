"""Shared runtime bootstrap for CLI commands."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from hrtracker.config import TrackerConfig, load_config
from hrtracker.logging import LOG_LEVEL_ENV_VAR, configure_logging
from hrtracker.schedules import ScheduleStore


@dataclass(slots=True)
class CliRuntime:
    """Resolved configuration and store for one CLI invocation."""

    config: TrackerConfig
    store: ScheduleStore


def bootstrap_runtime(
    *,
    schedule_file: Path | None = None,
    config_path: Path | None = None,
    verbose: bool = False,
) -> CliRuntime:
    """Load config, configure logging and open the schedule store.

    The schedule file is resolved as ``--file`` > config > default.

    Raises:
        FileNotFoundError: If an explicit config path does not exist.
        ConfigError: If the config file is not valid TOML.
        pydantic.ValidationError: If the config values are invalid.
    """
    config = load_config(config_path)

    if verbose:
        level = "DEBUG"
    else:
        level = os.environ.get(LOG_LEVEL_ENV_VAR) or config.log_level
    configure_logging(level=level, log_to_file=config.log_to_file)

    path = schedule_file.expanduser() if schedule_file else config.schedule_file
    return CliRuntime(config=config, store=ScheduleStore(path))
