"""Configuration module."""

from hrtracker.config.loader import load_config
from hrtracker.config.models import ConfigError, TrackerConfig
from hrtracker.config.paths import (
    get_config_path,
    get_logs_path,
    get_schedule_file,
    get_tracker_home,
)

__all__ = [
    "ConfigError",
    "TrackerConfig",
    "get_config_path",
    "get_logs_path",
    "get_schedule_file",
    "get_tracker_home",
    "load_config",
]
