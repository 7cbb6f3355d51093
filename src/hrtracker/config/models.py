"""Configuration models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from hrtracker.config.paths import get_schedule_file


class ConfigError(Exception):
    """Configuration error."""


class TrackerConfig(BaseModel):
    """Root configuration model."""

    schedule_file: Path = Field(default_factory=get_schedule_file)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    # Also write JSONL logs under $HRTRACKER_HOME/logs
    log_to_file: bool = False
