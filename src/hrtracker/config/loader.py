"""Configuration loading from TOML files."""

import tomllib
from pathlib import Path

from hrtracker.config.models import ConfigError, TrackerConfig
from hrtracker.config.paths import get_config_path


def load_config(path: Path | None = None) -> TrackerConfig:
    """Load configuration from a TOML file.

    Args:
        path: Explicit path to config file. If None, $HRTRACKER_HOME/config.toml
            is used when it exists, otherwise defaults apply.

    Returns:
        Validated TrackerConfig instance.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        ConfigError: If the file is not valid TOML.
        pydantic.ValidationError: If the values do not match the schema.
    """
    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = get_config_path()
        if not config_path.exists():
            return TrackerConfig()

    try:
        with config_path.open("rb") as f:
            raw_config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    if isinstance(raw_config.get("schedule_file"), str):
        raw_config["schedule_file"] = Path(raw_config["schedule_file"]).expanduser()

    return TrackerConfig.model_validate(raw_config)
