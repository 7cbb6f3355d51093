"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from hrtracker.config import ConfigError, TrackerConfig, load_config


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults_without_file(self, tracker_home):
        config = load_config()

        assert config.schedule_file == tracker_home / "schedules.jsonl"
        assert config.log_level == "WARNING"
        assert config.log_to_file is False

    def test_reads_home_config(self, tracker_home, tmp_path):
        tracker_home.mkdir()
        (tracker_home / "config.toml").write_text(
            f'schedule_file = "{tmp_path / "elsewhere.jsonl"}"\nlog_level = "INFO"\n'
        )

        config = load_config()

        assert config.schedule_file == tmp_path / "elsewhere.jsonl"
        assert config.log_level == "INFO"

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("log_to_file = true\n")

        assert load_config(path).log_to_file is True

    def test_expands_tilde_in_schedule_file(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('schedule_file = "~/meds.jsonl"\n')

        assert load_config(path).schedule_file == Path.home() / "meds.jsonl"

    def test_explicit_path_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("not valid toml [[[")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('log_level = "LOUD"\n')

        with pytest.raises(ValidationError):
            load_config(path)


class TestTrackerConfig:
    """Tests for the TrackerConfig model."""

    def test_default_schedule_file_follows_home(self, tracker_home):
        assert TrackerConfig().schedule_file == tracker_home / "schedules.jsonl"
