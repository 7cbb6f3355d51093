"""CLI command modules."""

from hrtracker.cli.commands import paths, schedules

__all__ = [
    "paths",
    "schedules",
]
