"""Schedule store backed by a JSONL file."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TypeVar

from hrtracker.errors import (
    DuplicateNameError,
    InvalidNameError,
    NotFoundError,
    OutOfRangeError,
    StorageError,
)
from hrtracker.schedules.types import Schedule
from hrtracker.timeexpr import parse_datetime, parse_interval

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class ScheduleStore:
    """File-backed storage for named schedules.

    Every read goes to disk. Every mutation reads the whole file, applies
    the change in memory and rewrites the file atomically (write to a temp
    file, then rename).
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list(self) -> list[Schedule]:
        """Return all schedules in insertion order."""
        return self._load()

    def get(self, name: str) -> Schedule:
        """Return the schedule called ``name``.

        Raises:
            NotFoundError: If no schedule has that name.
        """
        return _find(self._load(), name)

    def next(self, name: str) -> datetime:
        """Return the next occurrence of ``name``."""
        return self.get(name).date

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(
        self,
        name: str,
        date_expr: str,
        interval_expr: str,
        *,
        now: datetime | None = None,
    ) -> Schedule:
        """Parse the expressions and append a new schedule.

        Raises:
            InvalidNameError: If ``name`` is blank or not encodable as UTF-8.
            ParseError: If either expression is malformed.
            DuplicateNameError: If ``name`` is already taken.
        """
        _validate_name(name)
        schedule = Schedule(
            name=name,
            date=parse_datetime(date_expr, now),
            interval=parse_interval(interval_expr),
        )

        def mutate(schedules: list[Schedule]) -> Schedule:
            if any(s.name == name for s in schedules):
                raise DuplicateNameError(name)
            schedules.append(schedule)
            return schedule

        created = self._mutate(mutate)
        logger.info(
            "schedule_created",
            extra={
                "schedule.name": name,
                "schedule.date": created.date.isoformat(),
                "schedule.interval": int(created.interval.total_seconds()),
            },
        )
        return created

    def step(self, name: str) -> Schedule:
        """Advance ``name`` by one interval.

        Raises:
            NotFoundError: If no schedule has that name.
            OutOfRangeError: If the next date would be past year 9999.
        """

        def mutate(schedules: list[Schedule]) -> Schedule:
            schedule = _find(schedules, name)
            try:
                schedule.date = schedule.stepped()
            except OverflowError as e:
                raise OutOfRangeError(name) from e
            return schedule

        stepped = self._mutate(mutate)
        logger.info(
            "schedule_stepped",
            extra={"schedule.name": name, "schedule.date": stepped.date.isoformat()},
        )
        return stepped

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _load(self) -> list[Schedule]:
        if not self._path.exists():
            logger.debug("schedule_file_missing", extra={"file.path": str(self._path)})
            return []

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(self._path, f"cannot read: {e}") from e

        schedules: list[Schedule] = []
        seen: set[str] = set()
        for line_number, line in enumerate(text.splitlines(), start=1):
            try:
                schedule = Schedule.from_line(line, line_number)
            except ValueError as e:
                raise StorageError(self._path, f"line {line_number}: {e}") from e
            if schedule is None:
                continue
            if schedule.name in seen:
                raise StorageError(
                    self._path,
                    f"line {line_number}: duplicate schedule `{schedule.name}`",
                )
            seen.add(schedule.name)
            schedules.append(schedule)

        logger.debug(
            "schedules_loaded",
            extra={"file.path": str(self._path), "count": len(schedules)},
        )
        return schedules

    def _mutate(self, mutate: Callable[[list[Schedule]], _T]) -> _T:
        schedules = self._load()
        result = mutate(schedules)
        self._rewrite(schedules)
        return result

    def _rewrite(self, schedules: list[Schedule]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self._path.parent,
                prefix=f".{self._path.stem}_",
                suffix=".tmp",
            )
        except OSError as e:
            raise StorageError(self._path, f"cannot write: {e}") from e

        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                for schedule in schedules:
                    f.write(schedule.to_json_line() + "\n")
            # Atomic rename
            Path(temp_path).replace(self._path)
        except (OSError, UnicodeEncodeError) as e:
            _discard(temp_path)
            raise StorageError(self._path, f"cannot write: {e}") from e
        except BaseException:
            _discard(temp_path)
            raise


def _discard(temp_path: str) -> None:
    try:
        Path(temp_path).unlink(missing_ok=True)
    except OSError:
        pass


def _validate_name(name: str) -> None:
    if not name.strip():
        raise InvalidNameError(name, "must not be blank")
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidNameError(name, "contains characters that cannot be stored") from e


def _find(schedules: list[Schedule], name: str) -> Schedule:
    for schedule in schedules:
        if schedule.name == name:
            return schedule
    raise NotFoundError(name)
