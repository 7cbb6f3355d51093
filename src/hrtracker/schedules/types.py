"""Schedule types.

Public types:
- Schedule: A named recurring event, one line of the JSONL file
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from hrtracker.timeexpr import add_interval

_KNOWN_FIELDS = {"name", "date", "interval"}


@dataclass
class Schedule:
    """A named recurring event from the JSONL file."""

    name: str
    date: datetime  # Next occurrence, naive local time
    interval: timedelta
    # Internal tracking
    line_number: int = field(default=0, compare=False)
    _extra: dict[str, Any] = field(default_factory=dict)  # Preserve unknown fields

    def stepped(self) -> datetime:
        """The occurrence after ``date``."""
        return add_interval(self.date, self.interval)

    def to_json_line(self) -> str:
        """Serialize schedule to a JSON line."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize schedule to a JSON-serializable dict."""
        data: dict[str, Any] = dict(self._extra)
        data["name"] = self.name
        data["date"] = self.date.isoformat()
        data["interval"] = int(self.interval.total_seconds())
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, line_number: int = 0) -> "Schedule":
        """Parse schedule from a dict payload.

        Raises:
            ValueError: If a field is missing or has the wrong shape.
        """
        try:
            name = data["name"]
            raw_date = data["date"]
            raw_interval = data["interval"]
        except KeyError as e:
            raise ValueError(f"missing field {e}") from None

        if not isinstance(name, str) or not name:
            raise ValueError("`name` must be a non-empty string")
        if not isinstance(raw_date, str):
            raise ValueError("`date` must be an ISO-8601 string")
        if not isinstance(raw_interval, int) or isinstance(raw_interval, bool):
            raise ValueError("`interval` must be a whole number of seconds")

        try:
            date = datetime.fromisoformat(raw_date)
            if date.tzinfo is not None:
                # Schedules are local time; older files may carry an offset
                date = date.astimezone().replace(tzinfo=None)
        except OverflowError:
            raise ValueError("`date` is out of range") from None

        try:
            interval = timedelta(seconds=raw_interval)
        except OverflowError:
            raise ValueError("`interval` is out of range") from None

        extra = {k: v for k, v in data.items() if k not in _KNOWN_FIELDS}

        return cls(
            name=name,
            date=date,
            interval=interval,
            line_number=line_number,
            _extra=extra,
        )

    @classmethod
    def from_line(cls, line: str, line_number: int = 0) -> "Schedule | None":
        """Parse schedule from a JSONL line.

        Returns None for blank and comment lines.

        Raises:
            ValueError: If the line is not a valid schedule.
        """
        line = line.strip()
        if not line or line.startswith("#"):
            return None

        data = json.loads(line)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        return cls.from_dict(data, line_number=line_number)
