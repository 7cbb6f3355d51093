"""Schedule subsystem: named recurring events persisted to a JSONL file.

Public API:
- ScheduleStore: create / list / next / step over the schedule file

Types:
- Schedule: A single named schedule
"""

from hrtracker.schedules.store import ScheduleStore
from hrtracker.schedules.types import Schedule

__all__ = [
    "Schedule",
    "ScheduleStore",
]
