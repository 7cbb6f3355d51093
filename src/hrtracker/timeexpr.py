"""Date/time expressions and interval arithmetic.

Expressions resolve against the local clock:

    today            00:00:00 of the current date
    tomorrow, tmrw   00:00:00 of the next date
    now              the current date and time
    <base>+hh[:mm[:ss]]
                     the clock value is *added* as a duration, so
                     ``today+25`` is 01:00 on the following day

Intervals are a whole number of days (``1``, ``2d``), a clock literal
(``08:00``, ``0:30:15``) or both joined with ``+`` (``1d+12:00``).
"""

import re
from datetime import datetime, time, timedelta

from hrtracker.errors import ParseError

# hh[:mm[:ss]], one or two digits each, no upper bound
_TIME_RE = re.compile(r"(\d{1,2})(?::(\d{1,2})(?::(\d{1,2}))?)?", re.ASCII)
_DAYS_RE = re.compile(r"(\d+)d?", re.ASCII)

_TOMORROW = ("tomorrow", "tmrw")


def parse_duration(text: str) -> timedelta:
    """Parse ``hh[:mm[:ss]]`` into a duration.

    Components are not range-checked: ``30:70`` is 30 hours and 70 minutes.

    Raises:
        ParseError: If the text is not a valid clock literal.
    """
    match = _TIME_RE.fullmatch(text.strip())
    if match is None:
        raise ParseError(text, "expected hh[:mm[:ss]] with one or two digits each")
    hours, minutes, seconds = (int(part) if part else 0 for part in match.groups())
    try:
        return timedelta(hours=hours, minutes=minutes, seconds=seconds)
    except OverflowError as e:
        raise ParseError(text, "duration is too large") from e


def parse_base(keyword: str, now: datetime | None = None) -> datetime:
    """Resolve a date keyword to a timestamp relative to ``now``."""
    now = (now or datetime.now()).replace(microsecond=0)
    midnight = datetime.combine(now.date(), time())

    word = keyword.strip().lower()
    if word == "now":
        return now
    if word == "today":
        return midnight
    if word in _TOMORROW:
        return midnight + timedelta(days=1)
    raise ParseError(keyword, f"`{keyword.strip()}` is not a valid date")


def parse_datetime(expr: str, now: datetime | None = None) -> datetime:
    """Parse ``base['+'hh[:mm[:ss]]]`` into a naive local timestamp.

    Args:
        expr: The expression, e.g. ``tomorrow+08:30``.
        now: Reference instant. Defaults to the local clock.

    Returns:
        The resolved timestamp with second precision.

    Raises:
        ParseError: On an unknown keyword or a malformed time suffix.
    """
    base, sep, clock = expr.strip().partition("+")
    try:
        result = parse_base(base, now)
        if not sep:
            return result
        if not clock.strip():
            raise ParseError(clock, "expected a time after `+`")
        return result + parse_duration(clock)
    except ParseError as e:
        raise ParseError(expr, e.reason) from e


def parse_interval(text: str) -> timedelta:
    """Parse an interval literal.

    Grammar::

        interval := days | days '+' time | clock
        days     := digits 'd'?
        clock    := hh ':' mm [':' ss]

    A bare number is a day count, so a clock literal on its own must
    contain a colon.

    Raises:
        ParseError: If the literal matches none of the forms.
    """
    literal = text.strip().lower()
    days_part, sep, clock_part = literal.partition("+")

    try:
        if sep:
            return _parse_days(days_part) + parse_duration(clock_part)
        if ":" in literal:
            return parse_duration(literal)
        return _parse_days(literal)
    except ParseError as e:
        raise ParseError(text, e.reason) from e
    except OverflowError as e:
        raise ParseError(text, "interval is too large") from e


def _parse_days(text: str) -> timedelta:
    match = _DAYS_RE.fullmatch(text.strip())
    if match is None:
        raise ParseError(text, "expected a day count such as `1` or `2d`")
    try:
        return timedelta(days=int(match.group(1)))
    except OverflowError as e:
        raise ParseError(text, "day count is too large") from e


def add_interval(date: datetime, interval: timedelta) -> datetime:
    """Advance ``date`` by ``interval`` as elapsed time, with no calendar rules."""
    return date + interval


def format_interval(delta: timedelta) -> str:
    """Format a duration as ``[-]HHhMMmSSs``; hours are not folded into days."""
    sign = "-" if delta < timedelta(0) else ""
    total = int(abs(delta).total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{sign}{hours:02}h{minutes:02}m{seconds:02}s"


def format_countdown(target: datetime, now: datetime | None = None) -> str:
    """Describe the distance to ``target`` as "in ..." or "overdue by ..."."""
    delta = target - (now or datetime.now())
    if delta < timedelta(0):
        return f"overdue by {format_interval(-delta)}"
    return f"in {format_interval(delta)}"


def format_datetime(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S")
