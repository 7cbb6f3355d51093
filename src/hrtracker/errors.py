"""Error types raised by the tracker.

Every error the CLI reports derives from TrackerError, so the command
boundary can catch a single type and exit non-zero with its message.
"""

from pathlib import Path


class TrackerError(Exception):
    """Base class for tracker errors."""


class ParseError(TrackerError, ValueError):
    """A date, time or interval expression could not be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"cannot parse `{text}`: {reason}")
        self.text = text
        self.reason = reason


class InvalidNameError(TrackerError, ValueError):
    """A schedule name is blank or cannot be stored."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"invalid schedule name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class OutOfRangeError(TrackerError):
    """Stepping a schedule would move its date past the supported range."""

    def __init__(self, name: str) -> None:
        super().__init__(f"cannot step `{name}`: next date is out of range")
        self.name = name


class DuplicateNameError(TrackerError):
    """A schedule with this name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"schedule `{name}` already exists")
        self.name = name


class NotFoundError(TrackerError, KeyError):
    """No schedule has this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no schedule named `{name}`")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class StorageError(TrackerError):
    """The schedule file is unreadable, unwritable or corrupt."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
