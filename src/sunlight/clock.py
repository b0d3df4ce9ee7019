"""Clock collaborators supplying the local instant and UTC offset."""

from datetime import datetime
from typing import Protocol

from .errors import TimeParseError


class Clock(Protocol):
    def now(self) -> datetime:
        """Current local wall-clock time (naive)."""
        ...

    def utc_offset_hours(self) -> float:
        """Signed offset of local time from UTC, in hours."""
        ...


class SystemClock:
    """Reads the host clock and local timezone."""

    def now(self) -> datetime:
        return datetime.now()

    def utc_offset_hours(self) -> float:
        offset = datetime.now().astimezone().utcoffset()
        if offset is None:
            return 0.0
        return offset.total_seconds() / 3600.0


class FixedClock:
    """Always returns the same instant and offset."""

    def __init__(self, instant: datetime, utc_offset_hours: float = 0.0):
        self.instant = instant
        self.offset_hours = utc_offset_hours

    def now(self) -> datetime:
        return self.instant

    def utc_offset_hours(self) -> float:
        return self.offset_hours


def parse_local_time(local_time: str) -> datetime:
    """
    Parse an ISO-8601 local timestamp into a naive datetime.

    Args:
        local_time: Timestamp such as "2024-06-21T12:00:00"

    Returns:
        Naive datetime in local time

    Raises:
        TimeParseError: If local_time cannot be parsed or carries a UTC offset
    """
    try:
        dt = datetime.fromisoformat(local_time)
    except ValueError:
        raise TimeParseError(local_time)

    if dt.tzinfo is not None:
        raise TimeParseError(local_time)

    return dt

