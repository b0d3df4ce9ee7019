from dataclasses import dataclass, field
from typing import Optional

from ..config import (
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_PRESSURE_MBAR,
    DEFAULT_TEMPERATURE_C,
)


def degrees_minutes_to_decimal(value: float) -> float:
    """Convert a degrees.minutes value (19.30 = 19°30') to decimal degrees."""
    whole = int(value)
    return whole + (value - whole) * 100.0 / 60.0


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


@dataclass(frozen=True)
class TimeOverride:
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None

    @classmethod
    def clamped(cls, hour: int, minute: int, second: int) -> "TimeOverride":
        """Build an override from raw values, clamping instead of rejecting.

        Values are clamped to [-1, 23] for the hour and [-1, 59] for minute
        and second; -1 (or anything below it) leaves the field unset.
        """
        values = (
            _clamp(int(hour), -1, 23),
            _clamp(int(minute), -1, 59),
            _clamp(int(second), -1, 59),
        )
        return cls(*(None if v < 0 else v for v in values))

    def to_sentinels(self) -> tuple[int, int, int]:
        """Return the override as a tuple with -1 marking unset fields."""
        return tuple(-1 if v is None else v for v in (self.hour, self.minute, self.second))

    def resolve(self, hour: int, minute: int, second: int) -> tuple[int, int, int]:
        """Apply the override on top of clock-supplied components."""
        return (
            hour if self.hour is None else self.hour,
            minute if self.minute is None else self.minute,
            second if self.second is None else self.second,
        )


@dataclass
class ObserverConfig:
    longitude: float = degrees_minutes_to_decimal(DEFAULT_LONGITUDE)
    latitude: float = degrees_minutes_to_decimal(DEFAULT_LATITUDE)
    time_override: TimeOverride = field(default_factory=TimeOverride)
    pressure: float = DEFAULT_PRESSURE_MBAR
    temperature: float = DEFAULT_TEMPERATURE_C
    timezone_offset_hours: float = 0.0

    @classmethod
    def from_degrees_minutes(
        cls, longitude: float, latitude: float, **kwargs
    ) -> "ObserverConfig":
        return cls(
            longitude=degrees_minutes_to_decimal(longitude),
            latitude=degrees_minutes_to_decimal(latitude),
            **kwargs,
        )
