"""Sun path and irradiance sampled over one local day."""

from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta

import numpy as np

from ..config import DEFAULT_PROFILE_STEP_MINUTES
from ..engine import SolarEphemerisEngine
from ..models.observer import ObserverConfig, TimeOverride


@dataclass
class DailyProfile:
    day: date
    step_minutes: int
    hours: np.ndarray
    hour_angles: np.ndarray
    elevations: np.ndarray
    irradiance: np.ndarray

    def __post_init__(self):
        n = len(self.hours)
        if not (len(self.hour_angles) == len(self.elevations) == len(self.irradiance) == n):
            raise ValueError("profile arrays must have same length")

    def solar_noon(self) -> float:
        """Local decimal hour of the highest refracted elevation."""
        return float(self.hours[int(np.argmax(self.elevations))])

    def daylight_hours(self) -> float:
        """Time with the refracted sun above the horizon, in hours."""
        return float(np.count_nonzero(self.elevations > 0.0)) * self.step_minutes / 60.0

    def insolation_wh_m2(self) -> float:
        """Daily extraterrestrial energy on a horizontal surface, in Wh/m^2."""
        return float(np.sum(self.irradiance)) * self.step_minutes / 60.0


def daily_profile(
    config: ObserverConfig,
    day: date,
    step_minutes: int = DEFAULT_PROFILE_STEP_MINUTES,
) -> DailyProfile:
    """
    Sample the sun over one local day.

    Time overrides in config are ignored so that every sample uses its own
    time of day.

    Args:
        config: Observer configuration (location, atmosphere, timezone)
        day: Local calendar date
        step_minutes: Sampling interval, must divide into a day

    Returns:
        DailyProfile with one sample per step starting at 00:00
    """
    if step_minutes <= 0 or (24 * 60) % step_minutes != 0:
        raise ValueError(f"step_minutes must divide 1440, got {step_minutes}")

    engine = SolarEphemerisEngine(config=replace(config, time_override=TimeOverride()))
    engine.set_timezone(config.timezone_offset_hours)

    midnight = datetime(day.year, day.month, day.day)
    samples = (24 * 60) // step_minutes

    hours = np.empty(samples)
    hour_angles = np.empty(samples)
    elevations = np.empty(samples)
    irradiance = np.empty(samples)

    day_of_year = midnight.timetuple().tm_yday
    for i in range(samples):
        instant = midnight + timedelta(minutes=i * step_minutes)
        state = engine.update(instant)
        engine.intensity(day_of_year)

        hours[i] = i * step_minutes / 60.0
        hour_angles[i] = state.hour_angle
        elevations[i] = state.refracted_elevation_angle
        irradiance[i] = engine.last_irradiance.extraterrestrial_irradiance

    return DailyProfile(
        day=day,
        step_minutes=step_minutes,
        hours=hours,
        hour_angles=hour_angles,
        elevations=elevations,
        irradiance=irradiance,
    )
