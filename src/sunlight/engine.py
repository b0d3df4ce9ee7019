"""Solar ephemeris engine: observer configuration plus derived sun state."""

import logging
from datetime import datetime
from typing import Optional

import numpy as np

from .atmosphere.refraction import apply_refraction
from .clock import Clock, SystemClock
from .config import MARKER_DISTANCE, TimezonePolicy
from .errors import EngineStateError
from .irradiance.calculator import compute_irradiance, normalized_intensity
from .models.irradiance import Irradiance
from .models.observer import ObserverConfig, TimeOverride, degrees_minutes_to_decimal
from .models.orbital import OrbitalState
from .position.calculator import compute_position
from .presentation.vectors import marker_position, marker_radius, sun_direction

logger = logging.getLogger(__name__)


class SolarEphemerisEngine:
    """Computes the position and intensity of the Sun for one observer.

    Configuration setters only mutate the observer; nothing is recomputed
    until the next update(). Queries answer from the state of the last
    update. The engine is not thread-safe.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        timezone_policy: TimezonePolicy = TimezonePolicy.STARTUP,
        config: Optional[ObserverConfig] = None,
    ):
        """Initialize the engine.

        Args:
            clock: Source of the current instant and UTC offset (default: host clock)
            timezone_policy: When to sample the UTC offset from the clock
            config: Initial observer configuration (default location, 1013 mbar, 15°C)
        """
        self.clock = clock if clock is not None else SystemClock()
        self.timezone_policy = timezone_policy
        self.config = config if config is not None else ObserverConfig()

        self._timezone_pinned = False
        self._state: Optional[OrbitalState] = None
        self._instant: Optional[datetime] = None
        self._irradiance: Optional[Irradiance] = None
        self._direction: Optional[np.ndarray] = None

    def init(self) -> None:
        """Sample the UTC offset from the clock."""
        if self._timezone_pinned:
            return
        self.config.timezone_offset_hours = self.clock.utc_offset_hours()
        logger.debug("Timezone offset sampled: %+.2f h", self.config.timezone_offset_hours)

    @property
    def state(self) -> OrbitalState:
        return self._require_state("state")

    @property
    def last_irradiance(self) -> Optional[Irradiance]:
        return self._irradiance

    def update(self, instant: Optional[datetime] = None) -> OrbitalState:
        """Recompute the sun state for an instant.

        Args:
            instant: Local date and time; read from the clock when omitted

        Returns:
            The new OrbitalState
        """
        if instant is None:
            instant = self.clock.now()
            if self.timezone_policy is TimezonePolicy.EVERY_UPDATE:
                self.init()

        position = compute_position(instant, self.config)
        state = apply_refraction(position, self.config.pressure, self.config.temperature)
        direction = sun_direction(state.refracted_elevation_angle, state.hour_angle)

        self._state = state
        self._instant = instant
        self._direction = direction

        logger.debug(
            "Sun at %s: hour angle %.3f°, elevation %.3f° (refracted %.3f°)",
            instant.isoformat(),
            state.hour_angle,
            state.true_elevation_angle,
            state.refracted_elevation_angle,
        )
        return state

    def direction(self) -> np.ndarray:
        self._require_state("direction")
        return self._direction.copy()

    def elevation_angle(self) -> np.float32:
        return np.float32(self._require_state("elevation_angle").refracted_elevation_angle)

    def hour_angle(self) -> float:
        return self._require_state("hour_angle").hour_angle

    def distance(self) -> float:
        """Sun-Earth distance of the last update, in AU."""
        return self._require_state("distance").distance

    def intensity(self, day_of_year: Optional[int] = None) -> float:
        """Compute irradiance now and return it normalized for presentation.

        Args:
            day_of_year: 1-based day of the year (default: that of the last update)

        Returns:
            Horizontal extraterrestrial irradiance divided by 1399
        """
        state = self._require_state("intensity")
        if day_of_year is None:
            day_of_year = self._instant.timetuple().tm_yday

        self._irradiance = compute_irradiance(day_of_year, state.refracted_zenith_angle)
        return normalized_intensity(self._irradiance)

    def marker_radius(self) -> float:
        return marker_radius(self.distance())

    def marker_position(self, scale: float = MARKER_DISTANCE) -> np.ndarray:
        return marker_position(self.direction(), scale)

    def set_location(self, longitude: float, latitude: float) -> None:
        """Set the observer location from degrees.minutes values (19.30 = 19°30')."""
        self.config.longitude = degrees_minutes_to_decimal(longitude)
        self.config.latitude = degrees_minutes_to_decimal(latitude)
        logger.debug(
            "Location set to %.6f°, %.6f°", self.config.longitude, self.config.latitude
        )

    def set_time(self, hour: int, minute: int, second: int) -> None:
        """Override clock components; -1 keeps the value from the clock."""
        self.config.time_override = TimeOverride.clamped(hour, minute, second)
        logger.debug("Time override set to %s", self.config.time_override)

    def set_temperature(self, temperature: float) -> None:
        self.config.temperature = temperature

    def set_pressure(self, pressure: float) -> None:
        self.config.pressure = pressure

    def set_timezone(self, offset_hours: float) -> None:
        """Pin the UTC offset; the clock is no longer consulted for it."""
        self.config.timezone_offset_hours = offset_hours
        self._timezone_pinned = True
        logger.debug("Timezone offset pinned to %+.2f h", offset_hours)

    def _require_state(self, query: str) -> OrbitalState:
        if self._state is None:
            raise EngineStateError(query)
        return self._state
