"""High-precision reference position from skyfield for cross-checking."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import warnings

from skyfield.api import load, wgs84

from ..config import REFERENCE_EPHEMERIS
from ..errors import ReferenceUnavailableError
from ..models.observer import ObserverConfig
from ..models.orbital import OrbitalState


@dataclass(frozen=True)
class ReferencePosition:
    hour_angle: float
    refracted_elevation_angle: float
    distance: float


@dataclass(frozen=True)
class ReferenceComparison:
    hour_angle_error: float
    elevation_error: float
    distance_error: float


def load_ephemeris(name: str = REFERENCE_EPHEMERIS):
    """Load (downloading on first use) a JPL ephemeris through skyfield."""
    try:
        return load(name)
    except OSError as e:
        raise ReferenceUnavailableError(name, str(e)) from e


def reference_position(
    config: ObserverConfig, instant: datetime, ephemeris=None
) -> ReferencePosition:
    """
    Compute the apparent sun position for the observer with skyfield.

    Args:
        config: Observer configuration; time overrides are applied to instant
        instant: Naive local date and time
        ephemeris: Loaded skyfield ephemeris (default: load REFERENCE_EPHEMERIS)

    Returns:
        ReferencePosition with hour angle in degrees (-180, 180], refracted
        elevation in degrees and geocentric distance in AU
    """
    if ephemeris is None:
        ephemeris = load_ephemeris()

    hour, minute, second = config.time_override.resolve(
        instant.hour, instant.minute, instant.second
    )
    local = instant.replace(hour=hour, minute=minute, second=second, microsecond=0)
    utc = (local - timedelta(hours=config.timezone_offset_hours)).replace(
        tzinfo=timezone.utc
    )

    ts = load.timescale()
    t = ts.from_datetime(utc)

    earth = ephemeris["earth"]
    sun = ephemeris["sun"]
    observer = earth + wgs84.latlon(config.latitude, config.longitude)

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        apparent = observer.at(t).observe(sun).apparent()

    alt, _, _ = apparent.altaz(
        temperature_C=config.temperature, pressure_mbar=config.pressure
    )
    ha, _, _ = apparent.hadec()
    geocentric_distance = earth.at(t).observe(sun).distance().au

    hour_angle = ha.hours * 15.0
    if hour_angle <= -180.0:
        hour_angle += 360.0
    elif hour_angle > 180.0:
        hour_angle -= 360.0

    return ReferencePosition(
        hour_angle=float(hour_angle),
        refracted_elevation_angle=float(alt.degrees),
        distance=float(geocentric_distance),
    )


def compare_with_reference(
    state: OrbitalState, reference: ReferencePosition
) -> ReferenceComparison:
    """Differences (engine minus reference) in degrees and AU."""
    hour_angle_error = state.hour_angle - reference.hour_angle
    if hour_angle_error > 180.0:
        hour_angle_error -= 360.0
    elif hour_angle_error <= -180.0:
        hour_angle_error += 360.0

    return ReferenceComparison(
        hour_angle_error=hour_angle_error,
        elevation_error=state.refracted_elevation_angle
        - reference.refracted_elevation_angle,
        distance_error=state.distance - reference.distance,
    )
