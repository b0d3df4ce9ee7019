"""Empirical atmospheric refraction correction for solar elevation."""

import math
from enum import Enum
from typing import Callable, Dict

from ..models.orbital import OrbitalState, SolarPosition


class RefractionRegime(Enum):
    NEAR_ZENITH = "near_zenith"  # above 85°, no correction
    HIGH = "high"  # [5°, 85°], tangent series
    LOW = "low"  # [-0.575°, 5°), quartic polynomial
    BELOW_HORIZON = "below_horizon"  # below -0.575°


NEAR_ZENITH_LIMIT = 85.0
HIGH_LIMIT = 5.0
LOW_LIMIT = -0.575


def classify_elevation(elevation_deg: float) -> RefractionRegime:
    """Select the refraction regime for a true elevation angle."""
    if elevation_deg > NEAR_ZENITH_LIMIT:
        return RefractionRegime.NEAR_ZENITH
    if elevation_deg >= HIGH_LIMIT:
        return RefractionRegime.HIGH
    if elevation_deg >= LOW_LIMIT:
        return RefractionRegime.LOW
    return RefractionRegime.BELOW_HORIZON


def _high_correction(elevation_deg: float) -> float:
    tanelev = math.tan(math.radians(elevation_deg))
    return 58.1 / tanelev - 0.07 / tanelev**3 + 0.000086 / tanelev**5


def _low_correction(elevation_deg: float) -> float:
    e = elevation_deg
    return 1735.0 + e * (-518.2 + e * (103.4 + e * (-12.79 + e * 0.711)))


def _below_horizon_correction(elevation_deg: float) -> float:
    return -20.774 / math.tan(math.radians(elevation_deg))


# Raw corrections in arc-seconds at standard atmosphere
REFRACTION_FORMULAS: Dict[RefractionRegime, Callable[[float], float]] = {
    RefractionRegime.NEAR_ZENITH: lambda elevation_deg: 0.0,
    RefractionRegime.HIGH: _high_correction,
    RefractionRegime.LOW: _low_correction,
    RefractionRegime.BELOW_HORIZON: _below_horizon_correction,
}


def pressure_temperature_factor(pressure: float, temperature: float) -> float:
    """Scale factor for a non-standard atmosphere (1.0 at 1013 mbar, 10°C)."""
    return (pressure * 283.0) / (1013.0 * (273.0 + temperature))


def refraction_correction(
    elevation_deg: float, pressure: float, temperature: float
) -> float:
    """
    Refraction correction in degrees to add to the true elevation.

    Args:
        elevation_deg: True (geometric) solar elevation in degrees
        pressure: Surface pressure in millibars
        temperature: Ambient temperature in degrees C

    Returns:
        Correction in degrees (0.0 above 85°)
    """
    regime = classify_elevation(elevation_deg)
    if regime is RefractionRegime.NEAR_ZENITH:
        return 0.0

    arcsec = REFRACTION_FORMULAS[regime](elevation_deg)
    return arcsec * pressure_temperature_factor(pressure, temperature) / 3600.0


def apply_refraction(
    position: SolarPosition, pressure: float, temperature: float
) -> OrbitalState:
    """Refract the true elevation of a position and build the full state."""
    refracted_elevation = position.true_elevation_angle + refraction_correction(
        position.true_elevation_angle, pressure, temperature
    )
    return OrbitalState(
        position=position,
        refracted_elevation_angle=refracted_elevation,
        refracted_zenith_angle=90.0 - refracted_elevation,
    )
