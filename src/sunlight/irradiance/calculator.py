"""Extraterrestrial irradiance from day of year and refracted zenith angle."""

import math

from ..config import INTENSITY_NORMALIZATION, SOLAR_CONSTANT
from ..models.irradiance import Irradiance


def day_angle(day_of_year: int) -> float:
    """Fraction of the year in degrees, 0 on January 1st."""
    return (day_of_year - 1) * 360.0 / 365.0


def sun_earth_distance_factor(day_angle_deg: float) -> float:
    """
    Earth-Sun distance correction to the solar constant.

    Fourier series in the day angle; about 1.034 in early January and
    0.967 in early July.
    """
    rad = math.radians(day_angle_deg)
    factor = 1.000110 + 0.034221 * math.cos(rad) + 0.001280 * math.sin(rad)
    factor += 0.000719 * math.cos(2.0 * rad) + 0.000077 * math.sin(2.0 * rad)
    return factor


def compute_irradiance(day_of_year: int, refracted_zenith_deg: float) -> Irradiance:
    """
    Compute extraterrestrial normal and horizontal irradiance.

    Args:
        day_of_year: 1-based day of the year
        refracted_zenith_deg: Refracted solar zenith angle in degrees

    Returns:
        Irradiance with both values 0.0 when the sun is below the horizon
    """
    dayang = day_angle(day_of_year)
    erv = sun_earth_distance_factor(dayang)
    coszen = math.cos(math.radians(refracted_zenith_deg))

    if coszen > 0.0:
        etrn = SOLAR_CONSTANT * erv
        etr = etrn * coszen
    else:
        etrn = 0.0
        etr = 0.0

    return Irradiance(
        day_angle=dayang,
        sun_earth_distance_factor=erv,
        cosine_refracted_zenith=coszen,
        extraterrestrial_normal_irradiance=etrn,
        extraterrestrial_irradiance=etr,
    )


def normalized_intensity(irradiance: Irradiance) -> float:
    """Horizontal irradiance scaled so a clear zenith sun reads close to 1.0."""
    return irradiance.extraterrestrial_irradiance / INTENSITY_NORMALIZATION
