from dataclasses import dataclass


@dataclass(frozen=True)
class Irradiance:
    day_angle: float
    sun_earth_distance_factor: float
    cosine_refracted_zenith: float
    extraterrestrial_normal_irradiance: float
    extraterrestrial_irradiance: float
