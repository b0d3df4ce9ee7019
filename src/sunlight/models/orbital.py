from dataclasses import dataclass


@dataclass(frozen=True)
class SolarPosition:
    """Output of the position stage, before refraction."""

    day_number: float
    universal_time: float
    perihelion_longitude: float
    eccentricity: float
    mean_anomaly: float
    obliquity_of_ecliptic: float
    mean_longitude: float
    distance: float
    true_anomaly: float
    ecliptic_longitude: float
    declination: float
    right_ascension: float
    gmst: float
    lmst: float
    hour_angle: float
    true_zenith_angle: float
    true_elevation_angle: float


@dataclass(frozen=True)
class OrbitalState:
    """Full derived state of one update: position plus refraction."""

    position: SolarPosition
    refracted_elevation_angle: float
    refracted_zenith_angle: float

    @property
    def day_number(self) -> float:
        return self.position.day_number

    @property
    def distance(self) -> float:
        return self.position.distance

    @property
    def declination(self) -> float:
        return self.position.declination

    @property
    def right_ascension(self) -> float:
        return self.position.right_ascension

    @property
    def hour_angle(self) -> float:
        return self.position.hour_angle

    @property
    def true_zenith_angle(self) -> float:
        return self.position.true_zenith_angle

    @property
    def true_elevation_angle(self) -> float:
        return self.position.true_elevation_angle
