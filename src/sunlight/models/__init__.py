from .observer import ObserverConfig, TimeOverride, degrees_minutes_to_decimal
from .orbital import OrbitalState, SolarPosition
from .irradiance import Irradiance

__all__ = [
    "ObserverConfig",
    "TimeOverride",
    "degrees_minutes_to_decimal",
    "OrbitalState",
    "SolarPosition",
    "Irradiance",
]
