"""
Default observer configuration and physical constants
"""
from enum import Enum

# Default location roughly in the centre of Poland, degrees.minutes convention
DEFAULT_LONGITUDE = 19.00
DEFAULT_LATITUDE = 52.00

# Surface conditions for the refraction model
DEFAULT_PRESSURE_MBAR = 1013.0  # surface pressure, millibars
DEFAULT_TEMPERATURE_C = 15.0  # ambient dry-bulb temperature, degrees C

# Irradiance
SOLAR_CONSTANT = 1367.0  # W/m^2
INTENSITY_NORMALIZATION = 1399.0  # horizontal irradiance mapped to intensity 1.0

# Presentation: the sun marker is drawn at MARKER_DISTANCE scene units and its
# radius is the true solar radius scaled by the same ratio, per AU of distance
MARKER_DISTANCE = 2000.0
MARKER_RADIUS_PER_AU = 9.359157

# Daily profile sampling
DEFAULT_PROFILE_STEP_MINUTES = 10

# Reference ephemeris used for cross-checks
REFERENCE_EPHEMERIS = "de421.bsp"


class TimezonePolicy(Enum):
    """When the engine samples the host UTC offset."""

    STARTUP = "startup"
    EVERY_UPDATE = "every_update"
