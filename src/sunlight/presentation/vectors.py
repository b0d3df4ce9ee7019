"""Scene-space vectors for drawing the sun marker."""

import math

import numpy as np

from ..config import MARKER_DISTANCE, MARKER_RADIUS_PER_AU

# Scene convention: +Y up, the sun at zero elevation and hour angle lies on -Z
REFERENCE_DIRECTION = np.array([0.0, 0.0, -1.0], dtype=np.float32)


def _rotate_x(vector: np.ndarray, angle_deg: float) -> np.ndarray:
    a = math.radians(angle_deg)
    c, s = math.cos(a), math.sin(a)
    rotation = np.array(
        [[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]], dtype=np.float32
    )
    return rotation @ vector


def _rotate_y(vector: np.ndarray, angle_deg: float) -> np.ndarray:
    a = math.radians(angle_deg)
    c, s = math.cos(a), math.sin(a)
    rotation = np.array(
        [[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]], dtype=np.float32
    )
    return rotation @ vector


def sun_direction(elevation_deg: float, hour_angle_deg: float) -> np.ndarray:
    """
    Unit vector from the scene origin toward the sun.

    Args:
        elevation_deg: Refracted solar elevation in degrees
        hour_angle_deg: Hour angle in degrees (positive west of the meridian)

    Returns:
        np.ndarray: float32 vector of length 1
    """
    direction = _rotate_x(REFERENCE_DIRECTION, elevation_deg)
    direction = _rotate_y(direction, -hour_angle_deg)
    return (direction / np.linalg.norm(direction)).astype(np.float32)


def marker_position(direction: np.ndarray, scale: float = MARKER_DISTANCE) -> np.ndarray:
    return np.asarray(direction, dtype=np.float32) * np.float32(scale)


def marker_radius(distance_au: float) -> float:
    """Radius of the sun sphere, the true solar radius scaled down to the marker distance."""
    return distance_au * MARKER_RADIUS_PER_AU
