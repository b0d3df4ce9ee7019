from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..models.irradiance import Irradiance
    from ..models.observer import ObserverConfig
    from ..models.orbital import OrbitalState


def generate_summary(
    config: "ObserverConfig",
    state: "OrbitalState",
    irradiance: "Optional[Irradiance]" = None,
) -> str:
    """Generate a human-readable description of the sun position.

    Args:
        config: Observer configuration (location, timezone).
        state: Sun state from the last update.
        irradiance: Optional irradiance to report.

    Returns:
        Human-readable summary string.
    """
    parts = [
        f"Sun seen from {abs(config.latitude):.4f}°{'N' if config.latitude >= 0 else 'S'}, "
        f"{abs(config.longitude):.4f}°{'E' if config.longitude >= 0 else 'W'}"
    ]

    if state.refracted_elevation_angle > 0:
        parts.append(
            f"{state.refracted_elevation_angle:.2f}° above the horizon"
        )
    else:
        parts.append(
            f"{-state.refracted_elevation_angle:.2f}° below the horizon"
        )

    side = "west" if state.hour_angle > 0 else "east"
    if abs(state.hour_angle) < 0.005:
        parts.append("On the meridian")
    else:
        parts.append(
            f"Hour angle {state.hour_angle:.2f}° ({abs(state.hour_angle):.2f}° {side} of the meridian)"
        )

    parts.append(f"Distance {state.distance:.4f} AU")

    if irradiance is not None:
        parts.append(
            f"Extraterrestrial irradiance {irradiance.extraterrestrial_irradiance:.1f} W/m²"
        )

    return ". ".join(parts) + "."
