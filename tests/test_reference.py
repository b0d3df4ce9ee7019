from datetime import datetime

import pytest

from sunlight.atmosphere.refraction import apply_refraction
from sunlight.errors import ReferenceUnavailableError
from sunlight.models import ObserverConfig
from sunlight.position.calculator import compute_position
from sunlight.reference.skyfield_check import (
    ReferencePosition,
    compare_with_reference,
    load_ephemeris,
    reference_position,
)


@pytest.fixture(scope="module")
def ephemeris():
    try:
        return load_ephemeris()
    except ReferenceUnavailableError as e:
        pytest.skip(f"Reference ephemeris unavailable: {e.message}")


def _state(config, instant):
    position = compute_position(instant, config)
    return apply_refraction(position, config.pressure, config.temperature)


class TestAgainstDE421:
    """The low-precision formulas stay within a couple of degrees of DE421."""

    def test_summer_solstice_midday(self, ephemeris):
        config = ObserverConfig(timezone_offset_hours=2.0)
        instant = datetime(2024, 6, 21, 12, 0, 0)

        reference = reference_position(config, instant, ephemeris)
        comparison = compare_with_reference(_state(config, instant), reference)

        assert abs(comparison.hour_angle_error) < 2.5
        assert abs(comparison.elevation_error) < 1.0
        assert abs(comparison.distance_error) < 1e-3

    def test_winter_afternoon(self, ephemeris):
        config = ObserverConfig(timezone_offset_hours=1.0)
        instant = datetime(2024, 12, 21, 14, 30, 0)

        reference = reference_position(config, instant, ephemeris)
        comparison = compare_with_reference(_state(config, instant), reference)

        assert abs(comparison.hour_angle_error) < 2.5
        assert abs(comparison.elevation_error) < 1.0

    def test_reference_hour_angle_range(self, ephemeris):
        config = ObserverConfig(timezone_offset_hours=2.0)
        for hour in range(0, 24, 4):
            reference = reference_position(config, datetime(2024, 6, 21, hour), ephemeris)
            assert -180.0 < reference.hour_angle <= 180.0


def test_compare_wraps_hour_angle_difference():
    config = ObserverConfig(timezone_offset_hours=2.0)
    state = _state(config, datetime(2024, 6, 21, 0, 40, 0))
    reference = ReferencePosition(
        hour_angle=-state.hour_angle,
        refracted_elevation_angle=state.refracted_elevation_angle,
        distance=state.distance,
    )

    comparison = compare_with_reference(state, reference)

    assert -180.0 < comparison.hour_angle_error <= 180.0
    assert comparison.elevation_error == 0.0
    assert comparison.distance_error == 0.0
