import math
from datetime import datetime, timedelta

import numpy as np
import pytest

from sunlight.models import ObserverConfig, TimeOverride
from sunlight.position.calculator import (
    compute_position,
    day_number,
    reduce24,
    reduce360,
    wrap_hour_angle,
)


def _config(**kwargs):
    defaults = dict(longitude=19.0, latitude=52.0, timezone_offset_hours=2.0)
    defaults.update(kwargs)
    return ObserverConfig(**defaults)


class TestReduce360:
    @pytest.mark.parametrize(
        "value", [0.0, 359.999, 360.0, 720.0, -720.0, -1e-17, -0.5, 9166.82, -12345.6]
    )
    def test_range(self, value):
        result = reduce360(value)
        assert 0.0 <= result < 360.0

    def test_idempotent(self):
        rng = np.random.default_rng(12345)
        for value in rng.uniform(-1e5, 1e5, size=500):
            once = reduce360(value)
            assert reduce360(once) == once

    def test_known_values(self):
        assert reduce360(370.0) == pytest.approx(10.0)
        assert reduce360(-10.0) == pytest.approx(350.0)

    def test_reduce24(self):
        assert reduce24(604.1104) == pytest.approx(4.1104)
        assert reduce24(-1.0) == pytest.approx(23.0)
        assert 0.0 <= reduce24(-1e-17) < 24.0


class TestDayNumber:
    def test_epoch(self):
        assert day_number(2000, 1, 1, 0.0) == 1.0

    def test_summer_solstice_2024(self):
        assert day_number(2024, 6, 21, 12.0) == pytest.approx(8939.5)

    def test_consecutive_days(self):
        assert day_number(2024, 3, 1, 0.0) - day_number(2024, 2, 28, 0.0) == 2.0
        assert day_number(2023, 3, 1, 0.0) - day_number(2023, 2, 28, 0.0) == 1.0


class TestHourAngleWrap:
    def test_boundaries(self):
        assert wrap_hour_angle(180.0) == 180.0
        assert wrap_hour_angle(-180.0) == 180.0
        assert wrap_hour_angle(-179.5) == -179.5

    def test_single_adjustment(self):
        assert wrap_hour_angle(539.0) == pytest.approx(179.0)
        assert wrap_hour_angle(-539.0) == pytest.approx(-179.0)
        assert wrap_hour_angle(200.0) == pytest.approx(-160.0)

    def test_range_over_a_year(self):
        start = datetime(2024, 1, 1)
        for longitude in (-179.9, -90.0, 0.0, 19.0, 179.9):
            config = _config(longitude=longitude)
            for step in range(0, 366 * 24, 7):
                position = compute_position(start + timedelta(hours=step), config)
                assert -180.0 < position.hour_angle <= 180.0


class TestSummerSolsticeNoon:
    """Warsaw-ish observer on 2024-06-21, local time UTC+2."""

    def test_orbital_elements(self):
        position = compute_position(datetime(2024, 6, 21, 12, 0, 0), _config())

        assert position.day_number == pytest.approx(8939.5)
        assert position.universal_time == pytest.approx(10.0)
        assert position.eccentricity == pytest.approx(0.0166987, abs=1e-6)
        assert position.mean_anomaly == pytest.approx(166.82, abs=0.01)
        assert position.declination == pytest.approx(23.435, abs=0.01)
        assert position.right_ascension == pytest.approx(90.66, abs=0.02)
        assert position.distance == pytest.approx(1.0163, abs=5e-4)

    def test_midday_position(self):
        position = compute_position(datetime(2024, 6, 21, 12, 0, 0), _config())

        # Solar noon at 19°E falls about 40 minutes after 12:00 CEST
        assert -12.0 < position.hour_angle < -8.0
        assert 59.0 < position.true_elevation_angle < 62.0
        assert position.true_zenith_angle == pytest.approx(
            90.0 - position.true_elevation_angle
        )

    def test_solar_noon_hour_angle_near_zero(self):
        position = compute_position(datetime(2024, 6, 21, 12, 40, 0), _config())

        assert abs(position.hour_angle) < 5.0
        assert position.true_elevation_angle == pytest.approx(61.4, abs=0.5)


def test_winter_midnight_sun_below_horizon():
    position = compute_position(datetime(2024, 12, 21, 0, 0, 0), _config())

    assert position.true_elevation_angle < -50.0
    assert position.declination == pytest.approx(-23.43, abs=0.05)


def test_time_override_replaces_clock_components():
    overridden = _config(time_override=TimeOverride(12, 0, 0))
    plain = _config()

    a = compute_position(datetime(2024, 6, 21, 3, 15, 7), overridden)
    b = compute_position(datetime(2024, 6, 21, 12, 0, 0), plain)

    assert a == b


def test_timezone_shifts_hour_angle():
    instant = datetime(2024, 6, 21, 12, 0, 0)
    utc_plus_2 = compute_position(instant, _config(timezone_offset_hours=2.0))
    utc_plus_1 = compute_position(instant, _config(timezone_offset_hours=1.0))

    # same day number, one hour later in UTC: exactly 15° of sidereal rotation
    assert utc_plus_1.hour_angle - utc_plus_2.hour_angle == pytest.approx(15.0, abs=1e-9)


class TestPolarObserver:
    def test_north_pole_no_nan(self):
        position = compute_position(
            datetime(2024, 6, 21, 12, 0, 0), _config(latitude=90.0)
        )

        assert math.isfinite(position.true_zenith_angle)
        # at the pole elevation equals declination
        assert position.true_elevation_angle == pytest.approx(
            position.declination, abs=1e-6
        )

    def test_south_pole_no_nan(self):
        position = compute_position(
            datetime(2024, 12, 21, 12, 0, 0), _config(latitude=-90.0)
        )

        assert math.isfinite(position.true_zenith_angle)
        assert position.true_elevation_angle == pytest.approx(
            -position.declination, abs=1e-6
        )

    def test_all_latitudes_finite(self):
        for latitude in np.linspace(-90.0, 90.0, 37):
            for hour in range(0, 24, 3):
                position = compute_position(
                    datetime(2024, 6, 21, hour), _config(latitude=float(latitude))
                )
                assert 0.0 <= position.true_zenith_angle <= 180.0
