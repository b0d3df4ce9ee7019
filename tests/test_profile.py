from datetime import date

import numpy as np
import pytest

from sunlight.models import ObserverConfig, TimeOverride
from sunlight.sweep.profile import DailyProfile, daily_profile


@pytest.fixture
def config():
    return ObserverConfig(longitude=19.0, latitude=52.0, timezone_offset_hours=2.0)


class TestSummerSolstice:
    def test_sample_count(self, config):
        profile = daily_profile(config, date(2024, 6, 21), step_minutes=10)

        assert len(profile.hours) == 144
        assert profile.hours[0] == 0.0
        assert profile.hours[-1] == pytest.approx(23.0 + 50.0 / 60.0)

    def test_solar_noon(self, config):
        profile = daily_profile(config, date(2024, 6, 21), step_minutes=10)
        assert profile.solar_noon() == pytest.approx(12.67, abs=0.2)

    def test_long_day(self, config):
        profile = daily_profile(config, date(2024, 6, 21), step_minutes=10)
        assert 16.0 < profile.daylight_hours() < 17.5

    def test_insolation(self, config):
        profile = daily_profile(config, date(2024, 6, 21), step_minutes=10)
        assert 10500.0 < profile.insolation_wh_m2() < 12500.0

    def test_irradiance_zero_at_night(self, config):
        profile = daily_profile(config, date(2024, 6, 21), step_minutes=10)
        night = profile.elevations < -1.0
        assert np.any(night)
        assert np.all(profile.irradiance[night] == 0.0)

    def test_hour_angles_in_range(self, config):
        profile = daily_profile(config, date(2024, 6, 21), step_minutes=30)
        assert np.all(profile.hour_angles > -180.0)
        assert np.all(profile.hour_angles <= 180.0)


def test_winter_short_day(config):
    profile = daily_profile(config, date(2024, 12, 21), step_minutes=10)
    assert 7.0 < profile.daylight_hours() < 8.5


def test_time_override_ignored(config):
    config.time_override = TimeOverride(3, 0, 0)
    profile = daily_profile(config, date(2024, 6, 21), step_minutes=10)

    assert profile.solar_noon() == pytest.approx(12.67, abs=0.2)
    assert config.time_override == TimeOverride(3, 0, 0)


@pytest.mark.parametrize("step", [0, -10, 7])
def test_invalid_step(config, step):
    with pytest.raises(ValueError, match="step_minutes"):
        daily_profile(config, date(2024, 6, 21), step_minutes=step)


def test_mismatched_arrays():
    with pytest.raises(ValueError, match="same length"):
        DailyProfile(
            day=date(2024, 6, 21),
            step_minutes=60,
            hours=np.arange(24.0),
            hour_angles=np.zeros(24),
            elevations=np.zeros(23),
            irradiance=np.zeros(24),
        )
