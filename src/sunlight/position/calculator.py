"""Low-precision solar position: orbital elements to hour angle and zenith."""

import math
from datetime import datetime

from ..models.observer import ObserverConfig
from ..models.orbital import SolarPosition


def reduce360(value: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    result = math.fmod(value, 360.0)
    if result < 0.0:
        result += 360.0
    # fmod of a tiny negative number plus 360 can round up to 360.0
    if result >= 360.0:
        result = 0.0
    return result


def reduce24(value: float) -> float:
    """Wrap a time in hours into [0, 24)."""
    result = math.fmod(value, 24.0)
    if result < 0.0:
        result += 24.0
    if result >= 24.0:
        result = 0.0
    return result


def decimal_hours(hour: int, minute: int, second: int) -> float:
    return hour + minute / 60.0 + second / 3600.0


def day_number(year: int, month: int, day: int, ut: float) -> float:
    """
    Days since 2000 Jan 0.0, including the fraction of the current day.

    Args:
        year, month, day: Calendar date (Gregorian)
        ut: Decimal hours of the day

    Returns:
        Real-valued day number (2000-01-01 00:00 is 1.0)
    """
    return (
        367 * year
        - 7 * (year + (month + 9) // 12) // 4
        + 275 * month // 9
        + day
        - 730530
        + ut / 24.0
    )


def wrap_hour_angle(value: float) -> float:
    """Force an hour angle within (-540, 540) into (-180, 180]."""
    if value <= -180.0:
        return value + 360.0
    if value > 180.0:
        return value - 360.0
    return value


def compute_position(instant: datetime, config: ObserverConfig) -> SolarPosition:
    """
    Compute hour angle and true zenith/elevation of the Sun.

    The instant is local clock time; components overridden in
    config.time_override replace the instant's own.

    Args:
        instant: Local date and time of the observation
        config: Observer location, overrides and timezone

    Returns:
        SolarPosition with orbital elements and horizon angles
    """
    hour, minute, second = config.time_override.resolve(
        instant.hour, instant.minute, instant.second
    )
    ut = decimal_hours(hour, minute, second)
    d = day_number(instant.year, instant.month, instant.day, ut)

    utime = ut - config.timezone_offset_hours

    # orbital elements
    w = 282.9404 + 4.70935e-5 * d
    e = 0.016709 - 1.151e-9 * d
    M = reduce360(356.0470 + 0.9856002585 * d)
    oblecl = 23.4393 - 3.563e-7 * d
    L = reduce360(w + M)

    # one-step eccentric anomaly
    M_rad = math.radians(M)
    E = M + math.degrees(e * math.sin(M_rad) * (1.0 + e * math.cos(M_rad)))

    E_rad = math.radians(E)
    xv = math.cos(E_rad) - e
    yv = math.sin(E_rad) * math.sqrt(1.0 - e * e)

    r = math.sqrt(xv * xv + yv * yv)
    v = math.degrees(math.atan2(yv, xv))
    lon = reduce360(v + w)

    lon_rad = math.radians(lon)
    oblecl_rad = math.radians(oblecl)
    declination = math.degrees(math.asin(math.sin(oblecl_rad) * math.sin(lon_rad)))
    right_ascension = reduce360(
        math.degrees(
            math.atan2(math.cos(oblecl_rad) * math.sin(lon_rad), math.cos(lon_rad))
        )
    )

    gmst = reduce24(6.697375 + 0.0657098242 * d + utime)
    lmst = reduce360(gmst * 15.0 + config.longitude)

    hour_angle = wrap_hour_angle(lmst - right_ascension)

    decl_rad = math.radians(declination)
    lat_rad = math.radians(config.latitude)
    cos_zenith = math.sin(decl_rad) * math.sin(lat_rad) + math.cos(
        decl_rad
    ) * math.cos(lat_rad) * math.cos(math.radians(hour_angle))
    cos_zenith = max(-1.0, min(1.0, cos_zenith))

    zenith = math.degrees(math.acos(cos_zenith))

    return SolarPosition(
        day_number=d,
        universal_time=utime,
        perihelion_longitude=w,
        eccentricity=e,
        mean_anomaly=M,
        obliquity_of_ecliptic=oblecl,
        mean_longitude=L,
        distance=r,
        true_anomaly=v,
        ecliptic_longitude=lon,
        declination=declination,
        right_ascension=right_ascension,
        gmst=gmst,
        lmst=lmst,
        hour_angle=hour_angle,
        true_zenith_angle=zenith,
        true_elevation_angle=90.0 - zenith,
    )
