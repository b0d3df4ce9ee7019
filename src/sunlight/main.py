import argparse
import logging
import sys
from datetime import datetime

from .clock import FixedClock, SystemClock, parse_local_time
from .config import (
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_PRESSURE_MBAR,
    DEFAULT_PROFILE_STEP_MINUTES,
    DEFAULT_TEMPERATURE_C,
)
from .engine import SolarEphemerisEngine
from .errors import SunlightError, handle_error
from .summary.generator import generate_summary
from . import __version__

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Compute the apparent position and irradiance of the Sun for an observer."
    )
    parser.add_argument(
        "--longitude",
        type=float,
        default=DEFAULT_LONGITUDE,
        help="Longitude in degrees.minutes, east positive (default: %(default).2f)",
    )
    parser.add_argument(
        "--latitude",
        type=float,
        default=DEFAULT_LATITUDE,
        help="Latitude in degrees.minutes, north positive (default: %(default).2f)",
    )
    parser.add_argument(
        "--time",
        type=str,
        default=None,
        help="ISO-8601 local timestamp without offset (default: current time)",
    )
    parser.add_argument(
        "--timezone",
        type=float,
        default=None,
        help="UTC offset of the local time in hours (default: host timezone)",
    )
    parser.add_argument("--hour", type=int, default=-1, help="Override the hour (-1: keep)")
    parser.add_argument("--minute", type=int, default=-1, help="Override the minute (-1: keep)")
    parser.add_argument("--second", type=int, default=-1, help="Override the second (-1: keep)")
    parser.add_argument(
        "--pressure",
        type=float,
        default=DEFAULT_PRESSURE_MBAR,
        help="Surface pressure in millibars (default: %(default).1f)",
    )
    parser.add_argument(
        "--temperature",
        type=float,
        default=DEFAULT_TEMPERATURE_C,
        help="Ambient temperature in degrees C (default: %(default).1f)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a human-readable summary",
    )
    parser.add_argument(
        "--profile",
        type=int,
        nargs="?",
        const=DEFAULT_PROFILE_STEP_MINUTES,
        default=None,
        metavar="STEP_MINUTES",
        help="Print the sun path over the whole local day",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Compare against the skyfield DE421 reference position",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print detailed internal state",
    )
    parser.add_argument("--version", action="version", version=f"sunlight {__version__}")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_engine(
    longitude: float,
    latitude: float,
    local_time: str | None = None,
    timezone: float | None = None,
    override: tuple[int, int, int] = (-1, -1, -1),
    pressure: float = DEFAULT_PRESSURE_MBAR,
    temperature: float = DEFAULT_TEMPERATURE_C,
) -> SolarEphemerisEngine:
    """Create and initialize an engine from command-line style values.

    Raises:
        TimeParseError: If local_time cannot be parsed
    """
    if local_time is None:
        clock = SystemClock()
    else:
        system_offset = SystemClock().utc_offset_hours() if timezone is None else timezone
        clock = FixedClock(parse_local_time(local_time), system_offset)

    engine = SolarEphemerisEngine(clock=clock)
    engine.init()
    if timezone is not None:
        engine.set_timezone(timezone)
    engine.set_location(longitude, latitude)
    engine.set_time(*override)
    engine.set_pressure(pressure)
    engine.set_temperature(temperature)
    logger.debug("Engine configured with %s", engine.config)
    return engine


def print_verbose_info(engine: SolarEphemerisEngine) -> None:
    """Print every derived quantity of the last update."""
    state = engine.state
    position = state.position
    config = engine.config

    print("=== VERBOSE: Internal State ===")
    print()
    print("Observer:")
    print(f"  Longitude: {config.longitude:.6f}°")
    print(f"  Latitude: {config.latitude:.6f}°")
    print(f"  Timezone: UTC{config.timezone_offset_hours:+.2f}")
    print(f"  Time override: {config.time_override.to_sentinels()}")
    print(f"  Pressure: {config.pressure:.1f} mbar")
    print(f"  Temperature: {config.temperature:.1f} °C")
    print()
    print("Orbital elements:")
    print(f"  Day number: {position.day_number:.5f}")
    print(f"  Perihelion longitude: {position.perihelion_longitude:.5f}°")
    print(f"  Eccentricity: {position.eccentricity:.7f}")
    print(f"  Mean anomaly: {position.mean_anomaly:.5f}°")
    print(f"  Obliquity of ecliptic: {position.obliquity_of_ecliptic:.5f}°")
    print(f"  Mean longitude: {position.mean_longitude:.5f}°")
    print(f"  True anomaly: {position.true_anomaly:.5f}°")
    print(f"  Ecliptic longitude: {position.ecliptic_longitude:.5f}°")
    print(f"  Distance: {position.distance:.6f} AU")
    print()
    print("Equatorial and horizon:")
    print(f"  Declination: {position.declination:.5f}°")
    print(f"  Right ascension: {position.right_ascension:.5f}°")
    print(f"  UTC hours: {position.universal_time:.5f}")
    print(f"  GMST: {position.gmst:.5f} h")
    print(f"  LMST: {position.lmst:.5f}°")
    print(f"  Hour angle: {position.hour_angle:.5f}°")
    print(f"  True zenith: {position.true_zenith_angle:.5f}°")
    print(f"  True elevation: {position.true_elevation_angle:.5f}°")
    print(f"  Refracted elevation: {state.refracted_elevation_angle:.5f}°")
    print(f"  Refracted zenith: {state.refracted_zenith_angle:.5f}°")
    print("=== END VERBOSE ===")
    print()


def print_profile(engine: SolarEphemerisEngine, instant: datetime, step_minutes: int) -> None:
    from .sweep.profile import daily_profile

    profile = daily_profile(engine.config, instant.date(), step_minutes)

    print(f"Sun path on {profile.day.isoformat()} (every {step_minutes} min)")
    print(f"  {'time':>5}  {'hour angle':>10}  {'elevation':>9}  {'W/m²':>7}")
    for hour, ha, elev, irr in zip(
        profile.hours, profile.hour_angles, profile.elevations, profile.irradiance
    ):
        h = int(hour)
        m = int(round((hour - h) * 60))
        print(f"  {h:02d}:{m:02d}  {ha:10.2f}  {elev:9.2f}  {irr:7.1f}")
    print()
    noon = profile.solar_noon()
    print(f"  Solar noon: {int(noon):02d}:{int(round((noon % 1) * 60)):02d}")
    print(f"  Daylight: {profile.daylight_hours():.2f} h")
    print(f"  Insolation: {profile.insolation_wh_m2():.0f} Wh/m²")
    print()


def print_comparison(engine: SolarEphemerisEngine, instant: datetime) -> None:
    from .reference.skyfield_check import compare_with_reference, reference_position

    reference = reference_position(engine.config, instant)
    comparison = compare_with_reference(engine.state, reference)

    print("Reference (skyfield DE421):")
    print(f"  Hour angle: {reference.hour_angle:.4f}° (error {comparison.hour_angle_error:+.4f}°)")
    print(
        f"  Elevation: {reference.refracted_elevation_angle:.4f}° "
        f"(error {comparison.elevation_error:+.4f}°)"
    )
    print(f"  Distance: {reference.distance:.6f} AU (error {comparison.distance_error:+.6f} AU)")
    print()


def compute_sun(
    longitude: float = DEFAULT_LONGITUDE,
    latitude: float = DEFAULT_LATITUDE,
    local_time: str | None = None,
    timezone: float | None = None,
    override: tuple[int, int, int] = (-1, -1, -1),
    pressure: float = DEFAULT_PRESSURE_MBAR,
    temperature: float = DEFAULT_TEMPERATURE_C,
    print_summary: bool = False,
    profile_step: int | None = None,
    compare: bool = False,
    verbose: bool = False,
) -> int:
    """Compute and print the sun state for one observer and instant.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        try:
            engine = build_engine(
                longitude, latitude, local_time, timezone, override, pressure, temperature
            )
        except SunlightError as e:
            return handle_error(e, "configuring the observer")

        instant = engine.clock.now()
        state = engine.update(instant)
        intensity = engine.intensity()
        irradiance = engine.last_irradiance

        if verbose:
            print_verbose_info(engine)

        direction = engine.direction()
        print(f"Sun at {instant.isoformat(timespec='seconds')} (UTC{engine.config.timezone_offset_hours:+.2f})")
        print(f"  Location: {engine.config.latitude:.6f}°, {engine.config.longitude:.6f}°")
        print(f"  Hour angle: {state.hour_angle:.3f}°")
        print(f"  Elevation: {state.refracted_elevation_angle:.3f}° (true {state.true_elevation_angle:.3f}°)")
        print(f"  Irradiance: {irradiance.extraterrestrial_irradiance:.1f} W/m² (normal {irradiance.extraterrestrial_normal_irradiance:.1f})")
        print(f"  Intensity: {intensity:.4f}")
        print(f"  Direction: [{direction[0]:.4f}, {direction[1]:.4f}, {direction[2]:.4f}]")
        print()

        if print_summary:
            print(generate_summary(engine.config, state, irradiance))
            print()

        if profile_step is not None:
            try:
                print_profile(engine, instant, profile_step)
            except ValueError as e:
                return handle_error(SunlightError(str(e)), "sampling the daily profile")

        if compare:
            try:
                print_comparison(engine, instant)
            except SunlightError as e:
                return handle_error(e, "loading the reference ephemeris")

        return 0

    except Exception as e:
        return handle_error(e, "computing the sun position")


def main():
    """CLI entry point."""
    args = parse_args()
    configure_logging(args.verbose)

    exit_code = compute_sun(
        longitude=args.longitude,
        latitude=args.latitude,
        local_time=args.time,
        timezone=args.timezone,
        override=(args.hour, args.minute, args.second),
        pressure=args.pressure,
        temperature=args.temperature,
        print_summary=args.summary,
        profile_step=args.profile,
        compare=args.compare,
        verbose=args.verbose,
    )

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
