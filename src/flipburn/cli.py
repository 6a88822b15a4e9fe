# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for flip-and-burn trip calculations.

Usage:
    # Proxima Centauri at 1 g, 1000 kg ship
    flipburn --distance 4.24 --distance-unit ly --acceleration 1 --mass 1000

    # Solve acceleration for a 5-year ship-time trip
    flipburn --distance 4.24 --target-time 5 --target-unit years --frame ship

    # Distance uncertainty band, 64-digit reference arithmetic
    flipburn --distance 4.24 --range-min 4.2 --range-max 4.3 --precise

    # Request from JSON, report to JSON, velocity profile to CSV
    flipburn -i request.json -o report.json --export-csv profile.csv

    # HTTP calculate endpoint
    flipburn --serve --port 8766
"""
import argparse
import json
import logging
import sys

from flipburn.adapters.csv_exporter import CsvProfileExporter
from flipburn.adapters.json_io import JsonTripReportWriter, JsonTripRequestReader
from flipburn.domain.errors import FlipburnError
from flipburn.domain.formatting import format_duration, format_friendly
from flipburn.domain.inversion import Frame
from flipburn.domain.kinematics import RelativisticConstants
from flipburn.domain.metrics import ENERGY_BENCHMARKS
from flipburn.domain.trip_planner import (
    DistanceRange,
    SolveMode,
    TripReport,
    TripRequest,
    plan_trip,
)
from flipburn.domain.units import (
    ACCELERATION_UNITS,
    DISTANCE_UNITS,
    DURATION_UNITS,
    MASS_UNITS,
)


def _print_summary(report: TripReport) -> None:
    result = report.result
    metrics = report.metrics
    params = report.params

    print(f"Distance:            {format_friendly(params.distance_m)} m")
    if report.derived_acceleration_ms2 is not None:
        g = report.derived_acceleration_ms2 / RelativisticConstants.STANDARD_GRAVITY
        print(
            f"Derived acceleration: {format_friendly(report.derived_acceleration_ms2)} m/s² "
            f"({g:.3f} g)"
        )
    else:
        print(f"Acceleration:        {format_friendly(params.acceleration_ms2)} m/s²")
    print(f"Ship time:           {format_duration(result.proper_time_s)}")
    print(f"Earth time:          {format_duration(result.coordinate_time_s)}")
    print(f"Peak velocity:       {metrics.peak_velocity_fraction_c:.4f} c")
    print(f"Peak Lorentz factor: {format_friendly(result.peak_lorentz_factor)}")
    print(f"Rapidity:            {format_friendly(result.rapidity)}")
    print(f"Energy:              {format_friendly(result.energy_j)} J "
          f"({format_friendly(metrics.energy_kwh)} kWh)")
    print(f"Mass equivalent:     {format_friendly(metrics.mass_equivalent_kg)} kg")
    if metrics.fuel_mass_kg is not None:
        print(f"Fuel mass:           {format_friendly(metrics.fuel_mass_kg)} kg "
              f"(ratio {metrics.fuel_ratio:.3f})")
    for name, ratio in metrics.comparisons.items():
        print(f"  x {format_friendly(ratio)} {ENERGY_BENCHMARKS[name].label}")

    band = report.distance_range
    if band is not None:
        print(
            f"Range {format_friendly(band.min_distance_m)}–"
            f"{format_friendly(band.max_distance_m)} m: "
            f"Earth {format_duration(band.earth_time_min_s)} – "
            f"{format_duration(band.earth_time_max_s)}, "
            f"ship {format_duration(band.ship_time_min_s)} – "
            f"{format_duration(band.ship_time_max_s)}"
        )


def run(
    request: TripRequest,
    output_path: str | None = None,
    export_csv_path: str | None = None,
) -> TripReport:
    """
    Plan a trip, print the summary, and write requested outputs.

    Returns:
        The computed TripReport.
    """
    report = plan_trip(request)
    _print_summary(report)

    if output_path:
        JsonTripReportWriter().write_report(report, output_path)
        print(f"Wrote report to {output_path}")

    if export_csv_path:
        if report.profile is None:
            print("No velocity profile for a zero-length trip; CSV skipped.")
        else:
            n = CsvProfileExporter().export(report.profile, export_csv_path)
            print(f"Exported {n} profile samples to {export_csv_path}")

    return report


def _run_serve(port: int = 8766) -> None:
    """Start the HTTP calculate endpoint."""
    from flipburn.adapters.calculator_server import create_calculator_server

    try:
        server = create_calculator_server(port=port)
    except OSError as e:
        if "Address already in use" in str(e) or e.errno == 98:
            print(
                f"Error: Port {port} is already in use.\n"
                f"Try a different port: flipburn --serve --port {port + 1}",
                file=sys.stderr,
            )
            sys.exit(1)
        raise

    print(f"Calculate endpoint at http://localhost:{port}/api/calculate")
    print("Press Ctrl+C to stop.\n")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\nServer stopped.")
        server.shutdown()


def _request_from_args(args: argparse.Namespace) -> TripRequest:
    distance_range = None
    if args.range_min is not None or args.range_max is not None:
        distance_range = DistanceRange(
            min_value=args.range_min if args.range_min is not None else args.distance,
            max_value=args.range_max if args.range_max is not None else args.distance,
            unit=args.range_unit or args.distance_unit,
        )

    time_mode = args.target_time is not None
    return TripRequest(
        distance_value=args.distance,
        acceleration_value=args.acceleration,
        ship_mass_value=args.mass,
        distance_unit=args.distance_unit,
        acceleration_unit=args.acceleration_unit,
        ship_mass_unit=args.mass_unit,
        propulsion_efficiency=args.efficiency,
        solve_mode=SolveMode.TIME if time_mode else SolveMode.DISTANCE,
        target_time_value=args.target_time,
        target_time_unit=args.target_unit,
        target_time_frame=Frame(args.frame),
        distance_range=distance_range,
        precise=args.precise,
    )


def main():
    parser = argparse.ArgumentParser(
        description="Relativistic flip-and-burn trip calculator"
    )
    parser.add_argument(
        '--input', '-i',
        help="Path to request JSON (same shape as the HTTP body); overrides trip flags"
    )
    parser.add_argument(
        '--output', '-o',
        help="Path to write the report JSON"
    )
    parser.add_argument(
        '--export-csv',
        help="Export the velocity profile to CSV"
    )
    parser.add_argument(
        '--precise', action='store_true', default=False,
        help="Evaluate with 64-digit arithmetic instead of double precision"
    )
    parser.add_argument(
        '--serve', action='store_true', default=False,
        help="Start the HTTP calculate endpoint"
    )
    parser.add_argument(
        '--port', type=int, default=8766,
        help="Port for the HTTP endpoint (default: 8766, used with --serve)"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    trip_group = parser.add_argument_group('trip')
    trip_group.add_argument('--distance', type=float, help="Trip distance")
    trip_group.add_argument(
        '--distance-unit', default='ly', choices=sorted(DISTANCE_UNITS),
        help="Distance unit (default: ly)"
    )
    trip_group.add_argument(
        '--acceleration', type=float, default=1.0,
        help="Constant proper acceleration (default: 1)"
    )
    trip_group.add_argument(
        '--acceleration-unit', default='g', choices=sorted(ACCELERATION_UNITS),
        help="Acceleration unit (default: g)"
    )
    trip_group.add_argument(
        '--mass', type=float, default=1000.0,
        help="Ship rest mass (default: 1000)"
    )
    trip_group.add_argument(
        '--mass-unit', default='kg', choices=sorted(MASS_UNITS),
        help="Mass unit (default: kg)"
    )
    trip_group.add_argument(
        '--efficiency', type=float, default=1.0,
        help="Propulsion efficiency in (0, 1] (default: 1)"
    )

    time_group = parser.add_argument_group('target time (solves acceleration)')
    time_group.add_argument('--target-time', type=float, help="Desired trip duration")
    time_group.add_argument(
        '--target-unit', default='hours', choices=sorted(DURATION_UNITS),
        help="Target duration unit (default: hours)"
    )
    time_group.add_argument(
        '--frame', default='earth', choices=[f.value for f in Frame],
        help="Clock measuring the target duration (default: earth)"
    )

    range_group = parser.add_argument_group('distance range')
    range_group.add_argument('--range-min', type=float, help="Lower distance bound")
    range_group.add_argument('--range-max', type=float, help="Upper distance bound")
    range_group.add_argument(
        '--range-unit', choices=sorted(DISTANCE_UNITS),
        help="Range unit (default: same as --distance-unit)"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s | %(name)s | %(message)s",
        )

    if args.serve:
        _run_serve(port=args.port)
        return

    if not args.input and args.distance is None:
        parser.error("one of the arguments --input/-i or --distance is required")

    try:
        if args.input:
            request = JsonTripRequestReader().read_request(args.input)
        else:
            request = _request_from_args(args)
        run(
            request,
            output_path=args.output,
            export_csv_path=args.export_csv,
        )
    except FileNotFoundError:
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid request file: {e}", file=sys.stderr)
        sys.exit(1)
    except FlipburnError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
