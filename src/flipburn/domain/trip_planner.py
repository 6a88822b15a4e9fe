# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Request pipeline: user units in, complete trip report out.

    TripRequest -> normalize units -> (time mode) solve_acceleration
                -> solve_trip -> velocity profile, metrics, distance range

This is the single entry point used by the CLI and the HTTP adapter.
"""
import enum
import logging
import math
from dataclasses import dataclass

from flipburn.domain.errors import InvalidInputError, UnreachableTargetError
from flipburn.domain.inversion import Frame, solve_acceleration
from flipburn.domain.kinematics import (
    KinematicResult,
    TripParameters,
    light_transit_time_s,
    solve_trip,
    solve_trip_precise,
    validate_trip_parameters,
)
from flipburn.domain.metrics import (
    DistanceRangeResult,
    TripMetrics,
    compute_distance_range,
    compute_trip_metrics,
)
from flipburn.domain.profile import VelocityProfile, sample_velocity_profile
from flipburn.domain.units import (
    acceleration_to_ms2,
    distance_to_m,
    duration_to_s,
    mass_to_kg,
)

logger = logging.getLogger(__name__)


class SolveMode(enum.Enum):
    """DISTANCE: acceleration given. TIME: acceleration solved from a
    target duration."""
    DISTANCE = "distance"
    TIME = "time"


@dataclass(frozen=True)
class DistanceRange:
    """Distance uncertainty band in user units."""
    min_value: float
    max_value: float
    unit: str = "ly"


@dataclass(frozen=True)
class TripRequest:
    """One calculation request in user-facing units."""
    distance_value: float
    acceleration_value: float
    ship_mass_value: float
    distance_unit: str = "ly"
    acceleration_unit: str = "g"
    ship_mass_unit: str = "kg"
    propulsion_efficiency: float = 1.0
    solve_mode: SolveMode = SolveMode.DISTANCE
    target_time_value: float | None = None
    target_time_unit: str = "hours"
    target_time_frame: Frame = Frame.EARTH
    distance_range: DistanceRange | None = None
    precise: bool = False


@dataclass(frozen=True)
class TripReport:
    """Everything computed for one request."""
    params: TripParameters
    result: KinematicResult
    metrics: TripMetrics
    profile: VelocityProfile | None
    derived_acceleration_ms2: float | None = None
    distance_range: DistanceRangeResult | None = None


def _target_seconds(request: TripRequest) -> float:
    value = request.target_time_value
    if value is None or not math.isfinite(value) or value <= 0:
        raise InvalidInputError(
            f"Time mode needs a positive target time, got {value}"
        )
    return duration_to_s(value, request.target_time_unit)


def plan_trip(request: TripRequest) -> TripReport:
    """Run the full calculation for one request.

    Raises:
        InvalidInputError: On out-of-domain values or unknown units.
        UnreachableTargetError: If no bracketed acceleration meets the
            target duration (time mode only).
        NumericOverflowError: If the solver overflows.
    """
    distance_m = distance_to_m(request.distance_value, request.distance_unit)
    ship_mass_kg = mass_to_kg(request.ship_mass_value, request.ship_mass_unit)

    derived: float | None = None
    if request.solve_mode is SolveMode.TIME:
        target_s = _target_seconds(request)
        if not math.isfinite(distance_m) or distance_m < 0:
            raise InvalidInputError(
                f"distance must be finite and non-negative, got {request.distance_value}"
            )
        derived = solve_acceleration(
            distance_m, target_s, request.target_time_frame,
        )
        if derived is None:
            floor = None
            if request.target_time_frame is Frame.EARTH:
                floor = light_transit_time_s(distance_m)
            raise UnreachableTargetError(
                target_s, request.target_time_frame.value, floor,
            )
        acceleration_ms2 = derived
    else:
        acceleration_ms2 = acceleration_to_ms2(
            request.acceleration_value, request.acceleration_unit,
        )

    params = TripParameters(
        distance_m=distance_m,
        acceleration_ms2=acceleration_ms2,
        ship_mass_kg=ship_mass_kg,
        propulsion_efficiency=request.propulsion_efficiency,
    )
    validate_trip_parameters(params)
    logger.info(
        "Planning trip: d=%.6g m, a=%.6g m/s², m=%.6g kg, mode=%s%s",
        params.distance_m, params.acceleration_ms2, params.ship_mass_kg,
        request.solve_mode.value, ", precise" if request.precise else "",
    )

    solver = solve_trip_precise if request.precise else solve_trip
    result = solver(params.distance_m, params.acceleration_ms2, params.ship_mass_kg)

    band = None
    if request.distance_range is not None:
        band = compute_distance_range(
            distance_to_m(request.distance_range.min_value, request.distance_range.unit),
            distance_to_m(request.distance_range.max_value, request.distance_range.unit),
            params.acceleration_ms2,
            params.ship_mass_kg,
        )

    return TripReport(
        params=params,
        result=result,
        metrics=compute_trip_metrics(
            result, params.ship_mass_kg, params.propulsion_efficiency,
        ),
        profile=sample_velocity_profile(
            result.coordinate_time_s, params.acceleration_ms2,
        ),
        derived_acceleration_ms2=derived,
        distance_range=band,
    )
