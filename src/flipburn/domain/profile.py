# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Velocity-vs-time sampling of a flip-and-burn trip for charting.

Under constant proper acceleration a, velocity as a function of coordinate
time t is v = c·r/√(1 + r²) with r = a·t/c, and the Lorentz factor is
√(1 + r²). The acceleration leg is sampled on [0, T/2] and mirrored for
the deceleration leg. Times are expressed in an adaptive display unit and
all output values are pre-rounded.
"""
import math
from dataclasses import dataclass

from flipburn.domain.errors import InvalidInputError
from flipburn.domain.kinematics import RelativisticConstants
from flipburn.domain.units import JULIAN_YEAR_S

_C = RelativisticConstants.C_LIGHT

_TIME_DECIMALS = 2
_VELOCITY_DECIMALS = 4
_GAMMA_DECIMALS = 4


@dataclass(frozen=True)
class ChartUnit:
    """Display unit for the chart time axis."""
    label: str
    seconds: float


_YEARS = ChartUnit("years", JULIAN_YEAR_S)
_DAYS = ChartUnit("days", 86400.0)
_HOURS = ChartUnit("hours", 3600.0)
_MINUTES = ChartUnit("minutes", 60.0)


@dataclass(frozen=True)
class VelocitySample:
    """One chart point: time in display units, v/c, and Lorentz factor."""
    time: float
    velocity_fraction_c: float
    lorentz_factor: float


@dataclass(frozen=True)
class VelocityProfile:
    """Sampled velocity curve over the whole trip."""
    unit_label: str
    unit_seconds: float
    samples: tuple[VelocitySample, ...]


def select_time_unit(total_s: float) -> ChartUnit:
    """Pick the chart unit: years, days or hours once the trip spans at
    least two of them, minutes otherwise."""
    if total_s >= _YEARS.seconds * 2:
        return _YEARS
    if total_s >= _DAYS.seconds * 2:
        return _DAYS
    if total_s >= _HOURS.seconds * 2:
        return _HOURS
    return _MINUTES


def sample_velocity_profile(
    coordinate_time_s: float,
    acceleration_ms2: float,
    point_count: int = 80,
) -> VelocityProfile | None:
    """Sample v(t) over a symmetric flip-and-burn trip.

    Takes point_count + 1 evenly spaced samples on [0, T/2], then mirrors
    all but the turnover sample onto (T/2, T]. The result has
    2·point_count + 1 samples, symmetric about the turnover index.

    Args:
        coordinate_time_s: Total Earth-frame trip time T (s).
        acceleration_ms2: Proper acceleration (m/s²).
        point_count: Intervals per leg.

    Returns:
        VelocityProfile, or None if T is non-finite or not positive.

    Raises:
        InvalidInputError: If point_count < 1.
    """
    if point_count < 1:
        raise InvalidInputError(f"point_count must be >= 1, got {point_count}")
    if not math.isfinite(coordinate_time_s) or coordinate_time_s <= 0:
        return None

    unit = select_time_unit(coordinate_time_s)
    half = coordinate_time_s / 2.0

    leg: list[tuple[float, float, float]] = []
    for i in range(point_count + 1):
        t = half * i / point_count
        ratio = acceleration_ms2 * t / _C
        root = math.hypot(1.0, ratio)
        leg.append((t, ratio / root, root))

    mirrored = [
        (half + half * (k + 1) / point_count, beta, gamma)
        for k, (_, beta, gamma) in enumerate(reversed(leg[:-1]))
    ]

    samples = tuple(
        VelocitySample(
            time=round(t / unit.seconds, _TIME_DECIMALS),
            velocity_fraction_c=round(beta, _VELOCITY_DECIMALS),
            lorentz_factor=round(gamma, _GAMMA_DECIMALS),
        )
        for t, beta, gamma in leg + mirrored
    )
    return VelocityProfile(
        unit_label=unit.label,
        unit_seconds=unit.seconds,
        samples=samples,
    )
