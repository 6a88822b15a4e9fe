# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Acceleration inversion: find the constant proper acceleration that makes a
flip-and-burn trip over a fixed distance last a target duration.

Trip time in either frame is strictly decreasing in acceleration, so a
bracket [low, high] with time(low) >= target >= time(high) contains exactly
one root and bisection converges to it.
"""
import enum
import logging
import math
from dataclasses import dataclass

from flipburn.domain.errors import InvalidInputError, NumericOverflowError
from flipburn.domain.kinematics import solve_trip

logger = logging.getLogger(__name__)

# Mass does not enter either trip time; any positive value will do.
_UNIT_MASS_KG = 1.0


class Frame(enum.Enum):
    """Reference frame whose clock measures the target duration."""
    EARTH = "earth"
    SHIP = "ship"


@dataclass(frozen=True)
class InversionConfig:
    """Search bracket and stopping rule for the acceleration root-find."""
    low_ms2: float = 1e-6               # weakest acceleration considered
    high_ms2: float = 1e4               # initial upper bracket
    max_doublings: int = 12             # high may grow to high·2^12
    relative_tolerance: float = 1e-15   # stop when width <= tol·high
    max_iterations: int = 200           # safety cap on bisection steps


DEFAULT_INVERSION_CONFIG = InversionConfig()


def trip_duration(
    distance_m: float, acceleration_ms2: float, frame: Frame,
) -> float:
    """Trip time (s) measured in `frame`; inf when the solver overflows."""
    try:
        result = solve_trip(distance_m, acceleration_ms2, _UNIT_MASS_KG)
    except NumericOverflowError:
        return math.inf
    if frame is Frame.SHIP:
        return result.proper_time_s
    return result.coordinate_time_s


def solve_acceleration(
    distance_m: float,
    target_s: float,
    frame: Frame,
    config: InversionConfig = DEFAULT_INVERSION_CONFIG,
) -> float | None:
    """Constant proper acceleration giving a trip of `target_s` seconds.

    1. time(low) must be finite and >= target, else the trip cannot be
       made that slow.
    2. Double `high` until time(high) <= target, else it cannot be made
       that fast (light-transit floor in the Earth frame, or bracket limit).
    3. Bisect until the bracket width falls below the relative tolerance.

    Args:
        distance_m: Trip distance (m), >= 0.
        target_s: Desired duration (s), > 0.
        frame: Frame whose clock measures target_s.
        config: Search bracket configuration.

    Returns:
        Acceleration in m/s², or None if the target is unreachable.

    Raises:
        InvalidInputError: If distance_m or target_s is out of domain.
    """
    if not math.isfinite(distance_m) or distance_m < 0:
        raise InvalidInputError(
            f"distance_m must be finite and non-negative, got {distance_m}"
        )
    if not math.isfinite(target_s) or target_s <= 0:
        raise InvalidInputError(
            f"target_s must be finite and positive, got {target_s}"
        )

    low = config.low_ms2
    high = config.high_ms2

    low_time = trip_duration(distance_m, low, frame)
    if not math.isfinite(low_time) or target_s > low_time:
        logger.debug(
            "Target %.6g s exceeds %s-frame time %.6g s at %.1e m/s²",
            target_s, frame.value, low_time, low,
        )
        return None

    high_time = trip_duration(distance_m, high, frame)
    doublings = 0
    while high_time > target_s and doublings < config.max_doublings:
        high *= 2.0
        high_time = trip_duration(distance_m, high, frame)
        doublings += 1
    if high_time > target_s:
        logger.debug(
            "Target %.6g s below %s-frame time %.6g s at %.3e m/s²",
            target_s, frame.value, high_time, high,
        )
        return None

    iterations = 0
    while (
        high - low > config.relative_tolerance * high
        and iterations < config.max_iterations
    ):
        mid = (low + high) / 2.0
        if mid <= low or mid >= high:
            break
        t = trip_duration(distance_m, mid, frame)
        if not math.isfinite(t):
            return None
        if t > target_s:
            low = mid
        else:
            high = mid
        iterations += 1

    logger.debug(
        "Solved %s-frame target %.6g s after %d doublings, %d bisections",
        frame.value, target_s, doublings, iterations,
    )
    return (low + high) / 2.0
