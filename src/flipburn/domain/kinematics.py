# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Closed-form kinematics of a relativistic flip-and-burn trip.

Constant proper acceleration a over the first half of distance d, mirror
deceleration over the second half. With term = a·d / (2c²):

    φ = acosh(1 + term)                (rapidity at turnover)
    τ = (2c/a)·φ                       (proper time, ship clock)
    T = (2c/a)·sinh(φ)                 (coordinate time, origin clock)
    v_max = c·tanh(φ)
    E = m·c²·(e^(2φ) − 1)

acosh(1 + x) is ill-conditioned near x = 0 and 1 + x drops every digit of
x below ~1e-16, so the float path evaluates φ = 2·asinh(√(x/2)), an exact
identity for x ≥ 0 that keeps full relative precision for tiny x.
solve_trip_precise() runs the textbook formulas at 64 significant digits
(mpmath) and is the reference the float path is checked against.

Ref: Gibbs, "The Relativistic Rocket" (Usenet Physics FAQ, 1996).
"""
import math
from dataclasses import dataclass

import mpmath
import numpy as np

from flipburn.domain.errors import InvalidInputError, NumericOverflowError


@dataclass(frozen=True)
class _RelativisticConstants:
    """Physical constants and solver limits."""
    C_LIGHT: float = 299_792_458.0        # m/s, exact (SI 2019)
    STANDARD_GRAVITY: float = 9.80665     # m/s²
    MAX_TERM: float = 1e30                # largest a·d/(2c²) accepted
    PRECISE_DIGITS: int = 64              # significant digits, precise path


RelativisticConstants: _RelativisticConstants = _RelativisticConstants()

_C = RelativisticConstants.C_LIGHT
_C2 = _C * _C
# Largest double strictly below c; tanh(φ) rounds to 1.0 beyond φ ≈ 19.
_V_CEILING = float(np.nextafter(_C, 0.0))


@dataclass(frozen=True)
class TripParameters:
    """Normalized SI trip inputs."""
    distance_m: float
    acceleration_ms2: float
    ship_mass_kg: float
    propulsion_efficiency: float = 1.0


@dataclass(frozen=True)
class KinematicResult:
    """Canonical result of one flip-and-burn solve."""
    rapidity: float
    proper_time_s: float
    coordinate_time_s: float
    peak_velocity_ms: float
    energy_j: float
    peak_lorentz_factor: float

    @property
    def peak_velocity_fraction_c(self) -> float:
        return self.peak_velocity_ms / _C


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")


def _check_solver_inputs(
    distance_m: float, acceleration_ms2: float, ship_mass_kg: float,
) -> None:
    _require_finite("distance_m", distance_m)
    _require_finite("acceleration_ms2", acceleration_ms2)
    _require_finite("ship_mass_kg", ship_mass_kg)
    if distance_m < 0:
        raise InvalidInputError(f"distance_m must be non-negative, got {distance_m}")
    if acceleration_ms2 <= 0:
        raise InvalidInputError(
            f"acceleration_ms2 must be positive, got {acceleration_ms2}"
        )
    if ship_mass_kg <= 0:
        raise InvalidInputError(f"ship_mass_kg must be positive, got {ship_mass_kg}")


def validate_trip_parameters(params: TripParameters) -> None:
    """Reject parameters the solver and metrics cannot handle.

    Raises:
        InvalidInputError: On non-finite values, negative distance,
            non-positive acceleration or mass, or efficiency outside (0, 1].
    """
    _check_solver_inputs(
        params.distance_m, params.acceleration_ms2, params.ship_mass_kg,
    )
    _require_finite("propulsion_efficiency", params.propulsion_efficiency)
    if not 0.0 < params.propulsion_efficiency <= 1.0:
        raise InvalidInputError(
            "propulsion_efficiency must be in (0, 1], "
            f"got {params.propulsion_efficiency}"
        )


def _turnover_term(distance_m: float, acceleration_ms2: float) -> float:
    term = acceleration_ms2 * distance_m / (2.0 * _C2)
    if term > RelativisticConstants.MAX_TERM:
        raise NumericOverflowError(
            f"a·d/(2c²) = {term:.3e} exceeds the safe limit "
            f"{RelativisticConstants.MAX_TERM:.0e}"
        )
    return term


def _finish(
    rapidity: float,
    proper_time_s: float,
    coordinate_time_s: float,
    peak_velocity_ms: float,
    energy_j: float,
    peak_lorentz_factor: float,
) -> KinematicResult:
    values = (
        rapidity, proper_time_s, coordinate_time_s,
        peak_velocity_ms, energy_j, peak_lorentz_factor,
    )
    if not all(math.isfinite(v) for v in values):
        raise NumericOverflowError(
            "Trip result is not finite (energy or time exceeds double range)"
        )
    return KinematicResult(
        rapidity=rapidity,
        proper_time_s=proper_time_s,
        coordinate_time_s=coordinate_time_s,
        peak_velocity_ms=min(peak_velocity_ms, _V_CEILING),
        energy_j=energy_j,
        peak_lorentz_factor=peak_lorentz_factor,
    )


def solve_trip(
    distance_m: float,
    acceleration_ms2: float,
    ship_mass_kg: float,
) -> KinematicResult:
    """Solve a flip-and-burn trip in double precision.

    Args:
        distance_m: Total trip distance (m), >= 0.
        acceleration_ms2: Constant proper acceleration (m/s²), > 0.
        ship_mass_kg: Ship rest mass (kg), > 0.

    Returns:
        KinematicResult. distance_m == 0 gives all-zero times, velocity
        and energy with a Lorentz factor of 1.

    Raises:
        InvalidInputError: If a precondition fails.
        NumericOverflowError: If a·d/(2c²) > MAX_TERM or a result overflows.
    """
    _check_solver_inputs(distance_m, acceleration_ms2, ship_mass_kg)
    term = _turnover_term(distance_m, acceleration_ms2)

    phi = 2.0 * float(np.arcsinh(np.sqrt(term / 2.0)))
    scale = 2.0 * _C / acceleration_ms2

    return _finish(
        rapidity=phi,
        proper_time_s=scale * phi,
        coordinate_time_s=scale * float(np.sinh(phi)),
        peak_velocity_ms=_C * float(np.tanh(phi)),
        energy_j=ship_mass_kg * _C2 * float(np.expm1(2.0 * phi)),
        peak_lorentz_factor=1.0 + term,
    )


def solve_trip_precise(
    distance_m: float,
    acceleration_ms2: float,
    ship_mass_kg: float,
    digits: int = RelativisticConstants.PRECISE_DIGITS,
) -> KinematicResult:
    """Solve a flip-and-burn trip in arbitrary precision.

    Evaluates acosh(1 + term) literally with `digits` significant digits.
    Uses a private mpmath context so concurrent callers never share
    precision state.

    Raises:
        InvalidInputError: If a precondition fails.
        NumericOverflowError: If a·d/(2c²) > MAX_TERM or a result overflows.
    """
    _check_solver_inputs(distance_m, acceleration_ms2, ship_mass_kg)
    _turnover_term(distance_m, acceleration_ms2)

    ctx = mpmath.MPContext()
    ctx.dps = digits
    c = ctx.mpf(int(_C))
    d = ctx.mpf(distance_m)
    a = ctx.mpf(acceleration_ms2)
    m = ctx.mpf(ship_mass_kg)

    term = (a * d) / (2 * c ** 2)
    phi = ctx.acosh(1 + term)
    scale = (2 * c) / a

    return _finish(
        rapidity=float(phi),
        proper_time_s=float(scale * phi),
        coordinate_time_s=float(scale * ctx.sinh(phi)),
        peak_velocity_ms=float(c * ctx.tanh(phi)),
        energy_j=float(m * c ** 2 * (ctx.exp(2 * phi) - 1)),
        peak_lorentz_factor=float(1 + term),
    )


def light_transit_time_s(distance_m: float) -> float:
    """Time light needs to cover distance_m (s); floor on coordinate time."""
    return distance_m / _C
