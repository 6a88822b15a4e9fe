# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the closed-form flip-and-burn solver (float and 64-digit paths)."""

import math

import mpmath
import pytest

from flipburn.domain.errors import InvalidInputError, NumericOverflowError
from flipburn.domain.kinematics import (
    KinematicResult,
    RelativisticConstants,
    TripParameters,
    light_transit_time_s,
    solve_trip,
    solve_trip_precise,
    validate_trip_parameters,
)

C = RelativisticConstants.C_LIGHT
G0 = RelativisticConstants.STANDARD_GRAVITY
PROXIMA_M = 4.0e16


class TestProximaScenario:
    """4.0e16 m (~4.23 ly) at 1 g with a 1000 kg ship."""

    @pytest.fixture
    def result(self):
        return solve_trip(PROXIMA_M, G0, 1000.0)

    def test_proper_time(self, result):
        """About 3.54 ship years."""
        assert result.proper_time_s == pytest.approx(1.1159e8, rel=1e-3)

    def test_coordinate_time(self, result):
        """About 5.85 Earth years, matching relativistic-rocket tables."""
        assert result.coordinate_time_s == pytest.approx(1.8471e8, rel=1e-3)

    def test_peak_velocity_fraction(self, result):
        assert result.peak_velocity_fraction_c == pytest.approx(0.9493, rel=1e-3)

    def test_rapidity(self, result):
        assert result.rapidity == pytest.approx(1.8251, rel=1e-4)

    def test_energy(self, result):
        """E = m·c²·(e^(2φ) − 1) ≈ 3.37e21 J."""
        assert result.energy_j == pytest.approx(3.3687e21, rel=1e-3)
        expected = 1000.0 * C * C * math.expm1(2.0 * result.rapidity)
        assert result.energy_j == pytest.approx(expected, rel=1e-12)

    def test_lorentz_factor_is_cosh_rapidity(self, result):
        assert result.peak_lorentz_factor == pytest.approx(
            math.cosh(result.rapidity), rel=1e-12,
        )
        term = G0 * PROXIMA_M / (2.0 * C * C)
        assert result.peak_lorentz_factor == pytest.approx(1.0 + term, rel=1e-15)

    def test_velocity_consistent_with_lorentz_factor(self, result):
        """β = √(1 − 1/γ²) at turnover."""
        gamma = result.peak_lorentz_factor
        beta = math.sqrt(1.0 - 1.0 / (gamma * gamma))
        assert result.peak_velocity_fraction_c == pytest.approx(beta, rel=1e-12)

    def test_result_is_frozen(self, result):
        with pytest.raises(AttributeError):
            result.energy_j = 0.0


class TestDegenerateTrip:
    """distance == 0 is a valid zero-length trip, not an error."""

    @pytest.mark.parametrize("accel", [1e-6, 0.5, G0, 1e4])
    @pytest.mark.parametrize("mass", [1.0, 1000.0, 1e9])
    def test_all_zero(self, accel, mass):
        r = solve_trip(0.0, accel, mass)
        assert r.rapidity == 0.0
        assert r.proper_time_s == 0.0
        assert r.coordinate_time_s == 0.0
        assert r.peak_velocity_ms == 0.0
        assert r.energy_j == 0.0
        assert r.peak_lorentz_factor == 1.0

    def test_precise_path_all_zero(self):
        r = solve_trip_precise(0.0, G0, 1000.0)
        assert r.proper_time_s == 0.0
        assert r.coordinate_time_s == 0.0
        assert r.energy_j == 0.0


class TestSmallTermPrecision:
    """acosh(1 + x) for x far below double epsilon."""

    def test_naive_acosh_loses_everything(self):
        """Documents the hazard the stable identity avoids."""
        term = 1e-6 * 1.0 / (2.0 * C * C)
        assert math.acosh(1.0 + term) == 0.0
        assert solve_trip(1.0, 1e-6, 1.0).rapidity > 0.0

    def test_newtonian_limit(self):
        """Tiny term: τ ≈ T ≈ 2√(d/a), v_max ≈ √(a·d)."""
        d, a = 1000.0, 1.0
        r = solve_trip(d, a, 1.0)
        assert r.proper_time_s == pytest.approx(2.0 * math.sqrt(d / a), rel=1e-12)
        assert r.coordinate_time_s == pytest.approx(2.0 * math.sqrt(d / a), rel=1e-12)
        assert r.peak_velocity_ms == pytest.approx(math.sqrt(a * d), rel=1e-12)

    def test_energy_small_rapidity_limit(self):
        """m·c²·(e^(2φ) − 1) ≈ 2·m·c·v for v ≪ c."""
        d, a, m = 1000.0, 1.0, 10.0
        r = solve_trip(d, a, m)
        assert r.energy_j == pytest.approx(2.0 * m * C * r.peak_velocity_ms, rel=1e-6)


_REFERENCE_CASES = [
    # (distance_m, acceleration_ms2, label)
    (1.0, 1e-6, "term ~ 5.6e-24"),
    (1000.0, 1.0, "term ~ 5.6e-15"),
    (1.5e11, G0, "1 AU at 1 g"),
    (PROXIMA_M, G0, "Proxima at 1 g"),
    (9.4607304725808e20, G0, "100 kly at 1 g"),
    (2.4e22, 20.0, "Andromeda at 2 g"),
    (1e12, 1e4, "fast, short"),
]


class TestFloatPathMatchesPrecise:
    """Stable float path agrees with the 64-digit reference."""

    @pytest.mark.parametrize("d,a,label", _REFERENCE_CASES)
    def test_rapidity(self, d, a, label):
        fast = solve_trip(d, a, 1000.0)
        ref = solve_trip_precise(d, a, 1000.0)
        assert fast.rapidity == pytest.approx(ref.rapidity, rel=1e-12), label

    @pytest.mark.parametrize("d,a,label", _REFERENCE_CASES)
    def test_times(self, d, a, label):
        fast = solve_trip(d, a, 1000.0)
        ref = solve_trip_precise(d, a, 1000.0)
        assert fast.proper_time_s == pytest.approx(ref.proper_time_s, rel=1e-12), label
        assert fast.coordinate_time_s == pytest.approx(ref.coordinate_time_s, rel=1e-12), label

    @pytest.mark.parametrize("d,a,label", _REFERENCE_CASES)
    def test_velocity_and_energy(self, d, a, label):
        fast = solve_trip(d, a, 1000.0)
        ref = solve_trip_precise(d, a, 1000.0)
        assert fast.peak_velocity_ms == pytest.approx(ref.peak_velocity_ms, rel=1e-12), label
        assert fast.energy_j == pytest.approx(ref.energy_j, rel=1e-11), label

    def test_precise_leaves_global_context_alone(self):
        before = mpmath.mp.dps
        solve_trip_precise(PROXIMA_M, G0, 1000.0, digits=100)
        assert mpmath.mp.dps == before


class TestSpeedOfLightCeiling:

    def test_extreme_rapidity_stays_below_c(self):
        """tanh rounds to 1.0 past φ ≈ 19; peak velocity is still < c."""
        r = solve_trip(1e30, 1e4, 1.0)
        assert r.rapidity > 19.0
        assert r.peak_velocity_ms < C
        assert math.isfinite(r.coordinate_time_s)

    def test_precise_path_also_below_c(self):
        r = solve_trip_precise(1e30, 1e4, 1.0)
        assert r.peak_velocity_ms < C


class TestOverflow:

    def test_term_above_limit(self):
        with pytest.raises(NumericOverflowError):
            solve_trip(1e50, 10.0, 1.0)

    def test_term_above_limit_precise(self):
        with pytest.raises(NumericOverflowError):
            solve_trip_precise(1e50, 10.0, 1.0)

    def test_energy_overflow(self):
        """Finite rapidity, but m·c²·(e^(2φ) − 1) exceeds double range."""
        with pytest.raises(NumericOverflowError):
            solve_trip(PROXIMA_M, G0, 1e300)

    def test_overflow_is_overflow_error(self):
        with pytest.raises(OverflowError):
            solve_trip(1e50, 10.0, 1.0)


class TestInvalidInput:

    @pytest.mark.parametrize("d,a,m", [
        (1e12, 0.0, 1.0),
        (1e12, -1.0, 1.0),
        (1e12, 1.0, 0.0),
        (1e12, 1.0, -5.0),
        (-1.0, 1.0, 1.0),
        (math.nan, 1.0, 1.0),
        (1e12, math.inf, 1.0),
        (1e12, 1.0, math.nan),
    ])
    def test_rejected(self, d, a, m):
        with pytest.raises(InvalidInputError):
            solve_trip(d, a, m)
        with pytest.raises(InvalidInputError):
            solve_trip_precise(d, a, m)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            solve_trip(1e12, 0.0, 1.0)


class TestValidateTripParameters:

    def test_valid(self):
        validate_trip_parameters(TripParameters(PROXIMA_M, G0, 1000.0, 0.5))
        validate_trip_parameters(TripParameters(0.0, G0, 1000.0, 1.0))

    @pytest.mark.parametrize("efficiency", [0.0, -0.1, 1.5, math.nan])
    def test_efficiency_out_of_range(self, efficiency):
        with pytest.raises(InvalidInputError):
            validate_trip_parameters(TripParameters(PROXIMA_M, G0, 1000.0, efficiency))

    def test_bad_acceleration(self):
        with pytest.raises(InvalidInputError):
            validate_trip_parameters(TripParameters(PROXIMA_M, 0.0, 1000.0))


class TestLightTransit:

    def test_one_light_second(self):
        assert light_transit_time_s(C) == 1.0

    def test_coordinate_time_exceeds_light_transit(self):
        r = solve_trip(PROXIMA_M, 1e4, 1.0)
        assert r.coordinate_time_s > light_transit_time_s(PROXIMA_M)


class TestConstants:

    def test_values(self):
        assert RelativisticConstants.C_LIGHT == 299792458.0
        assert RelativisticConstants.STANDARD_GRAVITY == 9.80665
        assert RelativisticConstants.MAX_TERM == 1e30

    def test_result_type(self):
        assert isinstance(solve_trip(1e12, 1.0, 1.0), KinematicResult)
