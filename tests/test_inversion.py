# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for acceleration inversion (bracket expansion + bisection)."""

import logging
import math

import pytest

from flipburn.domain.errors import InvalidInputError
from flipburn.domain.inversion import (
    DEFAULT_INVERSION_CONFIG,
    Frame,
    InversionConfig,
    solve_acceleration,
    trip_duration,
)
from flipburn.domain.kinematics import solve_trip

_ACCELERATIONS = [0.1, 1.0, 5.0, 20.0]
_DISTANCES = [1e9, 1e12, 4.0e16]


class TestRoundTrip:
    """solve(d, a) followed by inversion recovers a."""

    @pytest.mark.parametrize("a", _ACCELERATIONS)
    @pytest.mark.parametrize("d", _DISTANCES)
    def test_ship_frame(self, d, a):
        target = solve_trip(d, a, 1000.0).proper_time_s
        solved = solve_acceleration(d, target, Frame.SHIP)
        assert solved is not None
        assert solved == pytest.approx(a, rel=1e-6)

    @pytest.mark.parametrize("a", _ACCELERATIONS)
    @pytest.mark.parametrize("d", _DISTANCES)
    def test_earth_frame(self, d, a):
        target = solve_trip(d, a, 1000.0).coordinate_time_s
        solved = solve_acceleration(d, target, Frame.EARTH)
        assert solved is not None
        assert solved == pytest.approx(a, rel=1e-6)

    def test_solution_reproduces_target(self):
        target = 5.0 * 31_557_600.0
        a = solve_acceleration(4.0e16, target, Frame.SHIP)
        assert a is not None
        assert trip_duration(4.0e16, a, Frame.SHIP) == pytest.approx(target, rel=1e-12)

    def test_bracket_expansion(self):
        """Target needing more than the initial 1e4 m/s² upper bound."""
        a = 5.0e4
        target = solve_trip(1e9, a, 1.0).proper_time_s
        solved = solve_acceleration(1e9, target, Frame.SHIP)
        assert solved == pytest.approx(a, rel=1e-6)


class TestUnreachable:
    """Unreachable targets are a normal None, not an error."""

    def test_one_second_across_light_year_scale(self):
        assert solve_acceleration(1e16, 1.0, Frame.EARTH) is None

    def test_below_light_transit_even_in_ship_frame_bracket(self):
        """Ship time can shrink below d/c, but not past the bracket limit."""
        assert solve_acceleration(1e9, 1.0, Frame.SHIP) is None

    def test_too_slow(self):
        """Longer than the trip at the weakest bracketed acceleration."""
        slowest = trip_duration(1e9, DEFAULT_INVERSION_CONFIG.low_ms2, Frame.EARTH)
        assert solve_acceleration(1e9, slowest * 10.0, Frame.EARTH) is None

    def test_zero_distance(self):
        """Every acceleration gives a zero-length trip."""
        assert solve_acceleration(0.0, 100.0, Frame.SHIP) is None

    def test_non_finite_low_time(self):
        """Overflow at the weakest acceleration means nothing is reachable."""
        assert solve_acceleration(1e60, 1e20, Frame.EARTH) is None


class TestConfiguration:

    def test_defaults(self):
        cfg = InversionConfig()
        assert cfg.low_ms2 == 1e-6
        assert cfg.high_ms2 == 1e4
        assert cfg.max_doublings == 12
        assert cfg.relative_tolerance == 1e-15

    def test_no_doublings_limits_reach(self):
        target = solve_trip(1e12, 5.0, 1.0).proper_time_s
        tight = InversionConfig(high_ms2=1.0, max_doublings=0)
        assert solve_acceleration(1e12, target, Frame.SHIP, tight) is None

    def test_doublings_recover_reach(self):
        target = solve_trip(1e12, 5.0, 1.0).proper_time_s
        cfg = InversionConfig(high_ms2=1.0, max_doublings=3)
        assert solve_acceleration(1e12, target, Frame.SHIP, cfg) == pytest.approx(5.0, rel=1e-6)

    def test_iteration_cap_bounds_work(self):
        """A low iteration cap still returns a point inside the bracket."""
        target = solve_trip(1e12, 5.0, 1.0).proper_time_s
        cfg = InversionConfig(max_iterations=5)
        solved = solve_acceleration(1e12, target, Frame.SHIP, cfg)
        assert solved is not None
        assert cfg.low_ms2 < solved < cfg.high_ms2


class TestTripDuration:

    def test_frames(self):
        r = solve_trip(4.0e16, 9.80665, 1.0)
        assert trip_duration(4.0e16, 9.80665, Frame.SHIP) == r.proper_time_s
        assert trip_duration(4.0e16, 9.80665, Frame.EARTH) == r.coordinate_time_s

    def test_overflow_is_infinite(self):
        assert trip_duration(1e50, 10.0, Frame.EARTH) == math.inf

    def test_frame_values(self):
        assert Frame("earth") is Frame.EARTH
        assert Frame("ship") is Frame.SHIP


class TestInvalidInput:

    @pytest.mark.parametrize("target", [0.0, -1.0, math.nan, math.inf])
    def test_bad_target(self, target):
        with pytest.raises(InvalidInputError):
            solve_acceleration(1e12, target, Frame.SHIP)

    @pytest.mark.parametrize("distance", [-1.0, math.nan, math.inf])
    def test_bad_distance(self, distance):
        with pytest.raises(InvalidInputError):
            solve_acceleration(distance, 100.0, Frame.SHIP)


class TestLogging:

    def test_debug_summary(self, caplog):
        target = solve_trip(1e12, 5.0, 1.0).proper_time_s
        with caplog.at_level(logging.DEBUG, logger="flipburn.domain.inversion"):
            solve_acceleration(1e12, target, Frame.SHIP)
        assert any("bisections" in rec.getMessage() for rec in caplog.records)
