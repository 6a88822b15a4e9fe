# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Derived trip metrics: energy units, mass-energy equivalents, fuel estimates,
reference-energy comparisons and distance-range sensitivity.
"""
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from flipburn.domain.errors import InvalidInputError
from flipburn.domain.kinematics import (
    KinematicResult,
    RelativisticConstants,
    solve_trip,
)

_C = RelativisticConstants.C_LIGHT
_C2 = _C * _C
_J_PER_KWH = 3.6e6
_J_PER_KILOTON_TNT = 4.184e12


@dataclass(frozen=True)
class EnergyBenchmark:
    """Reference energy for scale comparisons."""
    label: str
    energy_j: float


ENERGY_BENCHMARKS = MappingProxyType({
    "tsar_bomba": EnergyBenchmark("Tsar Bomba yield (~50 Mt)", 2.1e17),
    "global_annual_energy": EnergyBenchmark(
        "World primary energy use, one year", 5.8e20,
    ),
    "sun_output_per_second": EnergyBenchmark(
        "Solar luminosity, one second", 3.8e26,
    ),
    "lhc_beam": EnergyBenchmark("LHC stored beam energy", 3.62e8),
    "hiroshima": EnergyBenchmark(
        "Hiroshima yield (15 kt)", 15 * _J_PER_KILOTON_TNT,
    ),
})


@dataclass(frozen=True)
class TripMetrics:
    """Energy and fuel figures derived from a KinematicResult."""
    energy_kwh: float
    mass_equivalent_kg: float
    fuel_mass_kg: float | None
    fuel_ratio: float | None
    peak_velocity_fraction_c: float
    comparisons: Mapping[str, float]  # read-only view


@dataclass(frozen=True)
class DistanceRangeResult:
    """Trip times at both ends of a distance uncertainty band."""
    min_distance_m: float
    max_distance_m: float
    earth_time_min_s: float
    earth_time_max_s: float
    ship_time_min_s: float
    ship_time_max_s: float


def energy_kwh(energy_j: float) -> float:
    return energy_j / _J_PER_KWH


def mass_equivalent_kg(energy_j: float) -> float:
    """Rest mass with the same energy content, m = E/c²."""
    return energy_j / _C2


def fuel_mass_kg(energy_j: float, propulsion_efficiency: float) -> float | None:
    """Fuel rest mass converted to thrust at the given efficiency.

    Returns:
        E / (η·c²), or None if efficiency is not positive.
    """
    if not propulsion_efficiency > 0:
        return None
    return energy_j / (propulsion_efficiency * _C2)


def compare_energy(energy_j: float) -> dict[str, float]:
    """Ratio of energy_j to each entry of ENERGY_BENCHMARKS."""
    return {
        name: energy_j / benchmark.energy_j
        for name, benchmark in ENERGY_BENCHMARKS.items()
    }


def compute_trip_metrics(
    result: KinematicResult,
    ship_mass_kg: float,
    propulsion_efficiency: float,
) -> TripMetrics:
    """Energy, fuel and comparison figures for one solved trip."""
    fuel = fuel_mass_kg(result.energy_j, propulsion_efficiency)
    ratio = fuel / ship_mass_kg if fuel is not None else None
    return TripMetrics(
        energy_kwh=energy_kwh(result.energy_j),
        mass_equivalent_kg=mass_equivalent_kg(result.energy_j),
        fuel_mass_kg=fuel,
        fuel_ratio=ratio,
        peak_velocity_fraction_c=result.peak_velocity_fraction_c,
        comparisons=MappingProxyType(compare_energy(result.energy_j)),
    )


def compute_distance_range(
    min_distance_m: float,
    max_distance_m: float,
    acceleration_ms2: float,
    ship_mass_kg: float,
) -> DistanceRangeResult:
    """Trip times across a distance band at fixed acceleration.

    At fixed acceleration both trip times increase monotonically with
    distance, so the min distance yields the min times. This ordering holds
    only because acceleration is the same at both ends.

    Raises:
        InvalidInputError: If the band is inverted or not finite.
        NumericOverflowError: If either end overflows the solver.
    """
    if not (math.isfinite(min_distance_m) and math.isfinite(max_distance_m)):
        raise InvalidInputError("Distance range bounds must be finite")
    if min_distance_m > max_distance_m:
        raise InvalidInputError(
            f"Distance range is inverted: min {min_distance_m} > max {max_distance_m}"
        )

    near = solve_trip(min_distance_m, acceleration_ms2, ship_mass_kg)
    far = solve_trip(max_distance_m, acceleration_ms2, ship_mass_kg)

    return DistanceRangeResult(
        min_distance_m=min_distance_m,
        max_distance_m=max_distance_m,
        earth_time_min_s=near.coordinate_time_s,
        earth_time_max_s=far.coordinate_time_s,
        ship_time_min_s=near.proper_time_s,
        ship_time_max_s=far.proper_time_s,
    )
