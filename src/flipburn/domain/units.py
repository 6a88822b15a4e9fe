# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
User-facing unit conversion to SI base units.

Distance (ly/au/pc/km/m), acceleration (g/m·s⁻²), mass (kg/t/lb) and
duration (seconds through Julian years). Pure lookups, no value checks:
range validation belongs to the caller.
"""
from types import MappingProxyType

from flipburn.domain.errors import InvalidInputError

STANDARD_GRAVITY_MS2: float = 9.80665  # m/s² (CGPM 1901)
JULIAN_YEAR_S: float = 31_557_600.0    # s (365.25 d)

DISTANCE_UNITS = MappingProxyType({
    "ly": 9.4607304725808e15,     # m, IAU light-year
    "au": 1.495978707e11,         # m, IAU 2012
    "pc": 3.08567758149137e16,    # m
    "km": 1000.0,
    "m": 1.0,
})

ACCELERATION_UNITS = MappingProxyType({
    "g": STANDARD_GRAVITY_MS2,
    "mps2": 1.0,
})

MASS_UNITS = MappingProxyType({
    "kg": 1.0,
    "t": 1000.0,
    "lb": 0.45359237,             # exact, international avoirdupois pound
})

DURATION_UNITS = MappingProxyType({
    "seconds": 1.0,
    "minutes": 60.0,
    "hours": 3600.0,
    "days": 86400.0,
    "years": JULIAN_YEAR_S,
})


def _factor(table, unit: str, kind: str) -> float:
    try:
        return table[unit]
    except KeyError:
        known = ", ".join(sorted(table))
        raise InvalidInputError(
            f"Unknown {kind} unit {unit!r} (expected one of: {known})"
        ) from None


def distance_to_m(value: float, unit: str = "ly") -> float:
    """Convert a distance to meters.

    Raises:
        InvalidInputError: If the unit is not in DISTANCE_UNITS.
    """
    return value * _factor(DISTANCE_UNITS, unit, "distance")


def acceleration_to_ms2(value: float, unit: str = "g") -> float:
    """Convert an acceleration to m/s².

    Raises:
        InvalidInputError: If the unit is not in ACCELERATION_UNITS.
    """
    return value * _factor(ACCELERATION_UNITS, unit, "acceleration")


def mass_to_kg(value: float, unit: str = "kg") -> float:
    """Convert a mass to kilograms.

    Raises:
        InvalidInputError: If the unit is not in MASS_UNITS.
    """
    return value * _factor(MASS_UNITS, unit, "mass")


def duration_to_s(value: float, unit: str = "hours") -> float:
    """Convert a duration to seconds.

    Raises:
        InvalidInputError: If the unit is not in DURATION_UNITS.
    """
    return value * _factor(DURATION_UNITS, unit, "duration")
