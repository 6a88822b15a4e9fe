# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON request/report adapter.

Maps the camelCase JSON boundary used by web clients onto TripRequest and
TripReport, and reads/writes them as files.
"""
import json
import math
from typing import Any

from flipburn.domain.errors import InvalidInputError
from flipburn.domain.formatting import format_duration
from flipburn.domain.inversion import Frame
from flipburn.domain.kinematics import RelativisticConstants
from flipburn.domain.trip_planner import (
    DistanceRange,
    SolveMode,
    TripReport,
    TripRequest,
)
from flipburn.ports import TripReportWriter, TripRequestReader

_G0 = RelativisticConstants.STANDARD_GRAVITY

# Benchmark table key -> wire key.
_COMPARISON_KEYS = {
    "tsar_bomba": "tsarBomba",
    "global_annual_energy": "globalYear",
    "sun_output_per_second": "sunPerSecond",
    "lhc_beam": "lhcBeam",
    "hiroshima": "hiroshima",
}


def _number(body: dict, key: str, default: Any = None) -> float:
    value = body.get(key)
    if value is None:
        value = default
    if value is None:
        return math.nan
    if isinstance(value, bool):
        raise InvalidInputError(f"{key} must be a number, got {value!r}")
    try:
        return float(value)
    except OverflowError:
        raise InvalidInputError(
            f"{key} is too large to represent as a number"
        ) from None
    except (TypeError, ValueError):
        raise InvalidInputError(f"{key} must be a number, got {value!r}") from None


def _flag(body: dict, key: str) -> bool:
    value = body.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise InvalidInputError(f"{key} must be true or false, got {value!r}")
    return value


def _enum(enum_cls, body: dict, key: str, default: str):
    raw = str(body.get(key) or default)
    try:
        return enum_cls(raw)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise InvalidInputError(
            f"{key} must be one of {choices}, got {raw!r}"
        ) from None


def request_from_dict(body: dict[str, Any]) -> TripRequest:
    """Build a TripRequest from a decoded JSON body.

    Unit, mode and frame defaults follow the web form: ly, g, kg,
    efficiency 1, distance mode, target in hours, Earth frame.

    Raises:
        InvalidInputError: On non-numeric values or unknown mode/frame.
    """
    if not isinstance(body, dict):
        raise InvalidInputError("Request body must be a JSON object")

    solve_mode = _enum(SolveMode, body, "solveMode", SolveMode.DISTANCE.value)
    target_value = None
    if body.get("targetTimeValue") is not None:
        target_value = _number(body, "targetTimeValue")

    distance_range = None
    raw_range = body.get("distanceRange")
    if raw_range:
        if not isinstance(raw_range, dict):
            raise InvalidInputError("distanceRange must be an object")
        distance_range = DistanceRange(
            min_value=_number(raw_range, "minValue"),
            max_value=_number(raw_range, "maxValue"),
            unit=str(raw_range.get("unit") or "ly"),
        )

    return TripRequest(
        distance_value=_number(body, "distanceValue"),
        acceleration_value=_number(body, "accelerationValue"),
        ship_mass_value=_number(body, "shipMassValue"),
        distance_unit=str(body.get("distanceUnit") or "ly"),
        acceleration_unit=str(body.get("accelerationUnit") or "g"),
        ship_mass_unit=str(body.get("shipMassUnit") or "kg"),
        propulsion_efficiency=_number(body, "propulsionEfficiency", 1.0),
        solve_mode=solve_mode,
        target_time_value=target_value,
        target_time_unit=str(body.get("targetTimeUnit") or "hours"),
        target_time_frame=_enum(Frame, body, "targetTimeFrame", Frame.EARTH.value),
        distance_range=distance_range,
        precise=_flag(body, "precise"),
    )


def report_to_dict(report: TripReport) -> dict[str, Any]:
    """Serialize a TripReport to the JSON response shape."""
    result = report.result
    metrics = report.metrics

    payload: dict[str, Any] = {
        "rapidity": result.rapidity,
        "properTimeSeconds": result.proper_time_s,
        "coordinateTimeSeconds": result.coordinate_time_s,
        "peakVelocityMs": result.peak_velocity_ms,
        "energyJoules": result.energy_j,
        "energyKwh": metrics.energy_kwh,
        "massEquivalentKg": metrics.mass_equivalent_kg,
        "fuelMassKg": metrics.fuel_mass_kg,
        "fuelRatio": metrics.fuel_ratio,
        "peakVelocityFractionC": metrics.peak_velocity_fraction_c,
        "peakLorentzFactor": result.peak_lorentz_factor,
        "properTimeHuman": format_duration(result.proper_time_s),
        "coordinateTimeHuman": format_duration(result.coordinate_time_s),
        "accelerationMs2": report.params.acceleration_ms2,
        "comparisons": {
            _COMPARISON_KEYS.get(name, name): ratio
            for name, ratio in metrics.comparisons.items()
        },
        "chart": None,
    }

    if report.derived_acceleration_ms2 is not None:
        payload["derivedAccelerationMs2"] = report.derived_acceleration_ms2
        payload["derivedAccelerationG"] = report.derived_acceleration_ms2 / _G0

    if report.profile is not None:
        payload["chart"] = {
            "unitLabel": report.profile.unit_label,
            "data": [
                {
                    "t": sample.time,
                    "v": sample.velocity_fraction_c,
                    "gamma": sample.lorentz_factor,
                }
                for sample in report.profile.samples
            ],
        }

    band = report.distance_range
    if band is not None:
        payload["rangeResults"] = {
            "minDistanceMeters": band.min_distance_m,
            "maxDistanceMeters": band.max_distance_m,
            "earthTimeMinSeconds": band.earth_time_min_s,
            "earthTimeMaxSeconds": band.earth_time_max_s,
            "shipTimeMinSeconds": band.ship_time_min_s,
            "shipTimeMaxSeconds": band.ship_time_max_s,
            "earthTimeMin": format_duration(band.earth_time_min_s),
            "earthTimeMax": format_duration(band.earth_time_max_s),
            "shipTimeMin": format_duration(band.ship_time_min_s),
            "shipTimeMax": format_duration(band.ship_time_max_s),
        }

    return payload


class JsonTripRequestReader(TripRequestReader):
    """Reads calculation requests from JSON files."""

    def read_request(self, path: str) -> TripRequest:
        with open(path, encoding='utf-8') as f:
            return request_from_dict(json.load(f))


class JsonTripReportWriter(TripReportWriter):
    """Writes calculation reports to JSON files."""

    def write_report(self, report: TripReport, path: str) -> dict[str, Any]:
        payload = report_to_dict(report)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        return payload
