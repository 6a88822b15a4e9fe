# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error taxonomy for the trip engine.

InvalidInputError and NumericOverflowError are caller-visible failures.
An unreachable target duration is a normal None from the inverter;
UnreachableTargetError exists only for the request pipeline, which has to
report it to a CLI or HTTP caller.
"""


class FlipburnError(Exception):
    """Base class for all trip engine errors."""


class InvalidInputError(FlipburnError, ValueError):
    """Non-finite, non-positive, or out-of-domain parameter, or unknown unit."""


class NumericOverflowError(FlipburnError, OverflowError):
    """Intermediate magnitude beyond the solver's safe range."""


class UnreachableTargetError(FlipburnError):
    """Target trip duration cannot be produced by any bracketed acceleration."""

    def __init__(
        self, target_s: float, frame: str, light_floor_s: float | None = None,
    ) -> None:
        self.target_s = target_s
        self.frame = frame
        self.light_floor_s = light_floor_s
        message = (
            f"Unable to solve acceleration for a {frame}-frame trip "
            f"of {target_s:.6g} s"
        )
        if light_floor_s is not None and target_s <= light_floor_s:
            message += f" (light alone needs {light_floor_s:.6g} s)"
        super().__init__(message)
