# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Human-readable durations and magnitudes for reports."""
import math

from flipburn.domain.units import JULIAN_YEAR_S

_DURATION_STEPS = (
    ("years", JULIAN_YEAR_S),
    ("days", 86400.0),
    ("hours", 3600.0),
    ("minutes", 60.0),
)


def format_duration(seconds: float | None) -> str:
    """Render a duration in the largest whole unit it reaches.

    >>> format_duration(120)
    '2.00 minutes'
    """
    if seconds is None or not math.isfinite(seconds) or seconds <= 0:
        return "n/a"
    for label, size in _DURATION_STEPS:
        if seconds >= size:
            return f"{seconds / size:.2f} {label}"
    return f"{seconds:.2f} seconds"


def format_friendly(value: float | None) -> str:
    """Scientific notation for very large or very small magnitudes,
    grouped decimal with up to 4 fraction digits otherwise."""
    if value is None:
        return "n/a"
    if not math.isfinite(value):
        return str(value)
    magnitude = abs(value)
    if magnitude >= 1e9 or 0 < magnitude < 1e-3:
        return f"{value:.3e}"
    text = f"{value:,.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text
