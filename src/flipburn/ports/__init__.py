# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for trip request/report file I/O.

Adapters implement these to handle different file formats.
"""
from typing import Any, Protocol, runtime_checkable

from flipburn.domain.trip_planner import TripReport, TripRequest


@runtime_checkable
class TripRequestReader(Protocol):
    """Port for reading calculation requests."""

    def read_request(self, path: str) -> TripRequest:
        """Read and parse a request file."""
        ...


@runtime_checkable
class TripReportWriter(Protocol):
    """Port for writing calculation reports."""

    def write_report(self, report: TripReport, path: str) -> dict[str, Any]:
        """Write a report to file and return the serialized payload."""
        ...
