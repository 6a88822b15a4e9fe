# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
HTTP calculate endpoint for web clients.

Local HTTP server (stdlib only) exposing the trip planner as JSON:

    POST /api/calculate   request body -> report (400 invalid/unreachable,
                          413 oversized body, 500 numeric overflow)
    GET  /api/units       supported unit tables

Usage:
    flipburn --serve --port 8766
"""
import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

from flipburn.adapters.json_io import report_to_dict, request_from_dict
from flipburn.domain.errors import (
    InvalidInputError,
    NumericOverflowError,
    UnreachableTargetError,
)
from flipburn.domain.trip_planner import plan_trip
from flipburn.domain.units import (
    ACCELERATION_UNITS,
    DISTANCE_UNITS,
    DURATION_UNITS,
    MASS_UNITS,
)

logger = logging.getLogger(__name__)

_MAX_BODY_BYTES = 64 * 1024


class CalculatorHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the calculate API."""

    def log_message(self, fmt: str, *args: Any) -> None:
        logger.debug("%s - " + fmt, self.address_string(), *args)

    def _send(self, status: int, payload: Any = None) -> None:
        body = b"" if payload is None else json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "GET, POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        if payload is not None:
            self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if body:
            self.wfile.write(body)

    def _fail(self, status: int, message: str) -> None:
        self._send(status, {"error": message})

    def _request_json(self, size: int) -> Any:
        if size <= 0:
            return {}
        return json.loads(self.rfile.read(size).decode("utf-8"))

    def do_GET(self) -> None:
        if self.path.rstrip("/") != "/api/units":
            self._fail(404, f"No route for GET {self.path}")
            return
        self._send(200, {
            "distance": dict(DISTANCE_UNITS),
            "acceleration": dict(ACCELERATION_UNITS),
            "mass": dict(MASS_UNITS),
            "duration": dict(DURATION_UNITS),
        })

    def do_POST(self) -> None:
        if self.path.rstrip("/") != "/api/calculate":
            self._fail(404, f"No route for POST {self.path}")
            return

        try:
            size = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            self._fail(400, "Content-Length header is not an integer")
            return
        if size > _MAX_BODY_BYTES:
            self._fail(413, f"Request body too large ({size} bytes)")
            return

        try:
            body = self._request_json(size)
        except ValueError:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            self._fail(400, "Request body is not valid JSON")
            return

        try:
            report = plan_trip(request_from_dict(body))
        except (InvalidInputError, UnreachableTargetError) as e:
            self._fail(400, str(e))
            return
        except NumericOverflowError as e:
            logger.warning("Calculation overflowed: %s", e)
            self._fail(500, "Calculation failed")
            return

        self._send(200, report_to_dict(report))

    def do_OPTIONS(self) -> None:
        self._send(204)


def create_calculator_server(
    port: int = 8766, host: str = "localhost",
) -> ThreadingHTTPServer:
    """Create an HTTP server for the calculate API.

    Each request is handled on its own thread; the planner is pure, so
    requests share no state.

    Returns:
        ThreadingHTTPServer ready to serve_forever().
    """
    return ThreadingHTTPServer((host, port), CalculatorHandler)
