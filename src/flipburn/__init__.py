# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
flipburn: relativistic flip-and-burn trip calculator.

Constant proper acceleration for the first half of the trip, mirror-image
deceleration for the second half. Domain logic lives in flipburn.domain;
file, HTTP and CLI plumbing lives in flipburn.adapters and flipburn.cli.
"""

__version__ = "0.3.0"
