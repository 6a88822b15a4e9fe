# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for velocity-profile export.

Adapters implement this to write the sampled velocity curve in various
formats (CSV, etc.).
"""
from typing import Protocol, runtime_checkable

from flipburn.domain.profile import VelocityProfile


@runtime_checkable
class ProfileExporter(Protocol):
    """Port for exporting a sampled velocity profile to file."""

    def export(self, profile: VelocityProfile, path: str) -> int:
        """
        Export profile samples to a file.

        Args:
            profile: Sampled velocity profile.
            path: Output file path.

        Returns:
            Number of samples exported.
        """
        ...
