# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV velocity-profile exporter.

Writes the sampled flip-and-burn velocity curve, one row per sample.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from flipburn.ports.export import ProfileExporter
from flipburn.domain.profile import VelocityProfile

logger = logging.getLogger(__name__)


class CsvProfileExporter(ProfileExporter):
    """Exports a velocity profile to CSV (time in display unit, v/c, gamma)."""

    def export(self, profile: VelocityProfile, path: str) -> int:
        header = [f't_{profile.unit_label}', 'v_frac_c', 'lorentz_factor']
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(header)
            for sample in profile.samples:
                writer.writerow([
                    f'{sample.time:.2f}',
                    f'{sample.velocity_fraction_c:.4f}',
                    f'{sample.lorentz_factor:.4f}',
                ])

        logger.debug("Wrote %d profile samples to %s", len(profile.samples), path)
        return len(profile.samples)
