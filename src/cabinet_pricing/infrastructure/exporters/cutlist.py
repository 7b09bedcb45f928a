"""Cutlist CSV export: one row per priced panel."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cabinet_pricing.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from cabinet_pricing.application.dtos import CabinetPriceOutput, OrderOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("csv")
class CutlistCsvExporter:
    """Exports the carcass and door panels of a quote as CSV.

    Each row is one part of one line item, with the piece count across the
    whole line, the area and the rate it was priced at.

    Attributes:
        format_name: "csv"
        file_extension: "csv"
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    HEADER: ClassVar[list[str]] = [
        "Line",
        "Cabinet",
        "Part",
        "Role",
        "Width (mm)",
        "Height (mm)",
        "Pieces",
        "Area (sqm)",
        "Rate (per sqm)",
        "Cost",
    ]

    def export(self, output: CabinetPriceOutput | OrderOutput, path: Path) -> None:
        path.write_text(self.export_string(output), newline="")
        logger.info(f"Exported cutlist CSV to {path}")

    def export_string(self, output: CabinetPriceOutput | OrderOutput) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(self.HEADER)

        for index, line in enumerate(output.breakdown.lines, start=1):
            for part in line.parts:
                writer.writerow(
                    [
                        index,
                        line.cabinet_type.name,
                        part.part_name,
                        part.role.value,
                        f"{part.width_mm:.1f}",
                        f"{part.height_mm:.1f}",
                        part.pieces,
                        f"{part.total_area_sqm:.4f}",
                        f"{part.rate_per_sqm:.2f}",
                        f"{part.cost:.2f}",
                    ]
                )

        return buffer.getvalue()
