"""Text formatters for pricing results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cabinet_pricing.domain.services import format_payment_schedule
from cabinet_pricing.domain.value_objects import format_money

if TYPE_CHECKING:
    from cabinet_pricing.application.dtos import OrderOutput, PriceListOutput
    from cabinet_pricing.domain.services import (
        FulfilmentCharges,
        PaymentCheck,
        PaymentSchedule,
        PriceBreakdown,
        WeightBreakdown,
    )


class PriceBreakdownFormatter:
    """Formats a price breakdown as a table.

    Components are shown rounded half-up to whole currency units; the
    underlying values stay unrounded.
    """

    def __init__(self, show_parts: bool = False) -> None:
        self._show_parts = show_parts

    def format(self, breakdown: PriceBreakdown) -> str:
        display = breakdown.to_display()
        lines = [
            "PRICE BREAKDOWN",
            "=" * 70,
        ]

        for index, line in enumerate(breakdown.lines, start=1):
            dims = line.dimensions
            lines.append(
                f"{index}. {line.cabinet_type.name} "
                f"{dims.width_mm:g} x {dims.height_mm:g} x {dims.depth_mm:g} mm"
                f"  x{line.quantity}"
            )
            if self._show_parts:
                lines.extend(self._format_parts(line.parts))
            for hw in line.hardware.lines:
                lines.append(
                    f"     {hw.category:<12} {hw.name:<30} "
                    f"{hw.required_quantity:>6g}  {format_money(hw.final_cost):>12}"
                )

        lines.append("-" * 70)
        lines.append(f"{'Carcass':<40} {format_money(display['carcass'], 0):>28}")
        lines.append(f"{'Doors':<40} {format_money(display['doors'], 0):>28}")
        lines.append(f"{'Hardware':<40} {format_money(display['hardware'], 0):>28}")

        for fee in breakdown.service_fees:
            if fee.service_fee > 0:
                label = f"Service fee ({fee.color_name})"
                lines.append(f"{label:<40} {format_money(fee.service_fee, 0):>28}")

        lines.append("-" * 70)
        lines.append(f"{'Subtotal':<40} {format_money(display['subtotal'], 0):>28}")
        gst_label = f"GST ({breakdown.gst_rate * 100:g}%)"
        lines.append(f"{gst_label:<40} {format_money(display['gst'], 0):>28}")
        lines.append(f"{'TOTAL':<40} {format_money(display['total'], 0):>28}")

        if breakdown.rate_version:
            lines.append(f"Rates: {breakdown.rate_version}")
        if breakdown.degraded:
            lines.append("")
            lines.append("WARNINGS")
            for warning in breakdown.degraded:
                lines.append(f"  ! {warning}")

        return "\n".join(lines)

    def _format_parts(self, parts) -> list[str]:
        rows = []
        for part in parts:
            rows.append(
                f"     {part.part_name:<18} {part.width_mm:>7.0f} x {part.height_mm:<7.0f}"
                f" {part.pieces:>3} pcs {part.total_area_sqm:>8.3f} m2"
                f" {format_money(part.cost):>12}"
            )
        return rows


class WeightFormatter:
    """Formats weight and packaging estimates."""

    def format(self, weight: WeightBreakdown) -> str:
        package = weight.package_dimensions
        lines = [
            "WEIGHT & PACKAGING",
            "=" * 70,
            f"{'Carcass':<30} {weight.carcass_weight_kg:>10.2f} kg",
            f"{'Doors':<30} {weight.door_weight_kg:>10.2f} kg",
            f"{'Hardware':<30} {weight.hardware_weight_kg:>10.2f} kg",
            "-" * 70,
            f"{'Per cabinet':<30} {weight.unit_weight_kg:>10.2f} kg",
            f"{'Line total':<30} {weight.total_weight_kg:>10.2f} kg  (x{weight.quantity})",
            "",
            f"Package: {package.length_mm:g} x {package.width_mm:g} x "
            f"{package.height_mm:g} mm ({package.cubic_m:.3f} m3 each)",
            f"Board volume: {weight.total_volume_cubic_m:.4f} m3",
            f"Shipping volume: {weight.shipping_volume_cubic_m:.3f} m3",
        ]
        return "\n".join(lines)


class ScheduleFormatter:
    """Formats payment schedules and payment checks."""

    def format(self, schedule: PaymentSchedule) -> str:
        return "\n".join(["PAYMENT SCHEDULE", "=" * 70, format_payment_schedule(schedule)])

    def format_check(self, check: PaymentCheck) -> str:
        if check.valid:
            return (
                f"OK: {check.payment_type.value} payment of "
                f"{format_money(check.actual)} matches the schedule"
            )
        return f"REJECTED: {check.message}"


class FulfilmentFormatter:
    """Formats delivery and assembly charges."""

    def format(self, fulfilment: FulfilmentCharges) -> str:
        lines = [f"{'Delivery':<40} {format_money(fulfilment.delivery):>28}"]
        if fulfilment.assembly_applied:
            lines.append(f"{'Assembly':<40} {format_money(fulfilment.assembly):>28}")
        elif fulfilment.assembly_requested:
            lines.append("Assembly not available in this zone")
        lines.append(f"Estimated dispatch: {fulfilment.estimated_dispatch_date:%Y-%m-%d}")
        return "\n".join(lines)


class OrderFormatter:
    """Formats a whole order: breakdown, fulfilment, weight and schedule."""

    def __init__(self, show_parts: bool = False) -> None:
        self._breakdown = PriceBreakdownFormatter(show_parts=show_parts)
        self._fulfilment = FulfilmentFormatter()
        self._schedule = ScheduleFormatter()

    def format(self, output: OrderOutput) -> str:
        sections = [self._breakdown.format(output.breakdown)]

        if output.fulfilment is not None:
            sections.append(
                "\n".join(["FULFILMENT", "=" * 70, self._fulfilment.format(output.fulfilment)])
            )

        sections.append(
            "\n".join(
                [
                    f"{'GRAND TOTAL':<40} {format_money(output.grand_total):>28}",
                    f"Total weight: {output.total_weight_kg:.2f} kg, "
                    f"shipping volume: {output.shipping_volume_cubic_m:.3f} m3",
                ]
            )
        )

        gap_warnings = [w for w in output.warnings if w not in output.breakdown.degraded]
        if gap_warnings:
            sections.append("\n".join(f"  ! {warning}" for warning in gap_warnings))

        if output.schedule is not None:
            sections.append(self._schedule.format(output.schedule))

        return "\n\n".join(sections)


class PriceListFormatter:
    """Formats a price-list grid with one column per combination."""

    def format(self, output: PriceListOutput) -> str:
        if not output.rows:
            return f"No price list rows for {output.cabinet_type.name}."

        labels = output.column_labels
        width = 22 + 16 * len(labels)
        header = f"{'Width':<22}" + "".join(f"{label[:15]:>16}" for label in labels)
        lines = [
            f"PRICE LIST: {output.cabinet_type.name}",
            "=" * width,
            header,
            "-" * width,
        ]
        for row in output.rows:
            prices = "".join(f"{format_money(cell.total, 0):>16}" for cell in row.cells)
            lines.append(f"{row.width_range.label:<22}{prices}")
        return "\n".join(lines)

