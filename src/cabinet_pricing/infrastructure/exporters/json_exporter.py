"""JSON export of priced cabinets and orders.

The ``*_to_dict`` helpers are the single serialised form of pricing
results; the JSON exporter, the CLI ``--format json`` output and the HTTP
responses all build on them. Monetary values are emitted unrounded next
to a ``display`` block of half-up rounded values.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from cabinet_pricing.application.dtos import CabinetPriceOutput, OrderOutput
from cabinet_pricing.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from cabinet_pricing.application.dtos import PriceListOutput
    from cabinet_pricing.domain.services import (
        ColorServiceFee,
        FulfilmentCharges,
        HardwareLine,
        PaymentCheck,
        PaymentSchedule,
        PriceBreakdown,
        PricedLine,
        WeightBreakdown,
    )
    from cabinet_pricing.domain.services.models import PartCostLine


logger = logging.getLogger(__name__)


SCHEMA_VERSION = "1.0"


def _part_to_dict(part: PartCostLine) -> dict[str, Any]:
    return {
        "part_name": part.part_name,
        "role": part.role.value,
        "width_mm": part.width_mm,
        "height_mm": part.height_mm,
        "area_sqm": part.area_sqm,
        "pieces": part.pieces,
        "total_area_sqm": part.total_area_sqm,
        "rate_per_sqm": part.rate_per_sqm,
        "cost": part.cost,
    }


def _hardware_line_to_dict(line: HardwareLine) -> dict[str, Any]:
    return {
        "requirement_id": line.requirement_id,
        "category": line.category,
        "unit_scope": line.unit_scope.value if line.unit_scope else None,
        "required_quantity": line.required_quantity,
        "source": line.source.value,
        "name": line.name,
        "unit_cost": line.unit_cost,
        "base_cost": line.base_cost,
        "final_cost": line.final_cost,
    }


def _service_fee_to_dict(fee: ColorServiceFee) -> dict[str, Any]:
    return {
        "color_id": fee.color_id,
        "color_name": fee.color_name,
        "color_total": fee.color_total,
        "service_fee": fee.service_fee,
        "tier": fee.tier.value,
        "minimum_required": fee.minimum_required,
        "shortfall": fee.shortfall,
        "in_tier_gap": fee.in_tier_gap,
    }


def _line_to_dict(line: PricedLine) -> dict[str, Any]:
    carcass = line.carcass
    doors = line.doors
    return {
        "cabinet_type_id": line.cabinet_type.id,
        "cabinet_type_name": line.cabinet_type.name,
        "width_mm": line.dimensions.width_mm,
        "height_mm": line.dimensions.height_mm,
        "depth_mm": line.dimensions.depth_mm,
        "quantity": line.quantity,
        "door_style_id": line.configuration.door_style_id,
        "color_id": line.configuration.color_id,
        "finish_id": line.configuration.finish_id,
        "carcass": {
            "unit_cost": carcass.unit_cost,
            "total": carcass.total,
            "rate_per_sqm": carcass.material_rate.rate_per_sqm,
            "rate_source": carcass.material_rate.source,
            "material_type": carcass.material_rate.material_type,
        },
        "doors": {
            "unit_cost": doors.unit_cost,
            "total": doors.total,
            "door_area_sqm": doors.door_area_sqm,
            "style_rate": doors.rate.style_rate,
            "color_surcharge": doors.rate.color_surcharge,
            "finish_rate": doors.rate.finish_rate,
        },
        "hardware": {
            "unit_cost": line.hardware.unit_cost,
            "total": line.hardware.total,
            "lines": [_hardware_line_to_dict(hw) for hw in line.hardware.lines],
        },
        "parts": [_part_to_dict(part) for part in line.parts],
        "subtotal": line.subtotal,
        "unit_price": line.unit_price,
        "degraded": list(line.degraded),
    }


def breakdown_to_dict(breakdown: PriceBreakdown) -> dict[str, Any]:
    """Serialise a price breakdown with its line items."""
    return {
        "carcass": breakdown.carcass,
        "doors": breakdown.doors,
        "hardware": breakdown.hardware,
        "service_fees": [_service_fee_to_dict(fee) for fee in breakdown.service_fees],
        "service_fee_total": breakdown.service_fee_total,
        "subtotal": breakdown.subtotal,
        "gst": breakdown.gst,
        "gst_rate": breakdown.gst_rate,
        "total": breakdown.total,
        "display": breakdown.to_display(),
        "rate_version": breakdown.rate_version,
        "degraded": list(breakdown.degraded),
        "lines": [_line_to_dict(line) for line in breakdown.lines],
    }


def weight_to_dict(weight: WeightBreakdown) -> dict[str, Any]:
    """Serialise a weight and packaging estimate."""
    package = weight.package_dimensions
    return {
        "carcass_weight_kg": weight.carcass_weight_kg,
        "door_weight_kg": weight.door_weight_kg,
        "hardware_weight_kg": weight.hardware_weight_kg,
        "unit_weight_kg": weight.unit_weight_kg,
        "total_weight_kg": weight.total_weight_kg,
        "quantity": weight.quantity,
        "package_dimensions": {
            "length_mm": package.length_mm,
            "width_mm": package.width_mm,
            "height_mm": package.height_mm,
        },
        "carcass_volume_cubic_m": weight.carcass_volume_cubic_m,
        "door_volume_cubic_m": weight.door_volume_cubic_m,
        "total_volume_cubic_m": weight.total_volume_cubic_m,
        "shipping_volume_cubic_m": weight.shipping_volume_cubic_m,
    }


def schedule_to_dict(schedule: PaymentSchedule) -> dict[str, Any]:
    """Serialise a payment schedule; dates as ISO 8601 strings."""
    return {
        "deposit_amount": schedule.deposit_amount,
        "deposit_percentage": schedule.deposit_percentage,
        "balance_amount": schedule.balance_amount,
        "balance_percentage": schedule.balance_percentage,
        "total_amount": schedule.total_amount,
        "deposit_due_date": schedule.deposit_due_date.isoformat(),
        "balance_due_date": schedule.balance_due_date.isoformat(),
    }


def payment_check_to_dict(check: PaymentCheck) -> dict[str, Any]:
    return {
        "valid": check.valid,
        "payment_type": check.payment_type.value,
        "expected": check.expected,
        "actual": check.actual,
        "message": check.message,
    }


def fulfilment_to_dict(fulfilment: FulfilmentCharges) -> dict[str, Any]:
    return {
        "delivery": fulfilment.delivery,
        "assembly": fulfilment.assembly,
        "total": fulfilment.total,
        "assembly_requested": fulfilment.assembly_requested,
        "assembly_applied": fulfilment.assembly_applied,
        "estimated_dispatch_date": fulfilment.estimated_dispatch_date.isoformat(),
    }


def price_output_to_dict(output: CabinetPriceOutput) -> dict[str, Any]:
    """Serialise a single-cabinet pricing result."""
    return {
        "breakdown": breakdown_to_dict(output.breakdown),
        "weight": weight_to_dict(output.weight) if output.weight else None,
        "warnings": output.warnings,
    }


def order_to_dict(output: OrderOutput) -> dict[str, Any]:
    """Serialise an order pricing result."""
    return {
        "breakdown": breakdown_to_dict(output.breakdown),
        "weights": [weight_to_dict(weight) for weight in output.weights],
        "total_weight_kg": output.total_weight_kg,
        "shipping_volume_cubic_m": output.shipping_volume_cubic_m,
        "fulfilment": fulfilment_to_dict(output.fulfilment) if output.fulfilment else None,
        "grand_total": output.grand_total,
        "schedule": schedule_to_dict(output.schedule) if output.schedule else None,
        "warnings": output.warnings,
    }


def price_list_to_dict(output: PriceListOutput) -> dict[str, Any]:
    """Serialise a price-list grid."""
    return {
        "cabinet_type_id": output.cabinet_type.id,
        "cabinet_type_name": output.cabinet_type.name,
        "columns": output.column_labels,
        "rows": [
            {
                "label": row.width_range.label,
                "min_width_mm": row.width_range.min_width_mm,
                "max_width_mm": row.width_range.max_width_mm,
                "prices": [cell.total for cell in row.cells],
            }
            for row in output.rows
        ],
    }


@ExporterRegistry.register("json")
class QuoteJsonExporter:
    """JSON exporter for priced cabinets and orders.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: CabinetPriceOutput | OrderOutput, path: Path) -> None:
        """Write the JSON document to ``path``."""
        path.write_text(self.export_string(output))
        logger.info(f"Exported JSON quote to {path}")

    def export_string(self, output: CabinetPriceOutput | OrderOutput) -> str:
        """Return the JSON document for a priced result."""
        if isinstance(output, OrderOutput):
            data = {"kind": "order", **order_to_dict(output)}
        else:
            data = {"kind": "cabinet", **price_output_to_dict(output)}
        return json.dumps({"schema_version": SCHEMA_VERSION, **data}, indent=self.indent)
