"""Door and finish cost calculation."""

from __future__ import annotations

import logging

from ..entities import CabinetType, Color, DoorStyle, Finish
from ..value_objects import Dimensions, PartRole
from .models import DoorCost, DoorRate, PartCostLine
from .part_geometry import PartGeometryService

logger = logging.getLogger(__name__)

__all__ = ["DoorCostCalculator", "door_rate_for"]


def door_rate_for(
    door_style: DoorStyle | None,
    color: Color | None,
    finish: Finish | None,
) -> DoorRate:
    """Combine the door style, colour and finish rates.

    Missing selections contribute 0.
    """
    return DoorRate(
        style_rate=door_style.base_rate_per_sqm if door_style else 0.0,
        color_surcharge=color.surcharge_rate_per_sqm if color else 0.0,
        finish_rate=finish.rate_per_sqm if finish else 0.0,
    )


class DoorCostCalculator:
    """Prices the door parts of a cabinet."""

    def __init__(self, geometry: PartGeometryService | None = None) -> None:
        self.geometry = geometry or PartGeometryService()

    def calculate(
        self,
        cabinet_type: CabinetType,
        dimensions: Dimensions,
        quantity: int,
        door_style: DoorStyle | None = None,
        color: Color | None = None,
        finish: Finish | None = None,
    ) -> DoorCost:
        """Calculate the door cost of a line item.

        Args:
            cabinet_type: Cabinet type whose door parts are priced.
            dimensions: Ordered cabinet dimensions.
            quantity: Cabinets ordered.
            door_style: Selected door style, if any.
            color: Selected colour, if any.
            finish: Selected finish, if any.

        Returns:
            DoorCost with the combined rate, per-part lines and totals.
        """
        rate = door_rate_for(door_style, color, finish)
        unit_cost = 0.0
        lines: list[PartCostLine] = []

        for measurement in self.geometry.measure_all(
            cabinet_type.parts, dimensions, role=PartRole.DOOR
        ):
            part_cost = measurement.area_sqm * rate.total * measurement.part.quantity
            unit_cost += part_cost
            lines.append(
                PartCostLine(
                    part_name=measurement.part.part_name,
                    role=PartRole.DOOR,
                    width_mm=measurement.width_mm,
                    height_mm=measurement.height_mm,
                    area_sqm=measurement.area_sqm,
                    pieces=measurement.part.quantity * quantity,
                    rate_per_sqm=rate.total,
                    cost=part_cost * quantity,
                )
            )

        logger.debug(
            f"Doors for {cabinet_type.name}: rate ${rate.total:.2f}/m² "
            f"(style {rate.style_rate}, color {rate.color_surcharge}, "
            f"finish {rate.finish_rate}), unit ${unit_cost:.2f} x {quantity}"
        )
        return DoorCost(
            unit_cost=unit_cost,
            quantity=quantity,
            total=unit_cost * quantity,
            rate=rate,
            lines=tuple(lines),
        )
