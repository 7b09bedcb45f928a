"""Carcass cost calculation.

The carcass is every part of a cabinet type that is neither a door nor a
hardware placeholder. Each part costs its area times the carcass material
rate times its quantity; the sum is the cost of one cabinet.
"""

from __future__ import annotations

import logging

from ..entities import CabinetType, MaterialSpecification
from ..value_objects import Dimensions, PartRole
from .config import PricingSettings
from .constants import FALLBACK_MATERIAL_RATE_PER_SQM
from .models import CarcassCost, MaterialRate, PartCostLine
from .part_geometry import PartGeometryService

logger = logging.getLogger(__name__)

__all__ = ["CarcassCostCalculator", "resolve_material_rate"]


def resolve_material_rate(
    selected: MaterialSpecification | None,
    default: MaterialSpecification | None,
    settings: PricingSettings,
) -> MaterialRate:
    """Resolve the carcass rate per square metre.

    Precedence: the selected material, the default material specification,
    the ``hmr_rate_per_sqm`` global setting, then a built-in constant. The
    last step is degraded pricing and is logged and flagged on the result.

    Args:
        selected: Material explicitly chosen for the line item, if any.
        default: The repository's default material specification, if any.
        settings: Global pricing settings.

    Returns:
        The resolved MaterialRate.
    """
    if selected is not None:
        return MaterialRate(
            rate_per_sqm=selected.cost_per_sqm,
            source="selected",
            material_type=selected.material_type,
        )
    if default is not None:
        return MaterialRate(
            rate_per_sqm=default.cost_per_sqm,
            source="default_material",
            material_type=default.material_type,
        )
    if settings.hmr_rate_per_sqm is not None:
        return MaterialRate(
            rate_per_sqm=settings.hmr_rate_per_sqm,
            source="hmr_setting",
            material_type="HMR",
        )
    message = (
        "No material specification or HMR rate configured; "
        f"using fallback carcass rate ${FALLBACK_MATERIAL_RATE_PER_SQM:.2f}/m²"
    )
    logger.warning(message)
    return MaterialRate(
        rate_per_sqm=FALLBACK_MATERIAL_RATE_PER_SQM,
        source="fallback",
        degraded=message,
    )


class CarcassCostCalculator:
    """Prices the structural body of a cabinet."""

    def __init__(self, geometry: PartGeometryService | None = None) -> None:
        self.geometry = geometry or PartGeometryService()

    def calculate(
        self,
        cabinet_type: CabinetType,
        dimensions: Dimensions,
        quantity: int,
        material_rate: MaterialRate,
    ) -> CarcassCost:
        """Calculate the carcass cost of a line item.

        Args:
            cabinet_type: Cabinet type whose carcass parts are priced.
            dimensions: Ordered cabinet dimensions.
            quantity: Cabinets ordered.
            material_rate: Resolved carcass rate.

        Returns:
            CarcassCost with the single-cabinet cost and the line total.
        """
        rate = material_rate.rate_per_sqm
        unit_cost = 0.0
        lines: list[PartCostLine] = []

        for measurement in self.geometry.measure_all(
            cabinet_type.parts, dimensions, role=PartRole.CARCASS
        ):
            part_cost = measurement.area_sqm * rate * measurement.part.quantity
            unit_cost += part_cost
            lines.append(
                PartCostLine(
                    part_name=measurement.part.part_name,
                    role=PartRole.CARCASS,
                    width_mm=measurement.width_mm,
                    height_mm=measurement.height_mm,
                    area_sqm=measurement.area_sqm,
                    pieces=measurement.part.quantity * quantity,
                    rate_per_sqm=rate,
                    cost=part_cost * quantity,
                )
            )

        logger.debug(
            f"Carcass for {cabinet_type.name}: {len(lines)} parts, "
            f"unit ${unit_cost:.2f} at ${rate:.2f}/m² x {quantity}"
        )
        return CarcassCost(
            unit_cost=unit_cost,
            quantity=quantity,
            total=unit_cost * quantity,
            material_rate=material_rate,
            lines=tuple(lines),
        )
