"""Cost line data models shared by the carcass and door calculators.

This module provides dataclasses for:
- PartCostLine: One part's area and cost within a line item
- MaterialRate: Resolved carcass rate and where it came from
- CarcassCost: Carcass cost for a line item
- DoorRate: Components of the combined door rate
- DoorCost: Door cost for a line item
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..value_objects import PartRole


@dataclass(frozen=True)
class PartCostLine:
    """Area and cost of one part across a whole line item.

    Attributes:
        part_name: Name of the part.
        role: Carcass or door.
        width_mm: Resolved part width.
        height_mm: Resolved part height.
        area_sqm: Area of a single piece.
        pieces: Pieces across the line (part quantity x order quantity).
        rate_per_sqm: Rate applied to the area.
        cost: area_sqm x rate_per_sqm x pieces.
    """

    part_name: str
    role: PartRole
    width_mm: float
    height_mm: float
    area_sqm: float
    pieces: int
    rate_per_sqm: float
    cost: float

    @property
    def total_area_sqm(self) -> float:
        return self.area_sqm * self.pieces


@dataclass(frozen=True)
class MaterialRate:
    """Carcass material rate resolved for a calculation.

    Attributes:
        rate_per_sqm: Rate applied to carcass areas.
        source: "selected", "default_material", "hmr_setting" or "fallback".
        material_type: Material the rate belongs to, if any.
        degraded: Warning text when pricing fell back to a built-in constant.
    """

    rate_per_sqm: float
    source: str
    material_type: str | None = None
    degraded: str | None = None


@dataclass(frozen=True)
class CarcassCost:
    """Carcass cost for one line item.

    Attributes:
        unit_cost: Carcass cost of a single cabinet.
        quantity: Cabinets ordered.
        total: unit_cost x quantity.
        material_rate: The rate used.
        lines: Per-part cost lines across the whole line item.
    """

    unit_cost: float
    quantity: int
    total: float
    material_rate: MaterialRate
    lines: tuple[PartCostLine, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DoorRate:
    """Combined door rate: style base rate plus colour and finish surcharges."""

    style_rate: float = 0.0
    color_surcharge: float = 0.0
    finish_rate: float = 0.0

    @property
    def total(self) -> float:
        return self.style_rate + self.color_surcharge + self.finish_rate


@dataclass(frozen=True)
class DoorCost:
    """Door cost for one line item."""

    unit_cost: float
    quantity: int
    total: float
    rate: DoorRate
    lines: tuple[PartCostLine, ...] = field(default_factory=tuple)

    @property
    def door_area_sqm(self) -> float:
        """Total door area across the line item."""
        return sum(line.total_area_sqm for line in self.lines)
