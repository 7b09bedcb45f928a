"""Price-list grid generation.

A price list shows, for one cabinet type, the price of each width range
under a set of door style / colour / finish combinations. Each range is
priced at its minimum width with the type's default height and depth.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .price_aggregator import CabinetConfiguration, CabinetPricingService
from .validation import validate_configuration

if TYPE_CHECKING:
    from ..rates import RateSnapshot

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_WIDTH_RANGES",
    "PriceListCell",
    "PriceListCombination",
    "PriceListGenerator",
    "PriceListRow",
    "WidthRange",
    "default_combinations",
]


@dataclass(frozen=True)
class WidthRange:
    """A band of cabinet widths sharing one list price."""

    label: str
    min_width_mm: float
    max_width_mm: float

    def __post_init__(self) -> None:
        if self.min_width_mm <= 0:
            raise ValueError("min_width_mm must be positive")
        if self.min_width_mm > self.max_width_mm:
            raise ValueError("min_width_mm cannot exceed max_width_mm")


DEFAULT_WIDTH_RANGES: tuple[WidthRange, ...] = (
    WidthRange("300-400mm", 300, 400),
    WidthRange("400-500mm", 400, 500),
    WidthRange("500-600mm", 500, 600),
)


@dataclass(frozen=True)
class PriceListCombination:
    """Door style, colour and finish a price-list column is priced with."""

    door_style_id: str | None = None
    color_id: str | None = None
    finish_id: str | None = None

    @property
    def label(self) -> str:
        parts = [p for p in (self.door_style_id, self.color_id, self.finish_id) if p]
        return " / ".join(parts) if parts else "standard"


@dataclass(frozen=True)
class PriceListCell:
    combination: PriceListCombination
    total: float


@dataclass(frozen=True)
class PriceListRow:
    """List prices of one width range."""

    width_range: WidthRange
    cells: tuple[PriceListCell, ...] = field(default_factory=tuple)


def default_combinations(snapshot: RateSnapshot) -> list[PriceListCombination]:
    """One column per active finish, using the first active door style and
    a colour belonging to it."""
    door_style = next((s for s in snapshot.door_styles if s.active), None)
    color = None
    if door_style is not None:
        color = next(
            (c for c in snapshot.colors if c.active and c.door_style_id == door_style.id),
            None,
        )
    finishes = [f for f in snapshot.finishes if f.active] or [None]
    return [
        PriceListCombination(
            door_style_id=door_style.id if door_style else None,
            color_id=color.id if color else None,
            finish_id=finish.id if finish else None,
        )
        for finish in finishes
    ]


class PriceListGenerator:
    """Builds price-list grids from the pricing service."""

    def __init__(self, pricing_service: CabinetPricingService | None = None) -> None:
        self.pricing_service = pricing_service or CabinetPricingService()

    def generate(
        self,
        snapshot: RateSnapshot,
        cabinet_type_id: str,
        width_ranges: Sequence[WidthRange] | None = None,
        combinations: Sequence[PriceListCombination] | None = None,
    ) -> list[PriceListRow]:
        """Price every width range under every combination.

        Ranges whose minimum width falls outside the cabinet type's bounds
        are skipped with a warning.

        Raises:
            CatalogLookupError: If the cabinet type is unknown.
        """
        cabinet_type = snapshot.cabinet_type(cabinet_type_id)
        ranges = list(width_ranges) if width_ranges else list(DEFAULT_WIDTH_RANGES)
        combos = list(combinations) if combinations else default_combinations(snapshot)

        rows: list[PriceListRow] = []
        for width_range in ranges:
            issues = validate_configuration(
                cabinet_type,
                width_range.min_width_mm,
                cabinet_type.default_height_mm,
                cabinet_type.default_depth_mm,
                1,
                self.pricing_service.limits,
            )
            if issues:
                logger.warning(
                    f"Skipping width range {width_range.label} for {cabinet_type.name}: "
                    f"{issues[0].field} {issues[0].message}"
                )
                continue

            cells = []
            for combo in combos:
                breakdown = self.pricing_service.price(
                    CabinetConfiguration(
                        cabinet_type_id=cabinet_type.id,
                        width_mm=width_range.min_width_mm,
                        door_style_id=combo.door_style_id,
                        color_id=combo.color_id,
                        finish_id=combo.finish_id,
                    ),
                    snapshot,
                )
                cells.append(PriceListCell(combination=combo, total=breakdown.total))
            rows.append(PriceListRow(width_range=width_range, cells=tuple(cells)))

        return rows
