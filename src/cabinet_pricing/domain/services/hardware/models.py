"""Hardware pricing data models.

This module provides data models for hardware cost resolution:
- HardwareContext: Everything a resolution strategy may consult
- HardwareResolution: The product or set a requirement resolved to
- HardwareLine: Priced hardware for one requirement of a line item
- HardwareCost: All hardware lines of a line item
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from ...entities import HardwareBrandSet, HardwareOption, HardwareRequirement
from ...value_objects import HardwareSource, UnitScope
from ..config import PricingSettings


@dataclass(frozen=True)
class HardwareContext:
    """Inputs available while resolving one hardware requirement.

    Attributes:
        requirement: The requirement being resolved.
        selections: Customer selections keyed by hardware category. A value
            is either a brand set id or a brand id.
        settings: Global pricing settings (configured default set ids).
        options: Per-unit hardware options in the catalog.
        sets: Hardware brand sets in the catalog.
    """

    requirement: HardwareRequirement
    selections: Mapping[str, str]
    settings: PricingSettings
    options: tuple[HardwareOption, ...] = field(default_factory=tuple)
    sets: tuple[HardwareBrandSet, ...] = field(default_factory=tuple)

    @property
    def category(self) -> str:
        return self.requirement.category

    @property
    def selection(self) -> str | None:
        """Customer selection for this requirement's category, if any."""
        return self.selections.get(self.requirement.category)

    def find_set(self, set_id: str) -> HardwareBrandSet | None:
        """Find a brand set of this category by id."""
        for brand_set in self.sets:
            if brand_set.id == set_id and brand_set.category == self.category:
                return brand_set
        return None


@dataclass(frozen=True)
class HardwareResolution:
    """What a hardware requirement resolved to.

    Attributes:
        source: Which resolution step produced this result.
        name: Display name (set name or product name).
        unit_cost: Cost of one set (or one product) before markup and discount.
        set_id: Brand set id, when resolved to a set.
        brand: Brand name or id, when known.
    """

    source: HardwareSource
    name: str
    unit_cost: float
    set_id: str | None = None
    brand: str | None = None

    @classmethod
    def from_set(cls, brand_set: HardwareBrandSet, source: HardwareSource) -> HardwareResolution:
        return cls(
            source=source,
            name=brand_set.set_name,
            unit_cost=brand_set.unit_cost,
            set_id=brand_set.id,
            brand=brand_set.brand_name,
        )


@dataclass(frozen=True)
class HardwareLine:
    """Priced hardware for one requirement across a line item.

    Attributes:
        requirement_id: Requirement this line prices (None for the fallback line).
        category: Hardware category, e.g. "hinge".
        unit_scope: Basis of the quantity (None for the fallback line).
        required_quantity: Sets or units needed across the whole line item.
        source: How the hardware was resolved.
        name: Display name of what was priced.
        unit_cost: Base cost per set or unit.
        base_cost: unit_cost x required_quantity.
        final_cost: base_cost after markup and discount.
    """

    requirement_id: str | None
    category: str
    unit_scope: UnitScope | None
    required_quantity: float
    source: HardwareSource
    name: str
    unit_cost: float
    base_cost: float
    final_cost: float

    @property
    def is_priced(self) -> bool:
        return self.source not in (HardwareSource.UNRESOLVED, HardwareSource.FALLBACK)


@dataclass(frozen=True)
class HardwareCost:
    """Hardware cost of a line item."""

    lines: tuple[HardwareLine, ...] = field(default_factory=tuple)
    quantity: int = 1

    @property
    def total(self) -> float:
        return sum(line.final_cost for line in self.lines)

    @property
    def unit_cost(self) -> float:
        """Hardware cost of a single cabinet."""
        return self.total / self.quantity if self.quantity else 0.0

    @property
    def is_fallback(self) -> bool:
        """True when the flat fallback charge was used."""
        return any(line.source == HardwareSource.FALLBACK for line in self.lines)

    @property
    def unresolved(self) -> tuple[HardwareLine, ...]:
        """Lines whose requirement resolved to nothing."""
        return tuple(
            line for line in self.lines if line.source == HardwareSource.UNRESOLVED
        )
