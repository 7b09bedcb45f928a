"""Hardware cost resolver.

Derives the quantity each hardware requirement needs from its unit scope,
resolves a product or brand set for it, and applies the global markup and
discount. A cabinet type without any active requirement is charged the
flat ``hardware_base_cost`` per cabinet instead, tagged as a fallback.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ...entities import (
    CabinetType,
    HardwareBrandSet,
    HardwareOption,
    HardwareRequirement,
)
from ...value_objects import HardwareSource, UnitScope
from ..config import PricingSettings
from .models import HardwareContext, HardwareCost, HardwareLine
from .resolution import HardwareResolutionChain

logger = logging.getLogger(__name__)

FALLBACK_LINE_NAME = "Standard hardware allowance"


def required_quantity(
    requirement: HardwareRequirement,
    cabinet_type: CabinetType,
    quantity: int,
) -> float:
    """Units a requirement needs across a line item.

    ``door_count`` and ``drawer_count`` come from the cabinet type and are
    never inferred from its name.
    """
    if requirement.unit_scope == UnitScope.PER_DOOR:
        scope_count = cabinet_type.door_count
    elif requirement.unit_scope == UnitScope.PER_DRAWER:
        scope_count = cabinet_type.drawer_count
    else:
        scope_count = 1
    return requirement.units_per_scope * scope_count * quantity


def apply_markup(base_cost: float, settings: PricingSettings) -> float:
    """Apply the hardware markup, then the discount, to a base cost."""
    markup = 1 + settings.hardware_markup_percentage / 100
    discount = 1 - settings.hardware_discount_percentage / 100
    return base_cost * markup * discount


class HardwareCostResolver:
    """Prices the hardware of a line item."""

    def __init__(self, chain: HardwareResolutionChain | None = None) -> None:
        self.chain = chain or HardwareResolutionChain()

    def calculate(
        self,
        cabinet_type: CabinetType,
        quantity: int,
        settings: PricingSettings,
        options: tuple[HardwareOption, ...] = (),
        sets: tuple[HardwareBrandSet, ...] = (),
        selections: Mapping[str, str] | None = None,
    ) -> HardwareCost:
        """Calculate hardware cost lines for a line item.

        Args:
            cabinet_type: Cabinet type whose requirements are priced.
            quantity: Cabinets ordered.
            settings: Global settings (markup, discount, defaults, base cost).
            options: Per-unit hardware options from the catalog.
            sets: Hardware brand sets from the catalog.
            selections: Customer selections keyed by hardware category.

        Returns:
            HardwareCost with one line per active requirement, or a single
            fallback line when the type has no active requirement.
        """
        requirements = cabinet_type.active_requirements
        if not requirements:
            return self._fallback(cabinet_type, quantity, settings)

        selections = dict(selections or {})
        lines = [
            self._price_requirement(
                requirement,
                cabinet_type,
                quantity,
                HardwareContext(
                    requirement=requirement,
                    selections=selections,
                    settings=settings,
                    options=options,
                    sets=sets,
                ),
            )
            for requirement in requirements
        ]
        return HardwareCost(lines=tuple(lines), quantity=quantity)

    def _price_requirement(
        self,
        requirement: HardwareRequirement,
        cabinet_type: CabinetType,
        quantity: int,
        context: HardwareContext,
    ) -> HardwareLine:
        needed = required_quantity(requirement, cabinet_type, quantity)
        resolution = self.chain.resolve(context)
        if resolution is None:
            return HardwareLine(
                requirement_id=requirement.id,
                category=requirement.category,
                unit_scope=requirement.unit_scope,
                required_quantity=needed,
                source=HardwareSource.UNRESOLVED,
                name="",
                unit_cost=0.0,
                base_cost=0.0,
                final_cost=0.0,
            )

        base_cost = resolution.unit_cost * needed
        return HardwareLine(
            requirement_id=requirement.id,
            category=requirement.category,
            unit_scope=requirement.unit_scope,
            required_quantity=needed,
            source=resolution.source,
            name=resolution.name,
            unit_cost=resolution.unit_cost,
            base_cost=base_cost,
            final_cost=apply_markup(base_cost, context.settings),
        )

    def _fallback(
        self, cabinet_type: CabinetType, quantity: int, settings: PricingSettings
    ) -> HardwareCost:
        logger.info(
            f"No hardware configured for {cabinet_type.name}; using flat "
            f"hardware_base_cost ${settings.hardware_base_cost:.2f} per cabinet"
        )
        base_cost = settings.hardware_base_cost * quantity
        line = HardwareLine(
            requirement_id=None,
            category="hardware",
            unit_scope=None,
            required_quantity=quantity,
            source=HardwareSource.FALLBACK,
            name=FALLBACK_LINE_NAME,
            unit_cost=settings.hardware_base_cost,
            base_cost=base_cost,
            final_cost=base_cost,
        )
        return HardwareCost(lines=(line,), quantity=quantity)
