"""Hardware resolution strategies.

Each hardware requirement is resolved by trying an ordered chain of
strategies; the first one returning a result wins:

1. ExplicitSelectionStrategy: the customer picked a brand set, or a brand
   whose per-unit option covers the requirement.
2. ConfiguredDefaultStrategy: the ``default_<category>_set_id`` setting.
3. FlaggedDefaultStrategy: the set flagged ``is_default`` for the category.

When no strategy matches the requirement is unresolved and contributes 0.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ...value_objects import HardwareSource
from .models import HardwareContext, HardwareResolution

logger = logging.getLogger(__name__)

__all__ = [
    "ConfiguredDefaultStrategy",
    "DEFAULT_STRATEGIES",
    "ExplicitSelectionStrategy",
    "FlaggedDefaultStrategy",
    "HardwareResolutionChain",
    "ResolutionStrategy",
]


@runtime_checkable
class ResolutionStrategy(Protocol):
    """Protocol for one step of the hardware resolution chain."""

    name: str

    def resolve(self, context: HardwareContext) -> HardwareResolution | None:
        """Resolve the requirement, or return None to defer to the next step."""
        ...


class ExplicitSelectionStrategy:
    """Uses the customer's selection for the requirement's category.

    The selection may name a brand set of that category. Otherwise it is
    treated as a brand id and matched against the per-unit options of the
    requirement, which price one product per required unit.
    """

    name = "explicit"

    def resolve(self, context: HardwareContext) -> HardwareResolution | None:
        selection = context.selection
        if not selection:
            return None

        brand_set = context.find_set(selection)
        if brand_set is not None:
            return HardwareResolution.from_set(brand_set, HardwareSource.EXPLICIT)

        for option in context.options:
            if (
                option.active
                and option.requirement_id == context.requirement.id
                and option.brand_id == selection
            ):
                return HardwareResolution(
                    source=HardwareSource.EXPLICIT,
                    name=option.product.name,
                    unit_cost=option.product.cost_per_unit,
                    brand=option.brand_id,
                )

        logger.warning(
            f"Selected hardware '{selection}' does not match any "
            f"{context.category} set or option; trying defaults"
        )
        return None


class ConfiguredDefaultStrategy:
    """Uses the set named by the ``default_<category>_set_id`` setting."""

    name = "configured_default"

    def resolve(self, context: HardwareContext) -> HardwareResolution | None:
        set_id = context.settings.default_set_id(context.category)
        if not set_id:
            return None
        brand_set = context.find_set(set_id)
        if brand_set is None:
            logger.warning(
                f"Configured default {context.category} set '{set_id}' not found"
            )
            return None
        return HardwareResolution.from_set(brand_set, HardwareSource.CONFIGURED_DEFAULT)


class FlaggedDefaultStrategy:
    """Uses the first set flagged ``is_default`` for the category."""

    name = "flagged_default"

    def resolve(self, context: HardwareContext) -> HardwareResolution | None:
        for brand_set in context.sets:
            if brand_set.category == context.category and brand_set.is_default:
                return HardwareResolution.from_set(
                    brand_set, HardwareSource.FLAGGED_DEFAULT
                )
        return None


DEFAULT_STRATEGIES: tuple[ResolutionStrategy, ...] = (
    ExplicitSelectionStrategy(),
    ConfiguredDefaultStrategy(),
    FlaggedDefaultStrategy(),
)


class HardwareResolutionChain:
    """Tries resolution strategies in order."""

    def __init__(self, strategies: Sequence[ResolutionStrategy] | None = None) -> None:
        self.strategies = tuple(strategies) if strategies is not None else DEFAULT_STRATEGIES

    def resolve(self, context: HardwareContext) -> HardwareResolution | None:
        """Resolve a requirement with the first strategy that matches.

        Returns:
            The resolution, or None when every strategy deferred.
        """
        for strategy in self.strategies:
            resolution = strategy.resolve(context)
            if resolution is not None:
                logger.debug(
                    f"Requirement {context.requirement.id} ({context.category}) "
                    f"resolved by {strategy.name}: {resolution.name}"
                )
                return resolution
        logger.warning(
            f"No hardware found for requirement {context.requirement.id} "
            f"({context.category}); contributing 0"
        )
        return None
