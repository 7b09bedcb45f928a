"""Service protocols for dependency injection.

This module defines protocol classes that establish contracts between layers.
Commands and adapters depend on these protocols rather than on concrete
services, so tests can substitute fakes and alternative rate sources can be
plugged in without touching the pricing rules.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabinet_pricing.domain.entities import (
        CabinetType,
        DoorStyle,
        MaterialSpecification,
    )
    from cabinet_pricing.domain.exceptions import ValidationIssue
    from cabinet_pricing.domain.rates import RateSnapshot
    from cabinet_pricing.domain.services import (
        CabinetConfiguration,
        PriceBreakdown,
        WeightBreakdown,
    )
    from cabinet_pricing.domain.value_objects import Dimensions


@runtime_checkable
class RateRepositoryProtocol(Protocol):
    """Protocol for rate table sources.

    A repository hands out one immutable RateSnapshot per calculation. The
    pricing engine never reaches back into the repository mid-calculation.

    Example:
        ```python
        class JsonRateRepository:
            def load(self) -> RateSnapshot:
                return catalog_to_snapshot(load_catalog(self.path))
        ```
    """

    def load(self) -> RateSnapshot:
        """Return the current rate snapshot.

        Raises:
            ConfigError: If the rate source cannot be read or validated.
        """
        ...


@runtime_checkable
class PricingServiceProtocol(Protocol):
    """Protocol for cabinet and order pricing."""

    def price(
        self,
        configuration: CabinetConfiguration,
        snapshot: RateSnapshot,
        include_service_fees: bool = False,
    ) -> PriceBreakdown:
        """Price a single configuration."""
        ...

    def price_order(
        self,
        configurations: Sequence[CabinetConfiguration],
        snapshot: RateSnapshot,
    ) -> PriceBreakdown:
        """Price every configuration of an order, applying service fees once."""
        ...


@runtime_checkable
class WeightCalculatorProtocol(Protocol):
    """Protocol for weight and packaging estimates."""

    def calculate(
        self,
        cabinet_type: CabinetType,
        dimensions: Dimensions,
        quantity: int = 1,
        door_style: DoorStyle | None = None,
        material: MaterialSpecification | None = None,
    ) -> WeightBreakdown:
        """Estimate weight and carton size of a line item."""
        ...


@runtime_checkable
class InputValidatorProtocol(Protocol):
    """Protocol for validating configurations before pricing.

    Implementations collect every problem instead of stopping at the first,
    so callers can report them together.
    """

    def validate_configuration(
        self,
        configuration: CabinetConfiguration,
        snapshot: RateSnapshot,
        prefix: str = "",
    ) -> list[ValidationIssue]:
        """Validate one configuration against its cabinet type."""
        ...

    def validate_order(
        self,
        configurations: Sequence[CabinetConfiguration],
        snapshot: RateSnapshot,
    ) -> list[ValidationIssue]:
        """Validate every line of an order."""
        ...
