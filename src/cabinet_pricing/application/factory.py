"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from cabinet_pricing.application.commands import (
        PaymentScheduleCommand,
        PriceCabinetCommand,
        PriceListCommand,
        PriceOrderCommand,
    )
    from cabinet_pricing.application.services import InputValidatorService
    from cabinet_pricing.contracts.protocols import RateRepositoryProtocol
    from cabinet_pricing.domain.services import (
        CabinetPricingService,
        DimensionLimits,
        PriceListGenerator,
        WeightCalculator,
    )
    from cabinet_pricing.infrastructure.formatters import (
        OrderFormatter,
        PriceBreakdownFormatter,
        PriceListFormatter,
        ScheduleFormatter,
        WeightFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation to support:
    - Dependency injection for testing
    - One rate source shared by the CLI and the HTTP API
    - Lazy initialization, so loading the catalog happens on first use

    Attributes:
        catalog_path: JSON rate catalog served by the default repository.
        limits: Dimension and quantity limits applied before pricing.

    Example:
        ```python
        factory = ServiceFactory(catalog_path=Path("catalog.json"))
        snapshot = factory.get_rate_repository().load()
        output = factory.create_price_command().execute(configuration, snapshot)
        ```
    """

    catalog_path: Path | None = None
    limits: "DimensionLimits | None" = None

    # Cached instances (use field with init=False for dataclass)
    _rate_repository: "RateRepositoryProtocol | None" = field(
        default=None, init=False, repr=False
    )
    _pricing_service: "CabinetPricingService | None" = field(
        default=None, init=False, repr=False
    )
    _weight_calculator: "WeightCalculator | None" = field(
        default=None, init=False, repr=False
    )
    _input_validator: "InputValidatorService | None" = field(
        default=None, init=False, repr=False
    )
    _price_list_generator: "PriceListGenerator | None" = field(
        default=None, init=False, repr=False
    )

    def get_rate_repository(self) -> "RateRepositoryProtocol":
        """Get or create the rate repository for ``catalog_path``.

        Raises:
            ConfigError: If no repository was set and no catalog path is known.
        """
        if self._rate_repository is None:
            if self.catalog_path is None:
                from cabinet_pricing.application.config import ConfigError

                raise ConfigError("No rate catalog configured", error_type="not_configured")
            from cabinet_pricing.infrastructure.catalog import JsonRateRepository

            self._rate_repository = cast(
                "RateRepositoryProtocol", JsonRateRepository(self.catalog_path)
            )
        return self._rate_repository

    def set_rate_repository(self, repository: "RateRepositoryProtocol") -> None:
        """Serve rates from a custom repository (e.g. an in-memory one in tests)."""
        self._rate_repository = repository

    def get_pricing_service(self) -> "CabinetPricingService":
        """Get or create pricing service instance."""
        if self._pricing_service is None:
            from cabinet_pricing.domain.services import CabinetPricingService

            self._pricing_service = CabinetPricingService(limits=self.limits)
        return self._pricing_service

    def get_weight_calculator(self) -> "WeightCalculator":
        if self._weight_calculator is None:
            from cabinet_pricing.domain.services import WeightCalculator

            self._weight_calculator = WeightCalculator()
        return self._weight_calculator

    def get_input_validator(self) -> "InputValidatorService":
        if self._input_validator is None:
            from cabinet_pricing.application.services import InputValidatorService

            self._input_validator = InputValidatorService(limits=self.limits)
        return self._input_validator

    def get_price_list_generator(self) -> "PriceListGenerator":
        if self._price_list_generator is None:
            from cabinet_pricing.domain.services import PriceListGenerator

            self._price_list_generator = PriceListGenerator(self.get_pricing_service())
        return self._price_list_generator

    def get_breakdown_formatter(self, show_parts: bool = False) -> "PriceBreakdownFormatter":
        from cabinet_pricing.infrastructure.formatters import PriceBreakdownFormatter

        return PriceBreakdownFormatter(show_parts=show_parts)

    def get_order_formatter(self, show_parts: bool = False) -> "OrderFormatter":
        from cabinet_pricing.infrastructure.formatters import OrderFormatter

        return OrderFormatter(show_parts=show_parts)

    def get_weight_formatter(self) -> "WeightFormatter":
        from cabinet_pricing.infrastructure.formatters import WeightFormatter

        return WeightFormatter()

    def get_schedule_formatter(self) -> "ScheduleFormatter":
        from cabinet_pricing.infrastructure.formatters import ScheduleFormatter

        return ScheduleFormatter()

    def get_price_list_formatter(self) -> "PriceListFormatter":
        from cabinet_pricing.infrastructure.formatters import PriceListFormatter

        return PriceListFormatter()

    def create_price_command(self) -> "PriceCabinetCommand":
        """Create PriceCabinetCommand with all dependencies."""
        from cabinet_pricing.application.commands import PriceCabinetCommand

        return PriceCabinetCommand(
            pricing_service=self.get_pricing_service(),
            weight_calculator=self.get_weight_calculator(),
            input_validator=self.get_input_validator(),
        )

    def create_order_command(self) -> "PriceOrderCommand":
        """Create PriceOrderCommand with all dependencies."""
        from cabinet_pricing.application.commands import PriceOrderCommand

        return PriceOrderCommand(
            pricing_service=self.get_pricing_service(),
            weight_calculator=self.get_weight_calculator(),
            input_validator=self.get_input_validator(),
        )

    def create_schedule_command(self) -> "PaymentScheduleCommand":
        from cabinet_pricing.application.commands import PaymentScheduleCommand

        return PaymentScheduleCommand()

    def create_price_list_command(self) -> "PriceListCommand":
        from cabinet_pricing.application.commands import PriceListCommand

        return PriceListCommand(generator=self.get_price_list_generator())


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
