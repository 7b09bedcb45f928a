"""Application commands (use cases) for cabinet pricing."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING

from cabinet_pricing.domain.exceptions import PricingValidationError
from cabinet_pricing.domain.services import (
    CabinetConfiguration,
    CabinetPricingService,
    PaymentCheck,
    PaymentSchedule,
    PricedLine,
    PriceListCombination,
    PriceListGenerator,
    WeightBreakdown,
    WeightCalculator,
    WidthRange,
    ZoneQuote,
    calculate_fulfilment,
    calculate_payment_schedule,
    require_payment_amount,
    validate_payment_amount,
)
from cabinet_pricing.domain.services.constants import (
    DEFAULT_BALANCE_DUE_DAYS,
    DEFAULT_DEPOSIT_DUE_DAYS,
    DEFAULT_DEPOSIT_PERCENTAGE,
)
from cabinet_pricing.domain.value_objects import PaymentType, round_cents

from .dtos import CabinetPriceOutput, OrderOutput, PriceListOutput
from .services.input_validator import InputValidatorService

if TYPE_CHECKING:
    from cabinet_pricing.domain.rates import RateSnapshot

logger = logging.getLogger(__name__)


def _line_weight(
    calculator: WeightCalculator, line: PricedLine, snapshot: "RateSnapshot"
) -> WeightBreakdown:
    configuration = line.configuration
    material = snapshot.material(configuration.material_type) or snapshot.default_material()
    return calculator.calculate(
        line.cabinet_type,
        line.dimensions,
        line.quantity,
        door_style=snapshot.door_style(configuration.door_style_id),
        material=material,
    )


class PriceCabinetCommand:
    """Command to price a single cabinet configuration."""

    def __init__(
        self,
        pricing_service: CabinetPricingService | None = None,
        weight_calculator: WeightCalculator | None = None,
        input_validator: InputValidatorService | None = None,
    ) -> None:
        self.pricing_service = pricing_service or CabinetPricingService()
        self.weight_calculator = weight_calculator or WeightCalculator()
        self.input_validator = input_validator or InputValidatorService()

    def execute(
        self,
        configuration: CabinetConfiguration,
        snapshot: "RateSnapshot",
        include_weight: bool = True,
        include_service_fees: bool = False,
    ) -> CabinetPriceOutput:
        """Execute the pricing command.

        Args:
            configuration: Cabinet configuration to price.
            snapshot: Rate snapshot to price against.
            include_weight: Also estimate weight and packaging.
            include_service_fees: Evaluate colour service fees as if this
                configuration were the whole order.

        Returns:
            CabinetPriceOutput with the breakdown and optional weight.

        Raises:
            CatalogLookupError: If the cabinet type is unknown.
            PricingValidationError: If the configuration is out of range.
        """
        issues = self.input_validator.validate_configuration(configuration, snapshot)
        if issues:
            raise PricingValidationError(issues)

        breakdown = self.pricing_service.price(
            configuration, snapshot, include_service_fees=include_service_fees
        )
        weight = None
        if include_weight:
            weight = _line_weight(self.weight_calculator, breakdown.lines[0], snapshot)

        for warning in breakdown.degraded:
            logger.warning(f"Degraded pricing: {warning}")
        return CabinetPriceOutput(breakdown=breakdown, weight=weight)


class PriceOrderCommand:
    """Command to price an order: lines, service fees, fulfilment and schedule."""

    def __init__(
        self,
        pricing_service: CabinetPricingService | None = None,
        weight_calculator: WeightCalculator | None = None,
        input_validator: InputValidatorService | None = None,
    ) -> None:
        self.pricing_service = pricing_service or CabinetPricingService()
        self.weight_calculator = weight_calculator or WeightCalculator()
        self.input_validator = input_validator or InputValidatorService()

    def execute(
        self,
        configurations: Sequence[CabinetConfiguration],
        snapshot: "RateSnapshot",
        zone: ZoneQuote | None = None,
        assembly: bool = False,
        deposit_percentage: float = DEFAULT_DEPOSIT_PERCENTAGE,
        now: datetime | None = None,
    ) -> OrderOutput:
        """Execute the order pricing command.

        Every line is validated before any is priced.

        Args:
            configurations: Order lines.
            snapshot: Rate snapshot to price against.
            zone: Resolved delivery zone, if delivery is being quoted.
            assembly: Whether assembly was requested.
            deposit_percentage: Deposit share for the payment schedule.
            now: Reference time for due and dispatch dates.

        Returns:
            OrderOutput with breakdown, weights, fulfilment and schedule.

        Raises:
            PricingValidationError: If any line is invalid.
        """
        issues = self.input_validator.validate_order(configurations, snapshot)
        if issues:
            raise PricingValidationError(issues)

        breakdown = self.pricing_service.price_order(configurations, snapshot)
        weights = [
            _line_weight(self.weight_calculator, line, snapshot) for line in breakdown.lines
        ]

        fulfilment = None
        if zone is not None:
            cabinet_count = sum(line.quantity for line in breakdown.lines)
            fulfilment = calculate_fulfilment(zone, cabinet_count, assembly, now=now)

        output = OrderOutput(breakdown=breakdown, weights=weights, fulfilment=fulfilment)
        output.schedule = calculate_payment_schedule(
            round_cents(output.grand_total), deposit_percentage, now=now
        )
        logger.info(
            f"Priced order of {len(breakdown.lines)} line(s): "
            f"total ${breakdown.total:,.0f}, grand total ${output.grand_total:,.2f}"
        )
        return output


class PaymentScheduleCommand:
    """Command to build payment schedules and check payments against them."""

    def execute(
        self,
        total_amount: float,
        deposit_percentage: float = DEFAULT_DEPOSIT_PERCENTAGE,
        deposit_due_days: int = DEFAULT_DEPOSIT_DUE_DAYS,
        balance_due_days: int = DEFAULT_BALANCE_DUE_DAYS,
        now: datetime | None = None,
    ) -> PaymentSchedule:
        """Split a total into deposit and balance.

        Raises:
            PricingValidationError: If the percentage or due periods are invalid.
        """
        return calculate_payment_schedule(
            total_amount, deposit_percentage, deposit_due_days, balance_due_days, now=now
        )

    def check_payment(
        self,
        amount: float,
        schedule: PaymentSchedule,
        payment_type: PaymentType | str,
        strict: bool = False,
    ) -> PaymentCheck:
        """Check an attempted payment against a schedule.

        Args:
            amount: Attempted payment.
            schedule: Schedule the payment belongs to.
            payment_type: deposit, balance or full.
            strict: Raise ScheduleMismatchError instead of returning an
                invalid result.
        """
        if strict:
            return require_payment_amount(amount, schedule, payment_type)
        return validate_payment_amount(amount, schedule, payment_type)


class PriceListCommand:
    """Command to build a price-list grid for a cabinet type."""

    def __init__(self, generator: PriceListGenerator | None = None) -> None:
        self.generator = generator or PriceListGenerator()

    def execute(
        self,
        snapshot: "RateSnapshot",
        cabinet_type_id: str,
        width_ranges: Sequence[WidthRange] | None = None,
        combinations: Sequence[PriceListCombination] | None = None,
    ) -> PriceListOutput:
        """Execute the price-list command.

        Raises:
            CatalogLookupError: If the cabinet type is unknown.
        """
        cabinet_type = snapshot.cabinet_type(cabinet_type_id)
        rows = self.generator.generate(snapshot, cabinet_type_id, width_ranges, combinations)
        return PriceListOutput(cabinet_type=cabinet_type, rows=rows)
