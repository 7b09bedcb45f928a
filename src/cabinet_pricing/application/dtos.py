"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cabinet_pricing.domain.entities import CabinetType
from cabinet_pricing.domain.services import (
    FulfilmentCharges,
    PaymentSchedule,
    PriceBreakdown,
    PriceListRow,
    WeightBreakdown,
)


@dataclass
class CabinetPriceOutput:
    """Output DTO for pricing a single cabinet configuration.

    Attributes:
        breakdown: Price breakdown of the configuration.
        weight: Weight and packaging estimate, if requested.
    """

    breakdown: PriceBreakdown
    weight: WeightBreakdown | None = None

    @property
    def warnings(self) -> list[str]:
        return list(self.breakdown.degraded)


@dataclass
class OrderOutput:
    """Output DTO for pricing a whole order.

    Attributes:
        breakdown: Price breakdown of all lines plus service fees and GST.
        weights: Weight estimate per line, in line order.
        fulfilment: Delivery and assembly charges, when a zone was given.
        schedule: Payment schedule over the grand total.
    """

    breakdown: PriceBreakdown
    weights: list[WeightBreakdown] = field(default_factory=list)
    fulfilment: FulfilmentCharges | None = None
    schedule: PaymentSchedule | None = None

    @property
    def grand_total(self) -> float:
        """Cabinet total plus fulfilment charges."""
        extra = self.fulfilment.total if self.fulfilment else 0.0
        return self.breakdown.total + extra

    @property
    def total_weight_kg(self) -> float:
        return sum(weight.total_weight_kg for weight in self.weights)

    @property
    def shipping_volume_cubic_m(self) -> float:
        return sum(weight.shipping_volume_cubic_m for weight in self.weights)

    @property
    def warnings(self) -> list[str]:
        messages = list(self.breakdown.degraded)
        for fee in self.breakdown.service_fees:
            if fee.in_tier_gap:
                messages.append(
                    f"Colour {fee.color_name} is below its minimum order amount "
                    "but above every service fee tier; no fee charged"
                )
        return messages


@dataclass
class PriceListOutput:
    """Output DTO for a cabinet type's price list."""

    cabinet_type: CabinetType
    rows: list[PriceListRow] = field(default_factory=list)

    @property
    def column_labels(self) -> list[str]:
        if not self.rows:
            return []
        return [cell.combination.label for cell in self.rows[0].cells]
