"""Minimum-order service fees per colour.

Some colours are only produced economically in bulk. When the order's
spend on such a colour stays below its ``minimum_order_amount`` a flat
service fee applies, chosen by tier:

- colour total >= minimum: no fee
- colour total <= tier1_max: tier1 amount
- colour total <= tier2_max: tier2 amount
- otherwise: no fee

The last case (above both tier maxima yet below the minimum) is existing
policy. It is preserved and reported through ``ColorServiceFee.in_tier_gap``.
Fees are evaluated once per order, never per line item.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..entities import Color
from ..value_objects import FeeTier

logger = logging.getLogger(__name__)

__all__ = ["ColorServiceFee", "ColorSpend", "ServiceFeeEvaluator", "ServiceFeeSummary"]


@dataclass(frozen=True)
class ColorSpend:
    """A priced order line's contribution to its colour's total.

    Attributes:
        color_id: Colour of the line, None for lines without one.
        total_price: Unrounded line total.
    """

    color_id: str | None
    total_price: float


@dataclass(frozen=True)
class ColorServiceFee:
    """Service fee outcome for one colour of an order.

    Attributes:
        color_id: Colour identifier.
        color_name: Colour display name.
        color_total: Unrounded spend on the colour across the order.
        service_fee: Fee charged (0 when no tier applies).
        tier: Tier that produced the fee.
        minimum_required: The colour's minimum order amount.
        in_tier_gap: True when the total is below the minimum but above
            every configured tier, so no fee is charged.
    """

    color_id: str
    color_name: str
    color_total: float
    service_fee: float
    tier: FeeTier
    minimum_required: float
    in_tier_gap: bool = False

    @property
    def shortfall(self) -> float:
        """Amount still needed to reach the colour's minimum."""
        return max(0.0, self.minimum_required - self.color_total)


@dataclass(frozen=True)
class ServiceFeeSummary:
    """All colour service fees of an order."""

    fees: tuple[ColorServiceFee, ...] = field(default_factory=tuple)

    @property
    def total(self) -> float:
        return sum(fee.service_fee for fee in self.fees)

    @property
    def charged(self) -> tuple[ColorServiceFee, ...]:
        """Fees that actually charge something."""
        return tuple(fee for fee in self.fees if fee.service_fee > 0)


class ServiceFeeEvaluator:
    """Applies minimum-order service fee tiers to colour totals."""

    def evaluate(
        self, lines: Iterable[ColorSpend], colors: Iterable[Color]
    ) -> ServiceFeeSummary:
        """Evaluate service fees for an order.

        Only colours with a positive ``minimum_order_amount`` are evaluated.
        Lines without a colour, or whose colour is unknown, are ignored.

        Args:
            lines: Order lines with their colour and unrounded total.
            colors: Colour reference data.

        Returns:
            ServiceFeeSummary with one entry per evaluated colour, in the
            order colours first appear in the lines.
        """
        by_id = {color.id: color for color in colors}
        totals: dict[str, float] = {}
        for line in lines:
            if line.color_id is None:
                continue
            totals[line.color_id] = totals.get(line.color_id, 0.0) + line.total_price

        fees: list[ColorServiceFee] = []
        for color_id, color_total in totals.items():
            color = by_id.get(color_id)
            if color is None:
                logger.warning(f"Color '{color_id}' not found; no service fee evaluated")
                continue
            if color.minimum_order_amount <= 0:
                continue
            fees.append(self.fee_for(color, color_total))

        return ServiceFeeSummary(fees=tuple(fees))

    def fee_for(self, color: Color, color_total: float) -> ColorServiceFee:
        """Apply the tiers of one colour to its order total."""
        fee = 0.0
        tier = FeeTier.NONE
        in_gap = False

        if color_total < color.minimum_order_amount:
            tier1_max = color.service_fee_tier1_max
            tier2_max = color.service_fee_tier2_max
            if tier1_max is not None and color_total <= tier1_max:
                fee = color.service_fee_tier1_amount or 0.0
                tier = FeeTier.TIER1
            elif tier2_max is not None and color_total <= tier2_max:
                fee = color.service_fee_tier2_amount or 0.0
                tier = FeeTier.TIER2
            else:
                in_gap = True
                logger.warning(
                    f"Color {color.name} total ${color_total:.2f} is below the "
                    f"${color.minimum_order_amount:.2f} minimum but above every "
                    "service fee tier; no fee applied"
                )

        logger.debug(
            f"Service fee for {color.name}: total ${color_total:.2f}, "
            f"{tier.value} fee ${fee:.2f}"
        )
        return ColorServiceFee(
            color_id=color.id,
            color_name=color.name,
            color_total=color_total,
            service_fee=fee,
            tier=tier,
            minimum_required=color.minimum_order_amount,
            in_tier_gap=in_gap,
        )
