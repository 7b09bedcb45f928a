"""Delivery and assembly charges for an order.

The zone a delivery postcode falls in is resolved elsewhere; this module
only consumes the resolved zone quote. Fulfilment charges are kept apart
from the cabinet PriceBreakdown and added at checkout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

__all__ = ["FulfilmentCharges", "ZoneQuote", "calculate_fulfilment"]


@dataclass(frozen=True)
class ZoneQuote:
    """Delivery and assembly terms of a resolved delivery zone.

    Attributes:
        delivery_price: Flat delivery charge for the order.
        assembly_price_per_cabinet: Base assembly charge per cabinet.
        assembly_carcass_surcharge_pct: Assembly surcharge for carcasses, in percent.
        assembly_doors_surcharge_pct: Assembly surcharge for doors, in percent.
        lead_time_days: Calendar days until dispatch.
        assembly_available: Whether the zone offers assembly at all.
    """

    delivery_price: float = 0.0
    assembly_price_per_cabinet: float = 0.0
    assembly_carcass_surcharge_pct: float = 0.0
    assembly_doors_surcharge_pct: float = 0.0
    lead_time_days: int = 0
    assembly_available: bool = False

    def __post_init__(self) -> None:
        if self.delivery_price < 0:
            raise ValueError("delivery_price cannot be negative")
        if self.assembly_price_per_cabinet < 0:
            raise ValueError("assembly_price_per_cabinet cannot be negative")
        if self.assembly_carcass_surcharge_pct < 0 or self.assembly_doors_surcharge_pct < 0:
            raise ValueError("Assembly surcharges cannot be negative")
        if self.lead_time_days < 0:
            raise ValueError("lead_time_days cannot be negative")

    @property
    def assembly_multiplier(self) -> float:
        """1 plus the combined carcass and door surcharges."""
        return 1 + (self.assembly_carcass_surcharge_pct + self.assembly_doors_surcharge_pct) / 100


@dataclass(frozen=True)
class FulfilmentCharges:
    """Charges and dispatch estimate for delivering an order."""

    delivery: float
    assembly: float
    estimated_dispatch_date: datetime
    assembly_requested: bool = False
    assembly_applied: bool = False

    @property
    def total(self) -> float:
        return self.delivery + self.assembly


def calculate_fulfilment(
    zone: ZoneQuote,
    cabinet_count: int,
    assembly_requested: bool = False,
    now: datetime | None = None,
) -> FulfilmentCharges:
    """Calculate delivery and assembly charges for an order.

    Assembly is charged only when it is requested and the zone offers it:
    price per cabinet x cabinet count x (1 + (carcass% + doors%) / 100).

    Args:
        zone: Resolved zone quote.
        cabinet_count: Cabinets in the order.
        assembly_requested: Whether the customer asked for assembly.
        now: Reference time for the dispatch estimate.

    Returns:
        FulfilmentCharges for the order.
    """
    if cabinet_count < 0:
        raise ValueError("cabinet_count cannot be negative")

    apply_assembly = assembly_requested and zone.assembly_available
    if assembly_requested and not zone.assembly_available:
        logger.warning("Assembly requested but not available in this zone; not charged")

    assembly = 0.0
    if apply_assembly:
        assembly = zone.assembly_price_per_cabinet * cabinet_count * zone.assembly_multiplier

    reference = now or datetime.now(timezone.utc)
    return FulfilmentCharges(
        delivery=zone.delivery_price,
        assembly=assembly,
        estimated_dispatch_date=reference + timedelta(days=zone.lead_time_days),
        assembly_requested=assembly_requested,
        assembly_applied=apply_assembly,
    )
