"""Price aggregation.

This module combines the carcass, door, hardware and service fee
calculations into a PriceBreakdown:

    subtotal = carcass + doors + hardware + sum(service fees)
    gst      = subtotal x gst_rate
    total    = round_half_up(subtotal + gst)

Every intermediate value stays unrounded. Only ``total`` and the values
returned by ``PriceBreakdown.to_display`` are rounded, to whole currency
units.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ..entities import CabinetType
from ..value_objects import Dimensions, round_currency
from .carcass_pricing import CarcassCostCalculator, resolve_material_rate
from .config import PricingSettings
from .door_pricing import DoorCostCalculator
from .hardware import HardwareCost, HardwareCostResolver, HardwareLine
from .models import CarcassCost, DoorCost, PartCostLine
from .service_fees import ColorServiceFee, ColorSpend, ServiceFeeEvaluator
from .validation import DimensionLimits, ensure_valid, validate_configuration

if TYPE_CHECKING:
    from ..rates import RateSnapshot

logger = logging.getLogger(__name__)

__all__ = [
    "CabinetConfiguration",
    "CabinetPricingService",
    "PriceBreakdown",
    "PricedLine",
    "aggregate_order",
]


@dataclass(frozen=True)
class CabinetConfiguration:
    """A customer's cabinet configuration.

    Dimensions left as None take the cabinet type's defaults.

    Attributes:
        cabinet_type_id: Cabinet type being configured.
        width_mm: Requested width.
        height_mm: Requested height.
        depth_mm: Requested depth.
        quantity: Cabinets ordered.
        door_style_id: Selected door style, if any.
        color_id: Selected colour, if any.
        finish_id: Selected finish, if any.
        material_type: Selected carcass material, if any.
        hardware_selections: Brand set id or brand id per hardware category.
    """

    cabinet_type_id: str
    width_mm: float | None = None
    height_mm: float | None = None
    depth_mm: float | None = None
    quantity: int = 1
    door_style_id: str | None = None
    color_id: str | None = None
    finish_id: str | None = None
    material_type: str | None = None
    hardware_selections: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "hardware_selections", MappingProxyType(dict(self.hardware_selections))
        )

    def resolved_size(self, cabinet_type: CabinetType) -> tuple[float, float, float]:
        """Requested dimensions with the type's defaults filled in."""
        return (
            self.width_mm if self.width_mm is not None else cabinet_type.default_width_mm,
            self.height_mm if self.height_mm is not None else cabinet_type.default_height_mm,
            self.depth_mm if self.depth_mm is not None else cabinet_type.default_depth_mm,
        )


@dataclass(frozen=True)
class PricedLine:
    """One priced line item before order-level fees and GST.

    Attributes:
        configuration: The configuration priced.
        cabinet_type: Resolved cabinet type.
        dimensions: Dimensions used.
        carcass: Carcass cost of the line.
        doors: Door cost of the line.
        hardware: Hardware cost of the line.
        degraded: Warnings raised while pricing with fallbacks.
    """

    configuration: CabinetConfiguration
    cabinet_type: CabinetType
    dimensions: Dimensions
    carcass: CarcassCost
    doors: DoorCost
    hardware: HardwareCost
    degraded: tuple[str, ...] = field(default_factory=tuple)

    @property
    def quantity(self) -> int:
        return self.configuration.quantity

    @property
    def subtotal(self) -> float:
        """Unrounded line cost excluding GST."""
        return self.carcass.total + self.doors.total + self.hardware.total

    @property
    def unit_price(self) -> float:
        """Unrounded cost of one cabinet excluding GST."""
        return self.subtotal / self.quantity

    def total_with_gst(self, gst_rate: float) -> float:
        """Unrounded line total including GST, as shown on the cart line."""
        return self.subtotal * (1 + gst_rate)

    @property
    def parts(self) -> tuple[PartCostLine, ...]:
        return self.carcass.lines + self.doors.lines


@dataclass(frozen=True)
class PriceBreakdown:
    """Priced result for one cabinet or a whole order.

    Attributes:
        carcass: Unrounded carcass total.
        doors: Unrounded door total.
        hardware: Unrounded hardware total.
        service_fees: Colour service fee outcomes.
        subtotal: carcass + doors + hardware + service fee total.
        gst: subtotal x gst_rate.
        total: subtotal + gst rounded half-up to whole units.
        gst_rate: GST rate applied.
        lines: The priced line items.
        degraded: Warnings for pricing that used fallbacks.
        rate_version: Version of the rate snapshot used.
    """

    carcass: float
    doors: float
    hardware: float
    service_fees: tuple[ColorServiceFee, ...]
    subtotal: float
    gst: float
    total: float
    gst_rate: float
    lines: tuple[PricedLine, ...] = field(default_factory=tuple)
    degraded: tuple[str, ...] = field(default_factory=tuple)
    rate_version: str | None = None

    @property
    def service_fee_total(self) -> float:
        return sum(fee.service_fee for fee in self.service_fees)

    @property
    def parts(self) -> tuple[PartCostLine, ...]:
        """Per-part cost lines of every line item."""
        return tuple(part for line in self.lines for part in line.parts)

    @property
    def hardware_lines(self) -> tuple[HardwareLine, ...]:
        return tuple(hw for line in self.lines for hw in line.hardware.lines)

    @property
    def is_degraded(self) -> bool:
        return bool(self.degraded)

    def to_display(self) -> dict[str, Any]:
        """Values rounded half-up to whole currency units for display."""
        return {
            "carcass": round_currency(self.carcass),
            "doors": round_currency(self.doors),
            "hardware": round_currency(self.hardware),
            "service_fees": round_currency(self.service_fee_total),
            "subtotal": round_currency(self.subtotal),
            "gst": round_currency(self.gst),
            "total": self.total,
        }


def aggregate_order(
    lines: Sequence[PricedLine],
    settings: PricingSettings,
    service_fees: Sequence[ColorServiceFee] = (),
    rate_version: str | None = None,
) -> PriceBreakdown:
    """Combine priced lines and order-level service fees into a breakdown.

    Args:
        lines: Priced line items.
        settings: Settings supplying the GST rate.
        service_fees: Colour service fees evaluated for the order.
        rate_version: Version of the rate snapshot used.

    Returns:
        The PriceBreakdown of the order.
    """
    carcass = sum(line.carcass.total for line in lines)
    doors = sum(line.doors.total for line in lines)
    hardware = sum(line.hardware.total for line in lines)
    fee_total = sum(fee.service_fee for fee in service_fees)

    subtotal = carcass + doors + hardware + fee_total
    gst = subtotal * settings.gst_rate
    total = round_currency(subtotal + gst)

    degraded: list[str] = []
    for line in lines:
        for warning in line.degraded:
            if warning not in degraded:
                degraded.append(warning)

    logger.debug(
        f"Aggregated {len(lines)} line(s): subtotal ${subtotal:.4f}, "
        f"GST ${gst:.4f}, total ${total:.0f}"
    )
    return PriceBreakdown(
        carcass=carcass,
        doors=doors,
        hardware=hardware,
        service_fees=tuple(service_fees),
        subtotal=subtotal,
        gst=gst,
        total=total,
        gst_rate=settings.gst_rate,
        lines=tuple(lines),
        degraded=tuple(degraded),
        rate_version=rate_version,
    )


class CabinetPricingService:
    """Prices cabinet configurations against a rate snapshot.

    The service holds no rate data. Each call receives the snapshot it
    prices against, so identical inputs always give identical output.
    """

    def __init__(
        self,
        carcass_calculator: CarcassCostCalculator | None = None,
        door_calculator: DoorCostCalculator | None = None,
        hardware_resolver: HardwareCostResolver | None = None,
        fee_evaluator: ServiceFeeEvaluator | None = None,
        limits: DimensionLimits | None = None,
    ) -> None:
        self.carcass_calculator = carcass_calculator or CarcassCostCalculator()
        self.door_calculator = door_calculator or DoorCostCalculator()
        self.hardware_resolver = hardware_resolver or HardwareCostResolver()
        self.fee_evaluator = fee_evaluator or ServiceFeeEvaluator()
        self.limits = limits

    def price_line(
        self, configuration: CabinetConfiguration, snapshot: RateSnapshot
    ) -> PricedLine:
        """Price one configuration without order-level fees or GST.

        Raises:
            CatalogLookupError: If the cabinet type is unknown.
            PricingValidationError: If dimensions or quantity are out of range.
        """
        cabinet_type = snapshot.cabinet_type(configuration.cabinet_type_id)
        width, height, depth = configuration.resolved_size(cabinet_type)
        ensure_valid(
            validate_configuration(
                cabinet_type, width, height, depth, configuration.quantity, self.limits
            )
        )
        dimensions = Dimensions(width_mm=width, height_mm=height, depth_mm=depth)
        quantity = configuration.quantity

        material_rate = resolve_material_rate(
            snapshot.material(configuration.material_type),
            snapshot.default_material(),
            snapshot.settings,
        )
        carcass = self.carcass_calculator.calculate(
            cabinet_type, dimensions, quantity, material_rate
        )
        doors = self.door_calculator.calculate(
            cabinet_type,
            dimensions,
            quantity,
            door_style=snapshot.door_style(configuration.door_style_id),
            color=snapshot.color(configuration.color_id),
            finish=snapshot.finish(configuration.finish_id),
        )
        hardware = self.hardware_resolver.calculate(
            cabinet_type,
            quantity,
            snapshot.settings,
            options=snapshot.hardware_options,
            sets=snapshot.hardware_sets,
            selections=configuration.hardware_selections,
        )

        degraded: list[str] = []
        if material_rate.degraded:
            degraded.append(material_rate.degraded)
        for line in hardware.unresolved:
            degraded.append(
                f"No hardware resolved for {line.category} requirement "
                f"{line.requirement_id}; priced at 0"
            )

        return PricedLine(
            configuration=configuration,
            cabinet_type=cabinet_type,
            dimensions=dimensions,
            carcass=carcass,
            doors=doors,
            hardware=hardware,
            degraded=tuple(degraded),
        )

    def price(
        self,
        configuration: CabinetConfiguration,
        snapshot: RateSnapshot,
        include_service_fees: bool = False,
    ) -> PriceBreakdown:
        """Price a single configuration.

        Service fees are an order-level charge, so they are only evaluated
        here when ``include_service_fees`` is set.
        """
        line = self.price_line(configuration, snapshot)
        fees: tuple[ColorServiceFee, ...] = ()
        if include_service_fees:
            fees = self.service_fees([line], snapshot)
        return aggregate_order([line], snapshot.settings, fees, snapshot.version)

    def price_order(
        self,
        configurations: Sequence[CabinetConfiguration],
        snapshot: RateSnapshot,
    ) -> PriceBreakdown:
        """Price every configuration of an order and apply service fees once."""
        lines = [self.price_line(config, snapshot) for config in configurations]
        fees = self.service_fees(lines, snapshot)
        return aggregate_order(lines, snapshot.settings, fees, snapshot.version)

    def service_fees(
        self, lines: Sequence[PricedLine], snapshot: RateSnapshot
    ) -> tuple[ColorServiceFee, ...]:
        """Evaluate colour service fees over GST-inclusive line totals."""
        gst_rate = snapshot.settings.gst_rate
        spend = [
            ColorSpend(
                color_id=line.configuration.color_id,
                total_price=line.total_with_gst(gst_rate),
            )
            for line in lines
        ]
        return self.fee_evaluator.evaluate(spend, snapshot.colors).fees
