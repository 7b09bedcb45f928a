"""Domain services for cabinet pricing and fulfilment calculations.

This package provides all pricing engine services, including:
- Formula evaluation and part geometry
- Carcass, door and hardware costs
- Colour service fees and price aggregation
- Weight, volume and packaging estimates
- Payment schedules, fulfilment charges and price lists
"""

from .carcass_pricing import CarcassCostCalculator, resolve_material_rate
from .config import PricingSettings
from .door_pricing import DoorCostCalculator, door_rate_for
from .formula import FormulaEvaluator
from .fulfilment import FulfilmentCharges, ZoneQuote, calculate_fulfilment
from .hardware import (
    HardwareCost,
    HardwareCostResolver,
    HardwareLine,
    HardwareResolutionChain,
)
from .models import CarcassCost, DoorCost, DoorRate, MaterialRate, PartCostLine
from .part_geometry import PartGeometryService, PartMeasurement
from .payment_schedule import (
    PaymentCheck,
    PaymentSchedule,
    calculate_payment_schedule,
    format_payment_schedule,
    require_payment_amount,
    validate_payment_amount,
)
from .price_aggregator import (
    CabinetConfiguration,
    CabinetPricingService,
    PriceBreakdown,
    PricedLine,
    aggregate_order,
)
from .price_list import (
    DEFAULT_WIDTH_RANGES,
    PriceListCombination,
    PriceListGenerator,
    PriceListRow,
    WidthRange,
)
from .service_fees import (
    ColorServiceFee,
    ColorSpend,
    ServiceFeeEvaluator,
    ServiceFeeSummary,
)
from .validation import (
    DimensionLimits,
    ensure_valid,
    validate_cart_line,
    validate_configuration,
)
from .weight_calculator import PartVolume, WeightBreakdown, WeightCalculator

__all__ = [
    # Geometry
    "FormulaEvaluator",
    "PartGeometryService",
    "PartMeasurement",
    # Settings
    "PricingSettings",
    # Cost calculators
    "CarcassCost",
    "CarcassCostCalculator",
    "DoorCost",
    "DoorCostCalculator",
    "DoorRate",
    "MaterialRate",
    "PartCostLine",
    "door_rate_for",
    "resolve_material_rate",
    # Hardware
    "HardwareCost",
    "HardwareCostResolver",
    "HardwareLine",
    "HardwareResolutionChain",
    # Service fees
    "ColorServiceFee",
    "ColorSpend",
    "ServiceFeeEvaluator",
    "ServiceFeeSummary",
    # Aggregation
    "CabinetConfiguration",
    "CabinetPricingService",
    "PriceBreakdown",
    "PricedLine",
    "aggregate_order",
    # Weight
    "PartVolume",
    "WeightBreakdown",
    "WeightCalculator",
    # Payment schedule
    "PaymentCheck",
    "PaymentSchedule",
    "calculate_payment_schedule",
    "format_payment_schedule",
    "require_payment_amount",
    "validate_payment_amount",
    # Validation
    "DimensionLimits",
    "ensure_valid",
    "validate_cart_line",
    "validate_configuration",
    # Fulfilment
    "FulfilmentCharges",
    "ZoneQuote",
    "calculate_fulfilment",
    # Price list
    "DEFAULT_WIDTH_RANGES",
    "PriceListCombination",
    "PriceListGenerator",
    "PriceListRow",
    "WidthRange",
]
