"""Domain layer - pricing rules and reference data."""

from .entities import (
    CabinetPart,
    CabinetType,
    Color,
    DoorStyle,
    Finish,
    HardwareBrandSet,
    HardwareOption,
    HardwareProduct,
    HardwareRequirement,
    HardwareSetItem,
    MaterialSpecification,
)
from .exceptions import (
    CatalogLookupError,
    FormulaError,
    PricingValidationError,
    ScheduleMismatchError,
    ValidationIssue,
)
from .rates import RateSnapshot
from .services import (
    CabinetConfiguration,
    CabinetPricingService,
    PriceBreakdown,
    PricingSettings,
    WeightCalculator,
    calculate_payment_schedule,
)
from .value_objects import Dimensions, PackageDimensions, round_currency

__all__ = [
    "CabinetConfiguration",
    "CabinetPart",
    "CabinetPricingService",
    "CabinetType",
    "CatalogLookupError",
    "Color",
    "Dimensions",
    "DoorStyle",
    "Finish",
    "FormulaError",
    "HardwareBrandSet",
    "HardwareOption",
    "HardwareProduct",
    "HardwareRequirement",
    "HardwareSetItem",
    "MaterialSpecification",
    "PackageDimensions",
    "PriceBreakdown",
    "PricingSettings",
    "PricingValidationError",
    "RateSnapshot",
    "ScheduleMismatchError",
    "ValidationIssue",
    "WeightCalculator",
    "calculate_payment_schedule",
    "round_currency",
]
