"""Value objects for the pricing domain.

This module provides immutable data types used throughout the pricing
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

from ._enums import (
    CabinetCategory,
    FeeTier,
    HardwareSource,
    PartRole,
    PaymentType,
    UnitScope,
)
from ._geometry import Dimensions, PackageDimensions
from ._money import format_money, round_cents, round_currency

__all__ = [
    "CabinetCategory",
    "Dimensions",
    "FeeTier",
    "HardwareSource",
    "PackageDimensions",
    "PartRole",
    "PaymentType",
    "UnitScope",
    "format_money",
    "round_cents",
    "round_currency",
]
