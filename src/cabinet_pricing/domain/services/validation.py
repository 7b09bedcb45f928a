"""Input validation performed before any pricing.

Dimensions must fall within the cabinet type's configured bounds, or the
global limits when a type has none. Cart lines must carry positive prices
whose total agrees with unit price x quantity to within a cent.
Violations are user-input errors: every issue found is collected and
raised together as a PricingValidationError.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..entities import CabinetType
from ..exceptions import PricingValidationError, ValidationIssue
from .constants import PRICE_TOLERANCE

__all__ = [
    "DimensionLimits",
    "ensure_valid",
    "validate_cart_line",
    "validate_configuration",
]


@dataclass(frozen=True)
class DimensionLimits:
    """Inclusive bounds for cabinet dimensions (mm) and order quantity."""

    min_width_mm: float = 100
    max_width_mm: float = 2000
    min_height_mm: float = 100
    max_height_mm: float = 3000
    min_depth_mm: float = 100
    max_depth_mm: float = 1000
    min_quantity: int = 1
    max_quantity: int = 100

    def __post_init__(self) -> None:
        if self.min_width_mm > self.max_width_mm:
            raise ValueError("min_width_mm cannot exceed max_width_mm")
        if self.min_height_mm > self.max_height_mm:
            raise ValueError("min_height_mm cannot exceed max_height_mm")
        if self.min_depth_mm > self.max_depth_mm:
            raise ValueError("min_depth_mm cannot exceed max_depth_mm")
        if self.min_quantity > self.max_quantity:
            raise ValueError("min_quantity cannot exceed max_quantity")

    def for_cabinet_type(self, cabinet_type: CabinetType) -> DimensionLimits:
        """Limits narrowed to a cabinet type's own bounds where it has them."""

        def pick(value: float | None, fallback: float) -> float:
            return fallback if value is None else value

        return DimensionLimits(
            min_width_mm=pick(cabinet_type.min_width_mm, self.min_width_mm),
            max_width_mm=pick(cabinet_type.max_width_mm, self.max_width_mm),
            min_height_mm=pick(cabinet_type.min_height_mm, self.min_height_mm),
            max_height_mm=pick(cabinet_type.max_height_mm, self.max_height_mm),
            min_depth_mm=pick(cabinet_type.min_depth_mm, self.min_depth_mm),
            max_depth_mm=pick(cabinet_type.max_depth_mm, self.max_depth_mm),
            min_quantity=self.min_quantity,
            max_quantity=self.max_quantity,
        )


DEFAULT_LIMITS = DimensionLimits()


def _check_range(
    issues: list[ValidationIssue],
    field: str,
    value: float,
    low: float,
    high: float,
    unit: str = "mm",
) -> None:
    if not math.isfinite(value):
        issues.append(ValidationIssue(field=field, message="must be a finite number"))
    elif value < low or value > high:
        issues.append(
            ValidationIssue(
                field=field,
                message=f"must be between {low:g}{unit} and {high:g}{unit} (got {value:g}{unit})",
            )
        )


def validate_configuration(
    cabinet_type: CabinetType,
    width_mm: float,
    height_mm: float,
    depth_mm: float,
    quantity: int,
    limits: DimensionLimits | None = None,
) -> list[ValidationIssue]:
    """Check a cabinet configuration against its dimension and quantity limits.

    Args:
        cabinet_type: Cabinet type being configured.
        width_mm: Requested width.
        height_mm: Requested height.
        depth_mm: Requested depth.
        quantity: Requested number of cabinets.
        limits: Global limits; the type's own bounds take precedence.

    Returns:
        All issues found (empty when the configuration is valid).
    """
    bounds = (limits or DEFAULT_LIMITS).for_cabinet_type(cabinet_type)
    issues: list[ValidationIssue] = []

    if not cabinet_type.active:
        issues.append(
            ValidationIssue(
                field="cabinet_type_id",
                message=f"cabinet type '{cabinet_type.id}' is not available",
            )
        )

    _check_range(issues, "width_mm", width_mm, bounds.min_width_mm, bounds.max_width_mm)
    _check_range(issues, "height_mm", height_mm, bounds.min_height_mm, bounds.max_height_mm)
    _check_range(issues, "depth_mm", depth_mm, bounds.min_depth_mm, bounds.max_depth_mm)

    if isinstance(quantity, bool) or not isinstance(quantity, int):
        issues.append(ValidationIssue(field="quantity", message="must be a whole number"))
    else:
        _check_range(
            issues, "quantity", quantity, bounds.min_quantity, bounds.max_quantity, unit=""
        )

    return issues


def validate_cart_line(
    unit_price: float,
    total_price: float,
    quantity: int,
    tolerance: float = PRICE_TOLERANCE,
) -> list[ValidationIssue]:
    """Check the stored prices of a cart or quote line.

    Returns:
        All issues found (empty when the line is consistent).
    """
    issues: list[ValidationIssue] = []
    if unit_price <= 0:
        issues.append(ValidationIssue(field="unit_price", message="must be greater than 0"))
    if total_price <= 0:
        issues.append(ValidationIssue(field="total_price", message="must be greater than 0"))
    if quantity < 1:
        issues.append(ValidationIssue(field="quantity", message="must be at least 1"))

    expected = unit_price * quantity
    if not issues and abs(total_price - expected) > tolerance:
        issues.append(
            ValidationIssue(
                field="total_price",
                message=(
                    f"does not match unit price x quantity "
                    f"(expected {expected:.2f}, got {total_price:.2f})"
                ),
            )
        )
    return issues


def ensure_valid(issues: list[ValidationIssue]) -> None:
    """Raise when any validation issue was found.

    Raises:
        PricingValidationError: Carrying every issue.
    """
    if issues:
        raise PricingValidationError(issues)
