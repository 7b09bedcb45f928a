"""Input validation service for pricing requests.

Centralizes the checks run before any pricing is attempted, so the CLI,
the HTTP API and the commands report the same issues for the same input.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from cabinet_pricing.domain.exceptions import CatalogLookupError, ValidationIssue
from cabinet_pricing.domain.services import (
    DimensionLimits,
    validate_cart_line,
    validate_configuration,
)

if TYPE_CHECKING:
    from cabinet_pricing.domain.rates import RateSnapshot
    from cabinet_pricing.domain.services import CabinetConfiguration


class InputValidatorService:
    """Service for validating pricing inputs.

    Collects every issue in a request instead of stopping at the first,
    so a customer can correct all of them at once.
    """

    def __init__(self, limits: DimensionLimits | None = None) -> None:
        self.limits = limits or DimensionLimits()

    def validate_configuration(
        self,
        configuration: "CabinetConfiguration",
        snapshot: "RateSnapshot",
        prefix: str = "",
    ) -> list[ValidationIssue]:
        """Validate one configuration against its cabinet type.

        Args:
            configuration: Configuration to validate.
            snapshot: Rate snapshot holding the cabinet type.
            prefix: Path prefix for issue fields, e.g. "items[2].".

        Returns:
            List of validation issues (empty if valid).

        Raises:
            CatalogLookupError: If the cabinet type is unknown.
        """
        cabinet_type = snapshot.cabinet_type(configuration.cabinet_type_id)
        width, height, depth = configuration.resolved_size(cabinet_type)
        issues = validate_configuration(
            cabinet_type, width, height, depth, configuration.quantity, self.limits
        )
        return [
            ValidationIssue(field=f"{prefix}{issue.field}", message=issue.message)
            for issue in issues
        ]

    def validate_order(
        self,
        configurations: Sequence["CabinetConfiguration"],
        snapshot: "RateSnapshot",
    ) -> list[ValidationIssue]:
        """Validate every line of an order.

        Unknown cabinet types are reported as issues of their line rather
        than raised, since the order as a whole is being rejected.
        """
        issues: list[ValidationIssue] = []
        if not configurations:
            issues.append(ValidationIssue(field="items", message="must contain at least one item"))
        for index, configuration in enumerate(configurations):
            prefix = f"items[{index}]."
            try:
                issues.extend(self.validate_configuration(configuration, snapshot, prefix))
            except CatalogLookupError as e:
                issues.append(ValidationIssue(field=f"{prefix}cabinet_type_id", message=str(e)))
        return issues

    def validate_cart_line(
        self, unit_price: float, total_price: float, quantity: int
    ) -> list[ValidationIssue]:
        """Validate the stored prices of a cart line."""
        return validate_cart_line(unit_price, total_price, quantity)
