"""Domain exceptions for the pricing engine.

Pricing itself never raises for missing reference data; it degrades to a
documented fallback instead. The exceptions here cover the cases that are
reported back to the caller: bad user input, malformed formulas, rejected
payment amounts and unknown catalog identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass


class FormulaError(ValueError):
    """Raised when a part dimension formula cannot be parsed or evaluated."""

    def __init__(self, formula: str, reason: str) -> None:
        self.formula = formula
        self.reason = reason
        super().__init__(f"Invalid formula {formula!r}: {reason}")


@dataclass(frozen=True)
class ValidationIssue:
    """A single rejected input field.

    Attributes:
        field: Name of the offending input field (e.g. "width_mm").
        message: Human-readable description of the problem.
    """

    field: str
    message: str


class PricingValidationError(ValueError):
    """Raised when user input is rejected before any pricing is attempted."""

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = issues
        summary = "; ".join(f"{issue.field}: {issue.message}" for issue in issues)
        super().__init__(f"Invalid pricing input: {summary}")

    @classmethod
    def single(cls, field: str, message: str) -> PricingValidationError:
        """Create an error carrying one issue."""
        return cls([ValidationIssue(field=field, message=message)])


class ScheduleMismatchError(ValueError):
    """Raised when a payment amount does not match the expected schedule amount."""

    def __init__(self, payment_type: str, expected: float, actual: float) -> None:
        self.payment_type = payment_type
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{payment_type.capitalize()} amount must be exactly ${expected:,.2f} "
            f"(got ${actual:,.2f})"
        )


class CatalogLookupError(KeyError):
    """Raised when an identifier is not present in the rate catalog."""

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"Unknown {kind}: {identifier}")

    def __str__(self) -> str:
        return f"Unknown {self.kind}: {self.identifier}"
