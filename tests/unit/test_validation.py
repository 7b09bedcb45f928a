"""Tests for pre-pricing input validation."""

from __future__ import annotations

import pytest

from cabinet_pricing.application.services import InputValidatorService
from cabinet_pricing.domain.entities import CabinetType
from cabinet_pricing.domain.exceptions import PricingValidationError, ValidationIssue
from cabinet_pricing.domain.rates import RateSnapshot
from cabinet_pricing.domain.services import (
    CabinetConfiguration,
    DimensionLimits,
    ensure_valid,
    validate_cart_line,
    validate_configuration,
)


@pytest.fixture
def bounded_type() -> CabinetType:
    return CabinetType(id="bounded", name="Bounded", min_width_mm=300, max_width_mm=900)


class TestValidateConfiguration:
    """Tests for validate_configuration."""

    def test_valid_configuration(self, bounded_type: CabinetType) -> None:
        assert validate_configuration(bounded_type, 600, 720, 560, 1) == []

    def test_inclusive_bounds(self, bounded_type: CabinetType) -> None:
        assert validate_configuration(bounded_type, 300, 100, 1000, 100) == []
        assert validate_configuration(bounded_type, 900, 3000, 100, 1) == []

    def test_type_bounds_override_global_limits(self, bounded_type: CabinetType) -> None:
        issues = validate_configuration(bounded_type, 950, 720, 560, 1)
        assert issues == [
            ValidationIssue(
                field="width_mm", message="must be between 300mm and 900mm (got 950mm)"
            )
        ]

    def test_global_limits_without_type_bounds(self) -> None:
        plain = CabinetType(id="plain", name="Plain")
        issues = validate_configuration(plain, 600, 720, 1200, 1)
        assert [i.field for i in issues] == ["depth_mm"]
        assert issues[0].message == "must be between 100mm and 1000mm (got 1200mm)"

    def test_collects_every_issue(self, bounded_type: CabinetType) -> None:
        issues = validate_configuration(bounded_type, 50, 50, 50, 0)
        assert [i.field for i in issues] == ["width_mm", "height_mm", "depth_mm", "quantity"]
        assert issues[-1].message == "must be between 1 and 100 (got 0)"

    def test_inactive_type(self) -> None:
        inactive = CabinetType(id="old", name="Old", active=False)
        issues = validate_configuration(inactive, 600, 720, 560, 1)
        assert issues[0].field == "cabinet_type_id"
        assert "not available" in issues[0].message

    def test_non_integer_quantity(self, bounded_type: CabinetType) -> None:
        issues = validate_configuration(bounded_type, 600, 720, 560, 1.5)
        assert issues == [ValidationIssue(field="quantity", message="must be a whole number")]

    def test_custom_limits(self) -> None:
        plain = CabinetType(id="plain", name="Plain")
        limits = DimensionLimits(max_quantity=10)
        assert validate_configuration(plain, 600, 720, 560, 11, limits)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_dimensions(self, bounded_type: CabinetType, value: float) -> None:
        issues = validate_configuration(bounded_type, value, value, 560, 1)
        assert issues == [
            ValidationIssue(field="width_mm", message="must be a finite number"),
            ValidationIssue(field="height_mm", message="must be a finite number"),
        ]

    def test_global_width_limit(self) -> None:
        plain = CabinetType(id="plain", name="Plain")
        assert validate_configuration(plain, 2000, 720, 560, 1) == []
        issues = validate_configuration(plain, 2001, 720, 560, 1)
        assert issues[0].message == "must be between 100mm and 2000mm (got 2001mm)"

    def test_limits_reject_inverted_bounds(self) -> None:
        with pytest.raises(ValueError):
            DimensionLimits(min_width_mm=500, max_width_mm=400)


class TestValidateCartLine:
    def test_consistent_line(self) -> None:
        assert validate_cart_line(100.0, 300.0, 3) == []

    def test_within_tolerance(self) -> None:
        assert validate_cart_line(33.33, 99.995, 3) == []

    def test_total_mismatch(self) -> None:
        issues = validate_cart_line(100.0, 310.0, 3)
        assert issues == [
            ValidationIssue(
                field="total_price",
                message="does not match unit price x quantity (expected 300.00, got 310.00)",
            )
        ]

    def test_non_positive_values(self) -> None:
        issues = validate_cart_line(0, -1, 0)
        assert [i.field for i in issues] == ["unit_price", "total_price", "quantity"]


class TestEnsureValid:
    def test_no_issues(self) -> None:
        ensure_valid([])

    def test_raises_with_all_issues(self) -> None:
        issues = [ValidationIssue("a", "bad"), ValidationIssue("b", "worse")]
        with pytest.raises(PricingValidationError) as exc_info:
            ensure_valid(issues)
        assert exc_info.value.issues == issues
        assert str(exc_info.value) == "Invalid pricing input: a: bad; b: worse"


class TestInputValidatorService:
    """Tests for the application-level validator."""

    def test_defaults_are_filled_before_checking(self, snapshot: RateSnapshot) -> None:
        validator = InputValidatorService()
        issues = validator.validate_configuration(
            CabinetConfiguration(cabinet_type_id="dress-panel"), snapshot
        )
        assert issues == []

    def test_prefix_is_applied(self, snapshot: RateSnapshot) -> None:
        issues = InputValidatorService().validate_configuration(
            CabinetConfiguration(cabinet_type_id="dress-panel", depth_mm=30),
            snapshot,
            prefix="items[0].",
        )
        assert [i.field for i in issues] == ["items[0].depth_mm"]

    def test_order_reports_unknown_types_per_line(self, snapshot: RateSnapshot) -> None:
        issues = InputValidatorService().validate_order(
            [
                CabinetConfiguration(cabinet_type_id="base-600-1door", width_mm=50),
                CabinetConfiguration(cabinet_type_id="missing"),
            ],
            snapshot,
        )
        assert [i.field for i in issues] == ["items[0].width_mm", "items[1].cabinet_type_id"]
        assert issues[1].message == "Unknown cabinet type: missing"

    def test_empty_order(self, snapshot: RateSnapshot) -> None:
        issues = InputValidatorService().validate_order([], snapshot)
        assert issues == [ValidationIssue(field="items", message="must contain at least one item")]

    def test_cart_line_delegates(self) -> None:
        assert InputValidatorService().validate_cart_line(10, 20, 2) == []
