"""Tests for deposit/balance schedules and payment checks."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from cabinet_pricing.domain.exceptions import PricingValidationError, ScheduleMismatchError
from cabinet_pricing.domain.services import (
    calculate_payment_schedule,
    format_payment_schedule,
    require_payment_amount,
    validate_payment_amount,
)
from cabinet_pricing.domain.value_objects import PaymentType, round_cents


class TestCalculatePaymentSchedule:
    """Tests for calculate_payment_schedule."""

    def test_twenty_percent_deposit(self, fixed_now: datetime) -> None:
        schedule = calculate_payment_schedule(3470, 20, now=fixed_now)

        assert schedule.deposit_amount == 694.0
        assert schedule.balance_amount == 2776.0
        assert schedule.balance_percentage == 80
        assert schedule.deposit_due_date == fixed_now + timedelta(days=7)
        assert schedule.balance_due_date == fixed_now + timedelta(days=30)

    @pytest.mark.parametrize("total", [0.01, 99.99, 1234.56, 3333.33, 12345.67])
    @pytest.mark.parametrize("pct", [0, 15, 33.3, 50, 100])
    def test_parts_add_up_to_total(self, total: float, pct: float) -> None:
        schedule = calculate_payment_schedule(total, pct)
        assert round_cents(schedule.deposit_amount + schedule.balance_amount) == round_cents(total)

    @pytest.mark.parametrize("total", [0.005, 48743.935, 68069.055, 1234.5678, 999.9949])
    @pytest.mark.parametrize("pct", [15, 33.3, 100])
    def test_sub_cent_totals_are_rounded_first(self, total: float, pct: float) -> None:
        schedule = calculate_payment_schedule(total, pct)

        assert schedule.total_amount == round_cents(total)
        assert schedule.balance_amount >= 0
        assert round_cents(schedule.deposit_amount + schedule.balance_amount) == (
            schedule.total_amount
        )

    def test_full_deposit_leaves_no_balance(self) -> None:
        schedule = calculate_payment_schedule(48743.935, 100)
        assert schedule.deposit_amount == 48743.94
        assert schedule.balance_amount == 0.0

    def test_fifteen_percent_of_sub_cent_total(self) -> None:
        schedule = calculate_payment_schedule(68069.055, 15)
        assert schedule.total_amount == 68069.06
        assert schedule.deposit_amount == 10210.36
        assert schedule.balance_amount == 57858.7

    @pytest.mark.parametrize("total", [-0.01, -100, float("nan"), float("inf")])
    def test_invalid_total(self, total: float) -> None:
        with pytest.raises(PricingValidationError) as exc_info:
            calculate_payment_schedule(total, 20)
        assert exc_info.value.issues[0].field == "total_amount"

    def test_deposit_rounds_half_up(self) -> None:
        schedule = calculate_payment_schedule(0.25, 10)
        assert schedule.deposit_amount == 0.03
        assert schedule.balance_amount == 0.22

    def test_custom_due_days(self, fixed_now: datetime) -> None:
        schedule = calculate_payment_schedule(1000, 30, 3, 60, now=fixed_now)
        assert schedule.deposit_due_date == fixed_now + timedelta(days=3)
        assert schedule.balance_due_date == fixed_now + timedelta(days=60)

    @pytest.mark.parametrize("pct", [-1, 100.5, float("nan")])
    def test_percentage_out_of_range(self, pct: float) -> None:
        with pytest.raises(PricingValidationError) as exc_info:
            calculate_payment_schedule(1000, pct)
        assert exc_info.value.issues[0].field == "deposit_percentage"

    def test_negative_due_days(self) -> None:
        with pytest.raises(PricingValidationError):
            calculate_payment_schedule(1000, 20, deposit_due_days=-1)
        with pytest.raises(PricingValidationError):
            calculate_payment_schedule(1000, 20, balance_due_days=-1)


class TestPaymentChecks:
    """Tests for validate_payment_amount and require_payment_amount."""

    @pytest.fixture
    def schedule(self, fixed_now: datetime):
        return calculate_payment_schedule(3470, 20, now=fixed_now)

    def test_exact_deposit_is_valid(self, schedule) -> None:
        check = validate_payment_amount(694.00, schedule, PaymentType.DEPOSIT)
        assert check.valid
        assert check.message is None

    def test_mismatch_is_reported_not_adjusted(self, schedule) -> None:
        check = validate_payment_amount(700, schedule, "deposit")
        assert not check.valid
        assert check.expected == 694.0
        assert check.actual == 700
        assert check.message == "Deposit amount must be exactly $694.00"

    def test_balance_and_full(self, schedule) -> None:
        assert validate_payment_amount(2776, schedule, "balance").valid
        check = validate_payment_amount(3000, schedule, PaymentType.FULL)
        assert check.message == "Full payment amount must be exactly $3,470.00"

    def test_sub_cent_noise_is_tolerated(self, schedule) -> None:
        assert validate_payment_amount(694.001, schedule, "deposit").valid

    def test_require_raises_on_mismatch(self, schedule) -> None:
        with pytest.raises(ScheduleMismatchError) as exc_info:
            require_payment_amount(2775.99, schedule, "balance")
        assert str(exc_info.value) == (
            "Balance amount must be exactly $2,776.00 (got $2,775.99)"
        )

    @pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_amount_is_rejected(self, schedule, amount: float) -> None:
        check = validate_payment_amount(amount, schedule, "deposit")
        assert not check.valid
        assert check.message == "Deposit amount must be a finite number"

    def test_require_raises_on_non_finite_amount(self, schedule) -> None:
        with pytest.raises(ScheduleMismatchError):
            require_payment_amount(float("inf"), schedule, "deposit")

    def test_unknown_payment_type(self, schedule) -> None:
        with pytest.raises(ValueError):
            validate_payment_amount(694, schedule, "instalment")


class TestFormatPaymentSchedule:
    def test_three_lines(self, fixed_now: datetime) -> None:
        text = format_payment_schedule(calculate_payment_schedule(3470, 20, now=fixed_now))
        assert text.splitlines() == [
            "Deposit (20%): $694.00 - Due 2026-03-09",
            "Balance (80%): $2,776.00 - Due 2026-04-01",
            "Total: $3,470.00",
        ]
