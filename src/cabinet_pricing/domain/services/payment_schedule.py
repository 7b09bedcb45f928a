"""Deposit and balance payment schedules.

An order total is split into a deposit and a balance, each rounded
half-up to the cent, with the balance absorbing any rounding so that
deposit + balance always equals the total. Attempted payments are checked
against the schedule with exact cent equality.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ..exceptions import PricingValidationError, ScheduleMismatchError
from ..value_objects import PaymentType, round_cents
from .constants import (
    DEFAULT_BALANCE_DUE_DAYS,
    DEFAULT_DEPOSIT_DUE_DAYS,
    DEFAULT_DEPOSIT_PERCENTAGE,
)

logger = logging.getLogger(__name__)

__all__ = [
    "PaymentCheck",
    "PaymentSchedule",
    "calculate_payment_schedule",
    "format_payment_schedule",
    "require_payment_amount",
    "validate_payment_amount",
]

_PAYMENT_LABELS = {
    PaymentType.DEPOSIT: "Deposit",
    PaymentType.BALANCE: "Balance",
    PaymentType.FULL: "Full payment",
}


@dataclass(frozen=True)
class PaymentSchedule:
    """Deposit/balance split of an order total.

    Attributes:
        deposit_amount: Deposit, rounded to the cent.
        deposit_percentage: Share of the total due as deposit.
        balance_amount: total_amount - deposit_amount, rounded to the cent.
        balance_percentage: 100 - deposit_percentage.
        total_amount: Order total.
        deposit_due_date: When the deposit is due.
        balance_due_date: When the balance is due.
    """

    deposit_amount: float
    deposit_percentage: float
    balance_amount: float
    balance_percentage: float
    total_amount: float
    deposit_due_date: datetime
    balance_due_date: datetime

    def expected_amount(self, payment_type: PaymentType) -> float:
        """Amount expected for a kind of payment."""
        if payment_type == PaymentType.DEPOSIT:
            return self.deposit_amount
        if payment_type == PaymentType.BALANCE:
            return self.balance_amount
        return self.total_amount


@dataclass(frozen=True)
class PaymentCheck:
    """Outcome of checking a payment amount against a schedule."""

    valid: bool
    payment_type: PaymentType
    expected: float
    actual: float
    message: str | None = None


def calculate_payment_schedule(
    total_amount: float,
    deposit_percentage: float = DEFAULT_DEPOSIT_PERCENTAGE,
    deposit_due_days: int = DEFAULT_DEPOSIT_DUE_DAYS,
    balance_due_days: int = DEFAULT_BALANCE_DUE_DAYS,
    now: datetime | None = None,
) -> PaymentSchedule:
    """Split a total into deposit and balance.

    Args:
        total_amount: Order total.
        deposit_percentage: Deposit share in percent, 0 to 100.
        deposit_due_days: Calendar days until the deposit is due.
        balance_due_days: Calendar days until the balance is due.
        now: Reference time for due dates (defaults to the current UTC time).

    Returns:
        The PaymentSchedule.

    Raises:
        PricingValidationError: If the total is negative or not finite, the
            percentage is outside 0-100 or a due period is negative.

    Examples:
        >>> schedule = calculate_payment_schedule(3470, 20)
        >>> schedule.deposit_amount, schedule.balance_amount
        (694.0, 2776.0)
    """
    if not math.isfinite(total_amount) or total_amount < 0:
        raise PricingValidationError.single(
            "total_amount", "must be a finite, non-negative amount"
        )
    if not 0 <= deposit_percentage <= 100:
        raise PricingValidationError.single(
            "deposit_percentage", "must be between 0 and 100"
        )
    if deposit_due_days < 0:
        raise PricingValidationError.single("deposit_due_days", "cannot be negative")
    if balance_due_days < 0:
        raise PricingValidationError.single("balance_due_days", "cannot be negative")

    reference = now or datetime.now(timezone.utc)
    # both parts derive from the cent-rounded total so they sum to it exactly
    total = round_cents(total_amount)
    deposit = round_cents(total * (deposit_percentage / 100))
    balance = round_cents(total - deposit)

    logger.debug(
        f"Payment schedule for ${total:.2f}: deposit ${deposit:.2f} "
        f"({deposit_percentage:g}%), balance ${balance:.2f}"
    )
    return PaymentSchedule(
        deposit_amount=deposit,
        deposit_percentage=deposit_percentage,
        balance_amount=balance,
        balance_percentage=100 - deposit_percentage,
        total_amount=total,
        deposit_due_date=reference + timedelta(days=deposit_due_days),
        balance_due_date=reference + timedelta(days=balance_due_days),
    )


def validate_payment_amount(
    payment_amount: float,
    schedule: PaymentSchedule,
    payment_type: PaymentType | str,
) -> PaymentCheck:
    """Check an attempted payment against the schedule, to the cent.

    A mismatch is reported, never adjusted.
    """
    payment_type = PaymentType(payment_type)
    expected = schedule.expected_amount(payment_type)
    label = _PAYMENT_LABELS[payment_type]
    if not math.isfinite(payment_amount):
        return PaymentCheck(
            valid=False,
            payment_type=payment_type,
            expected=expected,
            actual=payment_amount,
            message=f"{label} amount must be a finite number",
        )
    if round_cents(payment_amount) == round_cents(expected):
        return PaymentCheck(
            valid=True, payment_type=payment_type, expected=expected, actual=payment_amount
        )
    return PaymentCheck(
        valid=False,
        payment_type=payment_type,
        expected=expected,
        actual=payment_amount,
        message=f"{label} amount must be exactly ${expected:,.2f}",
    )


def require_payment_amount(
    payment_amount: float,
    schedule: PaymentSchedule,
    payment_type: PaymentType | str,
) -> PaymentCheck:
    """Like validate_payment_amount, but raise on a mismatch.

    Raises:
        ScheduleMismatchError: If the amount differs from the expected one.
    """
    check = validate_payment_amount(payment_amount, schedule, payment_type)
    if not check.valid:
        logger.warning(check.message)
        raise ScheduleMismatchError(
            _PAYMENT_LABELS[check.payment_type], check.expected, check.actual
        )
    return check


def format_payment_schedule(schedule: PaymentSchedule) -> str:
    """Render a schedule as three display lines."""
    return "\n".join(
        [
            f"Deposit ({schedule.deposit_percentage:g}%): ${schedule.deposit_amount:,.2f}"
            f" - Due {schedule.deposit_due_date:%Y-%m-%d}",
            f"Balance ({schedule.balance_percentage:g}%): ${schedule.balance_amount:,.2f}"
            f" - Due {schedule.balance_due_date:%Y-%m-%d}",
            f"Total: ${schedule.total_amount:,.2f}",
        ]
    )
