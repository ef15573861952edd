# This project was developed with assistance from AI tools.
"""Mortgage payment and maximum-mortgage calculation logic.

Pure math, no I/O. Shared by the REST routes and any other caller.

Payment formula: P = L * c(1 + c)^n / ((1 + c)^n - 1), where L is the
principal, c the per-payment rate and n the number of payments.
"""

import logging

from ..schemas.calculator import MortgageAmountResult, PaymentAmountResult
from .interest_rate import InterestRateCell, get_rate_cell
from .mortgage_rules import (
    PaymentSchedule,
    down_payment_ratio,
    insurance_amount,
    minimum_down_payment,
    payments_per_year,
)
from .validation import ValidationFailure, validate_mortgage_request, validate_payment_request

logger = logging.getLogger(__name__)


def _resolve_rate(interest_rate: float | None, rate_cell: InterestRateCell | None) -> float:
    if interest_rate is not None:
        return interest_rate
    return (rate_cell or get_rate_cell()).get_rate()


def per_payment_rate(annual_rate_pct: float, per_year: int) -> float:
    """Convert a nominal annual percentage to the rate for one payment period."""
    return annual_rate_pct / 100 / per_year


def payment_per_dollar(rate: float, num_payments: int) -> float:
    """Loan constant: payment per dollar of principal.

    A zero rate falls back to straight-line repayment.
    """
    if rate == 0:
        return 1 / num_payments
    growth = (1 + rate) ** num_payments
    return rate * growth / (growth - 1)


def payment_amount(
    asking_price: float,
    down_payment: float,
    payment_schedule: str,
    amortization_period: int,
    interest_rate: float | None = None,
    *,
    rate_cell: InterestRateCell | None = None,
) -> PaymentAmountResult:
    """Recurring payment for buying at ``asking_price`` with ``down_payment``.

    Args:
        interest_rate: Annual rate in percent. Omit to use the default rate
            held by ``rate_cell`` (the process-wide cell when not given).

    Raises:
        ValidationFailure: With every violated rule, before any arithmetic.
    """
    report = validate_payment_request(
        asking_price, down_payment, payment_schedule, amortization_period, interest_rate
    )
    if not report.ok:
        logger.info("Payment calculation rejected (%d errors)", len(report.errors))
        raise ValidationFailure(report.errors)

    schedule = PaymentSchedule.parse(payment_schedule)
    rate_pct = _resolve_rate(interest_rate, rate_cell)
    per_year = payments_per_year(schedule)
    num_payments = int(amortization_period) * per_year

    insurance = insurance_amount(asking_price, down_payment)
    # Insurance is financed, not taken out of the down payment
    principal = asking_price + insurance - down_payment

    rate = per_payment_rate(rate_pct, per_year)
    payment = principal * payment_per_dollar(rate, num_payments)

    logger.debug(
        "rate=%f payments_per_year=%d num_payments=%d principal=%f payment=%f",
        rate,
        per_year,
        num_payments,
        principal,
        payment,
    )

    return PaymentAmountResult(
        payment=payment,
        asking_price=asking_price,
        down_payment=down_payment,
        payment_schedule=schedule.value,
        amortization_period=int(amortization_period),
        interest_rate=rate_pct,
        num_payments=num_payments,
        per_payment_rate=rate,
        payments_per_year=per_year,
        minimum_down_payment=minimum_down_payment(asking_price),
        down_payment_ratio=down_payment_ratio(asking_price, down_payment),
        insurance=insurance,
        principal=principal,
        loan_total=payment * num_payments,
    )


def mortgage_amount(
    payment: float,
    down_payment: float = 0.0,
    payment_schedule: str = PaymentSchedule.MONTHLY.value,
    amortization_period: int = 25,
    interest_rate: float | None = None,
    *,
    rate_cell: InterestRateCell | None = None,
) -> MortgageAmountResult:
    """Largest purchase a recurring ``payment`` supports.

    Inverts the payment formula for the principal, then adds the down
    payment back so the result is an implied asking price.

    Raises:
        ValidationFailure: With every violated rule, before any arithmetic.
    """
    report = validate_mortgage_request(
        payment, down_payment, payment_schedule, amortization_period, interest_rate
    )
    if not report.ok:
        logger.info("Mortgage calculation rejected (%d errors)", len(report.errors))
        raise ValidationFailure(report.errors)

    schedule = PaymentSchedule.parse(payment_schedule)
    rate_pct = _resolve_rate(interest_rate, rate_cell)
    per_year = payments_per_year(schedule)
    num_payments = int(amortization_period) * per_year

    rate = per_payment_rate(rate_pct, per_year)
    principal = payment / payment_per_dollar(rate, num_payments)
    amount = principal + down_payment

    logger.debug(
        "rate=%f payments_per_year=%d num_payments=%d payment=%f mortgage_amount=%f",
        rate,
        per_year,
        num_payments,
        payment,
        amount,
    )

    return MortgageAmountResult(
        mortgage_amount=amount,
        payment=payment,
        down_payment=down_payment,
        payment_schedule=schedule.value,
        amortization_period=int(amortization_period),
        interest_rate=rate_pct,
        num_payments=num_payments,
        per_payment_rate=rate,
        payments_per_year=per_year,
    )
