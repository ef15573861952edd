# This project was developed with assistance from AI tools.
"""Input validation for mortgage calculations.

Every rule runs unconditionally and appends its own message, so the caller
sees all problems with a request at once. Validators never raise; the
calculation entry points turn a non-empty report into ``ValidationFailure``.
"""

import math

from ..schemas.calculator import ValidationReport
from .mortgage_rules import (
    MAX_AMORTIZATION_YEARS,
    MIN_AMORTIZATION_YEARS,
    PaymentSchedule,
    is_valid_amortization_period,
    is_valid_interest_rate,
    minimum_down_payment,
    schedule_names,
)


class ValidationFailure(ValueError):
    """Raised when a calculation request violates one or more rules."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(", ".join(self.errors))


def _check_terms(
    report: ValidationReport,
    payment_schedule: str,
    amortization_period: int,
    interest_rate: float | None,
) -> None:
    """Rules shared by both calculations: schedule, amortization, rate."""
    if PaymentSchedule.parse(payment_schedule) is None:
        report.add(f"Payment schedule must be one of {', '.join(schedule_names())}.")
    if not is_valid_amortization_period(amortization_period):
        report.add(
            f"The amortization period must be between {MIN_AMORTIZATION_YEARS} "
            f"and {MAX_AMORTIZATION_YEARS} years inclusive, got {amortization_period}."
        )
    if interest_rate is not None and not is_valid_interest_rate(interest_rate):
        report.add(rate_bounds_message(interest_rate))


def _check_finite(report: ValidationReport, **amounts: float) -> None:
    for label, value in amounts.items():
        if not math.isfinite(value):
            report.add(f"The {label.replace('_', ' ')} must be a finite number.")


def rate_bounds_message(interest_rate: float) -> str:
    return (
        f"The interest rate, {interest_rate:.3f}, must be greater than zero "
        "and less than or equal to 100."
    )


def validate_payment_request(
    asking_price: float,
    down_payment: float,
    payment_schedule: str,
    amortization_period: int,
    interest_rate: float | None = None,
) -> ValidationReport:
    """Validate the inputs of a payment-amount calculation.

    The minimum down payment is checked against the bare asking price;
    mortgage insurance never enters into it.
    """
    report = ValidationReport()
    _check_terms(report, payment_schedule, amortization_period, interest_rate)
    _check_finite(report, asking_price=asking_price, down_payment=down_payment)
    if not down_payment <= asking_price:
        report.add("The down payment cannot exceed the asking price.")
    if not down_payment >= 0:
        report.add("The down payment cannot be negative.")
    if not asking_price >= 0:
        report.add("The asking price cannot be negative.")
    minimum = minimum_down_payment(asking_price)
    if not down_payment >= minimum:
        report.add(f"The down payment must be at least {minimum:.2f}.")
    return report


def validate_mortgage_request(
    payment: float,
    down_payment: float,
    payment_schedule: str,
    amortization_period: int,
    interest_rate: float | None = None,
) -> ValidationReport:
    """Validate the inputs of a maximum-mortgage calculation.

    There is no asking price, so only the term rules plus non-negative
    amounts apply.
    """
    report = ValidationReport()
    _check_terms(report, payment_schedule, amortization_period, interest_rate)
    _check_finite(report, payment=payment, down_payment=down_payment)
    if not payment >= 0:
        report.add("The payment cannot be negative.")
    if not down_payment >= 0:
        report.add("The down payment cannot be negative.")
    return report
