# This project was developed with assistance from AI tools.
"""Regulatory tables and lookups shared by the validator and calculator.

Pure functions over module-level constants. Nothing here depends on the
current interest rate.
"""

import enum


class PaymentSchedule(str, enum.Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, value: str) -> "PaymentSchedule | None":
        """Case-insensitive lookup; None for unknown schedules."""
        try:
            return cls(value.lower())
        except ValueError:
            return None


# Exact counts. An averaged 52.1786 weeks/year drifts badly over 25 years.
PAYMENTS_PER_YEAR: dict[PaymentSchedule, int] = {
    PaymentSchedule.WEEKLY: 52,
    PaymentSchedule.BIWEEKLY: 26,
    PaymentSchedule.MONTHLY: 12,
}

MIN_AMORTIZATION_YEARS = 5
MAX_AMORTIZATION_YEARS = 25

MIN_INTEREST_RATE = 0.0  # exclusive
MAX_INTEREST_RATE = 100.0  # inclusive

# Minimum down payment: 5% of the first $500k, 10% of the excess
DOWN_PAYMENT_BREAKPOINT = 500_000.0
DOWN_PAYMENT_RATE_BELOW = 0.05
DOWN_PAYMENT_RATE_ABOVE = 0.10

# Mortgage insurance is not available at or above $1M
INSURANCE_PRICE_CEILING = 1_000_000.0

# (exclusive upper bound on down payment / asking price, insurance rate)
INSURANCE_TIERS: tuple[tuple[float, float], ...] = (
    (0.10, 0.0315),
    (0.15, 0.024),
    (0.20, 0.018),
)


def schedule_names() -> list[str]:
    return [s.value for s in PaymentSchedule]


def payments_per_year(schedule: str | PaymentSchedule) -> int:
    """Return the exact number of payments per year for a schedule.

    Raises:
        ValueError: If the schedule is not one of weekly, biweekly, monthly.
    """
    if isinstance(schedule, PaymentSchedule):
        return PAYMENTS_PER_YEAR[schedule]
    resolved = PaymentSchedule.parse(schedule)
    if resolved is None:
        raise ValueError(f"Unknown payment schedule: {schedule!r}")
    return PAYMENTS_PER_YEAR[resolved]


def is_valid_interest_rate(rate: float) -> bool:
    return MIN_INTEREST_RATE < rate <= MAX_INTEREST_RATE


def is_valid_amortization_period(years: int) -> bool:
    """Whole years within the inclusive bounds."""
    if not float(years).is_integer():
        return False
    return MIN_AMORTIZATION_YEARS <= years <= MAX_AMORTIZATION_YEARS


def minimum_down_payment(asking_price: float) -> float:
    """Minimum down payment for an asking price (tiered at $500k)."""
    if asking_price < DOWN_PAYMENT_BREAKPOINT:
        return DOWN_PAYMENT_RATE_BELOW * asking_price
    return (
        DOWN_PAYMENT_RATE_BELOW * DOWN_PAYMENT_BREAKPOINT
        + DOWN_PAYMENT_RATE_ABOVE * (asking_price - DOWN_PAYMENT_BREAKPOINT)
    )


def down_payment_ratio(asking_price: float, down_payment: float) -> float:
    if asking_price <= 0:
        return 0.0
    return down_payment / asking_price


def insurance_amount(asking_price: float, down_payment: float) -> float:
    """Mortgage insurance added to the principal.

    Tiers are scanned in increasing order and the first bound strictly
    above the down payment ratio wins. Ratios of 20% or more, and asking
    prices of $1M or more, carry no insurance.
    """
    if asking_price <= 0 or asking_price >= INSURANCE_PRICE_CEILING:
        return 0.0
    ratio = down_payment_ratio(asking_price, down_payment)
    for upper_bound, rate in INSURANCE_TIERS:
        if ratio < upper_bound:
            return rate * asking_price
    return 0.0
