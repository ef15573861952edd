# This project was developed with assistance from AI tools.
"""Mortgage calculator schemas."""

from pydantic import BaseModel, Field


class ValidationReport(BaseModel):
    """Ordered, human-readable rule violations. Empty means acceptable."""

    errors: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, message: str) -> None:
        self.errors.append(message)


class PaymentAmountResult(BaseModel):
    """Recurring payment for a purchase, with the intermediate figures."""

    payment: float
    asking_price: float
    down_payment: float
    payment_schedule: str
    amortization_period: int
    interest_rate: float
    num_payments: int
    per_payment_rate: float
    payments_per_year: int
    minimum_down_payment: float
    down_payment_ratio: float
    insurance: float
    principal: float
    loan_total: float = Field(description="Sum of all payments over the amortization period.")


class MortgageAmountResult(BaseModel):
    """Maximum mortgage (implied asking price) supported by a payment."""

    mortgage_amount: float
    payment: float
    down_payment: float
    payment_schedule: str
    amortization_period: int
    interest_rate: float
    num_payments: int
    per_payment_rate: float
    payments_per_year: int


class InterestRateResponse(BaseModel):
    interest_rate: float


class InterestRateUpdateResponse(BaseModel):
    old_interest_rate: float
    new_interest_rate: float
