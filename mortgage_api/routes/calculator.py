# This project was developed with assistance from AI tools.
"""Mortgage calculator routes -- no authentication required.

Query parameters are bound as plain primitives; every domain rule is
enforced by the calculator service, which raises ``ValidationFailure``
(rendered as 400 by the app-level handler).
"""

from fastapi import APIRouter, HTTPException, Query, status

from ..schemas.calculator import (
    InterestRateResponse,
    InterestRateUpdateResponse,
    MortgageAmountResult,
    PaymentAmountResult,
)
from ..services.calculator import mortgage_amount, payment_amount
from ..services.interest_rate import get_rate_cell
from ..services.validation import rate_bounds_message

router = APIRouter()


@router.get("/payment-amount", response_model=PaymentAmountResult)
async def get_payment_amount(
    asking_price: float = Query(description="Purchase price of the home."),
    down_payment: float = Query(description="Cash paid up front."),
    payment_schedule: str = Query(description="One of weekly, biweekly, monthly."),
    amortization_period: int = Query(description="Years to repay, 5 to 25."),
    interest_rate: float | None = Query(
        default=None, description="Annual rate in percent. Defaults to the current rate."
    ),
) -> PaymentAmountResult:
    """Recurring payment amount for a purchase."""
    return payment_amount(
        asking_price, down_payment, payment_schedule, amortization_period, interest_rate
    )


@router.get("/mortgage-amount", response_model=MortgageAmountResult)
async def get_mortgage_amount(
    payment: float = Query(description="Recurring payment the borrower can afford."),
    down_payment: float = Query(default=0.0, description="Added to the maximum mortgage."),
    payment_schedule: str = Query(description="One of weekly, biweekly, monthly."),
    amortization_period: int = Query(description="Years to repay, 5 to 25."),
    interest_rate: float | None = Query(
        default=None, description="Annual rate in percent. Defaults to the current rate."
    ),
) -> MortgageAmountResult:
    """Maximum mortgage amount a recurring payment supports."""
    return mortgage_amount(
        payment, down_payment, payment_schedule, amortization_period, interest_rate
    )


@router.get("/interest-rate", response_model=InterestRateResponse)
async def get_interest_rate() -> InterestRateResponse:
    return InterestRateResponse(interest_rate=get_rate_cell().get_rate())


@router.patch("/interest-rate/{new_rate}", response_model=InterestRateUpdateResponse)
async def update_interest_rate(new_rate: float) -> InterestRateUpdateResponse:
    """Replace the default annual interest rate. Must lie in (0, 100]."""
    cell = get_rate_cell()
    old_rate = cell.get_rate()
    if not cell.set_rate(new_rate):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=rate_bounds_message(new_rate),
        )
    return InterestRateUpdateResponse(old_interest_rate=old_rate, new_interest_rate=new_rate)
