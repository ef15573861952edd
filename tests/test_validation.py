# This project was developed with assistance from AI tools.
"""Tests for calculation input validation."""

import math

from mortgage_api.services.validation import (
    ValidationFailure,
    validate_mortgage_request,
    validate_payment_request,
)


def _valid_payment_args(**overrides):
    args = {
        "asking_price": 500_000,
        "down_payment": 100_000,
        "payment_schedule": "monthly",
        "amortization_period": 25,
        "interest_rate": None,
    }
    args.update(overrides)
    return args


class TestPaymentRequest:
    def test_valid_request_has_empty_report(self):
        report = validate_payment_request(**_valid_payment_args())
        assert report.ok
        assert report.errors == []

    def test_unknown_schedule(self):
        report = validate_payment_request(**_valid_payment_args(payment_schedule="dne"))
        assert len(report.errors) == 1
        assert "weekly, biweekly, monthly" in report.errors[0]

    def test_schedule_case_insensitive(self):
        assert validate_payment_request(**_valid_payment_args(payment_schedule="BiWeekly")).ok

    def test_amortization_out_of_range(self):
        for years in (2, 4, 26, 30):
            report = validate_payment_request(**_valid_payment_args(amortization_period=years))
            assert not report.ok
            assert "amortization period" in report.errors[0]

    def test_amortization_bounds_accepted(self):
        assert validate_payment_request(**_valid_payment_args(amortization_period=5)).ok
        assert validate_payment_request(**_valid_payment_args(amortization_period=25)).ok

    def test_explicit_rate_out_of_range(self):
        for rate in (0, -1, 101):
            report = validate_payment_request(**_valid_payment_args(interest_rate=rate))
            assert not report.ok
            assert "interest rate" in report.errors[0]

    def test_rate_of_100_accepted(self):
        assert validate_payment_request(**_valid_payment_args(interest_rate=100)).ok

    def test_down_payment_exceeds_price(self):
        report = validate_payment_request(**_valid_payment_args(down_payment=600_000))
        assert report.errors == ["The down payment cannot exceed the asking price."]

    def test_below_minimum_down_payment(self):
        """$49k down on $750k is under the $50k minimum."""
        report = validate_payment_request(
            **_valid_payment_args(asking_price=750_000, down_payment=49_000)
        )
        assert report.errors == ["The down payment must be at least 50000.00."]

    def test_exact_minimum_down_payment_accepted(self):
        report = validate_payment_request(
            **_valid_payment_args(asking_price=750_000, down_payment=50_000)
        )
        assert report.ok

    def test_collects_every_violation_in_order(self):
        report = validate_payment_request(
            asking_price=-100,
            down_payment=200,
            payment_schedule="dne",
            amortization_period=30,
            interest_rate=101,
        )
        assert len(report.errors) == 5
        assert "Payment schedule" in report.errors[0]
        assert "amortization period" in report.errors[1]
        assert "interest rate" in report.errors[2]
        assert report.errors[3] == "The down payment cannot exceed the asking price."
        assert report.errors[4] == "The asking price cannot be negative."

    def test_negative_down_payment(self):
        report = validate_payment_request(**_valid_payment_args(asking_price=0, down_payment=-1))
        assert "The down payment cannot be negative." in report.errors

    def test_nan_amounts_rejected(self):
        report = validate_payment_request(
            **_valid_payment_args(asking_price=math.nan, down_payment=math.nan)
        )
        assert "The asking price must be a finite number." in report.errors
        assert "The down payment must be a finite number." in report.errors
        assert "The asking price cannot be negative." in report.errors

    def test_infinite_amounts_rejected(self):
        report = validate_payment_request(
            **_valid_payment_args(asking_price=math.inf, down_payment=math.inf)
        )
        assert report.errors == [
            "The asking price must be a finite number.",
            "The down payment must be a finite number.",
        ]

    def test_fractional_amortization_rejected(self):
        report = validate_payment_request(**_valid_payment_args(amortization_period=10.3))
        assert len(report.errors) == 1
        assert "amortization period" in report.errors[0]


class TestMortgageRequest:
    def test_valid_request(self):
        assert validate_mortgage_request(2000, 0, "weekly", 10).ok

    def test_ignores_down_payment_ratio_rules(self):
        """No asking price, so a large down payment is fine."""
        assert validate_mortgage_request(2000, 5_000_000, "monthly", 25).ok

    def test_term_rules_apply(self):
        report = validate_mortgage_request(2000, 0, "daily", 3, interest_rate=-1)
        assert len(report.errors) == 3

    def test_negative_amounts(self):
        report = validate_mortgage_request(-1, -1, "monthly", 25)
        assert report.errors == [
            "The payment cannot be negative.",
            "The down payment cannot be negative.",
        ]

    def test_non_finite_amounts_rejected(self):
        report = validate_mortgage_request(math.nan, math.inf, "monthly", 25)
        assert report.errors == [
            "The payment must be a finite number.",
            "The down payment must be a finite number.",
            "The payment cannot be negative.",
        ]


class TestValidationFailure:
    def test_carries_all_messages(self):
        exc = ValidationFailure(["first", "second"])
        assert exc.errors == ["first", "second"]
        assert str(exc) == "first, second"

    def test_is_value_error(self):
        assert isinstance(ValidationFailure(["x"]), ValueError)
