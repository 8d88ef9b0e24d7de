"""Tests for display formatting helpers."""

from datetime import date, datetime
from decimal import Decimal

from profitlens.adapters.formatting import (
    format_amount,
    format_currency,
    format_date,
    format_month,
    format_percentage,
    format_signed_percentage,
)
from profitlens.domain.models import Money, YearMonth


def test_format_currency() -> None:
    """Money and plain numbers should render with their currency."""
    assert format_currency(Money("1234.5")) == "$1,234.50"
    assert format_currency(Decimal("-50")) == "-$50.00"
    assert format_currency(Money("10", "EUR")) == "10.00 EUR"
    assert format_currency(7, "GBP") == "7.00 GBP"


def test_format_percentage_rounds_half_even() -> None:
    """Percentages keep one decimal place by default."""
    assert format_percentage(Decimal("82")) == "82.0%"
    assert format_percentage(Decimal("55.5555")) == "55.6%"
    assert format_percentage(Decimal("12.25")) == "12.2%"
    assert format_percentage(Decimal("12.35")) == "12.4%"
    assert format_percentage(Decimal("1.005"), places=2) == "1.00%"


def test_format_signed_percentage() -> None:
    """Changes carry an explicit plus sign when not negative."""
    assert format_signed_percentage(Decimal("100")) == "+100.0%"
    assert format_signed_percentage(Decimal("0")) == "+0.0%"
    assert format_signed_percentage(Decimal("-50")) == "-50.0%"


def test_percentages_rounding_to_zero_have_no_minus_sign() -> None:
    """Tiny negative values round to a plain zero."""
    assert format_signed_percentage(Decimal("-0.01")) == "+0.0%"
    assert format_signed_percentage(Decimal("-0.049")) == "+0.0%"
    assert format_signed_percentage(Decimal("-0.06")) == "-0.1%"
    assert format_percentage(Decimal("-0.04")) == "0.0%"
    assert format_percentage(Decimal("-0.004"), places=2) == "0.00%"


def test_format_amount_is_exact_unless_rounded() -> None:
    """Exports keep exact decimals unless places are requested."""
    assert format_amount(Money("19.990")) == "19.990"
    assert format_amount(Money("10").divided_by(3), places=2) == "3.33"
    assert format_amount(Money("40"), places=2) == "40.00"


def test_format_month_and_date() -> None:
    """Months render as labels and dates in ISO form."""
    assert format_month(YearMonth(2025, 3)) == "March 2025"
    assert format_month(date(2024, 12, 31)) == "December 2024"
    assert format_date(datetime(2025, 3, 31, 23, 59)) == "2025-03-31"
    assert format_date(date(2025, 1, 2)) == "2025-01-02"
