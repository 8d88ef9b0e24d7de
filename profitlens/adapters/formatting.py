"""Display formatting for aggregated results."""

from datetime import date, datetime
from decimal import ROUND_HALF_EVEN, Decimal

from profitlens.domain.constants import DEFAULT_CURRENCY
from profitlens.domain.models import Money, YearMonth, local_date
from profitlens.utils.decimal_utils import coerce_decimal


def format_currency(value, currency_code: str | None = None) -> str:
    """Format an amount with its currency, e.g. ``$1,234.56``."""
    if isinstance(value, Money):
        return value.to_display_string(currency_code)
    return Money.of(value, currency_code or DEFAULT_CURRENCY).to_display_string()


def _round_percentage(value, places: int) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    rounded = coerce_decimal(value).quantize(quantum, rounding=ROUND_HALF_EVEN)
    # Values rounding to zero print without a minus sign.
    return rounded.copy_abs() if rounded.is_zero() else rounded


def format_percentage(value, places: int = 1) -> str:
    """Format a percentage, e.g. ``82.0%``."""
    return f"{_round_percentage(value, places):.{places}f}%"


def format_signed_percentage(value, places: int = 1) -> str:
    """Format a percentage change with an explicit sign, e.g. ``+12.5%``.

    The sign follows the rounded value, so ``-0.01`` shows as ``+0.0%``.
    """
    rounded = _round_percentage(value, places)
    sign = "+" if rounded >= 0 else ""
    return f"{sign}{rounded:.{places}f}%"


def format_amount(value: Money, places: int | None = None) -> str:
    """Plain decimal, used in delimited exports.

    The exact value is kept unless ``places`` asks for rounding.
    """
    if places is None:
        return str(value.amount)
    quantum = Decimal(1).scaleb(-places)
    return str(value.amount.quantize(quantum, rounding=ROUND_HALF_EVEN))


def format_month(value: YearMonth | date | datetime) -> str:
    """Month and year, e.g. ``March 2025``."""
    return YearMonth.of(value).label


def format_date(value: date | datetime) -> str:
    """Local calendar date in ISO form."""
    return local_date(value).isoformat()


__all__ = [
    "format_currency",
    "format_percentage",
    "format_signed_percentage",
    "format_amount",
    "format_month",
    "format_date",
]
