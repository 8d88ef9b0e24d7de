"""Entry validation for new expenses and income."""

from decimal import Decimal

from profitlens.utils.decimal_utils import try_decimal

_AMOUNT_CHARACTERS = frozenset("0123456789.")


def clean_amount_input(raw: str) -> str:
    """Strip everything except digits and the decimal point."""
    return "".join(char for char in raw if char in _AMOUNT_CHARACTERS)


def parse_amount(raw) -> Decimal | None:
    """Parse a user-entered amount.

    Args:
        raw: Text such as ``"$1,250.00"``, or a number.

    Returns:
        Decimal | None: Parsed amount, or None when it is not a number.
    """
    if isinstance(raw, str):
        cleaned = clean_amount_input(raw)
        if not cleaned:
            return None
        return try_decimal(cleaned)
    return try_decimal(raw)


def is_valid_amount(amount) -> bool:
    """Return True for amounts strictly greater than zero."""
    parsed = parse_amount(amount)
    return parsed is not None and parsed > 0


def is_valid_expense_entry(amount, category_id: str | None) -> bool:
    return is_valid_amount(amount) and bool(category_id)


def is_valid_income_entry(amount, source: str | None) -> bool:
    return is_valid_amount(amount) and bool(source and source.strip())


__all__ = [
    "clean_amount_input",
    "parse_amount",
    "is_valid_amount",
    "is_valid_expense_entry",
    "is_valid_income_entry",
]
