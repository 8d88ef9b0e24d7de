"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so ``0.1`` stays ``Decimal("0.1")``.

    Args:
        value: Raw numeric value from SQL rows or user input.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def try_decimal(value) -> Decimal | None:
    """Parse a value to Decimal, returning None when it is not a finite number."""
    if value is None:
        return None
    try:
        parsed = coerce_decimal(value)
    except (InvalidOperation, ValueError):
        return None
    if not parsed.is_finite():
        return None
    return parsed


__all__ = ["coerce_decimal", "try_decimal"]
