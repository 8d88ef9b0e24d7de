"""Exact decimal money values."""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from functools import total_ordering
from typing import Iterable

from profitlens.domain.constants import CURRENCY_SYMBOLS, DEFAULT_CURRENCY
from profitlens.domain.errors import CurrencyMismatchError
from profitlens.utils.decimal_utils import coerce_decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")


@total_ordering
@dataclass(frozen=True, eq=False)
class Money:
    """Currency amount backed by ``Decimal``.

    Attributes:
        amount: Exact decimal value.
        currency_code: ISO currency code, USD unless stated otherwise.
    """

    amount: Decimal = ZERO
    currency_code: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", coerce_decimal(self.amount))

    @classmethod
    def zero(cls, currency_code: str = DEFAULT_CURRENCY) -> "Money":
        return cls(ZERO, currency_code)

    @classmethod
    def of(cls, value, currency_code: str = DEFAULT_CURRENCY) -> "Money":
        """Build Money from an int, str, float or Decimal value."""
        if isinstance(value, Money):
            return value
        return cls(coerce_decimal(value), currency_code)

    @classmethod
    def sum(
        cls,
        values: Iterable["Money"],
        currency_code: str = DEFAULT_CURRENCY,
    ) -> "Money":
        """Return the total of ``values``; zero when empty."""
        total = cls.zero(currency_code)
        for value in values:
            total = total + value
        return total

    def _check_currency(self, other: "Money") -> None:
        if other.currency_code != self.currency_code:
            raise CurrencyMismatchError(
                f"Cannot combine {self.currency_code} with {other.currency_code}"
            )

    def _other_amount(self, other) -> Decimal:
        if isinstance(other, Money):
            self._check_currency(other)
            return other.amount
        return coerce_decimal(other)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency_code)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return Money(self.amount - other.amount, self.currency_code)

    def __neg__(self) -> "Money":
        return Money(-self.amount, self.currency_code)

    def __abs__(self) -> "Money":
        return Money(abs(self.amount), self.currency_code)

    def __mul__(self, scalar) -> "Money":
        if isinstance(scalar, Money):
            return NotImplemented
        return Money(self.amount * coerce_decimal(scalar), self.currency_code)

    __rmul__ = __mul__

    def divided_by(self, divisor) -> "Money":
        """Divide by a scalar, e.g. a count for averages.

        A zero divisor yields zero instead of raising.
        """
        divisor = coerce_decimal(divisor)
        if divisor == 0:
            return Money.zero(self.currency_code)
        return Money(self.amount / divisor, self.currency_code)

    def ratio_to(self, other) -> Decimal:
        """Return ``self / other`` as a Decimal, or 0 for a zero divisor."""
        denominator = self._other_amount(other)
        if denominator == 0:
            return ZERO
        return self.amount / denominator

    def percent_of(self, total) -> Decimal:
        """Return this amount as a percentage of ``total``; 0 when total is 0."""
        return self.ratio_to(total) * HUNDRED

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def __eq__(self, other) -> bool:
        if isinstance(other, Money):
            return (
                self.currency_code == other.currency_code
                and self.amount == other.amount
            )
        if isinstance(other, (int, Decimal)):
            return self.amount == other
        return NotImplemented

    def __hash__(self) -> int:
        # Must agree with bare int and Decimal values that compare equal.
        return hash(self.amount)

    def __lt__(self, other) -> bool:
        if not isinstance(other, (Money, int, Decimal)):
            return NotImplemented
        return self.amount < self._other_amount(other)

    def quantized(self) -> Decimal:
        """Return the amount rounded half-even to cents."""
        return self.amount.quantize(CENT, rounding=ROUND_HALF_EVEN)

    def to_display_string(self, currency_code: str | None = None) -> str:
        """Render the amount for display.

        USD renders as ``$1,234.56`` (``-$50.00`` when negative); other codes
        render as ``1,234.56 EUR``.
        """
        code = currency_code or self.currency_code
        value = self.quantized()
        sign = "-" if value < 0 else ""
        digits = f"{abs(value):,.2f}"
        symbol = CURRENCY_SYMBOLS.get(code)
        if symbol:
            return f"{sign}{symbol}{digits}"
        return f"{sign}{digits} {code}"

    def __str__(self) -> str:
        return str(self.amount)


__all__ = ["Money", "ZERO", "HUNDRED"]
