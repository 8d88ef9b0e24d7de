"""Monthly snapshot models."""

from dataclasses import dataclass, replace
from decimal import Decimal

from profitlens.domain.constants import DEFAULT_CURRENCY
from profitlens.domain.models.money import ZERO, Money
from profitlens.domain.models.periods import YearMonth
from profitlens.domain.models.transactions import Category


@dataclass(frozen=True)
class CategoryAmount:
    """Expense total for one category."""

    category: Category
    amount: Money


@dataclass(frozen=True)
class SourceAmount:
    """Income total for one source label."""

    source: str
    amount: Money


@dataclass(frozen=True)
class MonthlySnapshot:
    """Aggregated income and expenses for one calendar month.

    Attributes:
        month: Month being summarized.
        total_income: Sum of the month's income.
        total_expenses: Sum of the month's expenses.
        top_categories: Expense totals per category, biggest first.
        income_by_source: Income totals per source, biggest first.
        mom_change: Net profit change versus another month, in percent.
    """

    month: YearMonth
    total_income: Money
    total_expenses: Money
    top_categories: tuple[CategoryAmount, ...] = ()
    income_by_source: tuple[SourceAmount, ...] = ()
    mom_change: Decimal | None = None

    @property
    def net_profit(self) -> Money:
        """Return total_income minus total_expenses."""
        return self.total_income - self.total_expenses

    @property
    def is_profit(self) -> bool:
        return self.net_profit.is_positive()

    @property
    def profit_margin(self) -> Decimal:
        """Net profit as a percentage of income; 0 without income."""
        if not self.total_income.is_positive():
            return ZERO
        return self.net_profit.percent_of(self.total_income)

    @property
    def currency_code(self) -> str:
        return self.total_income.currency_code

    def with_mom_change(self, value: Decimal | None) -> "MonthlySnapshot":
        return replace(self, mom_change=value)

    @classmethod
    def empty(
        cls,
        month: YearMonth,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> "MonthlySnapshot":
        return cls(
            month=month,
            total_income=Money.zero(currency_code),
            total_expenses=Money.zero(currency_code),
        )


__all__ = ["CategoryAmount", "SourceAmount", "MonthlySnapshot"]
