"""Domain models for annual and tag-scoped reports."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from profitlens.domain.models.money import ZERO, Money
from profitlens.domain.models.periods import YearMonth
from profitlens.domain.models.transactions import Category, Expense, Income, Tag


@dataclass(frozen=True)
class CategoryGroup:
    """Expenses grouped under one category.

    Attributes:
        category: Resolved category, possibly the Unknown fallback.
        total: Sum of the group's expenses.
        count: Number of expenses in the group, at least 1.
        average: ``total / count``.
        percentage: Share of the report's total expenses.
    """

    category: Category
    total: Money
    count: int
    average: Money
    percentage: Decimal


@dataclass(frozen=True)
class SourceGroup:
    """Income grouped under one source label."""

    source: str
    total: Money
    count: int
    average: Money
    percentage: Decimal


@dataclass(frozen=True)
class MonthlyBreakdownRow:
    """Income and expenses of one month inside a report."""

    month: YearMonth
    income: Money
    expenses: Money

    @property
    def net(self) -> Money:
        return self.income - self.expenses


@dataclass(frozen=True)
class _ReportTotals:
    total_income: Money
    total_expenses: Money

    @property
    def net_profit(self) -> Money:
        return self.total_income - self.total_expenses

    @property
    def is_profit(self) -> bool:
        return self.net_profit.is_positive()

    @property
    def profit_margin(self) -> Decimal:
        if not self.total_income.is_positive():
            return ZERO
        return self.net_profit.percent_of(self.total_income)


@dataclass(frozen=True, kw_only=True)
class AnnualSummary(_ReportTotals):
    """Tax-year summary.

    Groups are sorted by name; ``expenses`` and ``incomes`` list the year's
    transactions earliest first. ``monthly_breakdown`` always has 12 rows.
    """

    year: int
    expense_categories: tuple[CategoryGroup, ...] = ()
    income_sources: tuple[SourceGroup, ...] = ()
    monthly_breakdown: tuple[MonthlyBreakdownRow, ...] = ()
    expenses: tuple[Expense, ...] = ()
    incomes: tuple[Income, ...] = ()


@dataclass(frozen=True, kw_only=True)
class TagReport(_ReportTotals):
    """Project or client report for one tag over an inclusive date range.

    ``tag`` is None when ``tag_id`` did not resolve. ``monthly_breakdown``
    only lists months with matching transactions; ``expenses`` and
    ``incomes`` are most recent first.
    """

    tag_id: str
    tag: Tag | None
    start: date
    end: date
    expense_categories: tuple[CategoryGroup, ...] = ()
    income_sources: tuple[SourceGroup, ...] = ()
    monthly_breakdown: tuple[MonthlyBreakdownRow, ...] = ()
    expenses: tuple[Expense, ...] = ()
    incomes: tuple[Income, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.expenses and not self.incomes

    @property
    def transaction_count(self) -> int:
        return len(self.expenses) + len(self.incomes)


__all__ = [
    "CategoryGroup",
    "SourceGroup",
    "MonthlyBreakdownRow",
    "AnnualSummary",
    "TagReport",
]
