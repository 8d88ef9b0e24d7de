"""Monthly aggregation of expenses and income."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal

from profitlens.domain.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_TOP_CATEGORIES,
    MOM_CHANGE_FROM_ZERO_PROFIT,
)
from profitlens.domain.models import (
    CategoryAmount,
    Expense,
    Income,
    Money,
    MonthlySnapshot,
    SourceAmount,
    TransactionRecord,
    YearMonth,
)
from profitlens.domain.models.money import HUNDRED, ZERO
from profitlens.domain.services.resolution import (
    CategoriesInput,
    build_category_lookup,
    resolve_category,
)


def filter_by_month(
    records: Iterable[TransactionRecord],
    month: YearMonth,
) -> list[TransactionRecord]:
    """Keep records whose local calendar month equals ``month``."""
    return [record for record in records if month.contains(record.date)]


def sum_amounts(
    records: Iterable[TransactionRecord],
    currency_code: str = DEFAULT_CURRENCY,
) -> Money:
    return Money.sum((record.amount for record in records), currency_code)


def group_expenses_by_category(
    expenses: Iterable[Expense],
) -> dict[str, list[Expense]]:
    groups: dict[str, list[Expense]] = {}
    for expense in expenses:
        groups.setdefault(expense.category_id, []).append(expense)
    return groups


def group_incomes_by_source(
    incomes: Iterable[Income],
) -> dict[str, list[Income]]:
    """Group income by the exact source string, case-sensitive."""
    groups: dict[str, list[Income]] = {}
    for income in incomes:
        groups.setdefault(income.source, []).append(income)
    return groups


def compute_monthly_snapshot(
    expenses: Iterable[Expense],
    incomes: Iterable[Income],
    categories: CategoriesInput,
    month: YearMonth | date | datetime,
    *,
    top_limit: int | None = DEFAULT_TOP_CATEGORIES,
    currency_code: str = DEFAULT_CURRENCY,
) -> MonthlySnapshot:
    """Compute the snapshot of one calendar month.

    Args:
        expenses: Expenses to consider; other months are filtered out.
        incomes: Income to consider; other months are filtered out.
        categories: Categories (or an id mapping) used to resolve expenses.
        month: Target month, or any date inside it.
        top_limit: Number of expense categories to keep, biggest first.
            None keeps every category.
        currency_code: Currency of the totals.

    Returns:
        MonthlySnapshot: Totals and breakdowns with ``mom_change`` unset.
    """
    target = YearMonth.of(month)
    month_expenses = filter_by_month(expenses, target)
    month_incomes = filter_by_month(incomes, target)
    if not month_expenses and not month_incomes:
        return MonthlySnapshot.empty(target, currency_code)

    total_income = sum_amounts(month_incomes, currency_code)
    total_expenses = sum_amounts(month_expenses, currency_code)

    lookup = build_category_lookup(categories)
    category_totals = [
        CategoryAmount(
            category=resolve_category(lookup, category_id),
            amount=sum_amounts(group, currency_code),
        )
        for category_id, group in group_expenses_by_category(
            month_expenses
        ).items()
    ]
    # Biggest first; equal sums ordered by name then id.
    category_totals.sort(key=lambda item: (item.category.name, item.category.id))
    category_totals.sort(key=lambda item: item.amount.amount, reverse=True)
    if top_limit is not None:
        category_totals = category_totals[: max(top_limit, 0)]

    source_totals = [
        SourceAmount(source=source, amount=sum_amounts(group, currency_code))
        for source, group in group_incomes_by_source(month_incomes).items()
    ]
    source_totals.sort(key=lambda item: item.source)
    source_totals.sort(key=lambda item: item.amount.amount, reverse=True)

    return MonthlySnapshot(
        month=target,
        total_income=total_income,
        total_expenses=total_expenses,
        top_categories=tuple(category_totals),
        income_by_source=tuple(source_totals),
        mom_change=None,
    )


def compute_month_over_month_change(
    current: MonthlySnapshot,
    previous: MonthlySnapshot,
) -> Decimal:
    """Return the net profit change from ``previous`` to ``current`` in percent.

    A previous month that broke exactly even gives 100 when the current month
    is profitable and 0 otherwise. A negative previous profit is used as the
    denominator as is, so the sign may flip.
    """
    previous_profit = previous.net_profit
    current_profit = current.net_profit
    if previous_profit.is_zero():
        if current_profit.is_positive():
            return Decimal(MOM_CHANGE_FROM_ZERO_PROFIT)
        return ZERO
    change = current_profit - previous_profit
    return change.amount / previous_profit.amount * HUNDRED


def attach_month_over_month_change(
    current: MonthlySnapshot,
    previous: MonthlySnapshot,
) -> MonthlySnapshot:
    """Return ``current`` with its ``mom_change`` set against ``previous``."""
    return current.with_mom_change(
        compute_month_over_month_change(current, previous)
    )


__all__ = [
    "filter_by_month",
    "sum_amounts",
    "group_expenses_by_category",
    "group_incomes_by_source",
    "compute_monthly_snapshot",
    "compute_month_over_month_change",
    "attach_month_over_month_change",
]
