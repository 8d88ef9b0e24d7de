"""Annual and tag-scoped reports over arbitrary transaction subsets.

Report groups are sorted alphabetically for scanning, unlike the dashboard
snapshot which lists the biggest amounts first.
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime
from logging import Logger

from profitlens.domain.constants import DEFAULT_CURRENCY
from profitlens.domain.models import (
    AnnualSummary,
    CategoryGroup,
    Expense,
    Income,
    MonthlyBreakdownRow,
    SourceGroup,
    TagReport,
    TransactionRecord,
    YearMonth,
)
from profitlens.domain.services.aggregation import (
    group_expenses_by_category,
    group_incomes_by_source,
    sum_amounts,
)
from profitlens.domain.services.month_navigation import within_range
from profitlens.domain.services.resolution import (
    CategoriesInput,
    TagsInput,
    build_category_lookup,
    build_tag_lookup,
    resolve_category,
    resolve_tag,
)


def _alphabetical(name: str) -> tuple[str, str]:
    return (name.casefold(), name)


def build_category_groups(
    expenses: Sequence[Expense],
    categories: CategoriesInput,
    *,
    currency_code: str = DEFAULT_CURRENCY,
) -> tuple[CategoryGroup, ...]:
    """Group expenses by category with count, average and share of total.

    Args:
        expenses: Expenses already filtered to the report scope.
        categories: Categories used to resolve ids; unknown ids fall back to
            the synthetic Unknown category.
        currency_code: Currency of the totals.

    Returns:
        tuple[CategoryGroup, ...]: Groups sorted by category name.
    """
    lookup = build_category_lookup(categories)
    total_expenses = sum_amounts(expenses, currency_code)
    groups = []
    for category_id, members in group_expenses_by_category(expenses).items():
        total = sum_amounts(members, currency_code)
        groups.append(
            CategoryGroup(
                category=resolve_category(lookup, category_id),
                total=total,
                count=len(members),
                average=total.divided_by(len(members)),
                percentage=total.percent_of(total_expenses),
            )
        )
    groups.sort(
        key=lambda group: (
            _alphabetical(group.category.name),
            group.category.id,
        )
    )
    return tuple(groups)


def build_source_groups(
    incomes: Sequence[Income],
    *,
    currency_code: str = DEFAULT_CURRENCY,
) -> tuple[SourceGroup, ...]:
    """Group income by source with count, average and share of total."""
    total_income = sum_amounts(incomes, currency_code)
    groups = []
    for source, members in group_incomes_by_source(incomes).items():
        total = sum_amounts(members, currency_code)
        groups.append(
            SourceGroup(
                source=source,
                total=total,
                count=len(members),
                average=total.divided_by(len(members)),
                percentage=total.percent_of(total_income),
            )
        )
    groups.sort(key=lambda group: _alphabetical(group.source))
    return tuple(groups)


def _breakdown_row(
    month: YearMonth,
    expenses: Iterable[Expense],
    incomes: Iterable[Income],
    currency_code: str,
) -> MonthlyBreakdownRow:
    return MonthlyBreakdownRow(
        month=month,
        income=sum_amounts(
            (income for income in incomes if income.year_month == month),
            currency_code,
        ),
        expenses=sum_amounts(
            (expense for expense in expenses if expense.year_month == month),
            currency_code,
        ),
    )


def build_monthly_breakdown(
    expenses: Sequence[Expense],
    incomes: Sequence[Income],
    months: Iterable[YearMonth] | None = None,
    *,
    currency_code: str = DEFAULT_CURRENCY,
) -> tuple[MonthlyBreakdownRow, ...]:
    """Return per-month income and expense totals, oldest month first.

    Args:
        expenses: Expenses in scope.
        incomes: Income in scope.
        months: Months to report, zero-filled when empty. When None, only
            months holding at least one transaction are reported.
        currency_code: Currency of the totals.
    """
    if months is None:
        months = {record.year_month for record in (*expenses, *incomes)}
    return tuple(
        _breakdown_row(month, expenses, incomes, currency_code)
        for month in sorted(set(months))
    )


def _chronological(
    records: Iterable[TransactionRecord],
    *,
    newest_first: bool,
) -> tuple:
    return tuple(
        sorted(records, key=lambda record: record.sort_key(), reverse=newest_first)
    )


def compute_annual_summary(
    expenses: Iterable[Expense],
    incomes: Iterable[Income],
    categories: CategoriesInput,
    year: int,
    *,
    currency_code: str = DEFAULT_CURRENCY,
) -> AnnualSummary:
    """Compute the tax-year summary for ``year``.

    The monthly breakdown covers all twelve months, with zero rows for months
    without transactions. Transaction listings are earliest first.
    """
    year_expenses = [e for e in expenses if e.year_month.year == year]
    year_incomes = [i for i in incomes if i.year_month.year == year]

    return AnnualSummary(
        year=year,
        total_income=sum_amounts(year_incomes, currency_code),
        total_expenses=sum_amounts(year_expenses, currency_code),
        expense_categories=build_category_groups(
            year_expenses,
            categories,
            currency_code=currency_code,
        ),
        income_sources=build_source_groups(
            year_incomes,
            currency_code=currency_code,
        ),
        monthly_breakdown=build_monthly_breakdown(
            year_expenses,
            year_incomes,
            [YearMonth(year, month) for month in range(1, 13)],
            currency_code=currency_code,
        ),
        expenses=_chronological(year_expenses, newest_first=False),
        incomes=_chronological(year_incomes, newest_first=False),
    )


def compute_tag_report(
    expenses: Iterable[Expense],
    incomes: Iterable[Income],
    categories: CategoriesInput,
    tags: TagsInput,
    tag_id: str,
    start: date | datetime,
    end: date | datetime,
    *,
    currency_code: str = DEFAULT_CURRENCY,
    logger: Logger | None = None,
) -> TagReport:
    """Compute a project or client report for one tag.

    Args:
        expenses: Candidate expenses.
        incomes: Candidate income.
        categories: Categories used to resolve expense groups.
        tags: Known tags; a ``tag_id`` missing from them matches nothing.
        tag_id: Tag to report on.
        start: Inclusive lower bound of the transaction date.
        end: Inclusive upper bound of the transaction date.
        currency_code: Currency of the totals.
        logger: Optional logger warned about unresolved tags.

    Returns:
        TagReport: Totals, groups, the months holding matches, and the
        matching transactions most recent first.
    """
    tag = resolve_tag(build_tag_lookup(tags), tag_id)
    if tag is None:
        if logger is not None:
            logger.warning(f"Tag {tag_id!r} not found; report is empty")
        matched_expenses: list[Expense] = []
        matched_incomes: list[Income] = []
    else:
        matched_expenses = [
            expense
            for expense in expenses
            if expense.has_tag(tag.id) and within_range(expense.date, start, end)
        ]
        matched_incomes = [
            income
            for income in incomes
            if income.has_tag(tag.id) and within_range(income.date, start, end)
        ]

    return TagReport(
        tag_id=tag_id,
        tag=tag,
        start=start,
        end=end,
        total_income=sum_amounts(matched_incomes, currency_code),
        total_expenses=sum_amounts(matched_expenses, currency_code),
        expense_categories=build_category_groups(
            matched_expenses,
            categories,
            currency_code=currency_code,
        ),
        income_sources=build_source_groups(
            matched_incomes,
            currency_code=currency_code,
        ),
        monthly_breakdown=build_monthly_breakdown(
            matched_expenses,
            matched_incomes,
            currency_code=currency_code,
        ),
        expenses=_chronological(matched_expenses, newest_first=True),
        incomes=_chronological(matched_incomes, newest_first=True),
    )


__all__ = [
    "build_category_groups",
    "build_source_groups",
    "build_monthly_breakdown",
    "compute_annual_summary",
    "compute_tag_report",
]
