"""CSV exports of snapshots and reports.

Amounts are written as exact decimals; percentages go through
``format_percentage``. Detail listings keep the order of each report type:
monthly and tag exports list the most recent first, the annual export the
earliest first.
"""

import csv
from collections.abc import Iterable
from datetime import date, datetime
import io

from profitlens.adapters.formatting import (
    format_amount,
    format_date,
    format_month,
    format_percentage,
)
from profitlens.domain.models import (
    AnnualSummary,
    CategoryGroup,
    Expense,
    Income,
    MonthlyBreakdownRow,
    MonthlySnapshot,
    SourceGroup,
    TagReport,
)
from profitlens.domain.services.resolution import (
    CategoriesInput,
    build_category_lookup,
    category_display_name,
)

APP_TITLE = "ProfitLens"
APP_TAGLINE = "Finances Made Easy"


def _new_writer():
    buffer = io.StringIO()
    return buffer, csv.writer(buffer, lineterminator="\n")


def _generated(generated_at: datetime | None) -> str:
    stamp = generated_at or datetime.now()
    return stamp.strftime("%Y-%m-%d %H:%M:%S")


def _write_summary(writer, report) -> None:
    writer.writerow(["SUMMARY"])
    writer.writerow(["Total Income", format_amount(report.total_income)])
    writer.writerow(["Total Expenses", format_amount(report.total_expenses)])
    writer.writerow(["Net Profit", format_amount(report.net_profit)])
    writer.writerow(["Profit Margin", format_percentage(report.profit_margin)])


def _write_breakdown(
    writer,
    rows: Iterable[MonthlyBreakdownRow],
) -> None:
    writer.writerow(["MONTHLY BREAKDOWN"])
    writer.writerow(["Month", "Income", "Expenses", "Net"])
    for row in rows:
        writer.writerow(
            [
                format_month(row.month),
                format_amount(row.income),
                format_amount(row.expenses),
                format_amount(row.net),
            ]
        )


def _write_category_groups(
    writer,
    groups: Iterable[CategoryGroup],
) -> None:
    writer.writerow(["EXPENSE BY CATEGORY"])
    writer.writerow(["Category", "Count", "Total", "Average", "Percentage"])
    for group in groups:
        writer.writerow(
            [
                group.category.name,
                group.count,
                format_amount(group.total),
                format_amount(group.average, places=2),
                format_percentage(group.percentage),
            ]
        )


def _write_source_groups(
    writer,
    groups: Iterable[SourceGroup],
) -> None:
    writer.writerow(["INCOME BY SOURCE"])
    writer.writerow(["Source", "Count", "Total", "Average", "Percentage"])
    for group in groups:
        writer.writerow(
            [
                group.source,
                group.count,
                format_amount(group.total),
                format_amount(group.average, places=2),
                format_percentage(group.percentage),
            ]
        )


def _write_income_detail(writer, incomes: Iterable[Income]) -> None:
    writer.writerow(["INCOME DETAIL"])
    writer.writerow(["Date", "Source", "Amount", "Note"])
    for income in incomes:
        writer.writerow(
            [
                format_date(income.date),
                income.source,
                format_amount(income.amount),
                income.note or "",
            ]
        )


def _write_expense_detail(
    writer,
    expenses: Iterable[Expense],
    category_name,
) -> None:
    writer.writerow(["EXPENSE DETAIL"])
    writer.writerow(["Date", "Category", "Amount", "Note"])
    for expense in expenses:
        writer.writerow(
            [
                format_date(expense.date),
                category_name(expense),
                format_amount(expense.amount),
                expense.note or "",
            ]
        )


def export_monthly_csv(
    snapshot: MonthlySnapshot,
    expenses: Iterable[Expense],
    incomes: Iterable[Income],
    categories: CategoriesInput,
    generated_at: datetime | None = None,
) -> str:
    """Render a monthly snapshot and its transactions as CSV.

    Args:
        snapshot: Snapshot of the exported month.
        expenses: Expenses to list; only those in the snapshot month are kept.
        incomes: Income to list; only those in the snapshot month are kept.
        categories: Categories used to name expenses.
        generated_at: Timestamp printed in the header, now by default.

    Returns:
        str: CSV document.
    """
    lookup = build_category_lookup(categories)
    month_expenses = sorted(
        (e for e in expenses if e.year_month == snapshot.month),
        key=lambda record: record.sort_key(),
        reverse=True,
    )
    month_incomes = sorted(
        (i for i in incomes if i.year_month == snapshot.month),
        key=lambda record: record.sort_key(),
        reverse=True,
    )

    buffer, writer = _new_writer()
    writer.writerow([f"{APP_TITLE} Monthly Report"])
    writer.writerow([APP_TAGLINE])
    writer.writerow(["Month", format_month(snapshot.month)])
    writer.writerow(["Generated", _generated(generated_at)])
    writer.writerow([])
    _write_summary(writer, snapshot)
    writer.writerow([])
    _write_income_detail(writer, month_incomes)
    writer.writerow([])
    _write_expense_detail(
        writer,
        month_expenses,
        lambda expense: category_display_name(lookup, expense.category_id),
    )
    writer.writerow([])
    writer.writerow(["EXPENSE BY CATEGORY"])
    writer.writerow(["Category", "Amount", "Percentage"])
    for item in snapshot.top_categories:
        writer.writerow(
            [
                item.category.name,
                format_amount(item.amount),
                format_percentage(item.amount.percent_of(snapshot.total_expenses)),
            ]
        )
    return buffer.getvalue()


def export_tag_report_csv(
    report: TagReport,
    generated_at: datetime | None = None,
) -> str:
    """Render a tag report as CSV, transactions most recent first."""
    group_names = {
        group.category.id: group.category.name
        for group in report.expense_categories
    }
    tag_name = report.tag.name if report.tag else report.tag_id

    buffer, writer = _new_writer()
    writer.writerow([f"{APP_TITLE} Project Report"])
    writer.writerow(["Tag", tag_name])
    writer.writerow(
        ["Period", f"{format_date(report.start)} to {format_date(report.end)}"]
    )
    writer.writerow(["Generated", _generated(generated_at)])
    writer.writerow([])
    _write_summary(writer, report)
    writer.writerow(["Transactions", report.transaction_count])
    writer.writerow([])
    _write_breakdown(writer, report.monthly_breakdown)
    writer.writerow([])
    _write_category_groups(writer, report.expense_categories)
    writer.writerow([])
    _write_source_groups(writer, report.income_sources)
    writer.writerow([])
    _write_income_detail(writer, report.incomes)
    writer.writerow([])
    _write_expense_detail(
        writer,
        report.expenses,
        lambda expense: group_names.get(expense.category_id, ""),
    )
    return buffer.getvalue()


def export_annual_csv(
    summary: AnnualSummary,
    generated_at: datetime | None = None,
) -> str:
    """Render an annual tax summary as CSV, transactions earliest first."""
    group_names = {
        group.category.id: group.category.name
        for group in summary.expense_categories
    }

    buffer, writer = _new_writer()
    writer.writerow([f"{APP_TITLE} Annual Tax Summary"])
    writer.writerow(["Year", summary.year])
    writer.writerow(["Generated", _generated(generated_at)])
    writer.writerow([])
    _write_summary(writer, summary)
    writer.writerow([])
    _write_breakdown(writer, summary.monthly_breakdown)
    writer.writerow([])
    _write_category_groups(writer, summary.expense_categories)
    writer.writerow([])
    _write_source_groups(writer, summary.income_sources)
    writer.writerow([])
    _write_income_detail(writer, summary.incomes)
    writer.writerow([])
    _write_expense_detail(
        writer,
        summary.expenses,
        lambda expense: group_names.get(expense.category_id, ""),
    )
    return buffer.getvalue()


def tag_report_filename(tag_name: str, start: date, end: date) -> str:
    """Return ``project_<name>_<start>_to_<end>.csv`` for a tag export."""
    safe_name = tag_name.replace(" ", "_")
    return (
        f"project_{safe_name}_{format_date(start)}_to_{format_date(end)}.csv"
    )


__all__ = [
    "export_monthly_csv",
    "export_tag_report_csv",
    "export_annual_csv",
    "tag_report_filename",
]
