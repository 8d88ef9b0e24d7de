"""CLI adapter printing monthly, annual and tag reports.

Configuration comes from environment variables:

* ``REPORT_KIND``: ``month`` (default), ``annual`` or ``tag``.
* ``REPORT_MONTH``: ``YYYY-MM``; defaults to the current month.
* ``REPORT_YEAR``: defaults to the current year.
* ``REPORT_TAG_ID``, ``REPORT_START_DATE``, ``REPORT_END_DATE``: tag report
  scope; dates in ``YYYY-MM-DD``, defaulting to the current year.
* ``REPORT_FORMAT``: ``text`` (default) or ``csv``.
"""

from datetime import date
import os

from profitlens.adapters.csv_export import (
    export_annual_csv,
    export_monthly_csv,
    export_tag_report_csv,
)
from profitlens.adapters.formatting import (
    format_currency,
    format_month,
    format_percentage,
    format_signed_percentage,
)
from profitlens.application.use_cases.get_annual_summary import (
    GetAnnualSummaryUseCase,
)
from profitlens.application.use_cases.get_monthly_snapshot import (
    GetMonthlySnapshotUseCase,
)
from profitlens.application.use_cases.get_tag_report import GetTagReportUseCase
from profitlens.domain.models import YearMonth
from profitlens.domain.services.month_navigation import (
    coerce_month,
    current_month,
)
from profitlens.infrastructure.container import build_transactions_repository
from profitlens.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from profitlens.infrastructure.settings import AppSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _parse_month(value: str | None, logger) -> YearMonth:
    if not value:
        return current_month()
    month = coerce_month(value)
    if month is None:
        logger.warning(f"Invalid month '{value}'. Expected format YYYY-MM.")
        return current_month()
    return month


def _parse_year(value: str | None, logger) -> int:
    if not value:
        return date.today().year
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid year '{value}'. Using the current year.")
        return date.today().year


def _print_month(repository, settings: AppSettings, output: str, logger) -> None:
    month = _parse_month(os.getenv("REPORT_MONTH"), logger)
    use_case = GetMonthlySnapshotUseCase(
        repository,
        logger=logger,
        top_limit=None if output == "csv" else settings.top_categories,
        currency_code=settings.currency_code,
    )
    result = use_case.execute_with_records(month, include_mom_change=True)
    snapshot = result.snapshot
    if output == "csv":
        print(
            export_monthly_csv(
                snapshot,
                result.expenses,
                result.incomes,
                result.categories,
            ),
            end="",
        )
        return

    print(f"{format_month(snapshot.month)}")
    print(f"Income:   {format_currency(snapshot.total_income)}")
    print(f"Expenses: {format_currency(snapshot.total_expenses)}")
    print(
        f"Profit:   {format_currency(snapshot.net_profit)} "
        f"(margin {format_percentage(snapshot.profit_margin)})"
    )
    if snapshot.mom_change is not None:
        print(
            "Change vs previous month: "
            f"{format_signed_percentage(snapshot.mom_change)}"
        )
    for item in snapshot.top_categories:
        print(f"  {item.category.name}: {format_currency(item.amount)}")
    for item in snapshot.income_by_source:
        print(f"  {item.source}: {format_currency(item.amount)}")


def _print_annual(repository, settings: AppSettings, output: str, logger) -> None:
    year = _parse_year(os.getenv("REPORT_YEAR"), logger)
    summary = GetAnnualSummaryUseCase(
        repository,
        logger=logger,
        currency_code=settings.currency_code,
    ).execute(year)
    if output == "csv":
        print(export_annual_csv(summary), end="")
        return

    print(f"Tax year {summary.year}")
    print(f"Income:   {format_currency(summary.total_income)}")
    print(f"Expenses: {format_currency(summary.total_expenses)}")
    print(f"Profit:   {format_currency(summary.net_profit)}")
    for row in summary.monthly_breakdown:
        print(
            f"  {format_month(row.month)}: "
            f"in={format_currency(row.income)}, "
            f"out={format_currency(row.expenses)}, "
            f"net={format_currency(row.net)}"
        )


def _print_tag(repository, settings: AppSettings, output: str, logger) -> None:
    tag_id = os.getenv("REPORT_TAG_ID")
    if not tag_id:
        logger.warning("REPORT_TAG_ID is required for tag reports.")
        return
    today = date.today()
    start = _parse_date(os.getenv("REPORT_START_DATE"), logger) or date(
        today.year, 1, 1
    )
    end = _parse_date(os.getenv("REPORT_END_DATE"), logger) or date(
        today.year, 12, 31
    )
    report = GetTagReportUseCase(
        repository,
        logger=logger,
        currency_code=settings.currency_code,
    ).execute(tag_id, start, end)
    if output == "csv":
        print(export_tag_report_csv(report), end="")
        return

    name = report.tag.name if report.tag else tag_id
    print(f"Tag {name} ({start} to {end})")
    print(f"Income:   {format_currency(report.total_income)}")
    print(f"Expenses: {format_currency(report.total_expenses)}")
    print(
        f"Profit:   {format_currency(report.net_profit)} "
        f"(margin {format_percentage(report.profit_margin)})"
    )
    print(f"Transactions: {report.transaction_count}")


REPORTS = {
    "month": _print_month,
    "annual": _print_annual,
    "tag": _print_tag,
}


def main() -> None:
    """Print the report selected through environment variables."""
    logger = get_app_logger()
    kind = os.getenv("REPORT_KIND", "month").strip().lower()
    output = os.getenv("REPORT_FORMAT", "text").strip().lower()
    report = REPORTS.get(kind)
    if report is None:
        logger.warning(
            f"Unknown REPORT_KIND '{kind}'. Expected one of: "
            f"{', '.join(REPORTS)}."
        )
        return

    settings = AppSettings.from_env()
    repository = build_transactions_repository(settings=settings)
    report(repository, settings, output, logger)
    get_usage_logger().info(f"report kind={kind} format={output}")


if __name__ == "__main__":  # pragma: no cover
    main()
