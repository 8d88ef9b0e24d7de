"""Use case to compute the dashboard snapshot of one month."""

from dataclasses import dataclass
from datetime import date, datetime

from profitlens.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from profitlens.domain.constants import DEFAULT_CURRENCY, DEFAULT_TOP_CATEGORIES
from profitlens.domain.models import (
    Category,
    Expense,
    Income,
    MonthlySnapshot,
    YearMonth,
)
from profitlens.domain.services.aggregation import (
    attach_month_over_month_change,
    compute_monthly_snapshot,
)
from profitlens.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class MonthlySnapshotResult:
    """A snapshot together with the rows it was computed from.

    Attributes:
        snapshot: Aggregated month.
        expenses: Expenses loaded for the snapshot month.
        incomes: Income loaded for the snapshot month.
        categories: Categories used to resolve the expenses.
    """

    snapshot: MonthlySnapshot
    expenses: list[Expense]
    incomes: list[Income]
    categories: list[Category]


class GetMonthlySnapshotUseCase:
    """Load one month of transactions and aggregate them."""

    def __init__(
        self,
        repository: TransactionsRepositoryPort,
        logger=None,
        top_limit: int | None = DEFAULT_TOP_CATEGORIES,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing transactions and categories.
            logger: Optional logger compatible with logging.Logger-like API.
            top_limit: Number of expense categories kept in the snapshot.
            currency_code: Currency of the totals.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._top_limit = top_limit
        self._currency_code = currency_code

    def execute(
        self,
        month: YearMonth | date | datetime,
        include_mom_change: bool = False,
    ) -> MonthlySnapshot:
        """Return the snapshot of ``month``.

        Args:
            month: Target month, or any date inside it.
            include_mom_change: Also load the previous month and attach the
                month-over-month change in net profit.

        Returns:
            MonthlySnapshot: Aggregated month.
        """
        return self.execute_with_records(month, include_mom_change).snapshot

    def execute_with_records(
        self,
        month: YearMonth | date | datetime,
        include_mom_change: bool = False,
    ) -> MonthlySnapshotResult:
        """Return the snapshot of ``month`` along with its loaded rows.

        Exports need the individual transactions as well as the totals; this
        hands them over so callers do not query the month a second time.

        Args:
            month: Target month, or any date inside it.
            include_mom_change: Also load the previous month and attach the
                month-over-month change in net profit.

        Returns:
            MonthlySnapshotResult: Snapshot plus the month's expenses, income
            and the categories.
        """
        target = YearMonth.of(month)
        categories = self._repository.fetch_categories()
        expenses, incomes = self._fetch_month(target)
        snapshot = self._aggregate(expenses, incomes, categories, target)
        if include_mom_change:
            previous_month = target.previous()
            previous = self._aggregate(
                *self._fetch_month(previous_month),
                categories,
                previous_month,
            )
            snapshot = attach_month_over_month_change(snapshot, previous)
        self._logger.info(
            f"Snapshot computed for {target}: income={snapshot.total_income}, "
            f"expenses={snapshot.total_expenses}, "
            f"net={snapshot.net_profit}, mom={snapshot.mom_change}"
        )
        return MonthlySnapshotResult(
            snapshot=snapshot,
            expenses=expenses,
            incomes=incomes,
            categories=categories,
        )

    def _fetch_month(
        self,
        month: YearMonth,
    ) -> tuple[list[Expense], list[Income]]:
        expenses = self._repository.fetch_expenses(
            month.first_day,
            month.last_day,
        )
        incomes = self._repository.fetch_incomes(
            month.first_day,
            month.last_day,
        )
        self._logger.info(
            f"Fetched {len(expenses)} expenses and {len(incomes)} income "
            f"rows for {month}"
        )
        return expenses, incomes

    def _aggregate(
        self,
        expenses: list[Expense],
        incomes: list[Income],
        categories: list[Category],
        month: YearMonth,
    ) -> MonthlySnapshot:
        return compute_monthly_snapshot(
            expenses,
            incomes,
            categories,
            month,
            top_limit=self._top_limit,
            currency_code=self._currency_code,
        )


__all__ = [
    "GetMonthlySnapshotUseCase",
    "MonthlySnapshot",
    "MonthlySnapshotResult",
]
