"""Use case to list snapshots for recent months."""

from datetime import date

from profitlens.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from profitlens.domain.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_TOP_CATEGORIES,
    HISTORY_MONTHS,
)
from profitlens.domain.models import MonthlySnapshot
from profitlens.domain.services.aggregation import compute_monthly_snapshot
from profitlens.domain.services.month_navigation import recent_months
from profitlens.infrastructure.logging.logger import get_app_logger


class GetMonthlyHistoryUseCase:
    """Compute one snapshot per month for the last N months."""

    def __init__(
        self,
        repository: TransactionsRepositoryPort,
        logger=None,
        top_limit: int | None = DEFAULT_TOP_CATEGORIES,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._top_limit = top_limit
        self._currency_code = currency_code

    def execute(
        self,
        months: int = HISTORY_MONTHS,
        today: date | None = None,
    ) -> list[MonthlySnapshot]:
        """Return snapshots of the last ``months`` months, newest first.

        Transactions for the whole window are fetched once and aggregated per
        month.
        """
        window = recent_months(months, today)
        if not window:
            return []
        start = window[-1].first_day
        end = window[0].last_day
        expenses = self._repository.fetch_expenses(start, end)
        incomes = self._repository.fetch_incomes(start, end)
        categories = self._repository.fetch_categories()
        self._logger.info(
            f"Fetched {len(expenses)} expenses and {len(incomes)} income "
            f"rows for {start} to {end}"
        )
        return [
            compute_monthly_snapshot(
                expenses,
                incomes,
                categories,
                month,
                top_limit=self._top_limit,
                currency_code=self._currency_code,
            )
            for month in window
        ]


__all__ = ["GetMonthlyHistoryUseCase"]
