"""Use case to compute the tax-year summary."""

from datetime import date

from profitlens.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from profitlens.domain.constants import DEFAULT_CURRENCY
from profitlens.domain.models import AnnualSummary
from profitlens.domain.services.reporting import compute_annual_summary
from profitlens.infrastructure.logging.logger import get_app_logger


class GetAnnualSummaryUseCase:
    """Load a calendar year of transactions and summarize them."""

    def __init__(
        self,
        repository: TransactionsRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing transactions and categories.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency of the totals.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(self, year: int) -> AnnualSummary:
        """Return the annual summary of ``year``.

        Args:
            year: Calendar year to summarize.

        Returns:
            AnnualSummary: Totals, groups and a 12-row monthly breakdown.
        """
        start = date(year, 1, 1)
        end = date(year, 12, 31)
        expenses = self._repository.fetch_expenses(start, end)
        incomes = self._repository.fetch_incomes(start, end)
        categories = self._repository.fetch_categories()
        self._logger.info(
            f"Fetched {len(expenses)} expenses and {len(incomes)} income "
            f"rows for {year}"
        )
        summary = compute_annual_summary(
            expenses,
            incomes,
            categories,
            year,
            currency_code=self._currency_code,
        )
        self._logger.info(
            f"Annual summary computed for {year}: "
            f"income={summary.total_income}, "
            f"expenses={summary.total_expenses}, net={summary.net_profit}"
        )
        return summary


__all__ = ["GetAnnualSummaryUseCase", "AnnualSummary"]
