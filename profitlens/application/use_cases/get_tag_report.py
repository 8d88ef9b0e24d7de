"""Use case to compute a project or client report for one tag."""

from datetime import date

from profitlens.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from profitlens.domain.constants import DEFAULT_CURRENCY
from profitlens.domain.models import TagReport
from profitlens.domain.services.reporting import compute_tag_report
from profitlens.infrastructure.logging.logger import get_app_logger


class GetTagReportUseCase:
    """Aggregate the transactions carrying a tag over a date range."""

    def __init__(
        self,
        repository: TransactionsRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(
        self,
        tag_id: str,
        start_date: date,
        end_date: date,
    ) -> TagReport:
        """Return the tag report for ``[start_date, end_date]``.

        Args:
            tag_id: Tag to report on; unknown ids produce an empty report.
            start_date: Inclusive first day.
            end_date: Inclusive last day.

        Returns:
            TagReport: Totals, groups and monthly rollup of the tag.
        """
        expenses = self._repository.fetch_expenses(start_date, end_date)
        incomes = self._repository.fetch_incomes(start_date, end_date)
        categories = self._repository.fetch_categories()
        tags = self._repository.fetch_tags()
        report = compute_tag_report(
            expenses,
            incomes,
            categories,
            tags,
            tag_id,
            start_date,
            end_date,
            currency_code=self._currency_code,
            logger=self._logger,
        )
        self._logger.info(
            f"Tag report computed for {tag_id} ({start_date} to {end_date}): "
            f"{report.transaction_count} transactions, net={report.net_profit}"
        )
        return report


__all__ = ["GetTagReportUseCase", "TagReport"]
