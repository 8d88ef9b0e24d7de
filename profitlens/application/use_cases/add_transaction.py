"""Use cases to record new expenses and income."""

from collections.abc import Iterable
from datetime import date, datetime

from profitlens.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from profitlens.domain.constants import DEFAULT_CURRENCY
from profitlens.domain.errors import InvalidEntryError
from profitlens.domain.models import Expense, Income, Money
from profitlens.domain.services.validation import (
    is_valid_expense_entry,
    is_valid_income_entry,
    parse_amount,
)
from profitlens.infrastructure.logging.logger import get_app_logger


def _clean_note(note: str | None) -> str | None:
    if note is None:
        return None
    stripped = note.strip()
    return stripped or None


class AddExpenseUseCase:
    """Validate and store a new expense."""

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
        amount,
        category_id: str,
        transaction_date: date | datetime | None = None,
        note: str | None = None,
        receipt_path: str | None = None,
        tag_ids: Iterable[str] = (),
    ) -> Expense:
        """Create and save an expense.

        Args:
            amount: Entered amount, text or number; must be above zero.
            category_id: Category of the expense; required.
            transaction_date: Date of the expense, now when omitted.
            note: Optional free text; blank notes are dropped.
            receipt_path: Optional path to a stored receipt image.
            tag_ids: Tags attached to the expense.

        Returns:
            Expense: The saved expense.

        Raises:
            InvalidEntryError: If the amount or category is invalid.
        """
        if not is_valid_expense_entry(amount, category_id):
            raise InvalidEntryError(
                f"Invalid expense entry: amount={amount!r}, "
                f"category_id={category_id!r}"
            )
        expense = Expense(
            amount=Money(parse_amount(amount), self._currency_code),
            date=transaction_date or datetime.now(),
            category_id=category_id,
            note=_clean_note(note),
            receipt_path=receipt_path,
            tag_ids=frozenset(tag_ids),
        )
        self._repository.save_expense(expense)
        self._logger.info(
            f"Expense {expense.id} saved: amount={expense.amount}, "
            f"category={category_id}"
        )
        return expense


class AddIncomeUseCase:
    """Validate and store a new income."""

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
        amount,
        source: str,
        transaction_date: date | datetime | None = None,
        note: str | None = None,
        tag_ids: Iterable[str] = (),
    ) -> Income:
        """Create and save an income.

        Raises:
            InvalidEntryError: If the amount or source is invalid.
        """
        if not is_valid_income_entry(amount, source):
            raise InvalidEntryError(
                f"Invalid income entry: amount={amount!r}, source={source!r}"
            )
        income = Income(
            amount=Money(parse_amount(amount), self._currency_code),
            date=transaction_date or datetime.now(),
            source=source.strip(),
            note=_clean_note(note),
            tag_ids=frozenset(tag_ids),
        )
        self._repository.save_income(income)
        self._logger.info(
            f"Income {income.id} saved: amount={income.amount}, "
            f"source={income.source}"
        )
        return income


__all__ = ["AddExpenseUseCase", "AddIncomeUseCase"]
