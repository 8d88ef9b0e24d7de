"""Application port for transaction persistence."""

from datetime import date
from typing import Protocol

from profitlens.domain.models import Category, Expense, Income, Tag


class TransactionsRepositoryPort(Protocol):
    """Port exposing load, save and delete of transactions and labels.

    Date bounds are inclusive calendar dates; None means unbounded.
    """

    def prepare(self) -> None:
        """Create storage and seed default categories when missing."""

    def fetch_expenses(
        self,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Expense]:
        """Return expenses dated within the range, newest first."""

    def fetch_incomes(
        self,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Income]:
        """Return income dated within the range, newest first."""

    def fetch_categories(self) -> list[Category]:
        """Return categories ordered by sort order."""

    def fetch_tags(self) -> list[Tag]:
        """Return tags ordered by name."""

    def save_expense(self, expense: Expense) -> None:
        """Insert or replace an expense."""

    def save_income(self, income: Income) -> None:
        """Insert or replace an income."""

    def save_category(self, category: Category) -> None:
        """Insert or replace a category."""

    def save_tag(self, tag: Tag) -> None:
        """Insert or replace a tag."""

    def delete_expense(self, expense_id: str) -> None:
        """Delete an expense by id."""

    def delete_income(self, income_id: str) -> None:
        """Delete an income by id."""

    def delete_category(self, category_id: str) -> None:
        """Delete a non-default category by id."""

    def delete_tag(self, tag_id: str) -> None:
        """Delete a tag; transactions keep the orphaned id."""


__all__ = ["TransactionsRepositoryPort"]
