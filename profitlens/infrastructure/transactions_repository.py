"""SQLAlchemy-backed repository for transactions, categories and tags.

Amounts are stored as decimal text so they round-trip exactly. Dates are
epoch seconds read back as local naive datetimes; tag ids are stored as a
comma-delimited string.
"""

from datetime import date, datetime, time, timedelta

from sqlalchemy import text

from profitlens.application.ports.database import DatabaseEnginePort
from profitlens.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from profitlens.domain.errors import ProtectedCategoryError
from profitlens.domain.models import (
    Category,
    Expense,
    Income,
    Money,
    Tag,
    TagColor,
    build_default_categories,
)
from profitlens.domain.policies import can_delete_category
from profitlens.infrastructure.logging.logger import get_app_logger
from profitlens.utils.decimal_utils import coerce_decimal

TAG_SEPARATOR = ","

CREATE_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS expenses (
        id TEXT PRIMARY KEY,
        amount TEXT NOT NULL,
        date INTEGER NOT NULL,
        category_id TEXT NOT NULL,
        note TEXT,
        receipt_path TEXT,
        tag_ids TEXT NOT NULL DEFAULT '',
        created_at INTEGER NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS income (
        id TEXT PRIMARY KEY,
        amount TEXT NOT NULL,
        date INTEGER NOT NULL,
        source TEXT NOT NULL,
        note TEXT,
        tag_ids TEXT NOT NULL DEFAULT '',
        created_at INTEGER NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS categories (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        icon TEXT NOT NULL,
        is_default INTEGER NOT NULL DEFAULT 0,
        sort_order INTEGER NOT NULL DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS tags (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        color TEXT NOT NULL,
        created_at INTEGER NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_expenses_date ON expenses(date DESC)",
    "CREATE INDEX IF NOT EXISTS idx_income_date ON income(date DESC)",
)

COUNT_DEFAULT_CATEGORIES_SQL = text(
    "SELECT COUNT(*) FROM categories WHERE is_default = 1"
)

SELECT_EXPENSES_SQL = text(
    """
    SELECT id, amount, date, category_id, note, receipt_path, tag_ids,
           created_at
    FROM expenses
    WHERE date >= :start_ts AND date < :end_ts
    ORDER BY date DESC
    """
)

SELECT_INCOME_SQL = text(
    """
    SELECT id, amount, date, source, note, tag_ids, created_at
    FROM income
    WHERE date >= :start_ts AND date < :end_ts
    ORDER BY date DESC
    """
)

SELECT_CATEGORIES_SQL = text(
    """
    SELECT id, name, icon, is_default, sort_order
    FROM categories
    ORDER BY sort_order, name
    """
)

SELECT_CATEGORY_SQL = text(
    """
    SELECT id, name, icon, is_default, sort_order
    FROM categories
    WHERE id = :id
    """
)

SELECT_TAGS_SQL = text(
    "SELECT id, name, color, created_at FROM tags ORDER BY name"
)

UPSERT_EXPENSE_SQL = text(
    """
    INSERT OR REPLACE INTO expenses (
        id, amount, date, category_id, note, receipt_path, tag_ids, created_at
    )
    VALUES (
        :id, :amount, :date, :category_id, :note, :receipt_path, :tag_ids,
        :created_at
    )
    """
)

UPSERT_INCOME_SQL = text(
    """
    INSERT OR REPLACE INTO income (
        id, amount, date, source, note, tag_ids, created_at
    )
    VALUES (:id, :amount, :date, :source, :note, :tag_ids, :created_at)
    """
)

UPSERT_CATEGORY_SQL = text(
    """
    INSERT OR REPLACE INTO categories (id, name, icon, is_default, sort_order)
    VALUES (:id, :name, :icon, :is_default, :sort_order)
    """
)

UPSERT_TAG_SQL = text(
    """
    INSERT OR REPLACE INTO tags (id, name, color, created_at)
    VALUES (:id, :name, :color, :created_at)
    """
)

DELETE_SQL = {
    "expenses": text("DELETE FROM expenses WHERE id = :id"),
    "income": text("DELETE FROM income WHERE id = :id"),
    "categories": text("DELETE FROM categories WHERE id = :id"),
    "tags": text("DELETE FROM tags WHERE id = :id"),
}

# Bounds used for open-ended ranges.
MIN_TIMESTAMP = -(2**62)
MAX_TIMESTAMP = 2**62


def to_timestamp(value: date | datetime) -> int:
    """Convert a date or datetime to epoch seconds.

    Plain dates and naive datetimes are taken as local time.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    return int(value.timestamp())


def from_timestamp(value: int) -> datetime:
    return datetime.fromtimestamp(value)


def serialize_tag_ids(tag_ids) -> str:
    return TAG_SEPARATOR.join(sorted(tag_ids))


def parse_tag_ids(raw: str | None) -> frozenset[str]:
    if not raw:
        return frozenset()
    return frozenset(part for part in raw.split(TAG_SEPARATOR) if part)


def range_params(
    start_date: date | None,
    end_date: date | None,
) -> dict[str, int]:
    """Return the half-open epoch window covering the inclusive date range."""
    start_ts = MIN_TIMESTAMP if start_date is None else to_timestamp(start_date)
    if end_date is None:
        end_ts = MAX_TIMESTAMP
    else:
        if isinstance(end_date, datetime):
            end_date = end_date.date()
        end_ts = to_timestamp(end_date + timedelta(days=1))
    return {"start_ts": start_ts, "end_ts": end_ts}


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository backed by SQLAlchemy over the local SQLite database."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger=None,
        currency_code: str = "USD",
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the engine.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency attached to loaded amounts.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def prepare(self) -> None:
        """Create tables and indexes and seed default categories once."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            for statement in CREATE_STATEMENTS:
                conn.exec_driver_sql(statement)
            seeded = conn.execute(COUNT_DEFAULT_CATEGORIES_SQL).scalar()
            if not seeded:
                defaults = build_default_categories()
                conn.execute(
                    UPSERT_CATEGORY_SQL,
                    [self._category_params(c) for c in defaults],
                )
                self._logger.info(f"Seeded {len(defaults)} default categories")

    def fetch_expenses(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Expense]:
        """Return expenses within the inclusive date range, newest first."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_EXPENSES_SQL,
                range_params(start_date, end_date),
            ).all()
        return [
            Expense(
                id=row.id,
                amount=self._money(row.amount),
                date=from_timestamp(row.date),
                category_id=row.category_id,
                note=row.note,
                receipt_path=row.receipt_path,
                tag_ids=parse_tag_ids(row.tag_ids),
                created_at=from_timestamp(row.created_at),
            )
            for row in rows
        ]

    def fetch_incomes(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Income]:
        """Return income within the inclusive date range, newest first."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_INCOME_SQL,
                range_params(start_date, end_date),
            ).all()
        return [
            Income(
                id=row.id,
                amount=self._money(row.amount),
                date=from_timestamp(row.date),
                source=row.source,
                note=row.note,
                tag_ids=parse_tag_ids(row.tag_ids),
                created_at=from_timestamp(row.created_at),
            )
            for row in rows
        ]

    def fetch_categories(self) -> list[Category]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_CATEGORIES_SQL).all()
        return [self._category_from_row(row) for row in rows]

    def fetch_tags(self) -> list[Tag]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_TAGS_SQL).all()
        return [
            Tag(
                id=row.id,
                name=row.name,
                color=self._tag_color(row.color),
                created_at=from_timestamp(row.created_at),
            )
            for row in rows
        ]

    def save_expense(self, expense: Expense) -> None:
        params = {
            "id": expense.id,
            "amount": str(expense.amount.amount),
            "date": to_timestamp(expense.date),
            "category_id": expense.category_id,
            "note": expense.note,
            "receipt_path": expense.receipt_path,
            "tag_ids": serialize_tag_ids(expense.tag_ids),
            "created_at": to_timestamp(expense.created_at),
        }
        self._write(UPSERT_EXPENSE_SQL, params)

    def save_income(self, income: Income) -> None:
        params = {
            "id": income.id,
            "amount": str(income.amount.amount),
            "date": to_timestamp(income.date),
            "source": income.source,
            "note": income.note,
            "tag_ids": serialize_tag_ids(income.tag_ids),
            "created_at": to_timestamp(income.created_at),
        }
        self._write(UPSERT_INCOME_SQL, params)

    def save_category(self, category: Category) -> None:
        self._write(UPSERT_CATEGORY_SQL, self._category_params(category))

    def save_tag(self, tag: Tag) -> None:
        params = {
            "id": tag.id,
            "name": tag.name,
            "color": TagColor(tag.color).value,
            "created_at": to_timestamp(tag.created_at),
        }
        self._write(UPSERT_TAG_SQL, params)

    def delete_expense(self, expense_id: str) -> None:
        self._write(DELETE_SQL["expenses"], {"id": expense_id})

    def delete_income(self, income_id: str) -> None:
        self._write(DELETE_SQL["income"], {"id": income_id})

    def delete_category(self, category_id: str) -> None:
        """Delete a category unless it is one of the defaults.

        Raises:
            ProtectedCategoryError: If the category is a default category.
        """
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            row = conn.execute(SELECT_CATEGORY_SQL, {"id": category_id}).first()
            if row is None:
                return
            if not can_delete_category(self._category_from_row(row)):
                raise ProtectedCategoryError(
                    f"Default category {row.name!r} cannot be deleted"
                )
            conn.execute(DELETE_SQL["categories"], {"id": category_id})

    def delete_tag(self, tag_id: str) -> None:
        """Delete a tag; transactions keep the now orphaned tag id."""
        self._write(DELETE_SQL["tags"], {"id": tag_id})

    def _write(self, statement, params: dict) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(statement, params)

    def _money(self, raw) -> Money:
        return Money(coerce_decimal(raw), self._currency_code)

    def _tag_color(self, raw: str) -> TagColor:
        try:
            return TagColor(raw)
        except ValueError:
            self._logger.warning(f"Unknown tag color {raw!r}; using Blue")
            return TagColor.BLUE

    @staticmethod
    def _category_from_row(row) -> Category:
        return Category(
            id=row.id,
            name=row.name,
            icon=row.icon,
            is_default=bool(row.is_default),
            sort_order=row.sort_order,
        )

    @staticmethod
    def _category_params(category: Category) -> dict:
        return {
            "id": category.id,
            "name": category.name,
            "icon": category.icon,
            "is_default": int(category.is_default),
            "sort_order": category.sort_order,
        }


__all__ = ["SqlAlchemyTransactionsRepository"]
