"""Domain models for expenses, income, categories and tags."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from uuid import uuid4

from profitlens.domain.constants import (
    DEFAULT_FREELANCER_CATEGORIES,
    UNKNOWN_CATEGORY_ICON,
    UNKNOWN_CATEGORY_NAME,
)
from profitlens.domain.models.money import Money
from profitlens.domain.models.periods import (
    YearMonth,
    local_date,
    local_datetime,
)


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid4()).upper()


@dataclass(frozen=True)
class Category:
    """Expense category.

    Attributes:
        id: Unique identifier.
        name: Display name.
        icon: Opaque display token.
        is_default: Default categories cannot be deleted.
        sort_order: Position in category pickers.
    """

    id: str
    name: str
    icon: str
    is_default: bool = False
    sort_order: int = 0

    @classmethod
    def unknown(cls, category_id: str) -> "Category":
        """Synthetic category standing in for an unresolved id."""
        return cls(
            id=category_id,
            name=UNKNOWN_CATEGORY_NAME,
            icon=UNKNOWN_CATEGORY_ICON,
        )


def build_default_categories() -> list[Category]:
    """Return the freelancer preset categories, in display order."""
    return [
        Category(
            id=new_id(),
            name=name,
            icon=icon,
            is_default=True,
            sort_order=index,
        )
        for index, (name, icon) in enumerate(DEFAULT_FREELANCER_CATEGORIES)
    ]


class TagColor(str, Enum):
    """Display colors available for tags."""

    BLUE = "Blue"
    GREEN = "Green"
    ORANGE = "Orange"
    RED = "Red"
    PURPLE = "Purple"
    PINK = "Pink"
    YELLOW = "Yellow"
    TEAL = "Teal"
    INDIGO = "Indigo"
    GRAY = "Gray"


@dataclass(frozen=True)
class Tag:
    """Project or client label attachable to any transaction."""

    id: str
    name: str
    color: TagColor = TagColor.BLUE
    created_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True, kw_only=True)
class TransactionRecord:
    """Fields shared by expenses and income.

    ``date`` is the user-chosen transaction date; ``created_at`` records when
    the entry was made. Amounts are not validated here; see
    ``profitlens.domain.services.validation`` for entry rules.
    """

    amount: Money
    date: date | datetime
    note: str | None = None
    tag_ids: frozenset[str] = frozenset()
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Money):
            object.__setattr__(self, "amount", Money.of(self.amount))
        if not isinstance(self.tag_ids, frozenset):
            object.__setattr__(self, "tag_ids", frozenset(self.tag_ids))

    @property
    def local_date(self) -> date:
        return local_date(self.date)

    @property
    def year_month(self) -> YearMonth:
        return YearMonth.of(self.date)

    def has_tag(self, tag_id: str) -> bool:
        return tag_id in self.tag_ids

    def sort_key(self) -> tuple[datetime, datetime, str]:
        """Local-clock chronological key; ties use entry time, then id."""
        return (
            local_datetime(self.date),
            local_datetime(self.created_at),
            self.id,
        )


@dataclass(frozen=True, kw_only=True)
class Expense(TransactionRecord):
    """Money spent, classified by exactly one category."""

    category_id: str
    receipt_path: str | None = None


@dataclass(frozen=True, kw_only=True)
class Income(TransactionRecord):
    """Money received from a free-text source such as a client name."""

    source: str


__all__ = [
    "Category",
    "Tag",
    "TagColor",
    "TransactionRecord",
    "Expense",
    "Income",
    "build_default_categories",
    "new_id",
]
