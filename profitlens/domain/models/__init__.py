"""Domain models package."""

from .money import Money
from .periods import YearMonth, local_date, local_datetime
from .reports import (
    AnnualSummary,
    CategoryGroup,
    MonthlyBreakdownRow,
    SourceGroup,
    TagReport,
)
from .snapshot import CategoryAmount, MonthlySnapshot, SourceAmount
from .transactions import (
    Category,
    Expense,
    Income,
    Tag,
    TagColor,
    TransactionRecord,
    build_default_categories,
    new_id,
)

__all__ = [
    "Money",
    "YearMonth",
    "local_date",
    "local_datetime",
    "Category",
    "Expense",
    "Income",
    "Tag",
    "TagColor",
    "TransactionRecord",
    "build_default_categories",
    "new_id",
    "CategoryAmount",
    "SourceAmount",
    "MonthlySnapshot",
    "CategoryGroup",
    "SourceGroup",
    "MonthlyBreakdownRow",
    "AnnualSummary",
    "TagReport",
]
