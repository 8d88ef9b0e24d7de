"""Domain package for business rules and core models."""

from .constants import DEFAULT_CURRENCY, DEFAULT_TOP_CATEGORIES
from .errors import (
    CurrencyMismatchError,
    InvalidEntryError,
    ProfitLensError,
    ProtectedCategoryError,
)
from .models import (
    AnnualSummary,
    Category,
    Expense,
    Income,
    Money,
    MonthlySnapshot,
    Tag,
    TagReport,
    YearMonth,
)
from .policies import can_delete_category
from .services import (
    compute_annual_summary,
    compute_month_over_month_change,
    compute_monthly_snapshot,
    compute_tag_report,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "DEFAULT_TOP_CATEGORIES",
    "CurrencyMismatchError",
    "InvalidEntryError",
    "ProfitLensError",
    "ProtectedCategoryError",
    "AnnualSummary",
    "Category",
    "Expense",
    "Income",
    "Money",
    "MonthlySnapshot",
    "Tag",
    "TagReport",
    "YearMonth",
    "can_delete_category",
    "compute_annual_summary",
    "compute_month_over_month_change",
    "compute_monthly_snapshot",
    "compute_tag_report",
]
