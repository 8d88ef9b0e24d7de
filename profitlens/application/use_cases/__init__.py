"""Application use cases package."""

from .add_transaction import AddExpenseUseCase, AddIncomeUseCase
from .get_annual_summary import AnnualSummary, GetAnnualSummaryUseCase
from .get_monthly_history import GetMonthlyHistoryUseCase
from .get_monthly_snapshot import (
    GetMonthlySnapshotUseCase,
    MonthlySnapshot,
    MonthlySnapshotResult,
)
from .get_tag_report import GetTagReportUseCase, TagReport

__all__ = [
    "AddExpenseUseCase",
    "AddIncomeUseCase",
    "GetAnnualSummaryUseCase",
    "AnnualSummary",
    "GetMonthlyHistoryUseCase",
    "GetMonthlySnapshotUseCase",
    "MonthlySnapshot",
    "MonthlySnapshotResult",
    "GetTagReportUseCase",
    "TagReport",
]
