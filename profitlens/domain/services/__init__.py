"""Domain services package."""

from .aggregation import (
    attach_month_over_month_change,
    compute_month_over_month_change,
    compute_monthly_snapshot,
    filter_by_month,
    sum_amounts,
)
from .month_navigation import (
    coerce_month,
    current_month,
    is_within_free_tier_limit,
    month_range,
    next_month,
    previous_month,
    recent_months,
    within_range,
)
from .reporting import (
    build_category_groups,
    build_monthly_breakdown,
    build_source_groups,
    compute_annual_summary,
    compute_tag_report,
)
from .resolution import (
    build_category_lookup,
    build_tag_lookup,
    category_display_name,
    resolve_category,
    resolve_tag,
)
from .validation import (
    is_valid_amount,
    is_valid_expense_entry,
    is_valid_income_entry,
    parse_amount,
)

__all__ = [
    "attach_month_over_month_change",
    "compute_month_over_month_change",
    "compute_monthly_snapshot",
    "filter_by_month",
    "sum_amounts",
    "coerce_month",
    "current_month",
    "is_within_free_tier_limit",
    "month_range",
    "next_month",
    "previous_month",
    "recent_months",
    "within_range",
    "build_category_groups",
    "build_monthly_breakdown",
    "build_source_groups",
    "compute_annual_summary",
    "compute_tag_report",
    "build_category_lookup",
    "build_tag_lookup",
    "category_display_name",
    "resolve_category",
    "resolve_tag",
    "is_valid_amount",
    "is_valid_expense_entry",
    "is_valid_income_entry",
    "parse_amount",
]
