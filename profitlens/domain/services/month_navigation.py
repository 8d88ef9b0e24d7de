"""Calendar month arithmetic over the local calendar.

Helpers return None instead of raising when handed a missing or unparseable
month, leaving the decision to the caller.
"""

import calendar
from datetime import date, datetime, time

from profitlens.domain.models.periods import YearMonth, local_date

MonthLike = YearMonth | date | datetime | str


def coerce_month(value: MonthLike | None) -> YearMonth | None:
    """Convert a month-like value to a YearMonth.

    Args:
        value: YearMonth, date, datetime, or ``YYYY-MM`` / ``YYYY-MM-DD``
            string.

    Returns:
        YearMonth | None: The month, or None when the value is unusable.
    """
    if value is None:
        return None
    if isinstance(value, (YearMonth, date)):
        return YearMonth.of(value)
    if isinstance(value, str):
        parts = value.strip().split("-")
        if len(parts) not in (2, 3):
            return None
        try:
            year, month = int(parts[0]), int(parts[1])
            if len(parts) == 3:
                date(year, month, int(parts[2]))
            return YearMonth(year, month)
        except ValueError:
            return None
    return None


def _shift(value: MonthLike | None, months: int):
    if isinstance(value, YearMonth):
        return value.shifted(months)
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone()
    if isinstance(value, date):
        target = YearMonth(value.year, value.month).shifted(months)
        day = min(value.day, calendar.monthrange(target.year, target.month)[1])
        return value.replace(year=target.year, month=target.month, day=day)
    month = coerce_month(value)
    if month is None:
        return None
    return month.shifted(months)


def previous_month(value: MonthLike | None):
    """Return ``value`` moved back one calendar month.

    Days past the end of the target month clamp to its last day, so March 31
    becomes February 28 (29 in leap years). Dates stay dates, datetimes keep
    their time and timezone, strings come back as YearMonth.
    """
    return _shift(value, -1)


def next_month(value: MonthLike | None):
    """Return ``value`` moved forward one calendar month."""
    return _shift(value, 1)


def month_range(value: MonthLike | None) -> tuple[date, date] | None:
    """Return the first and last day of the month containing ``value``."""
    month = coerce_month(value)
    if month is None:
        return None
    return month.first_day, month.last_day


def current_month(today: date | None = None) -> YearMonth:
    return YearMonth.of(today or datetime.now())


def is_within_free_tier_limit(
    value: MonthLike | None,
    today: date | None = None,
) -> bool:
    """Return True when ``value`` is in the current month.

    Free users only see the current month; the check compares year and month
    components, not elapsed time.
    """
    month = coerce_month(value)
    if month is None:
        return False
    return month == current_month(today)


def recent_months(count: int, today: date | None = None) -> list[YearMonth]:
    """Return the last ``count`` months, newest first."""
    latest = current_month(today)
    return [latest.shifted(-offset) for offset in range(max(count, 0))]


def _align(value: date | datetime, bound: datetime) -> datetime:
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if bound.tzinfo is not None and value.tzinfo is None:
        return value.astimezone()
    if bound.tzinfo is None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def _after_start(value: date | datetime, start: date | datetime) -> bool:
    if isinstance(start, datetime):
        return _align(value, start) >= start
    return local_date(value) >= start


def _before_end(value: date | datetime, end: date | datetime) -> bool:
    if isinstance(end, datetime):
        return _align(value, end) <= end
    return local_date(value) <= end


def within_range(
    value: date | datetime,
    start: date | datetime | None,
    end: date | datetime | None,
) -> bool:
    """Return True when ``start <= value <= end``.

    Both ends are inclusive and None means unbounded. Plain date bounds are
    compared against the local calendar date of ``value``, so a transaction
    at 23:59 on the end day is still inside the range.
    """
    if start is not None and not _after_start(value, start):
        return False
    if end is not None and not _before_end(value, end):
        return False
    return True


__all__ = [
    "MonthLike",
    "coerce_month",
    "previous_month",
    "next_month",
    "month_range",
    "current_month",
    "is_within_free_tier_limit",
    "recent_months",
    "within_range",
]
