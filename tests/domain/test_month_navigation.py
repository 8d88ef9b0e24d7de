"""Tests for calendar month helpers."""

from datetime import date, datetime, timedelta, timezone

from profitlens.domain.models import YearMonth
from profitlens.domain.services.month_navigation import (
    coerce_month,
    is_within_free_tier_limit,
    month_range,
    next_month,
    previous_month,
    recent_months,
    within_range,
)


def test_previous_month_moves_one_calendar_month() -> None:
    """Days past the end of the shorter month should clamp."""
    assert previous_month(date(2025, 3, 31)) == date(2025, 2, 28)
    assert previous_month(date(2024, 3, 31)) == date(2024, 2, 29)
    assert previous_month(date(2025, 1, 15)) == date(2024, 12, 15)


def test_next_month_moves_one_calendar_month() -> None:
    """next_month should cross year boundaries and clamp days."""
    assert next_month(date(2025, 1, 31)) == date(2025, 2, 28)
    assert next_month(date(2025, 12, 15)) == date(2026, 1, 15)


def test_navigation_keeps_the_value_kind() -> None:
    """Datetimes keep their time; YearMonth and strings give YearMonth."""
    assert previous_month(datetime(2025, 1, 15, 10, 30)) == datetime(
        2024, 12, 15, 10, 30
    )
    assert next_month(YearMonth(2025, 12)) == YearMonth(2026, 1)
    assert previous_month("2025-03") == YearMonth(2025, 2)


def test_navigation_returns_none_for_unusable_input() -> None:
    """Missing or unparseable months should give None, not raise."""
    assert previous_month(None) is None
    assert next_month("not a month") is None
    assert month_range(None) is None
    assert coerce_month("2025-13") is None
    assert coerce_month("2025-02-30") is None
    assert coerce_month(42) is None


def test_month_range_returns_first_and_last_day() -> None:
    """month_range should cover the whole calendar month."""
    assert month_range(date(2024, 2, 10)) == (
        date(2024, 2, 1),
        date(2024, 2, 29),
    )
    assert month_range("2025-04") == (date(2025, 4, 1), date(2025, 4, 30))


def test_free_tier_limit_compares_year_and_month() -> None:
    """Only the current calendar month should be within the free tier."""
    today = date(2025, 3, 31)

    assert is_within_free_tier_limit(date(2025, 3, 1), today=today)
    assert not is_within_free_tier_limit(date(2025, 2, 28), today=today)
    assert not is_within_free_tier_limit(date(2024, 3, 15), today=today)
    assert not is_within_free_tier_limit(None, today=today)


def test_recent_months_lists_newest_first() -> None:
    """recent_months should walk back across the year boundary."""
    assert recent_months(3, today=date(2025, 1, 10)) == [
        YearMonth(2025, 1),
        YearMonth(2024, 12),
        YearMonth(2024, 11),
    ]
    assert recent_months(0, today=date(2025, 1, 10)) == []


def test_within_range_is_inclusive_on_both_ends() -> None:
    """Date bounds should include the whole first and last day."""
    start, end = date(2025, 3, 1), date(2025, 3, 31)

    assert within_range(date(2025, 3, 1), start, end)
    assert within_range(datetime(2025, 3, 31, 23, 59), start, end)
    assert not within_range(date(2025, 2, 28), start, end)
    assert not within_range(datetime(2025, 4, 1, 0, 0), start, end)
    assert within_range(date(1999, 1, 1), None, None)


def test_within_range_with_datetime_bounds() -> None:
    """Datetime bounds should compare at full precision."""
    start = datetime(2025, 3, 1, 12, 0)
    end = datetime(2025, 3, 2, 12, 0)

    assert within_range(datetime(2025, 3, 1, 12, 0), start, end)
    assert within_range(datetime(2025, 3, 2, 12, 0), start, end)
    assert not within_range(datetime(2025, 3, 1, 11, 59), start, end)
    assert within_range(date(2025, 3, 2), start, end)


def test_year_month_of_aware_datetime_uses_local_calendar() -> None:
    """Aware datetimes should be grouped by their local calendar month."""
    moment = datetime(2025, 3, 31, 23, 30, tzinfo=timezone.utc)

    local = moment.astimezone()

    assert YearMonth.of(moment) == YearMonth(local.year, local.month)


def test_navigation_of_aware_datetime_uses_local_calendar() -> None:
    """Shifting an aware datetime moves its local month, not its own zone's."""
    moment = datetime(2025, 3, 1, 2, 0, tzinfo=timezone(timedelta(hours=14)))
    local_month = YearMonth.of(moment)

    earlier = previous_month(moment)
    later = next_month(moment)

    assert YearMonth.of(earlier) == local_month.previous()
    assert YearMonth.of(later) == local_month.next()
    assert earlier.tzinfo is not None
    assert later - earlier > timedelta(days=55)


def test_year_month_contains_any_time_of_the_month() -> None:
    """Membership covers the whole first and last day."""
    march = YearMonth(2025, 3)

    assert march.contains(date(2025, 3, 1))
    assert march.contains(datetime(2025, 3, 31, 23, 59))
    assert not march.contains(datetime(2025, 4, 1, 0, 0))
    assert not march.contains(date(2024, 3, 15))
