"""Calendar month values interpreted in the local calendar."""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time


def local_date(value: date | datetime) -> date:
    """Return the local calendar date of ``value``.

    Aware datetimes are converted to the local timezone first; naive datetimes
    and plain dates are taken as already local.

    Args:
        value: Date or datetime to normalize.

    Returns:
        date: Calendar date in the local timezone.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def local_datetime(value: date | datetime) -> datetime:
    """Return ``value`` as a naive datetime on the local clock.

    Plain dates are read as midnight. Aware datetimes are converted to the
    local timezone and stripped of their tzinfo so they compare with naive
    values.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    return datetime.combine(value, time.min)


@dataclass(frozen=True, order=True)
class YearMonth:
    """A calendar month of a given year."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be within 1..12, got {self.month}")

    @classmethod
    def of(cls, value: "date | datetime | YearMonth") -> "YearMonth":
        """Return the local calendar month containing ``value``."""
        if isinstance(value, YearMonth):
            return value
        day = local_date(value)
        return cls(day.year, day.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.days)

    @property
    def days(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def label(self) -> str:
        """Month and year, e.g. ``March 2025``."""
        return f"{calendar.month_name[self.month]} {self.year}"

    def shifted(self, months: int) -> "YearMonth":
        index = self.year * 12 + (self.month - 1) + months
        return YearMonth(index // 12, index % 12 + 1)

    def previous(self) -> "YearMonth":
        return self.shifted(-1)

    def next(self) -> "YearMonth":
        return self.shifted(1)

    def contains(self, value: date | datetime) -> bool:
        """Return True when ``value`` falls in this month, whatever the time."""
        return YearMonth.of(value) == self

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


__all__ = ["YearMonth", "local_date", "local_datetime"]
