"""Calendar date value used by expense records.

Validity is checked, not enforced: a CalendarDate may hold any three
integers, and callers must call is_valid() before trusting one.
"""

from dataclasses import dataclass
from datetime import date

MIN_YEAR = 1900
MAX_YEAR = 2100

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month.

    Args:
        year: Calendar year.
        month: Month number (1-12).

    Returns:
        Day count, or 0 if the month is out of range.
    """
    if not 1 <= month <= 12:
        return 0
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Immutable year/month/day triple, ordered lexicographically."""

    year: int
    month: int
    day: int

    def is_valid(self) -> bool:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            return False
        return 1 <= self.day <= days_in_month(self.year, self.month)

    def to_date(self) -> date:
        """Convert to datetime.date.

        Raises:
            ValueError: If the date is not valid.
        """
        if not self.is_valid():
            raise ValueError(f"Invalid date: {self}")
        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(value.year, value.month, value.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
