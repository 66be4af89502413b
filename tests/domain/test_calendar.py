"""Tests for spendbook.domain.calendar."""

from datetime import date

import pytest

from spendbook.domain.calendar import CalendarDate, days_in_month, is_leap_year


class TestIsLeapYear:
    """Tests for is_leap_year."""

    def test_divisible_by_four(self) -> None:
        """Should treat years divisible by 4 as leap years."""
        assert is_leap_year(2024)
        assert not is_leap_year(2023)

    def test_century_rules(self) -> None:
        """Should skip centuries unless divisible by 400."""
        assert not is_leap_year(1900)
        assert not is_leap_year(2100)
        assert is_leap_year(2000)


class TestDaysInMonth:
    """Tests for days_in_month."""

    def test_february(self) -> None:
        """Should give 29 days in leap Februaries, 28 otherwise."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28

    def test_thirty_and_thirty_one_day_months(self) -> None:
        """Should know the length of each month."""
        assert days_in_month(2025, 4) == 30
        assert days_in_month(2025, 12) == 31

    def test_out_of_range_month(self) -> None:
        """Should return 0 for months outside 1-12."""
        assert days_in_month(2025, 0) == 0
        assert days_in_month(2025, 13) == 0


class TestCalendarDate:
    """Tests for CalendarDate."""

    @pytest.mark.parametrize(
        "year,month,day",
        [(2024, 2, 29), (1900, 1, 1), (2100, 12, 31), (2025, 4, 30)],
    )
    def test_valid_dates(self, year: int, month: int, day: int) -> None:
        """Should accept real dates within 1900-2100."""
        assert CalendarDate(year, month, day).is_valid()

    @pytest.mark.parametrize(
        "year,month,day",
        [
            (2023, 2, 29),  # not a leap year
            (1900, 2, 29),  # century, not a leap year
            (1899, 12, 31),  # before range
            (2101, 1, 1),  # after range
            (2025, 4, 31),  # April has 30 days
            (2025, 0, 10),
            (2025, 13, 10),
            (2025, 1, 0),
        ],
    )
    def test_invalid_dates(self, year: int, month: int, day: int) -> None:
        """Should reject impossible or out-of-range dates."""
        assert not CalendarDate(year, month, day).is_valid()

    def test_constructor_does_not_validate(self) -> None:
        """Should allow building an invalid date and checking it later."""
        bad = CalendarDate(2025, 2, 30)
        assert bad.day == 30
        assert not bad.is_valid()

    def test_ordering_is_lexicographic(self) -> None:
        """Should order by year, then month, then day."""
        assert CalendarDate(2024, 3, 10) < CalendarDate(2024, 3, 15)
        assert CalendarDate(2023, 12, 31) < CalendarDate(2024, 1, 1)
        assert CalendarDate(2024, 2, 28) < CalendarDate(2024, 10, 1)
        assert CalendarDate(2024, 3, 15) == CalendarDate(2024, 3, 15)

    def test_str_is_zero_padded_iso(self) -> None:
        """Should render as YYYY-MM-DD."""
        assert str(CalendarDate(2024, 3, 5)) == "2024-03-05"

    def test_date_conversion(self) -> None:
        """Should convert to and from datetime.date."""
        value = CalendarDate(2024, 3, 15)
        assert value.to_date() == date(2024, 3, 15)
        assert CalendarDate.from_date(date(2024, 3, 15)) == value

    def test_to_date_rejects_invalid(self) -> None:
        """Should refuse to convert an invalid date."""
        with pytest.raises(ValueError):
            CalendarDate(2025, 2, 30).to_date()

    def test_is_immutable(self) -> None:
        """Should not allow fields to change after construction."""
        value = CalendarDate(2024, 3, 15)
        with pytest.raises(AttributeError):
            value.day = 16  # type: ignore[misc]
