"""Tests for spendbook.domain.ledger pure functions."""

from decimal import Decimal

from spendbook.domain.calendar import CalendarDate
from spendbook.domain.ledger import (
    Ledger,
    find_index,
    max_record_id,
    reconcile_next_id,
    sorted_by_amount,
    sorted_by_date,
)
from spendbook.domain.models import Category, Expense, ExpenseId, Remarks


def make_expense(expense_id: int, amount: str, date: CalendarDate, category: Category = Category.FOOD) -> Expense:
    return Expense(
        id=ExpenseId(expense_id),
        amount=Decimal(amount),
        category=category,
        date=date,
        remarks=Remarks(""),
    )


class TestLedger:
    """Tests for the Ledger container."""

    def test_empty_ledger(self) -> None:
        """Should start with next id 1 and no records."""
        ledger = Ledger.empty()
        assert ledger.next_id == 1
        assert ledger.records == []

    def test_empty_ledgers_do_not_share_records(self) -> None:
        """Should give each ledger its own record list."""
        first = Ledger.empty()
        second = Ledger.empty()
        first.records.append(make_expense(1, "1.00", CalendarDate(2024, 1, 1)))
        assert second.records == []


class TestReconcileNextId:
    """Tests for reconcile_next_id."""

    def test_empty_ledger_starts_at_one(self) -> None:
        """Should never go below 1."""
        assert reconcile_next_id(1, []) == 1
        assert reconcile_next_id(0, []) == 1
        assert reconcile_next_id(-4, []) == 1

    def test_keeps_counter_ahead_of_deleted_ids(self) -> None:
        """Should keep a stored counter that is already above every id."""
        records = [make_expense(1, "1.00", CalendarDate(2024, 1, 1))]
        assert reconcile_next_id(5, records) == 5

    def test_raises_stale_counter(self) -> None:
        """Should move a lost or stale counter past the highest id."""
        records = [
            make_expense(3, "1.00", CalendarDate(2024, 1, 1)),
            make_expense(7, "2.00", CalendarDate(2024, 1, 2)),
        ]
        assert reconcile_next_id(1, records) == 8
        assert reconcile_next_id(7, records) == 8

    def test_max_record_id(self) -> None:
        """Should return 0 for no records."""
        assert max_record_id([]) == 0
        assert max_record_id([make_expense(4, "1.00", CalendarDate(2024, 1, 1))]) == 4


class TestFindIndex:
    """Tests for find_index."""

    def test_finds_record(self) -> None:
        """Should return the position of the matching id."""
        records = [
            make_expense(1, "1.00", CalendarDate(2024, 1, 1)),
            make_expense(4, "2.00", CalendarDate(2024, 1, 2)),
        ]
        assert find_index(records, 4) == 1

    def test_missing_record(self) -> None:
        """Should return None when no record has the id."""
        assert find_index([make_expense(1, "1.00", CalendarDate(2024, 1, 1))], 99) is None


class TestSorting:
    """Tests for sorted_by_date and sorted_by_amount."""

    def test_sort_by_date_ascending(self) -> None:
        """Should order records from oldest to newest."""
        records = [
            make_expense(1, "12.50", CalendarDate(2024, 3, 15)),
            make_expense(2, "5.00", CalendarDate(2024, 3, 10)),
            make_expense(3, "1.00", CalendarDate(2023, 12, 31)),
        ]
        assert [e.id for e in sorted_by_date(records)] == [3, 2, 1]

    def test_sort_by_amount_ascending(self) -> None:
        """Should order records from smallest to largest amount."""
        records = [
            make_expense(1, "12.50", CalendarDate(2024, 3, 15)),
            make_expense(2, "5.00", CalendarDate(2024, 3, 10)),
            make_expense(3, "100", CalendarDate(2024, 3, 1)),
        ]
        assert [e.id for e in sorted_by_amount(records)] == [2, 1, 3]

    def test_sort_compares_amounts_numerically(self) -> None:
        """Should compare 9.5 below 10.00 regardless of text form."""
        records = [
            make_expense(1, "10.00", CalendarDate(2024, 1, 1)),
            make_expense(2, "9.5", CalendarDate(2024, 1, 1)),
        ]
        assert [e.id for e in sorted_by_amount(records)] == [2, 1]

    def test_sorts_are_idempotent(self) -> None:
        """Should give the same order when applied twice."""
        records = [
            make_expense(1, "3.00", CalendarDate(2024, 5, 1)),
            make_expense(2, "1.00", CalendarDate(2024, 2, 1)),
            make_expense(3, "3.00", CalendarDate(2024, 2, 1)),
            make_expense(4, "2.00", CalendarDate(2024, 9, 1)),
        ]
        once = sorted_by_date(records)
        assert sorted_by_date(once) == once

        once = sorted_by_amount(records)
        assert sorted_by_amount(once) == once

    def test_does_not_modify_input(self) -> None:
        """Should return a new list."""
        records = [
            make_expense(1, "3.00", CalendarDate(2024, 5, 1)),
            make_expense(2, "1.00", CalendarDate(2024, 2, 1)),
        ]
        sorted_by_amount(records)
        assert [e.id for e in records] == [1, 2]
