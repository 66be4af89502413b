"""Tests for spendbook.domain.report pure functions."""

from decimal import Decimal

from spendbook.domain.calendar import CalendarDate
from spendbook.domain.models import Category, Expense, ExpenseId, Remarks
from spendbook.domain.report import (
    CategoryTotals,
    compute_statistics,
    find_max_category,
    find_max_single_expense,
    summarize_by_category,
)


def make_expense(expense_id: int, amount: str, category: Category, day: int = 1) -> Expense:
    return Expense(
        id=ExpenseId(expense_id),
        amount=Decimal(amount),
        category=category,
        date=CalendarDate(2024, 3, day),
        remarks=Remarks(""),
    )


class TestComputeStatistics:
    """Tests for compute_statistics."""

    def test_empty_ledger(self) -> None:
        """Should report no records instead of dividing by zero."""
        stats = compute_statistics([])

        assert stats.is_empty
        assert stats.count == 0
        assert stats.total == Decimal("0")
        assert stats.average is None
        assert stats.per_category == {}
        assert stats.max_category is None
        assert stats.max_single_expense is None

    def test_two_record_example(self) -> None:
        """Should total 17.50 over two records."""
        lunch = make_expense(1, "12.50", Category.FOOD, day=15)
        bus = make_expense(2, "5.00", Category.TRANSPORTATION, day=10)

        stats = compute_statistics([lunch, bus])

        assert not stats.is_empty
        assert stats.total == Decimal("17.50")
        assert stats.count == 2
        assert stats.average == Decimal("8.75")
        assert stats.max_category is Category.FOOD
        assert stats.max_single_expense == lunch

    def test_category_totals_add_up(self) -> None:
        """Should have per-category sums and counts matching the totals."""
        records = [
            make_expense(1, "12.50", Category.FOOD),
            make_expense(2, "5.00", Category.TRANSPORTATION),
            make_expense(3, "7.25", Category.FOOD),
            make_expense(4, "30", Category.LEARNING_SUPPLIES),
            make_expense(5, "0", Category.OTHER),
        ]

        stats = compute_statistics(records)

        assert sum((t.sum for t in stats.per_category.values()), Decimal("0")) == stats.total
        assert sum(t.count for t in stats.per_category.values()) == stats.count
        assert stats.per_category[Category.FOOD] == CategoryTotals(sum=Decimal("19.75"), count=2)


class TestSummarizeByCategory:
    """Tests for summarize_by_category."""

    def test_only_present_categories_in_declaration_order(self) -> None:
        """Should list categories that occur, in enumeration order."""
        records = [
            make_expense(1, "1", Category.OTHER),
            make_expense(2, "1", Category.FOOD),
            make_expense(3, "1", Category.LEARNING_SUPPLIES),
        ]

        totals = summarize_by_category(records)

        assert list(totals) == [Category.LEARNING_SUPPLIES, Category.FOOD, Category.OTHER]
        assert Category.DAILY_NECESSITIES not in totals


class TestFindMaxCategory:
    """Tests for find_max_category."""

    def test_largest_sum_wins(self) -> None:
        """Should pick the category with the largest sum, not the most records."""
        totals = {
            Category.FOOD: CategoryTotals(sum=Decimal("10"), count=5),
            Category.OTHER: CategoryTotals(sum=Decimal("50"), count=1),
        }
        assert find_max_category(totals) is Category.OTHER

    def test_tie_goes_to_first_declared(self) -> None:
        """Should break ties by enumeration order."""
        totals = {
            Category.FOOD: CategoryTotals(sum=Decimal("10"), count=1),
            Category.LEARNING_SUPPLIES: CategoryTotals(sum=Decimal("10"), count=1),
        }
        assert find_max_category(totals) is Category.LEARNING_SUPPLIES

    def test_all_zero_amounts(self) -> None:
        """Should still name a category when every sum is zero."""
        totals = {Category.TRANSPORTATION: CategoryTotals(sum=Decimal("0"), count=2)}
        assert find_max_category(totals) is Category.TRANSPORTATION

    def test_no_totals(self) -> None:
        """Should return None when there is nothing to compare."""
        assert find_max_category({}) is None


class TestFindMaxSingleExpense:
    """Tests for find_max_single_expense."""

    def test_tie_goes_to_first_record(self) -> None:
        """Should keep the earliest record among equal amounts."""
        first = make_expense(7, "20", Category.FOOD)
        second = make_expense(3, "20.00", Category.OTHER)
        small = make_expense(1, "5", Category.FOOD)

        assert find_max_single_expense([small, first, second]) is first

    def test_empty(self) -> None:
        """Should return None without records."""
        assert find_max_single_expense([]) is None
