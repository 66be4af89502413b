"""Pure functions for ledger statistics.

This module contains the functional core for reporting operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are Decimal.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from spendbook.domain.models import REAL_CATEGORIES, Category, Expense


@dataclass(frozen=True)
class CategoryTotals:
    """Immutable spending totals for one category."""

    sum: Decimal
    count: int


@dataclass(frozen=True)
class LedgerStatistics:
    """Immutable summary of a set of expense records."""

    total: Decimal
    count: int
    average: Decimal | None
    per_category: dict[Category, CategoryTotals] = field(default_factory=dict)
    max_category: Category | None = None
    max_single_expense: Expense | None = None

    @property
    def is_empty(self) -> bool:
        return self.count == 0


def summarize_by_category(records: Sequence[Expense]) -> dict[Category, CategoryTotals]:
    """Sum and count records per category.

    Args:
        records: Expense records.

    Returns:
        Totals keyed by category, in enumeration order, for categories that occur.
    """
    sums: dict[Category, Decimal] = {}
    counts: dict[Category, int] = {}
    for expense in records:
        sums[expense.category] = sums.get(expense.category, Decimal("0")) + expense.amount
        counts[expense.category] = counts.get(expense.category, 0) + 1

    return {
        category: CategoryTotals(sum=sums[category], count=counts[category])
        for category in REAL_CATEGORIES
        if category in counts
    }


def find_max_category(per_category: dict[Category, CategoryTotals]) -> Category | None:
    """Category with the largest summed amount.

    Ties go to the category declared first.

    Args:
        per_category: Totals keyed by category.

    Returns:
        Top category, or None if there are no totals.
    """
    best: Category | None = None
    best_sum = Decimal("0")
    for category in sorted(per_category):
        category_sum = per_category[category].sum
        if best is None or category_sum > best_sum:
            best = category
            best_sum = category_sum
    return best


def find_max_single_expense(records: Sequence[Expense]) -> Expense | None:
    """Record with the largest amount; ties go to the earliest record."""
    best: Expense | None = None
    for expense in records:
        if best is None or expense.amount > best.amount:
            best = expense
    return best


def compute_statistics(records: Sequence[Expense]) -> LedgerStatistics:
    """Compute totals, average and extremes for a ledger.

    Args:
        records: Expense records in current ledger order.

    Returns:
        LedgerStatistics; average and extremes are None when there are no records.
    """
    count = len(records)
    if count == 0:
        return LedgerStatistics(total=Decimal("0"), count=0, average=None)

    total = sum((expense.amount for expense in records), start=Decimal("0"))
    per_category = summarize_by_category(records)

    return LedgerStatistics(
        total=total,
        count=count,
        average=total / count,
        per_category=per_category,
        max_category=find_max_category(per_category),
        max_single_expense=find_max_single_expense(records),
    )
