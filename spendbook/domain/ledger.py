"""Pure functions for ledger ordering and id allocation.

This module contains the functional core for ledger operations:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from spendbook.domain.models import Expense, ExpenseId


@dataclass
class Ledger:
    """Next-id allocator plus the ordered expense records."""

    next_id: int = 1
    records: list[Expense] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "Ledger":
        return cls(next_id=1, records=[])


def max_record_id(records: Iterable[Expense]) -> int:
    """Highest id among records, or 0 if there are none."""
    return max((expense.id for expense in records), default=0)


def reconcile_next_id(stored_next_id: int, records: Sequence[Expense]) -> int:
    """Compute a next id that satisfies the allocator invariant.

    A stale or lost counter is raised above every id already in use.

    Args:
        stored_next_id: Counter read from storage (1 if unavailable).
        records: Records currently in the ledger.

    Returns:
        Next id to allocate, always at least 1.
    """
    return max(stored_next_id, max_record_id(records) + 1, 1)


def find_index(records: Sequence[Expense], expense_id: ExpenseId | int) -> int | None:
    """Find the position of a record by id.

    Args:
        records: Records to search.
        expense_id: Id to look for.

    Returns:
        Index of the matching record, or None if absent.
    """
    for idx, expense in enumerate(records):
        if expense.id == expense_id:
            return idx
    return None


def sorted_by_date(records: Iterable[Expense]) -> list[Expense]:
    """Records in ascending date order."""
    return sorted(records, key=lambda expense: expense.date)


def sorted_by_amount(records: Iterable[Expense]) -> list[Expense]:
    """Records in ascending amount order."""
    return sorted(records, key=lambda expense: expense.amount)
