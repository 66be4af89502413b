"""Domain models and types for spendbook.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from spendbook.domain.calendar import CalendarDate
from spendbook.domain.ledger import Ledger
from spendbook.domain.models import Category, Expense, ExpenseId, Remarks
from spendbook.domain.report import CategoryTotals, LedgerStatistics

__all__ = [
    "CalendarDate",
    "Category",
    "CategoryTotals",
    "Expense",
    "ExpenseId",
    "Ledger",
    "LedgerStatistics",
    "Remarks",
]
