"""Domain type definitions for spendbook.

These types describe a single expense entry:
- ExpenseId: Ledger-assigned record id (never reused)
- Remarks: Free-text note, always a single line
- Category: Fixed set of spending categories
- Expense: One immutable ledger record
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from typing import NewType

from spendbook.domain.calendar import CalendarDate

# Ids are allocated by the ledger, starting at 1
ExpenseId = NewType("ExpenseId", int)

# Remarks never contain a line break (one line per field on disk)
Remarks = NewType("Remarks", str)


class Category(IntEnum):
    """Spending category.

    The integer value is the on-disk encoding and must not change.
    """

    LEARNING_SUPPLIES = 0
    DAILY_NECESSITIES = 1
    TRANSPORTATION = 2
    FOOD = 3
    OTHER = 4
    INVALID = 5


REAL_CATEGORIES: tuple[Category, ...] = tuple(c for c in Category if c is not Category.INVALID)

_LABELS: dict[Category, str] = {
    Category.LEARNING_SUPPLIES: "Learning Supplies",
    Category.DAILY_NECESSITIES: "Daily Necessities",
    Category.TRANSPORTATION: "Transportation",
    Category.FOOD: "Food",
    Category.OTHER: "Other",
}

UNKNOWN_LABEL = "Unknown"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Labels written by the original command-line tool
_LEGACY_LABELS: dict[str, Category] = {
    "学习用品": Category.LEARNING_SUPPLIES,
    "日用品": Category.DAILY_NECESSITIES,
    "交通费": Category.TRANSPORTATION,
    "伙食费": Category.FOOD,
    "其他": Category.OTHER,
}


@dataclass(frozen=True)
class Expense:
    """Immutable expense record."""

    id: ExpenseId
    amount: Decimal
    category: Category
    date: CalendarDate
    remarks: Remarks = Remarks("")


def category_to_label(category: Category) -> str:
    """Return the display label for a category.

    Args:
        category: Category to label.

    Returns:
        Display label, or "Unknown" for the INVALID sentinel.
    """
    return _LABELS.get(category, UNKNOWN_LABEL)


def category_from_index(index: int) -> Category:
    """Map a 0-based wire index to a category.

    Args:
        index: Integer as stored on disk.

    Returns:
        Matching category, or INVALID if out of range.
    """
    if 0 <= index < len(REAL_CATEGORIES):
        return Category(index)
    return Category.INVALID


def label_to_category(text: str) -> Category:
    """Parse a category from a label, member name, legacy label, or index.

    Args:
        text: Raw text (e.g. "Food", "food", "FOOD", "伙食费" or "3").

    Returns:
        Matching category, or INVALID when nothing matches.
    """
    candidate = text.strip()
    if not candidate:
        return Category.INVALID

    if candidate.isascii() and candidate.isdigit():
        return category_from_index(int(candidate))

    if candidate in _LEGACY_LABELS:
        return _LEGACY_LABELS[candidate]

    folded = " ".join(candidate.replace("_", " ").split()).casefold()
    for category, label in _LABELS.items():
        if folded == label.casefold():
            return category

    return Category.INVALID


def sanitize_remarks(text: str) -> Remarks:
    """Collapse line breaks so remarks fit on a single line.

    Args:
        text: Raw remarks text.

    Returns:
        Remarks with each CRLF, CR or LF replaced by a space.
    """
    return Remarks(_LINE_BREAK.sub(" ", text))


def has_line_break(text: str) -> bool:
    """Check whether text would span more than one line on disk."""
    return "\n" in text or "\r" in text
