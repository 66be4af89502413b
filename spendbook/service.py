"""Ledger service: owns the in-memory ledger between load and save.

The service loads the ledger file when constructed and writes it back
exactly once when closed. All mutations happen in memory in between.
"""

from decimal import Decimal, InvalidOperation
from pathlib import Path
from types import TracebackType

from spendbook.domain.calendar import CalendarDate
from spendbook.domain.ledger import Ledger, find_index, reconcile_next_id, sorted_by_amount, sorted_by_date
from spendbook.domain.models import Category, Expense, ExpenseId, Remarks, has_line_break
from spendbook.domain.report import LedgerStatistics, compute_statistics
from spendbook.store.flatfile import LoadResult, load_ledger, save_ledger


class LedgerService:
    """In-memory expense ledger backed by a flat file."""

    def __init__(self, data_path: Path) -> None:
        self._data_path = data_path
        self._load_result: LoadResult = load_ledger(data_path)

        loaded = self._load_result.ledger
        stored_next_id = loaded.next_id if self._load_result.found else 1
        self._records: list[Expense] = list(loaded.records)
        self._next_id = reconcile_next_id(stored_next_id, self._records)

        self._save_result: bool | None = None

    @property
    def data_path(self) -> Path:
        return self._data_path

    @property
    def load_result(self) -> LoadResult:
        """What happened when the ledger file was read."""
        return self._load_result

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def closed(self) -> bool:
        return self._save_result is not None

    def add(self, amount: Decimal, category: Category, date: CalendarDate, remarks: str = "") -> ExpenseId:
        """Append a new expense and return its id.

        Args:
            amount: Non-negative amount.
            category: Any category except INVALID.
            date: A valid calendar date.
            remarks: Single-line note, may be empty.

        Returns:
            The newly allocated id.

        Raises:
            ValueError: If any precondition does not hold.
        """
        try:
            value = Decimal(str(amount))
        except InvalidOperation as e:
            raise ValueError(f"Amount must be a number, got {amount!r}") from e
        if not value.is_finite() or value < 0:
            raise ValueError(f"Amount must be a non-negative number, got {amount}")
        if category is Category.INVALID:
            raise ValueError("Category must not be INVALID")
        if not date.is_valid():
            raise ValueError(f"Invalid date: {date}")
        if has_line_break(remarks):
            raise ValueError("Remarks must be a single line")

        expense_id = ExpenseId(self._next_id)
        self._records.append(
            Expense(id=expense_id, amount=value, category=category, date=date, remarks=Remarks(remarks))
        )
        self._next_id += 1
        return expense_id

    def delete(self, expense_id: int) -> bool:
        """Remove the record with the given id.

        Returns:
            True if a record was removed, False if no record has that id.
        """
        idx = find_index(self._records, expense_id)
        if idx is None:
            return False
        del self._records[idx]
        return True

    def get(self, expense_id: int) -> Expense | None:
        idx = find_index(self._records, expense_id)
        return None if idx is None else self._records[idx]

    def sort_by_date(self) -> None:
        self._records[:] = sorted_by_date(self._records)

    def sort_by_amount(self) -> None:
        self._records[:] = sorted_by_amount(self._records)

    def statistics(self) -> LedgerStatistics:
        return compute_statistics(self._records)

    def list(self) -> tuple[Expense, ...]:
        """Read-only snapshot of the records in current order."""
        return tuple(self._records)

    def snapshot(self) -> Ledger:
        """Copy of the current ledger state."""
        return Ledger(next_id=self._next_id, records=list(self._records))

    def close(self) -> bool:
        """Save the ledger to disk.

        Only the first call writes; later calls return the first result.

        Returns:
            True if the ledger was saved.
        """
        if self._save_result is None:
            self._save_result = save_ledger(self._data_path, self.snapshot())
        return self._save_result

    def __enter__(self) -> "LedgerService":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def open_ledger(data_path: Path) -> LedgerService:
    """Load the ledger at data_path into a new service."""
    return LedgerService(data_path)
