"""Flat-file ledger persistence.

File layout, one value per line:

    next_id
    id
    amount
    category index (0-based)
    year
    month
    day
    remarks
    ... (7 lines per record)

Remarks come last in each group so they may contain spaces; they may not
contain CR or LF, which are replaced with spaces on write. Only LF separates
lines, with one trailing CR stripped so CRLF files still load.
"""

from contextlib import suppress
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from spendbook.domain.calendar import CalendarDate
from spendbook.domain.ledger import Ledger
from spendbook.domain.models import Category, Expense, ExpenseId, Remarks, category_from_index, sanitize_remarks

LINES_PER_RECORD = 7


class CorruptRecordError(ValueError):
    """A stored field could not be parsed as its expected type."""

    def __init__(self, line_number: int, field_name: str, raw: str) -> None:
        super().__init__(f"line {line_number}: invalid {field_name} {raw!r}")
        self.line_number = line_number
        self.field_name = field_name
        self.raw = raw


@dataclass
class LoadResult:
    """Outcome of reading a ledger file.

    found is False when the file is missing, empty or corrupt. error is set
    only for corruption or read failures; warnings list skipped records.
    """

    ledger: Ledger
    found: bool
    warnings: list[str] = field(default_factory=list)
    error: str | None = None


def _parse_int(raw: str, line_number: int, field_name: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as e:
        raise CorruptRecordError(line_number, field_name, raw) from e


def _parse_amount(raw: str, line_number: int) -> Decimal:
    try:
        amount = Decimal(raw.strip())
    except InvalidOperation as e:
        raise CorruptRecordError(line_number, "amount", raw) from e
    if not amount.is_finite():
        raise CorruptRecordError(line_number, "amount", raw)
    return amount


def split_lines(text: str) -> list[str]:
    """Split file contents on LF only.

    Form feeds, lone CRs and other Unicode separators stay inside their line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_record(lines: list[str], first_line_number: int) -> tuple[Expense | None, str | None]:
    """Parse one 7-line record group.

    Args:
        lines: Exactly seven lines (id, amount, category, year, month, day, remarks).
        first_line_number: 1-based file line number of the id line.

    Returns:
        Tuple of (expense, warning):
        - expense: Parsed record, or None if it failed validation
        - warning: Reason the record was skipped, or None

    Raises:
        CorruptRecordError: If a numeric field cannot be parsed.
    """
    n = first_line_number
    expense_id = _parse_int(lines[0], n, "id")
    amount = _parse_amount(lines[1], n + 1)
    category_index = _parse_int(lines[2], n + 2, "category")
    year = _parse_int(lines[3], n + 3, "year")
    month = _parse_int(lines[4], n + 4, "month")
    day = _parse_int(lines[5], n + 5, "day")
    remarks = lines[6]

    date = CalendarDate(year, month, day)
    category = category_from_index(category_index)

    if expense_id < 1:
        return None, f"Skipping invalid record (ID: {expense_id}): id must be positive"
    if not date.is_valid():
        return None, f"Skipping invalid record (ID: {expense_id}): bad date {date}"
    if category is Category.INVALID:
        return None, f"Skipping invalid record (ID: {expense_id}): unknown category {category_index}"
    if amount < 0:
        return None, f"Skipping invalid record (ID: {expense_id}): negative amount {amount}"

    expense = Expense(
        id=ExpenseId(expense_id),
        amount=amount,
        category=category,
        date=date,
        remarks=Remarks(remarks),
    )
    return expense, None


def parse_ledger_text(text: str) -> LoadResult:
    """Parse the full contents of a ledger file.

    Args:
        text: File contents.

    Returns:
        LoadResult. A trailing group shorter than seven lines is dropped
        silently; a corrupt numeric field discards everything. A record
        reusing an earlier id is skipped with a warning.
    """
    lines = split_lines(text)
    if not lines:
        return LoadResult(ledger=Ledger.empty(), found=False)

    try:
        next_id = int(lines[0].strip())
    except ValueError:
        return LoadResult(
            ledger=Ledger.empty(),
            found=False,
            error=f"line 1: invalid next id {lines[0]!r}",
        )

    records: list[Expense] = []
    warnings: list[str] = []
    seen_ids: set[int] = set()
    for start in range(1, len(lines), LINES_PER_RECORD):
        group = lines[start : start + LINES_PER_RECORD]
        if len(group) < LINES_PER_RECORD:
            break

        try:
            expense, warning = parse_record(group, start + 1)
        except CorruptRecordError as e:
            return LoadResult(ledger=Ledger.empty(), found=False, error=str(e))

        if warning:
            warnings.append(warning)
        if expense is None:
            continue
        if expense.id in seen_ids:
            warnings.append(f"Skipping invalid record (ID: {expense.id}): duplicate id")
            continue
        seen_ids.add(expense.id)
        records.append(expense)

    return LoadResult(ledger=Ledger(next_id=next_id, records=records), found=True, warnings=warnings)


def load_ledger(data_path: Path) -> LoadResult:
    """Load a ledger from disk.

    A missing file is the normal first-run state and is not an error.

    Args:
        data_path: Path to the ledger file.

    Returns:
        LoadResult describing what was read.
    """
    try:
        with open(data_path, encoding="utf-8", newline="") as f:
            text = f.read()
    except FileNotFoundError:
        return LoadResult(ledger=Ledger.empty(), found=False)
    except (OSError, UnicodeDecodeError) as e:
        return LoadResult(ledger=Ledger.empty(), found=False, error=f"Unable to read {data_path}: {e}")

    return parse_ledger_text(text)


def format_ledger(ledger: Ledger) -> str:
    """Render a ledger in the on-disk line format."""
    lines = [str(ledger.next_id)]
    for expense in ledger.records:
        lines.extend(
            [
                str(expense.id),
                str(expense.amount),
                str(int(expense.category)),
                str(expense.date.year),
                str(expense.date.month),
                str(expense.date.day),
                sanitize_remarks(expense.remarks),
            ]
        )
    return "\n".join(lines) + "\n"


def save_ledger(data_path: Path, ledger: Ledger) -> bool:
    """Write the whole ledger to disk.

    The file is written to a temporary sibling and moved into place, so a
    reader never sees a half-written ledger.

    Args:
        data_path: Destination path.
        ledger: Ledger to write.

    Returns:
        True if the ledger was written, False if the destination could not be written.
    """
    temp_path = data_path.with_name(data_path.name + ".tmp")
    try:
        data_path.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(format_ledger(ledger))
        temp_path.replace(data_path)
    except OSError:
        with suppress(OSError):
            temp_path.unlink(missing_ok=True)
        return False
    return True
