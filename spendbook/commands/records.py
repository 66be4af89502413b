"""One-shot record commands (add, delete, list)."""

import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from spendbook.commands.confirm import confirm_deletion
from spendbook.commands.display import format_amount, render_expense_details, render_expenses
from spendbook.commands.session import finish_session, start_session
from spendbook.dates import parse_date_text
from spendbook.domain.models import REAL_CATEGORIES, Category, category_to_label, label_to_category, sanitize_remarks
from spendbook.service import LedgerService

console = Console()

SORT_KEYS = ("date", "amount")


def parse_amount_text(raw: str) -> Decimal:
    """Parse a user-entered amount.

    Args:
        raw: Amount text, e.g. "12.50" or "1,200".

    Returns:
        Non-negative finite Decimal.

    Raises:
        ValueError: If the text is not a non-negative number.
    """
    try:
        amount = Decimal(raw.strip().replace(",", ""))
    except InvalidOperation as e:
        raise ValueError(f"'{raw}' is not a number") from e
    if not amount.is_finite() or amount < 0:
        raise ValueError("Amount must be a non-negative number")
    return amount


def parse_category_text(raw: str) -> Category:
    """Parse a category given as label, name or 0-based index.

    Raises:
        ValueError: If nothing matches.
    """
    category = label_to_category(raw)
    if category is Category.INVALID:
        choices = ", ".join(f"{int(c)}={category_to_label(c)}" for c in REAL_CATEGORIES)
        raise ValueError(f"Unknown category '{raw}' (choose one of: {choices})")
    return category


def apply_sort(service: LedgerService, sort_by: str | None) -> str:
    """Sort the ledger in place and return a table title for the new order."""
    if sort_by == "date":
        service.sort_by_date()
        return "Expenses by date"
    if sort_by == "amount":
        service.sort_by_amount()
        return "Expenses by amount"
    return "All expenses"


def add_command(data_path: Path, amount: str, category: str, date: str, remarks: str = "") -> None:
    """Add an expense record.

    Args:
        data_path: Ledger file.
        amount: Amount text.
        category: Category label, name or 0-based index.
        date: Date text (YYYY-MM-DD, DD/MM/YYYY, ...).
        remarks: Optional note; line breaks become spaces.
    """
    try:
        parsed_amount = parse_amount_text(amount)
        parsed_category = parse_category_text(category)
        parsed_date = parse_date_text(date)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        console.print("[dim]Accepted date formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
        sys.exit(1)

    service = start_session(data_path, quiet=True)
    expense_id = service.add(parsed_amount, parsed_category, parsed_date, sanitize_remarks(remarks))

    console.print(f"[green]✓[/green] Expense added (ID: {expense_id})")
    console.print(f"  Amount: {format_amount(parsed_amount)}")
    console.print(f"  Category: {category_to_label(parsed_category)}")
    console.print(f"  Date: {parsed_date}")

    if not finish_session(service, quiet=True):
        sys.exit(1)


def delete_with_confirmation(service: LedgerService, expense_id: int, yes: bool, countdown: int) -> bool:
    """Show a record, ask for confirmation, then delete it.

    Args:
        service: Open ledger service.
        expense_id: Id of the record to delete.
        yes: Skip the confirmation prompt.
        countdown: Seconds for the confirmation countdown.

    Returns:
        True if the record was deleted.
    """
    expense = service.get(expense_id)
    if expense is None:
        console.print(f"[yellow]No expense with ID {expense_id}[/yellow]")
        return False

    render_expense_details(expense)
    if not yes and not confirm_deletion(countdown):
        console.print("[dim]Deletion cancelled[/dim]")
        return False

    service.delete(expense_id)
    console.print(f"[green]✓[/green] Expense {expense_id} deleted")
    return True


def delete_command(data_path: Path, expense_id: int, yes: bool = False, countdown: int = 15) -> None:
    """Delete an expense record after confirmation.

    Args:
        data_path: Ledger file.
        expense_id: Id of the record to delete.
        yes: Skip the confirmation prompt.
        countdown: Seconds for the confirmation countdown.
    """
    service = start_session(data_path, quiet=True)
    try:
        delete_with_confirmation(service, expense_id, yes, countdown)
    finally:
        saved = finish_session(service, quiet=True)
    if not saved:
        sys.exit(1)


def list_command(data_path: Path, sort_by: str | None = None) -> None:
    """List expense records, optionally re-sorting them first.

    A sort is persisted: the ledger file keeps the new order.
    """
    if sort_by is not None and sort_by not in SORT_KEYS:
        console.print(f"[red]Unknown sort key '{escape(sort_by)}' (use 'date' or 'amount')[/red]")
        sys.exit(1)

    service = start_session(data_path, quiet=True)
    title = apply_sort(service, sort_by)
    render_expenses(service.list(), title)

    if not finish_session(service, quiet=True):
        sys.exit(1)
