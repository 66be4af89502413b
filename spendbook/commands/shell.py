"""Interactive menu shell.

The shell owns all input validation: the ledger service only ever sees a
non-negative amount, a real category, a valid date and single-line remarks.
"""

import sys
from decimal import Decimal
from pathlib import Path

import typer
from rich.console import Console

from spendbook.commands.display import render_expenses
from spendbook.commands.records import apply_sort, delete_with_confirmation, parse_amount_text
from spendbook.commands.session import finish_session, start_session
from spendbook.commands.stats import render_statistics
from spendbook.domain.calendar import MAX_YEAR, MIN_YEAR, CalendarDate
from spendbook.domain.models import REAL_CATEGORIES, Category, category_to_label, sanitize_remarks
from spendbook.service import LedgerService

console = Console()

MENU_ITEMS = (
    ("1", "Add an expense"),
    ("2", "Delete an expense"),
    ("3", "List all expenses"),
    ("4", "Sort by date"),
    ("5", "Sort by amount"),
    ("6", "Statistics"),
    ("0", "Exit"),
)


def display_menu() -> None:
    console.print("\n[bold cyan]===== Expense Ledger =====[/bold cyan]")
    for key, label in MENU_ITEMS:
        console.print(f"  {key}. {label}")
    console.print("[cyan]==========================[/cyan]")


def prompt_int(text: str, minimum: int, maximum: int) -> int:
    """Prompt until the user enters an integer within [minimum, maximum].

    Args:
        text: Prompt text.
        minimum: Smallest accepted value.
        maximum: Largest accepted value.

    Returns:
        The accepted integer.
    """
    while True:
        raw: str = typer.prompt(text, type=str)
        try:
            value = int(raw.strip())
        except ValueError:
            console.print(f"[red]Please enter a whole number between {minimum} and {maximum}[/red]")
            continue
        if minimum <= value <= maximum:
            return value
        console.print(f"[red]Please enter a whole number between {minimum} and {maximum}[/red]")


def prompt_amount() -> Decimal:
    """Prompt until the user enters a non-negative amount."""
    while True:
        raw: str = typer.prompt("Amount", type=str)
        try:
            return parse_amount_text(raw)
        except ValueError:
            console.print("[red]Invalid input, please enter a non-negative number[/red]")


def prompt_category() -> Category:
    """Show the categories and prompt for one (1-based on screen)."""
    console.print("[cyan]Categories:[/cyan]")
    for idx, category in enumerate(REAL_CATEGORIES, 1):
        console.print(f"  {idx}. {category_to_label(category)}")
    choice = prompt_int(f"Category (1-{len(REAL_CATEGORIES)})", 1, len(REAL_CATEGORIES))
    return REAL_CATEGORIES[choice - 1]


def prompt_date() -> CalendarDate:
    """Prompt for year, month and day until they form a valid date."""
    while True:
        year = prompt_int("Year (YYYY)", MIN_YEAR, MAX_YEAR)
        month = prompt_int("Month (MM)", 1, 12)
        day = prompt_int("Day (DD)", 1, 31)
        date = CalendarDate(year, month, day)
        if date.is_valid():
            return date
        console.print(f"[red]{date} is not a valid date, please try again[/red]")


def handle_add(service: LedgerService) -> None:
    console.print("\n[bold]Add a new expense[/bold]")
    amount = prompt_amount()
    category = prompt_category()
    date = prompt_date()
    remarks: str = typer.prompt("Remarks (optional)", type=str, default="", show_default=False)

    expense_id = service.add(amount, category, date, sanitize_remarks(remarks))
    console.print(f"[green]✓[/green] Expense added (ID: {expense_id})")


def handle_delete(service: LedgerService, countdown: int) -> None:
    console.print("\n[bold]Delete an expense[/bold]")
    render_expenses(service.list(), "Current expenses")
    if not service.list():
        return
    if prompt_int("Delete a record? (1 = yes, 0 = no)", 0, 1) == 0:
        return

    expense_id = prompt_int("ID of the record to delete", 1, sys.maxsize)
    delete_with_confirmation(service, expense_id, yes=False, countdown=countdown)


def dispatch(choice: str, service: LedgerService, countdown: int) -> bool:
    """Run one menu action.

    Args:
        choice: Menu key typed by the user.
        service: Open ledger service.
        countdown: Seconds for the delete confirmation countdown.

    Returns:
        False when the user chose to exit, True otherwise.
    """
    if choice == "0":
        console.print("[yellow]Exiting[/yellow]")
        return False

    if choice == "1":
        handle_add(service)
    elif choice == "2":
        handle_delete(service, countdown)
    elif choice == "3":
        render_expenses(service.list())
    elif choice == "4":
        render_expenses(service.list(), apply_sort(service, "date"))
    elif choice == "5":
        render_expenses(service.list(), apply_sort(service, "amount"))
    elif choice == "6":
        render_statistics(service.statistics())
    else:
        console.print("[red]Invalid choice, please try again[/red]")
        return True

    typer.prompt("\nPress Enter to continue", type=str, default="", show_default=False)
    return True


def run_menu(service: LedgerService, countdown: int) -> None:
    """Menu loop; returns when the user exits."""
    while True:
        display_menu()
        choice: str = typer.prompt("Your choice", type=str)
        if not dispatch(choice.strip(), service, countdown):
            return


def shell_command(data_path: Path, countdown: int = 15) -> None:
    """Run the interactive menu, saving once on exit."""
    service = start_session(data_path)
    try:
        run_menu(service, countdown)
    except typer.Abort:
        console.print("\n[yellow]Interrupted, saving and exiting[/yellow]")
    finally:
        saved = finish_session(service)

    if not saved:
        sys.exit(1)
