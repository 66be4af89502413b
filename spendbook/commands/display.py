"""Console rendering shared by the ledger commands."""

from collections.abc import Sequence
from decimal import Decimal

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from spendbook.domain.models import Expense, category_to_label

console = Console()


def format_amount(amount: Decimal) -> str:
    """Format an amount with two decimals and thousands separators."""
    return f"{amount:,.2f}"


def build_expense_table(records: Sequence[Expense], title: str) -> Table:
    """Build a table of expense records in the given order.

    Args:
        records: Records to show.
        title: Table title.

    Returns:
        Rich table ready to print.
    """
    table = Table(title=title)
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Amount", justify="right")
    table.add_column("Category", style="magenta")
    table.add_column("Date", style="cyan")
    table.add_column("Remarks", style="white")

    for expense in records:
        table.add_row(
            str(expense.id),
            format_amount(expense.amount),
            category_to_label(expense.category),
            str(expense.date),
            escape(expense.remarks) if expense.remarks else "[dim]-[/dim]",
        )
    return table


def render_expenses(records: Sequence[Expense], title: str = "All expenses") -> None:
    """Print records as a table, or a notice when there are none."""
    if not records:
        console.print("[yellow]No expense records[/yellow]")
        return
    console.print(build_expense_table(records, f"{title} ({len(records)})"))


def render_expense_details(expense: Expense) -> None:
    """Print a single record, one field per line."""
    console.print("─" * 60, style="dim")
    console.print(f"[bold]ID:[/bold] {expense.id}")
    console.print(f"[bold]Amount:[/bold] {format_amount(expense.amount)}")
    console.print(f"[bold]Category:[/bold] {category_to_label(expense.category)}")
    console.print(f"[bold]Date:[/bold] {expense.date}")
    if expense.remarks:
        console.print(f"[bold]Remarks:[/bold] {escape(expense.remarks)}")
    console.print()
