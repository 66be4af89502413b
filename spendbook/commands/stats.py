"""Statistics command."""

import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from spendbook.commands.display import format_amount
from spendbook.commands.session import finish_session, start_session
from spendbook.domain.models import category_to_label
from spendbook.domain.report import LedgerStatistics

console = Console()


def render_statistics(stats: LedgerStatistics) -> None:
    """Print the statistics report.

    Args:
        stats: Computed ledger statistics.
    """
    if stats.is_empty:
        console.print("[yellow]No expense records to analyse[/yellow]")
        return

    console.print("[bold cyan]Expense statistics[/bold cyan]\n")
    console.print(f"[bold]Total:[/bold] {format_amount(stats.total)}")
    console.print(f"[bold]Records:[/bold] {stats.count}")
    if stats.average is not None:
        console.print(f"[bold]Average per record:[/bold] {format_amount(stats.average)}")

    table = Table(title="By category")
    table.add_column("Category", style="magenta")
    table.add_column("Total", justify="right")
    table.add_column("Records", justify="right")
    table.add_column("Share", justify="right", style="dim")
    for category, totals in stats.per_category.items():
        share = (totals.sum / stats.total * 100) if stats.total else 0
        table.add_row(category_to_label(category), format_amount(totals.sum), str(totals.count), f"{share:.0f}%")
    console.print()
    console.print(table)

    if stats.max_category is not None:
        top = stats.per_category[stats.max_category]
        console.print(
            f"\n[bold]Top category:[/bold] {category_to_label(stats.max_category)} ({format_amount(top.sum)})"
        )

    biggest = stats.max_single_expense
    if biggest is not None:
        console.print(
            f"[bold]Largest single expense:[/bold] {format_amount(biggest.amount)} "
            f"({category_to_label(biggest.category)}, {biggest.date})"
        )


def stats_command(data_path: Path) -> None:
    """Show totals, averages and per-category breakdown."""
    service = start_session(data_path, quiet=True)
    render_statistics(service.statistics())
    if not finish_session(service, quiet=True):
        sys.exit(1)
