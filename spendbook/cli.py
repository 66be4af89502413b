"""CLI entry point for spendbook."""

import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console

from spendbook.commands.admin import init_command
from spendbook.commands.records import add_command, delete_command, list_command
from spendbook.commands.shell import shell_command
from spendbook.commands.stats import stats_command
from spendbook.config import Settings, load_settings, resolve_data_path

console = Console()

app = typer.Typer(
    name="spendbook",
    help="spendbook - a small terminal ledger for day-to-day expenses",
    add_completion=False,
)


@dataclass(frozen=True)
class AppState:
    """Per-invocation state shared with subcommands."""

    data_path: Path
    settings: Settings


def _state(ctx: typer.Context) -> AppState:
    state: AppState = ctx.obj
    return state


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    data_file: Path = typer.Option(None, "--data-file", "-f", help="Ledger file (default: from config)"),
) -> None:
    """spendbook - a small terminal ledger for day-to-day expenses."""
    if ctx.invoked_subcommand == "init":
        return

    try:
        settings = load_settings()
    except (tomllib.TOMLDecodeError, ValueError) as e:
        console.print(f"[red]Invalid config file: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Unable to read config file: {e}[/red]", style="bold")
        sys.exit(1)

    ctx.obj = AppState(data_path=resolve_data_path(data_file, settings), settings=settings)

    if ctx.invoked_subcommand is None:
        shell_command(ctx.obj.data_path, ctx.obj.settings.confirm_countdown)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create the default configuration file."""
    init_command(force)


@app.command()
def shell(ctx: typer.Context) -> None:
    """Run the interactive menu."""
    state = _state(ctx)
    shell_command(state.data_path, state.settings.confirm_countdown)


@app.command()
def add(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="Amount spent (non-negative)"),
    category: str = typer.Argument(..., help="Category label, name or index (0-4)"),
    date: str = typer.Argument(..., help="Date (YYYY-MM-DD, DD/MM/YYYY, ...)"),
    remarks: str = typer.Option("", "--remarks", "-r", help="Optional note"),
) -> None:
    """Add an expense."""
    add_command(_state(ctx).data_path, amount, category, date, remarks)


@app.command()
def delete(
    ctx: typer.Context,
    expense_id: int = typer.Argument(..., help="ID of the expense to delete"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Delete without asking for confirmation"),
) -> None:
    """Delete an expense by ID."""
    state = _state(ctx)
    delete_command(state.data_path, expense_id, yes, state.settings.confirm_countdown)


@app.command(name="list")
def list_expenses(
    ctx: typer.Context,
    sort: str = typer.Option(None, "--sort", "-s", help="Sort by 'date' or 'amount' (the new order is saved)"),
) -> None:
    """List your expenses."""
    list_command(_state(ctx).data_path, sort)


@app.command()
def stats(ctx: typer.Context) -> None:
    """Show totals, averages and the per-category breakdown."""
    stats_command(_state(ctx).data_path)


if __name__ == "__main__":
    app()
