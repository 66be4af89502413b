"""Opening and closing the ledger with user-facing status messages."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from spendbook.service import LedgerService, open_ledger

console = Console()


def report_load(service: LedgerService, quiet: bool = False) -> None:
    """Print what happened when the ledger file was read.

    Args:
        service: Freshly opened service.
        quiet: Suppress the informational messages (warnings and errors still show).
    """
    result = service.load_result

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {escape(warning)}[/yellow]")

    if result.error:
        console.print(f"[red]Ledger file is corrupt: {escape(result.error)}[/red]", style="bold")
        console.print(f"[dim]Starting with an empty ledger. {service.data_path} will be overwritten on save.[/dim]")
    elif not quiet:
        if result.found:
            console.print(f"[dim]Loaded {len(service.list())} records from {service.data_path}[/dim]")
        else:
            console.print(f"[dim]No ledger found at {service.data_path}, starting a new one[/dim]")


def start_session(data_path: Path, quiet: bool = False) -> LedgerService:
    """Open the ledger and report the load outcome."""
    service = open_ledger(data_path)
    report_load(service, quiet)
    return service


def finish_session(service: LedgerService, quiet: bool = False) -> bool:
    """Save the ledger and report the outcome.

    Returns:
        True if the ledger was saved.
    """
    if service.close():
        if not quiet:
            console.print(f"[dim]Saved to {service.data_path}[/dim]")
        return True

    console.print(f"[red]Failed to save ledger to {service.data_path}[/red]", style="bold")
    console.print("[yellow]Changes from this session were not persisted[/yellow]")
    return False
