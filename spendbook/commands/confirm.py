"""Deletion confirmation prompt with a visual countdown.

The countdown is decoration only. The answer typed by the user decides
whether a record is deleted; the timer never does.
"""

import threading

import typer
from rich.console import Console

console = Console()


class Countdown:
    """Background countdown line, stopped by an event."""

    def __init__(self, seconds: int) -> None:
        self.seconds = seconds
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="spendbook-countdown", daemon=True)

    def _run(self) -> None:
        for remaining in range(self.seconds, 0, -1):
            if self._stop.is_set():
                return
            console.print(f"\r[dim]Countdown: {remaining:>2}s[/dim] ", end="")
            if self._stop.wait(1):
                return
        console.print("\r[dim]Countdown finished[/dim]   ", end="")

    def start(self) -> None:
        if self.seconds > 0:
            self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread.is_alive():
            self._thread.join()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()


def is_affirmative(answer: str) -> bool:
    """Only an answer starting with y or Y confirms."""
    return answer.strip()[:1] in ("y", "Y")


def confirm_deletion(countdown_seconds: int = 15) -> bool:
    """Ask the user to confirm a deletion.

    Args:
        countdown_seconds: Length of the visual countdown (0 disables it).

    Returns:
        True if the user typed y/Y, False for anything else.
    """
    console.print(f"Confirm deletion within {countdown_seconds} seconds" if countdown_seconds else "Confirm deletion")
    countdown = Countdown(countdown_seconds)
    countdown.start()
    try:
        answer: str = typer.prompt(
            "\nType 'y' to delete, anything else to cancel", type=str, default="", show_default=False
        )
    finally:
        countdown.stop()
    console.print()
    return is_affirmative(answer)
