"""Default data file location."""

import os
from pathlib import Path

DATA_FILE_NAME = "expenses.dat"


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_data_path() -> Path:
    """Get the default ledger file path (XDG compliant)."""
    return get_xdg_data_home() / "spendbook" / DATA_FILE_NAME


def data_file_exists(data_path: Path | None = None) -> bool:
    """Check if the ledger file exists.

    Args:
        data_path: Path to check. If None, uses default location.

    Returns:
        True if the file exists, False otherwise.
    """
    if data_path is None:
        data_path = get_data_path()
    return data_path.exists()
