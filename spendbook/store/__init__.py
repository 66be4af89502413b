"""Store layer - provides persistence for the application.

This module re-exports all public storage functions for easy importing.
"""

from spendbook.store.flatfile import (
    CorruptRecordError,
    LoadResult,
    format_ledger,
    load_ledger,
    parse_ledger_text,
    save_ledger,
)
from spendbook.store.paths import data_file_exists, get_data_path

__all__ = [
    # Paths
    "data_file_exists",
    "get_data_path",
    # Flat file
    "CorruptRecordError",
    "LoadResult",
    "format_ledger",
    "load_ledger",
    "parse_ledger_text",
    "save_ledger",
]
