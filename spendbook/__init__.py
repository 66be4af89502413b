"""spendbook - a small terminal ledger for day-to-day expenses."""

__version__ = "0.1.0"
