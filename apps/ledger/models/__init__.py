"""
Ledger models module.

Both tables are append-only: rows are inserted and never changed.
"""
from .log_entry import LogEntry
from .redemption import Redemption

__all__ = [
    'LogEntry',
    'Redemption',
]
