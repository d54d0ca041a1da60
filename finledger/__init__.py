"""
finledger - Personal Finance Ledger

Records income and expense transactions, persists them to a JSON file
and derives simple reports (balance, monthly summary, category spend,
search, recent activity).

DESIGN PRINCIPLES:
1. One store owns all state - no module-level globals
2. Validation errors are raised, storage errors are logged
3. Every mutation is written through to disk before returning
4. Storage layer is swappable
"""

from finledger.ledger import LedgerStore
from finledger.models import MonthlyReport, Transaction, TransactionType
from finledger.validation import ValidationError

__version__ = "1.0.0"
__author__ = "finledger Team"

__all__ = [
    "LedgerStore",
    "MonthlyReport",
    "Transaction",
    "TransactionType",
    "ValidationError",
]
