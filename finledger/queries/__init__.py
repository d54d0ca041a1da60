"""Ledger report package."""

from finledger.queries.reports import (
    balance,
    category_spending,
    monthly_report,
    recent_transactions,
    search_transactions,
)

__all__ = [
    "balance",
    "category_spending",
    "monthly_report",
    "recent_transactions",
    "search_transactions",
]
