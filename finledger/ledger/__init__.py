"""Ledger package."""

from finledger.ledger.store import LedgerStore

__all__ = ["LedgerStore"]
