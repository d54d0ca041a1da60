"""
Storage Services Package

Provides abstract interfaces and concrete implementations for data storage.
The ledger lives in a JSON file; audit events can be kept in memory.
Both are designed to be swappable.
"""

from finledger.services.storage.interface import (
    AuditStorageInterface,
    CorruptLedgerError,
    LedgerStorageInterface,
    PersistenceError,
)
from finledger.services.storage.json_file import JsonFileStorage
from finledger.services.storage.memory import InMemoryAuditStorage

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "LedgerStorageInterface",
    # Exceptions
    "CorruptLedgerError",
    "PersistenceError",
    # Implementations
    "InMemoryAuditStorage",
    "JsonFileStorage",
]
