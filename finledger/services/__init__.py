"""Services package."""

from finledger.services.storage import (
    AuditStorageInterface,
    CorruptLedgerError,
    InMemoryAuditStorage,
    JsonFileStorage,
    LedgerStorageInterface,
    PersistenceError,
)

__all__ = [
    # Storage services
    "AuditStorageInterface",
    "CorruptLedgerError",
    "InMemoryAuditStorage",
    "JsonFileStorage",
    "LedgerStorageInterface",
    "PersistenceError",
]
