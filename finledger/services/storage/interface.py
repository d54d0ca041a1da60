"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for persisting the ledger.
This allows us to:
1. Keep LedgerStore free of file handling
2. Use in-memory or failing backends in tests
3. Move to another format later without touching report logic

The contract is whole-ledger: save writes everything, load reads everything.
There are no partial updates.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from finledger.models.audit import AuditEvent, AuditEventType
from finledger.models.transaction import Transaction


class LedgerStorageInterface(ABC):
    """
    Abstract interface for ledger persistence.

    Implementations raise PersistenceError on any failure; deciding
    what to do about it is the caller's job.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where the ledger lives."""
        pass

    @abstractmethod
    def load(self) -> list[Transaction]:
        """
        Read the full ledger.

        Returns:
            Transactions in stored order; an empty list if nothing has
            been stored yet

        Raises:
            PersistenceError: If the stored data cannot be read or parsed
        """
        pass

    @abstractmethod
    def save(self, transactions: Sequence[Transaction]) -> None:
        """
        Replace the stored ledger with `transactions`.

        Raises:
            PersistenceError: If writing fails
        """
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_recent_events(
        self,
        limit: int = 100,
        event_type: Optional[AuditEventType] = None,
    ) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Args:
            limit: Maximum number of events to return
            event_type: Only return events of this type

        Returns:
            List of recent events (newest first)
        """
        pass


class PersistenceError(Exception):
    """Base exception for storage operations."""
    pass


class CorruptLedgerError(PersistenceError):
    """Stored data exists but is not a valid ledger."""
    pass
