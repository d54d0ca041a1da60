"""
Audit Models for finledger

Every mutation of the ledger and every save/load outcome is described by
an AuditEvent. This provides:
1. The confirmation messages shown after a change
2. Diagnostics when the ledger file cannot be read or written
3. A trail tests can inspect without scraping log output

DESIGN DECISION: Audit events are append-only. We never delete or modify them.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Mutations
    TRANSACTION_ADDED = "transaction_added"
    TRANSACTION_DELETED = "transaction_deleted"
    VALIDATION_FAILED = "validation_failed"

    # Persistence
    LEDGER_LOADED = "ledger_loaded"
    LOAD_FAILED = "load_failed"
    LEDGER_SAVED = "ledger_saved"
    SAVE_FAILED = "save_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When the event occurred"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - which transaction is this about?
    transaction_id: Optional[int] = Field(
        default=None,
        description="ID of the transaction this event relates to"
    )

    # Event details
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "transaction_id": self.transaction_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_added(1, "Income", 1000.0, "Salary")
        event = AuditEventBuilder.save_failed(path, error)
    """

    @staticmethod
    def transaction_added(
        transaction_id: int,
        kind: str,
        amount: float,
        category: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            transaction_id=transaction_id,
            description=f"{kind} added successfully!",
            details={
                "amount": amount,
                "category": category,
            },
        )

    @staticmethod
    def transaction_deleted(
        transaction_id: int,
        removed: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_DELETED,
            transaction_id=transaction_id,
            description=f"Transaction {transaction_id} deleted",
            details={"removed": removed},
        )

    @staticmethod
    def validation_failed(
        issues: list[dict],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VALIDATION_FAILED,
            severity=AuditSeverity.WARNING,
            description=f"Transaction rejected with {len(issues)} issue(s)",
            details={"issues": issues},
        )

    @staticmethod
    def ledger_loaded(
        path: str,
        count: int,
        next_id: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_LOADED,
            description=f"Loaded {count} transaction(s)",
            details={
                "path": path,
                "transaction_count": count,
                "next_id": next_id,
            },
        )

    @staticmethod
    def load_failed(
        path: str,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            description="Error loading data",
            details={"path": path},
            error_message=error_message,
        )

    @staticmethod
    def ledger_saved(
        path: str,
        count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_SAVED,
            severity=AuditSeverity.DEBUG,
            description=f"Saved {count} transaction(s)",
            details={
                "path": path,
                "transaction_count": count,
            },
        )

    @staticmethod
    def save_failed(
        path: str,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            description="Error saving data",
            details={"path": path},
            error_message=error_message,
        )
