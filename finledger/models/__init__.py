"""
Data Models Package

This package contains all Pydantic models used by finledger.
All data flowing through the ledger must conform to these schemas.
"""

from finledger.models.transaction import (
    MonthlyReport,
    PersistenceResult,
    Transaction,
    TransactionType,
    ValidationIssue,
)
from finledger.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "MonthlyReport",
    "PersistenceResult",
    "Transaction",
    "TransactionType",
    "ValidationIssue",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
