"""
Audit Logger

DESIGN DECISION: Every change to the ledger and every save/load outcome
is logged. This provides:
1. The confirmation message after a transaction is added
2. Diagnostics when the ledger file is unreadable or unwritable
3. A queryable trail when an audit storage is attached

The audit logger gracefully handles failures: a broken audit sink is
logged locally and never breaks a ledger operation.
"""

from typing import Optional

import structlog

from finledger.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from finledger.models.transaction import Transaction
from finledger.services.storage import AuditStorageInterface


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for diagnostics)
    2. An optional audit storage (for inspection)
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for events.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("finledger")

    @property
    def storage(self) -> Optional[AuditStorageInterface]:
        return self._storage

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Appends to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_transaction_added(self, transaction: Transaction) -> None:
        """Log the confirmation for a new transaction."""
        event = AuditEventBuilder.transaction_added(
            transaction_id=transaction.id,
            kind=transaction.type.label,
            amount=transaction.amount,
            category=transaction.category,
        )
        self.log(event)

    def log_transaction_deleted(self, transaction_id: int, removed: int) -> None:
        event = AuditEventBuilder.transaction_deleted(
            transaction_id=transaction_id,
            removed=removed,
        )
        self.log(event)

    def log_validation_failed(self, issues: list[dict]) -> None:
        self.log(AuditEventBuilder.validation_failed(issues=issues))

    def log_ledger_loaded(self, path: str, count: int, next_id: int) -> None:
        event = AuditEventBuilder.ledger_loaded(
            path=path,
            count=count,
            next_id=next_id,
        )
        self.log(event)

    def log_load_failed(self, path: str, error_message: str) -> None:
        """Log a ledger file that could not be read."""
        self.log(AuditEventBuilder.load_failed(path=path, error_message=error_message))

    def log_ledger_saved(self, path: str, count: int) -> None:
        self.log(AuditEventBuilder.ledger_saved(path=path, count=count))

    def log_save_failed(self, path: str, error_message: str) -> None:
        """Log a ledger file that could not be written."""
        self.log(AuditEventBuilder.save_failed(path=path, error_message=error_message))
