"""
Ledger Store

This module owns the in-memory ledger and ties together validation,
reports, persistence and auditing.

DESIGN DECISION: The store enforces the boundaries:
- Bad input raises ValidationError before anything changes
- Every successful mutation is written through to storage before returning
- Storage failures are logged and recorded, never raised; memory stays
  the source of truth

Not thread-safe. Concurrent use would need a lock around the
mutate-then-save sequence in add and delete_transaction.
"""

from datetime import date
from typing import Callable, Optional, Union

from finledger.audit import AuditLogger
from finledger.config import LedgerSettings, get_settings
from finledger.models.transaction import (
    MonthlyReport,
    PersistenceResult,
    Transaction,
    TransactionType,
)
from finledger.queries import reports
from finledger.services.storage import (
    JsonFileStorage,
    LedgerStorageInterface,
    PersistenceError,
)
from finledger.validation import TransactionValidator, ValidationError


class LedgerStore:
    """
    Ordered collection of transactions with id allocation and reports.

    Construct once per process. The persisted ledger is loaded during
    construction; there is no close or flush step.

    GUARANTEES:
    - ids start at 1 (or max stored id + 1) and are never reused
    - Insertion order is preserved; deletion removes in place
    - No public method raises for storage problems
    """

    def __init__(
        self,
        settings: Optional[LedgerSettings] = None,
        storage: Optional[LedgerStorageInterface] = None,
        audit_logger: Optional[AuditLogger] = None,
        validator: Optional[TransactionValidator] = None,
        clock: Callable[[], date] = date.today,
    ):
        """
        Initialize the store and load any persisted ledger.

        Args:
            settings: Settings to use. Defaults to get_settings().
            storage: Persistence backend. Defaults to a JsonFileStorage
                     at settings.data_file.
            audit_logger: Receives confirmations and diagnostics.
            validator: Checks arguments of add().
            clock: Returns "today" for new transactions.
        """
        self._settings = settings or get_settings()
        self._storage = storage or JsonFileStorage(settings=self._settings)
        self._audit = audit_logger or AuditLogger()
        self._validator = validator or TransactionValidator()
        self._clock = clock

        self._transactions: list[Transaction] = []
        self._next_id = 1
        self._last_result: Optional[PersistenceResult] = None

        self._load()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Snapshot of the ledger in store order."""
        return tuple(self._transactions)

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def last_persistence_result(self) -> Optional[PersistenceResult]:
        """Outcome of the most recent load or save."""
        return self._last_result

    def __len__(self) -> int:
        return len(self._transactions)

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        for t in self._transactions:
            if t.id == transaction_id:
                return t
        return None

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(
        self,
        amount: float,
        category: str,
        description: str,
        type: Union[TransactionType, str],
    ) -> Transaction:
        """
        Record a new transaction and persist the ledger.

        Raises:
            ValidationError: amount not positive, blank category or
                description, or unknown type. Nothing is changed.
        """
        try:
            kind = self._validator.validate(amount, category, description, type)
        except ValidationError as e:
            self._audit.log_validation_failed([issue.model_dump() for issue in e.issues])
            raise

        transaction = Transaction(
            id=self._next_id,
            amount=float(amount),
            category=category,
            description=description,
            date=self._clock().isoformat(),
            type=kind,
        )
        self._next_id += 1
        self._transactions.append(transaction)
        self._save()

        self._audit.log_transaction_added(transaction)
        return transaction

    def add_income(self, amount: float, category: str, description: str) -> Transaction:
        return self.add(amount, category, description, TransactionType.INCOME)

    def add_expense(self, amount: float, category: str, description: str) -> Transaction:
        return self.add(amount, category, description, TransactionType.EXPENSE)

    def delete_transaction(self, transaction_id: int) -> bool:
        """
        Remove every transaction with this id.

        Returns True if anything was removed. Storage is only written
        when something was removed.
        """
        kept = [t for t in self._transactions if t.id != transaction_id]
        removed = len(self._transactions) - len(kept)
        if not removed:
            return False

        self._transactions = kept
        self._save()
        self._audit.log_transaction_deleted(transaction_id, removed)
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_balance(self) -> float:
        return reports.balance(self._transactions)

    def get_monthly_report(self, month: int, year: int) -> MonthlyReport:
        return reports.monthly_report(
            self._transactions,
            month,
            year,
            top_n=self._settings.top_categories_limit,
        )

    def get_category_spending(self) -> dict[str, float]:
        return reports.category_spending(self._transactions)

    def search_transactions(self, query: str) -> list[Transaction]:
        """Case-insensitive match on description or category; "" matches all."""
        return reports.search_transactions(self._transactions, query)

    def get_recent_transactions(self, limit: Optional[int] = None) -> list[Transaction]:
        """Newest first by date; same-day entries keep insertion order."""
        if limit is None:
            limit = self._settings.recent_limit
        return reports.recent_transactions(self._transactions, limit)

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def _load(self) -> PersistenceResult:
        location = self._storage.location
        try:
            loaded = self._storage.load()
        except PersistenceError as e:
            self._audit.log_load_failed(location, str(e))
            self._last_result = PersistenceResult(
                operation="load",
                success=False,
                path=location,
                error_message=str(e),
            )
            return self._last_result

        self._transactions = list(loaded)
        # ids read from disk are not range-checked; new ids stay positive
        self._next_id = max([t.id for t in loaded] + [0]) + 1
        self._audit.log_ledger_loaded(location, len(loaded), self._next_id)
        self._last_result = PersistenceResult(
            operation="load",
            success=True,
            path=location,
            transaction_count=len(loaded),
        )
        return self._last_result

    def _save(self) -> PersistenceResult:
        location = self._storage.location
        try:
            self._storage.save(self._transactions)
        except PersistenceError as e:
            self._audit.log_save_failed(location, str(e))
            self._last_result = PersistenceResult(
                operation="save",
                success=False,
                path=location,
                transaction_count=len(self._transactions),
                error_message=str(e),
            )
            return self._last_result

        self._audit.log_ledger_saved(location, len(self._transactions))
        self._last_result = PersistenceResult(
            operation="save",
            success=True,
            path=location,
            transaction_count=len(self._transactions),
        )
        return self._last_result
