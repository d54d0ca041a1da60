"""
JSON File Storage Implementation

DESIGN DECISION: The ledger is one JSON array in one file because:
1. Users can open and read their data in any editor
2. No database setup required
3. The data volume of a personal ledger is tiny

TRADEOFFS:
- Every save rewrites the whole file
- Writes are a direct overwrite, not atomic; a crash mid-write can
  leave a truncated file, which the next load reports as corrupt
- Loading is all-or-nothing: one malformed or wrongly typed record
  rejects the file; field values are not range-checked

File format (array order is load order):

    [
      {
        "id": 1,
        "amount": 2000.0,
        "category": "Salary",
        "description": "February pay",
        "date": "2024-02-01",
        "type": "INCOME"
      }
    ]
"""

import json
from pathlib import Path
from typing import Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError as SchemaError
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from finledger.config import LedgerSettings, get_settings
from finledger.models.transaction import Transaction
from finledger.services.storage.interface import (
    CorruptLedgerError,
    LedgerStorageInterface,
    PersistenceError,
)


_LEDGER_ADAPTER = TypeAdapter(list[Transaction])


class JsonFileStorage(LedgerStorageInterface):
    """
    Stores the ledger as a JSON array at a fixed path.

    Transient OS errors on save are retried with exponential backoff
    before a PersistenceError is raised.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        settings: Optional[LedgerSettings] = None,
    ):
        """
        Initialize file storage.

        Args:
            path: File to use. Defaults to settings.data_file.
            settings: Settings to use. Defaults to get_settings().
        """
        self._settings = settings or get_settings()
        self._path = Path(path) if path is not None else self._settings.data_file

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> list[Transaction]:
        if not self._path.exists():
            return []

        try:
            raw = self._path.read_bytes()
        except OSError as e:
            raise PersistenceError(f"Cannot read {self._path}: {e}") from e

        try:
            return _LEDGER_ADAPTER.validate_json(raw)
        except SchemaError as e:
            raise CorruptLedgerError(
                f"{self._path} is not a valid ledger: {e.error_count()} problem(s), "
                f"first: {self._describe_first_error(e)}"
            ) from e

    def save(self, transactions: Sequence[Transaction]) -> None:
        text = self.serialize(transactions)
        retrying = Retrying(
            stop=stop_after_attempt(self._settings.save_retry_attempts),
            wait=wait_exponential(
                multiplier=self._settings.save_retry_wait_seconds,
                max=self._settings.save_retry_wait_seconds * 8,
            ),
            retry=retry_if_exception_type(OSError),
            reraise=True,
        )
        try:
            retrying(self._write, text)
        except OSError as e:
            raise PersistenceError(f"Cannot write {self._path}: {e}") from e

    def serialize(self, transactions: Sequence[Transaction]) -> str:
        """Render transactions exactly as they are written to disk."""
        records = [t.to_record() for t in transactions]
        indent = self._settings.json_indent or None
        return json.dumps(records, indent=indent, ensure_ascii=False)

    def _write(self, text: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(text, encoding="utf-8")

    @staticmethod
    def _describe_first_error(error: SchemaError) -> str:
        first = error.errors()[0]
        where = ".".join(str(part) for part in first["loc"]) or "<root>"
        return f"{where}: {first['msg']}"
