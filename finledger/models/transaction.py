"""
Core Data Models for finledger

These models define the schemas for all data flowing through the ledger.
They are designed to:
1. Keep a transaction immutable once the store has created it
2. Be serializable to the on-disk JSON format without loss
3. Give report results a stable, typed shape

DESIGN DECISION: Transaction dates are stored as ISO text, not as `date`.
The text written to disk is exactly the text read back, and ISO 8601
text sorts in calendar order.
"""

import datetime as dt
import re
from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)


_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionType(str, Enum):
    """
    Direction of money for a transaction.

    Values match the names so the on-disk text is "INCOME" / "EXPENSE".
    """
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    @property
    def label(self) -> str:
        """Human form, e.g. 'Income'."""
        return self.value.lower().capitalize()


# =============================================================================
# CORE TRANSACTION MODEL
# =============================================================================

class Transaction(BaseModel):
    """
    A single recorded income or expense.

    CRITICAL: ids are assigned by LedgerStore, never by callers.
    Instances are frozen; a change means delete and re-add.

    The model checks shape and types only. Value rules for new
    transactions (positive amount, non-blank text) belong to
    TransactionValidator, so a stored record with an odd value still
    loads instead of taking the rest of the ledger down with it.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Store-assigned identifier, unique and never reused"
    )
    amount: float = Field(
        ...,
        description="Amount of money moved (positive for new transactions)"
    )
    category: str = Field(
        ...,
        description="Category label, e.g. 'Groceries'"
    )
    description: str = Field(
        ...,
        description="Free text describing the transaction"
    )
    date: str = Field(
        ...,
        description="ISO 8601 date text (YYYY-MM-DD)"
    )
    type: TransactionType

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def signed_amount(self) -> float:
        """Positive for income, negative for expense."""
        return self.amount if self.is_income else -self.amount

    def parsed_date(self) -> Optional[dt.date]:
        """
        Return the date as a `date`, or None if the text is not a real
        YYYY-MM-DD calendar date.
        """
        # fromisoformat alone also takes "20240210" and week dates on 3.11+
        if not _ISO_DATE.fullmatch(self.date):
            return None
        try:
            return dt.date.fromisoformat(self.date)
        except ValueError:
            return None

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on description or category."""
        needle = query.casefold()
        return needle in self.description.casefold() or needle in self.category.casefold()

    def to_record(self) -> dict:
        """Convert to the JSON object stored in the ledger file."""
        return {
            "id": self.id,
            "amount": self.amount,
            "category": self.category,
            "description": self.description,
            "date": self.date,
            "type": self.type.value,
        }


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem with caller input."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'not_positive', 'blank', 'unknown_value')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )


# =============================================================================
# REPORT MODELS
# =============================================================================

class MonthlyReport(BaseModel):
    """
    Income/expense summary for one calendar month.

    Field aliases give the camelCase keys used by presentation layers.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    month: int
    year: int
    income: float = 0.0
    expenses: float = 0.0
    net: float = 0.0
    transaction_count: int = Field(
        default=0,
        ge=0,
        alias="transactionCount"
    )
    top_expense_categories: dict[str, float] = Field(
        default_factory=dict,
        alias="topExpenseCategories",
        description="Largest expense categories, biggest first"
    )

    def to_dict(self) -> dict:
        """Report as a plain mapping keyed the way callers display it."""
        return self.model_dump(by_alias=True, exclude={"month", "year"})


# =============================================================================
# PERSISTENCE MODELS
# =============================================================================

class PersistenceResult(BaseModel):
    """
    Outcome of a save or load.

    Storage failures never propagate out of LedgerStore; they end up here
    so diagnostics and tests can still see what went wrong.
    """

    operation: str = Field(
        ...,
        pattern="^(save|load)$"
    )
    success: bool
    path: str
    transaction_count: int = Field(default=0, ge=0)
    error_message: Optional[str] = None
    completed_at: dt.datetime = Field(default_factory=dt.datetime.now)
