"""
Transaction Input Validation

DESIGN DECISION: Caller input is checked before the ledger changes.
All problems are collected, not just the first one, so a form can show
every bad field at once. If anything is wrong a ValidationError is
raised and the store is left exactly as it was.

IMPORTANT: Validation NEVER silently fixes input.
A category of "  Food " is accepted as typed; an empty one is rejected.
"""

import math
from numbers import Real
from typing import Union

from finledger.models.transaction import TransactionType, ValidationIssue


class ValidationError(ValueError):
    """
    Caller input cannot become a transaction.

    `field` and `message` describe the first issue; `issues` holds all
    of them.
    """

    def __init__(self, issues: list[ValidationIssue]):
        if not issues:
            raise ValueError("ValidationError needs at least one issue")
        self.issues = issues
        self.field = issues[0].field
        self.message = issues[0].message
        super().__init__("; ".join(f"{i.field}: {i.message}" for i in issues))


class TransactionValidator:
    """Validates the arguments of LedgerStore.add."""

    def validate(
        self,
        amount: float,
        category: str,
        description: str,
        type: Union[TransactionType, str],
    ) -> TransactionType:
        """
        Check every field and return the resolved TransactionType.

        Raises:
            ValidationError: if any field is invalid
        """
        issues = []
        issues.extend(self._check_amount(amount))
        issues.extend(self._check_text("category", "Category", category))
        issues.extend(self._check_text("description", "Description", description))

        kind = self._resolve_type(type)
        if kind is None:
            issues.append(ValidationIssue(
                field="type",
                issue_type="unknown_value",
                message=f"Type must be INCOME or EXPENSE, got {type!r}",
            ))

        if issues:
            raise ValidationError(issues)
        return kind

    def _check_amount(self, amount) -> list[ValidationIssue]:
        # bool is a Real subclass but never a meaningful amount
        if isinstance(amount, bool) or not isinstance(amount, Real):
            return [ValidationIssue(
                field="amount",
                issue_type="not_a_number",
                message="Amount must be a number",
            )]
        # The stored value is a float, so every check runs on the float
        try:
            stored = float(amount)
        except (OverflowError, ValueError):
            stored = math.inf
        if not math.isfinite(stored):
            return [ValidationIssue(
                field="amount",
                issue_type="not_finite",
                message="Amount must be a finite number",
            )]
        if stored <= 0:
            return [ValidationIssue(
                field="amount",
                issue_type="not_positive",
                message="Amount must be positive",
            )]
        return []

    def _check_text(self, field: str, label: str, value) -> list[ValidationIssue]:
        if not isinstance(value, str) or not value.strip():
            return [ValidationIssue(
                field=field,
                issue_type="blank",
                message=f"{label} cannot be empty",
            )]
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return [ValidationIssue(
                field=field,
                issue_type="invalid_text",
                message=f"{label} contains characters that cannot be stored",
            )]
        return []

    def _resolve_type(self, value):
        if isinstance(value, TransactionType):
            return value
        if isinstance(value, str):
            try:
                return TransactionType(value.strip().upper())
            except ValueError:
                return None
        return None
