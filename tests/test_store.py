"""Tests for LedgerStore operations."""

from datetime import date
from fractions import Fraction

import pytest

from finledger.models.audit import AuditEventType
from finledger.models.transaction import TransactionType
from finledger.validation import ValidationError

INCOME = TransactionType.INCOME
EXPENSE = TransactionType.EXPENSE


class TestAdd:
    """Tests for LedgerStore.add."""

    def test_ids_start_at_one_and_increase(self, store):
        ids = [store.add(10, "Food", f"item {i}", EXPENSE).id for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]
        assert store.next_id == 6

    def test_returns_transaction_with_today(self, store, clock):
        t = store.add(1000, "Salary", "February pay", INCOME)
        assert t.date == "2024-02-10"
        assert t.amount == 1000.0
        assert t.type is INCOME
        assert store.transactions == (t,)

    def test_date_follows_clock(self, store, clock):
        store.add(1, "A", "a", EXPENSE)
        clock.today = date(2024, 12, 31)
        assert store.add(1, "B", "b", EXPENSE).date == "2024-12-31"

    def test_type_name_is_accepted(self, store):
        assert store.add(5, "Gift", "Birthday", "income").type is INCOME

    def test_add_income_and_expense_helpers(self, store):
        assert store.add_income(5, "Gift", "Birthday").type is INCOME
        assert store.add_expense(5, "Food", "Snack").type is EXPENSE

    @pytest.mark.parametrize(
        "amount, category, description, field",
        [
            (-5, "Food", "desc", "amount"),
            (0, "Food", "desc", "amount"),
            (5, "", "desc", "category"),
            (5, "   ", "desc", "category"),
            (5, "Food", "", "description"),
        ],
    )
    def test_invalid_input_changes_nothing(self, store, data_file, amount, category, description, field):
        store.add(1, "Seed", "first", EXPENSE)
        before = data_file.read_text()

        with pytest.raises(ValidationError) as exc_info:
            store.add(amount, category, description, EXPENSE)

        assert exc_info.value.field == field
        assert len(store) == 1
        assert store.next_id == 2
        assert data_file.read_text() == before

    @pytest.mark.parametrize(
        "amount, category, description, field",
        [
            (10**400, "Food", "Lunch", "amount"),
            (Fraction(1, 10**400), "Food", "Lunch", "amount"),
            (5, "Food \udcff", "Lunch", "category"),
            (5, "Food", "bad \ud800 text", "description"),
        ],
        ids=["huge-int", "tiny-fraction", "surrogate-category", "surrogate-description"],
    )
    def test_awkward_input_raises_validation_error(
        self, store, data_file, amount, category, description, field
    ):
        """Test that input failing only on conversion is still a ValidationError."""
        store.add(1, "Seed", "first", EXPENSE)
        before = data_file.read_text(encoding="utf-8")

        with pytest.raises(ValidationError) as exc_info:
            store.add(amount, category, description, EXPENSE)

        assert exc_info.value.field == field
        assert len(store) == 1
        assert data_file.read_text(encoding="utf-8") == before

    def test_confirmation_message(self, store, audit_storage):
        store.add(1000, "Salary", "Pay", INCOME)
        store.add(30, "Food", "Lunch", EXPENSE)
        added = audit_storage.get_recent_events(event_type=AuditEventType.TRANSACTION_ADDED)
        assert [e.description for e in added] == [
            "Expense added successfully!",
            "Income added successfully!",
        ]

    def test_rejection_is_audited(self, store, audit_storage):
        with pytest.raises(ValidationError):
            store.add(0, "Food", "desc", EXPENSE)
        failed = audit_storage.get_recent_events(event_type=AuditEventType.VALIDATION_FAILED)
        assert len(failed) == 1
        assert failed[0].details["issues"][0]["field"] == "amount"


class TestQueries:
    """Tests for the read-only store operations."""

    def test_empty_store(self, store):
        assert store.get_balance() == 0
        assert store.get_category_spending() == {}
        assert store.search_transactions("") == []
        assert store.get_recent_transactions() == []
        assert store.get_monthly_report(2, 2024).to_dict() == {
            "income": 0,
            "expenses": 0,
            "net": 0,
            "transactionCount": 0,
            "topExpenseCategories": {},
        }

    def test_balance(self, store):
        store.add(1000, "Salary", "Pay", INCOME)
        store.add(300, "Rent", "Room", EXPENSE)
        assert store.get_balance() == 700

    def test_category_spending_ignores_income(self, store):
        store.add(1000, "Salary", "Pay", INCOME)
        store.add(200, "Bonus", "Extra", INCOME)
        assert store.get_category_spending() == {}

    def test_category_spending(self, store):
        store.add(20, "Food", "Lunch", EXPENSE)
        store.add(1000, "Salary", "Pay", INCOME)
        store.add(5, "Food", "Coffee", EXPENSE)
        store.add(60, "Transport", "Train", EXPENSE)
        assert store.get_category_spending() == {"Food": 25, "Transport": 60}

    def test_search(self, store):
        grocery = store.add(40, "Grocery", "Weekly shop", EXPENSE)
        store.add(1000, "Salary", "Pay", INCOME)
        assert store.search_transactions("GROCERY") == [grocery]
        assert len(store.search_transactions("")) == 2

    def test_monthly_report(self, store, clock):
        clock.today = date(2024, 2, 10)
        store.add(50, "Gas", "Fill up", EXPENSE)
        clock.today = date(2024, 2, 1)
        store.add(2000, "Salary", "Pay", INCOME)
        clock.today = date(2024, 3, 1)
        store.add(75, "Food", "Dinner", EXPENSE)

        report = store.get_monthly_report(2, 2024)
        assert report.to_dict() == {
            "income": 2000,
            "expenses": 50,
            "net": 1950,
            "transactionCount": 2,
            "topExpenseCategories": {"Gas": 50},
        }

    def test_monthly_report_uses_configured_top_n(self, make_store, settings):
        store = make_store(settings=settings.model_copy(update={"top_categories_limit": 1}))
        store.add(5, "Small", "s", EXPENSE)
        store.add(9, "Big", "b", EXPENSE)
        assert store.get_monthly_report(2, 2024).top_expense_categories == {"Big": 9}

    def test_recent_transactions(self, store, clock):
        for day in (date(2024, 1, 1), date(2024, 3, 1), date(2024, 2, 1)):
            clock.today = day
            store.add(1, "X", "x", EXPENSE)
        recent = store.get_recent_transactions(2)
        assert [t.date for t in recent] == ["2024-03-01", "2024-02-01"]

    def test_recent_transactions_default_limit(self, store):
        for i in range(12):
            store.add(1, "X", f"x{i}", EXPENSE)
        recent = store.get_recent_transactions()
        assert len(recent) == 10
        # all on the same day: insertion order
        assert [t.id for t in recent] == list(range(1, 11))

    def test_get_transaction(self, store):
        t = store.add(1, "X", "x", EXPENSE)
        assert store.get_transaction(t.id) == t
        assert store.get_transaction(99) is None


class TestDelete:
    """Tests for LedgerStore.delete_transaction."""

    def test_missing_id(self, store, data_file):
        store.add(10, "Food", "Lunch", EXPENSE)
        before = data_file.read_text()
        assert store.delete_transaction(42) is False
        assert len(store) == 1
        assert data_file.read_text() == before

    def test_missing_id_does_not_create_file(self, store, data_file):
        assert store.delete_transaction(1) is False
        assert not data_file.exists()

    def test_existing_id_is_gone_everywhere(self, store):
        store.add(1000, "Salary", "Pay", INCOME)
        lunch = store.add(10, "Food", "Lunch", EXPENSE)

        assert store.delete_transaction(lunch.id) is True

        assert store.get_transaction(lunch.id) is None
        assert store.get_balance() == 1000
        assert store.get_category_spending() == {}
        assert store.search_transactions("lunch") == []
        assert lunch not in store.get_recent_transactions()
        assert store.get_monthly_report(2, 2024).transaction_count == 1

    def test_ids_are_not_reused(self, store):
        store.add(1, "A", "a", EXPENSE)
        second = store.add(1, "B", "b", EXPENSE)
        store.delete_transaction(second.id)
        assert store.add(1, "C", "c", EXPENSE).id == 3

    def test_deletion_keeps_order(self, store):
        for name in "abcd":
            store.add(1, name, name, EXPENSE)
        store.delete_transaction(2)
        assert [t.category for t in store.transactions] == ["a", "c", "d"]

    def test_deletion_is_audited(self, store, audit_storage):
        store.add(1, "A", "a", EXPENSE)
        store.delete_transaction(1)
        deleted = audit_storage.get_recent_events(event_type=AuditEventType.TRANSACTION_DELETED)
        assert deleted[0].transaction_id == 1
