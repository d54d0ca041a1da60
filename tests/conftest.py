"""Shared fixtures for finledger tests."""

from datetime import date

import pytest

from finledger.audit import AuditLogger
from finledger.config import LedgerSettings
from finledger.ledger import LedgerStore
from finledger.services.storage import InMemoryAuditStorage


class FakeClock:
    """Callable standing in for date.today."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "finances.json"


@pytest.fixture
def settings(data_file):
    return LedgerSettings(
        data_file=data_file,
        save_retry_attempts=1,
        save_retry_wait_seconds=0,
    )


@pytest.fixture
def clock():
    return FakeClock(date(2024, 2, 10))


@pytest.fixture
def audit_storage():
    return InMemoryAuditStorage()


@pytest.fixture
def make_store(settings, clock, audit_storage):
    """Build a store; call again to simulate a restart."""
    def _make(**overrides):
        kwargs = {
            "settings": settings,
            "audit_logger": AuditLogger(audit_storage),
            "clock": clock,
        }
        kwargs.update(overrides)
        return LedgerStore(**kwargs)
    return _make


@pytest.fixture
def store(make_store):
    return make_store()
