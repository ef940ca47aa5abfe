"""Shared pytest fixtures for fintrack tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from fintrack.database.adapter import PersistenceAdapter
from fintrack.database.factories import create_sqlite_storage
from fintrack.domain.aggregation import AggregationService
from fintrack.domain.budget import BudgetService
from fintrack.domain.entities import Severity
from fintrack.domain.ledger import LedgerService
from fintrack.domain.notifications import Notifier


class RecordingNotifier(Notifier):
    """Notifier that keeps every message for assertions."""

    def __init__(self):
        self.messages: list[tuple[str, Severity]] = []

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        self.messages.append((message, severity))

    @property
    def errors(self) -> list[str]:
        return [message for message, severity in self.messages if severity == Severity.ERROR]

    @property
    def successes(self) -> list[str]:
        return [message for message, severity in self.messages if severity == Severity.SUCCESS]


@pytest.fixture
def temp_storage():
    """Create a temporary SQLite-backed storage for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    storage = create_sqlite_storage(database_path=db_path)
    # Store the path for tests that need it
    storage.database_path = db_path
    storage.connect()
    storage.initialize_schema()

    yield storage

    # Cleanup
    storage.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def notifier():
    """Create a notifier that records messages."""
    return RecordingNotifier()


@pytest.fixture
def adapter(temp_storage, notifier):
    """Create a PersistenceAdapter over the temporary storage."""
    return PersistenceAdapter(temp_storage, notifier)


@pytest.fixture
def ledger(adapter):
    """Create a LedgerService that deletes without prompting."""
    return LedgerService(adapter)


@pytest.fixture
def aggregation(adapter):
    """Create an AggregationService over the temporary storage."""
    return AggregationService(adapter)


@pytest.fixture
def budget_service(adapter):
    """Create a BudgetService over the temporary storage."""
    return BudgetService(adapter)


@pytest.fixture
def sample_transactions(ledger):
    """Add a small mix of income and expenses across two months."""
    return [
        ledger.add("income", Decimal("5000000"), "other", "January salary", date(2024, 1, 25)),
        ledger.add("expense", Decimal("25000"), "food", "Morning Coffee", date(2024, 1, 5)),
        ledger.add("expense", Decimal("150000"), "transport", "Train pass", date(2024, 1, 10)),
        ledger.add("expense", Decimal("80000"), "food", "Groceries", date(2024, 2, 3)),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
