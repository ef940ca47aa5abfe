"""Persistence adapter storing transactions and budgets as JSON text."""

import json
from decimal import Decimal
from typing import Mapping, Optional, Sequence
import structlog

from fintrack.database.base import Storage
from fintrack.database.mappers import (
    budget_from_record,
    budget_to_record,
    transaction_from_record,
    transaction_to_record,
)
from fintrack.domain.entities import Severity, Transaction
from fintrack.domain.errors import StorageError
from fintrack.domain.notifications import LoggingNotifier, Notifier

logger = structlog.get_logger(__name__)

TRANSACTIONS_KEY = "transactions"
BUDGET_KEY = "budget"


class PersistenceAdapter:
    """Reads and writes the whole transaction collection and budget map.

    Reads fail soft: absent, corrupt or unreadable entries load as empty
    defaults. Writes report failure by returning False and notifying the user.
    """

    def __init__(self, storage: Storage, notifier: Optional[Notifier] = None):
        """Initialize persistence adapter.

        Args:
            storage: Key-value storage backend
            notifier: Sink for storage failure messages
        """
        self.storage = storage
        self.notifier = notifier or LoggingNotifier()

    def load_transactions(self) -> list[Transaction]:
        """Load the full stored transaction collection."""
        try:
            data = self.storage.get_item(TRANSACTIONS_KEY)
            if data is None:
                return []
            records = json.loads(data)
            if not isinstance(records, list):
                raise ValueError("Transaction entry must be a list")
            return [transaction_from_record(record) for record in records]
        except (StorageError, ValueError) as e:
            logger.warning("transactions_load_failed", error=str(e))
            return []

    def save_transactions(self, transactions: Sequence[Transaction]) -> bool:
        """Serialize and write the whole transaction collection."""
        payload = json.dumps([transaction_to_record(txn) for txn in transactions])
        return self._write(TRANSACTIONS_KEY, payload, "Error saving data")

    def load_budget(self) -> dict[str, Decimal]:
        """Load the stored budget map."""
        try:
            data = self.storage.get_item(BUDGET_KEY)
            if data is None:
                return {}
            return budget_from_record(json.loads(data))
        except (StorageError, ValueError) as e:
            logger.warning("budget_load_failed", error=str(e))
            return {}

    def save_budget(self, budget: Mapping[str, Decimal]) -> bool:
        """Serialize and write the whole budget map."""
        payload = json.dumps(budget_to_record(budget))
        return self._write(BUDGET_KEY, payload, "Error saving budget")

    def _write(self, key: str, payload: str, failure_message: str) -> bool:
        try:
            self.storage.set_item(key, payload)
        except StorageError as e:
            logger.error("storage_write_failed", key=key, error=str(e))
            self.notifier.notify(failure_message, Severity.ERROR)
            return False
        return True
