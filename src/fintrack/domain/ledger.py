"""Ledger domain service."""

from dataclasses import replace
from datetime import date, datetime, UTC
from typing import Any, Callable, Mapping, Optional
import structlog

from fintrack.database.adapter import PersistenceAdapter
from fintrack.domain.entities import Severity, Transaction, TransactionFilters
from fintrack.domain.errors import (
    DomainError,
    NotFoundError,
    ValidationError,
    immutable_field,
    transaction_not_found,
    unknown_field,
)
from fintrack.domain.notifications import Notifier
from fintrack.domain.validation import validate_transaction_input
from fintrack.utils.id_generator import generate_id

logger = structlog.get_logger(__name__)

UPDATABLE_FIELDS = ("type", "amount", "category", "description", "date")
FIXED_FIELDS = ("id", "timestamp")


class LedgerService:
    """Service owning transaction identity, mutation and retrieval.

    Every operation reloads the full collection through the persistence
    adapter, so the service itself holds no transaction state. Failures are
    logged and reported through the notifier; operations then return None or
    False instead of raising.
    """

    def __init__(
        self,
        adapter: PersistenceAdapter,
        notifier: Optional[Notifier] = None,
        confirm: Optional[Callable[[str], bool]] = None,
        id_generator: Callable[[], str] = generate_id,
    ):
        """Initialize ledger service.

        Args:
            adapter: Persistence adapter for the transaction collection
            notifier: Sink for user messages (defaults to the adapter's)
            confirm: Callable asked before a delete; None means no prompt
            id_generator: Callable returning a fresh unique id per call
        """
        self.adapter = adapter
        self.notifier = notifier or adapter.notifier
        self.confirm = confirm
        self.id_generator = id_generator

    def add(
        self,
        type: Any,
        amount: Any,
        category: str,
        description: str,
        date: date,
    ) -> Optional[Transaction]:
        """Create a transaction and append it to the collection.

        Returns:
            The new transaction, or None if validation or the save failed
        """
        try:
            fields = validate_transaction_input(type, amount, category, description, date)
            transactions = self.adapter.load_transactions()
            existing_ids = {txn.id for txn in transactions}
            new_id = self.id_generator()
            while new_id in existing_ids:
                new_id = self.id_generator()

            transaction = Transaction(id=new_id, timestamp=datetime.now(UTC), **fields)
            transactions.append(transaction)
            if not self.adapter.save_transactions(transactions):
                return None
        except DomainError as e:
            self._report("add", e, "Error adding transaction")
            return None
        except Exception:
            self._report_unexpected("add", "Error adding transaction")
            return None

        logger.info("transaction_added", transaction_id=transaction.id, type=transaction.type.value)
        self.notifier.notify("Transaction added successfully", Severity.SUCCESS)
        return transaction

    def get(self, transaction_id: str) -> Optional[Transaction]:
        """Get a transaction by ID, or None if it does not exist."""
        try:
            return self._find(self.adapter.load_transactions(), transaction_id)[1]
        except DomainError as e:
            self._report("get", e, "Transaction not found")
            return None
        except Exception:
            self._report_unexpected("get", "Error loading transaction")
            return None

    def update(self, transaction_id: str, updates: Mapping[str, Any]) -> Optional[Transaction]:
        """Merge the given fields over an existing transaction.

        Unspecified fields are left untouched; id and timestamp cannot change.
        The merged record is validated like a new one.

        Args:
            transaction_id: ID of the transaction to update
            updates: Field name to new value

        Returns:
            The updated transaction, or None on failure
        """
        try:
            for field in updates:
                if field in FIXED_FIELDS:
                    raise ValidationError(immutable_field(field))
                if field not in UPDATABLE_FIELDS:
                    raise ValidationError(unknown_field(field))

            transactions = self.adapter.load_transactions()
            index, current = self._find(transactions, transaction_id)
            merged = {field: getattr(current, field) for field in UPDATABLE_FIELDS}
            merged.update(updates)
            fields = validate_transaction_input(**merged)

            updated = replace(current, **fields)
            transactions[index] = updated
            if not self.adapter.save_transactions(transactions):
                return None
        except DomainError as e:
            self._report("update", e, "Error updating transaction")
            return None
        except Exception:
            self._report_unexpected("update", "Error updating transaction")
            return None

        logger.info("transaction_updated", transaction_id=transaction_id, fields=sorted(updates))
        self.notifier.notify("Transaction updated successfully", Severity.SUCCESS)
        return updated

    def delete(self, transaction_id: str) -> bool:
        """Delete a transaction after confirmation.

        Returns:
            True if the transaction was removed and the collection saved
        """
        try:
            transactions = self.adapter.load_transactions()
            index, _ = self._find(transactions, transaction_id)

            if self.confirm is not None and not self.confirm(
                "Are you sure you want to delete this transaction?"
            ):
                logger.debug("transaction_delete_declined", transaction_id=transaction_id)
                return False

            del transactions[index]
            if not self.adapter.save_transactions(transactions):
                return False
        except DomainError as e:
            self._report("delete", e, "Error deleting transaction")
            return False
        except Exception:
            self._report_unexpected("delete", "Error deleting transaction")
            return False

        logger.info("transaction_deleted", transaction_id=transaction_id)
        self.notifier.notify("Transaction deleted successfully", Severity.SUCCESS)
        return True

    def list_transactions(self, filters: Optional[TransactionFilters] = None) -> list[Transaction]:
        """List transactions matching all given filters, newest date first.

        Args:
            filters: Optional filters; unset fields do not restrict the result

        Returns:
            List of transaction entities sorted by date descending
        """
        filters = filters or TransactionFilters()
        transactions = self.adapter.load_transactions()

        if filters.type is not None:
            transactions = [t for t in transactions if t.type == filters.type]

        if filters.category:
            transactions = [t for t in transactions if t.category == filters.category]

        if filters.search:
            term = filters.search.lower()
            transactions = [t for t in transactions if term in t.description.lower()]

        if filters.start_date is not None:
            transactions = [t for t in transactions if t.date >= filters.start_date]
        if filters.end_date is not None:
            transactions = [t for t in transactions if t.date <= filters.end_date]

        return sorted(transactions, key=lambda t: t.date, reverse=True)

    def _find(self, transactions: list[Transaction], transaction_id: str) -> tuple[int, Transaction]:
        for index, txn in enumerate(transactions):
            if txn.id == transaction_id:
                return index, txn
        raise NotFoundError(transaction_not_found(transaction_id))

    def _report(self, operation: str, error: DomainError, fallback: str) -> None:
        """Log a failed operation and tell the user why."""
        logger.warning("ledger_operation_failed", operation=operation, error=str(error))
        message = str(error) if isinstance(error, (NotFoundError, ValidationError)) else fallback
        self.notifier.notify(message, Severity.ERROR)

    def _report_unexpected(self, operation: str, message: str) -> None:
        logger.exception("ledger_operation_crashed", operation=operation)
        self.notifier.notify(message, Severity.ERROR)

