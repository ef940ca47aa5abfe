"""Mapper functions to convert between domain entities and stored records.

Stored records are plain JSON-compatible dicts. Amounts are written as decimal
strings so no precision is lost; numeric amounts are still accepted on read.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from fintrack.domain import entities as domain


def parse_decimal(value: Any) -> Decimal:
    """Convert a stored number or numeric string to Decimal.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise ValueError(f"Not a number: {value!r}")
    try:
        result = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Not a number: {value!r}") from e
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def transaction_to_record(transaction: domain.Transaction) -> dict[str, Any]:
    """Convert a domain Transaction entity to a stored record."""
    return {
        "id": transaction.id,
        "type": transaction.type.value,
        "amount": str(transaction.amount),
        "category": transaction.category,
        "description": transaction.description,
        "date": transaction.date.isoformat(),
        "timestamp": transaction.timestamp.isoformat(),
    }


def transaction_from_record(record: Mapping[str, Any]) -> domain.Transaction:
    """Convert a stored record to a domain Transaction entity.

    Raises:
        ValueError: If the record is missing fields or holds malformed values
    """
    try:
        return domain.Transaction(
            id=str(record["id"]),
            type=domain.TransactionType(record["type"]),
            amount=parse_decimal(record["amount"]),
            category=str(record["category"]),
            description=str(record["description"]),
            date=date.fromisoformat(record["date"]),
            timestamp=datetime.fromisoformat(record["timestamp"]),
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed transaction record: {e}") from e


def budget_to_record(budget: Mapping[str, Decimal]) -> dict[str, str]:
    """Convert a budget map to a stored record."""
    return {category: str(ceiling) for category, ceiling in budget.items()}


def budget_from_record(record: Any) -> dict[str, Decimal]:
    """Convert a stored record to a budget map.

    Raises:
        ValueError: If the record is not a mapping of category to number
    """
    if not isinstance(record, dict):
        raise ValueError("Budget record must be an object")
    return {str(category): parse_decimal(ceiling) for category, ceiling in record.items()}
