"""Validation of transaction input before it reaches the ledger."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from fintrack.domain.entities import TransactionType
from fintrack.domain.errors import ValidationError


def validate_type(value: Any) -> TransactionType:
    """Coerce a transaction type, accepting enum members or their values."""
    if not value:
        raise ValidationError("Please select transaction type")
    try:
        return TransactionType(value)
    except ValueError:
        raise ValidationError(f"Invalid transaction type '{value}'")


def validate_amount(value: Any) -> Decimal:
    """Coerce an amount to a positive Decimal."""
    if isinstance(value, bool) or value is None:
        raise ValidationError("Please enter a valid amount")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except ArithmeticError:
        raise ValidationError("Please enter a valid amount")
    if not amount.is_finite() or amount <= 0:
        raise ValidationError("Please enter a valid amount")
    return amount


def validate_category(value: Optional[str]) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Please select a category")
    return value.strip()


def validate_description(value: Optional[str]) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Please enter a description")
    return value.strip()


def validate_date(value: Any) -> date:
    """Accept a calendar date; a datetime is reduced to its date part."""
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise ValidationError("Please select a date")
    return value


def validate_transaction_input(
    type: Any,
    amount: Any,
    category: Optional[str],
    description: Optional[str],
    date: Any,
) -> dict[str, Any]:
    """Validate raw transaction fields.

    Checks run in the same order a user fills in the form, so the first
    missing field is the one reported.

    Returns:
        Dict of normalized field values keyed by field name

    Raises:
        ValidationError: If any field is missing or invalid
    """
    return {
        "amount": validate_amount(amount),
        "type": validate_type(type),
        "category": validate_category(category),
        "description": validate_description(description),
        "date": validate_date(date),
    }
