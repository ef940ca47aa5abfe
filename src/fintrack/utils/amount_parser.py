"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse a user-entered amount string into a positive Decimal.

    Transactions carry their direction in their type, so amounts are always
    magnitudes. Handles:
    - "123.45"
    - "$123.45", "Rp 15000", "€12"
    - "1,234.56"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount greater than zero

    Raises:
        ValueError: If the string is empty, not a number, or not positive
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = re.sub(r"(?i)rp|[$€£¥\s]", "", amount_str)
    cleaned = cleaned.replace(",", "")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")

    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"Amount must be greater than zero, got '{amount_str.strip()}'")
    return amount
