"""Display helpers shared by CLI commands."""

from datetime import date
from decimal import Decimal

BAR_WIDTH = 30


def format_currency(amount: Decimal) -> str:
    """Format an amount with thousands separators and two decimals."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{abs(amount):,.2f}"


def format_date(value: date) -> str:
    """Format a date like 'Jan 05, 2024'."""
    return value.strftime("%b %d, %Y")


def format_month(key: str) -> str:
    """Format a 'YYYY-MM' bucket key like 'Jan 2024'."""
    year, month = key.split("-")
    return date(int(year), int(month), 1).strftime("%b %Y")


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def bar(value: Decimal, maximum: Decimal, width: int = BAR_WIDTH) -> str:
    """Render value as a bar of '#' relative to maximum, clamped to width."""
    if maximum <= 0 or value <= 0:
        return ""
    filled = int(min(value / maximum, Decimal("1")) * width)
    return "#" * max(filled, 1)
