"""Utility functions for fintrack."""

from fintrack.utils.date_parser import parse_date, get_date_range
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.id_generator import generate_id

__all__ = ["parse_date", "get_date_range", "parse_amount", "generate_id"]
