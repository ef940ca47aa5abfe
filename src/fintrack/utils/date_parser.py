"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta, MO


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and a few
    relative forms: "today", "yesterday", "tomorrow", and "this/last/next"
    followed by "week", "month" or "year" (the first day of that period).

    Args:
        date_str: Date string
        today: Reference date for relative forms (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = today or date.today()

    simple = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if text in simple:
        return simple[text]

    offsets = {"last": -1, "this": 0, "next": 1}
    words = text.split()
    if len(words) == 2 and words[0] in offsets:
        start = period_start(words[1], today)
        if start is not None:
            step = offsets[words[0]]
            if words[1] == "week":
                return start + relativedelta(weeks=step)
            if words[1] == "month":
                return start + relativedelta(months=step)
            return start + relativedelta(years=step)

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def period_start(period: str, today: date) -> Optional[date]:
    """Return the first day of the week, month or year containing today."""
    if period == "week":
        return today + relativedelta(weekday=MO(-1))
    if period == "month":
        return today.replace(day=1)
    if period == "year":
        return today.replace(month=1, day=1)
    return None


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: One of this-week, this-month, this-year, last-week,
            last-month, last-year
        today: Reference date (defaults to date.today())

    Returns:
        Tuple of (start_date, end_date). "this-*" periods end today; "last-*"
        periods end on the last day of the previous period.

    Raises:
        ValueError: If period string is not recognized
    """
    today = today or date.today()
    which, _, unit = period.strip().lower().partition("-")
    start = period_start(unit, today)
    if which not in ("this", "last") or start is None:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: this-month, this-year, "
            "this-week, last-month, last-year, last-week"
        )

    if which == "this":
        return (start, today)

    step = {"week": relativedelta(weeks=1), "month": relativedelta(months=1), "year": relativedelta(years=1)}[unit]
    return (start - step, start - timedelta(days=1))
