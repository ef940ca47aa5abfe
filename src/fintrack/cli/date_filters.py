"""CLI helpers for date range resolution."""

from datetime import date
from functools import wraps
from typing import Callable

import click

from fintrack.utils.date_parser import get_date_range, parse_date

PERIODS = ("this-week", "this-month", "this-year", "last-week", "last-month", "last-year")


def period_options(command: Callable) -> Callable:
    """Add --start-date/--end-date and one flag per named period.

    The flags reach the command as a ``periods`` tuple of the names given.
    """

    @wraps(command)
    def wrapper(*args, **kwargs):
        kwargs["periods"] = tuple(
            period for period in PERIODS if kwargs.pop(period.replace("-", "_"))
        )
        return command(*args, **kwargs)

    for period in reversed(PERIODS):
        wrapper = click.option(
            f"--{period}", is_flag=True, help=f"Filter to {period.replace('-', ' ')}"
        )(wrapper)
    wrapper = click.option(
        "--end-date", help="End date (YYYY-MM-DD or relative like 'today', 'this month')"
    )(wrapper)
    wrapper = click.option(
        "--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')"
    )(wrapper)
    return wrapper


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    periods: tuple[str, ...] = (),
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    if len(periods) > 1:
        click.echo(
            "Error: Only one period option (--this-month, --last-year, ...) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if periods and (start_date or end_date):
        click.echo(
            "Error: Period options cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if periods:
        return get_date_range(periods[0])

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    return start, end
