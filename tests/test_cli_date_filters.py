"""Tests for CLI date filter helper."""

from datetime import date

import click
import pytest

from fintrack.cli.date_filters import resolve_cli_date_range
from fintrack.utils.date_parser import get_date_range


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_date_range_rejects_multiple_periods(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date=None,
            end_date=None,
            periods=("this-month", "last-month"),
        )

    assert excinfo.value.exit_code == 1
    assert "Only one period option" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_period_with_start_end(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date="2024-01-01",
            end_date=None,
            periods=("this-month",),
        )

    assert excinfo.value.exit_code == 1
    assert "cannot be combined" in capsys.readouterr().err


def test_resolve_cli_date_range_returns_period_range():
    start, end = resolve_cli_date_range(
        _ctx(), start_date=None, end_date=None, periods=("this-month",)
    )
    assert (start, end) == get_date_range("this-month")


def test_resolve_cli_date_range_parses_explicit_dates():
    start, end = resolve_cli_date_range(
        _ctx(), start_date="2024-01-01", end_date="2024-01-31"
    )
    assert start == date(2024, 1, 1)
    assert end == date(2024, 1, 31)


def test_resolve_cli_date_range_no_filters():
    assert resolve_cli_date_range(_ctx(), start_date=None, end_date=None) == (None, None)


def test_resolve_cli_date_range_invalid_start(capsys):
    with pytest.raises(click.exceptions.Exit):
        resolve_cli_date_range(_ctx(), start_date="not a date", end_date=None)
    assert "Invalid start date" in capsys.readouterr().err
