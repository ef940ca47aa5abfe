"""Tests for the aggregation service."""

from datetime import date
from decimal import Decimal

from fintrack.domain.entities import BalanceSummary, MonthlyTotals, TransactionType


def test_balance_empty(aggregation):
    """Test that an empty ledger has a zero balance."""
    assert aggregation.balance() == BalanceSummary(
        balance=Decimal("0"), total_income=Decimal("0"), total_expenses=Decimal("0")
    )


def test_balance(ledger, aggregation):
    """Test balance as income minus expenses."""
    ledger.add("income", Decimal("100"), "other", "Salary", date(2024, 1, 1))
    ledger.add("expense", Decimal("30"), "food", "Dinner", date(2024, 1, 2))

    summary = aggregation.balance()

    assert summary.balance == 70
    assert summary.total_income == 100
    assert summary.total_expenses == 30


def test_balance_can_be_negative(ledger, aggregation):
    """Test that overspending yields a negative balance."""
    ledger.add("expense", Decimal("12.50"), "food", "Snack", date(2024, 1, 2))
    assert aggregation.balance().balance == Decimal("-12.50")


def test_balance_keeps_decimal_precision(ledger, aggregation):
    """Test that cents add up exactly."""
    for _ in range(3):
        ledger.add("income", Decimal("0.10"), "other", "Interest", date(2024, 1, 1))
    assert aggregation.balance().total_income == Decimal("0.30")


def test_totals_by_category_for_expenses(ledger, aggregation):
    """Test that only expenses are summed when filtering by type."""
    ledger.add("expense", Decimal("20"), "food", "Lunch", date(2024, 1, 1))
    ledger.add("expense", Decimal("10"), "food", "Snack", date(2024, 1, 2))
    ledger.add("income", Decimal("5"), "food", "Refund", date(2024, 1, 3))

    assert aggregation.totals_by_category(TransactionType.EXPENSE) == {"food": Decimal("30")}


def test_totals_by_category_all_types(ledger, aggregation, sample_transactions):
    """Test totals without a type filter."""
    totals = aggregation.totals_by_category()
    assert totals == {
        "other": Decimal("5000000"),
        "food": Decimal("105000"),
        "transport": Decimal("150000"),
    }


def test_totals_by_category_omits_unmatched(ledger, aggregation, sample_transactions):
    """Test that categories without matching transactions are absent."""
    totals = aggregation.totals_by_category(TransactionType.INCOME)
    assert totals == {"other": Decimal("5000000")}
    assert "food" not in totals


def test_monthly_series_single_bucket(ledger, aggregation):
    """Test that one month accumulates income and expenses separately."""
    ledger.add("income", Decimal("50"), "other", "Gift", date(2024, 1, 5))
    ledger.add("expense", Decimal("10"), "food", "Bread", date(2024, 1, 20))

    assert aggregation.monthly_series() == {
        "2024-01": MonthlyTotals(income=Decimal("50"), expenses=Decimal("10"))
    }


def test_monthly_series_separate_buckets(ledger, aggregation):
    """Test that a new month starts an independent bucket."""
    ledger.add("income", Decimal("50"), "other", "Gift", date(2024, 1, 5))
    ledger.add("expense", Decimal("10"), "food", "Bread", date(2024, 1, 20))
    ledger.add("expense", Decimal("7"), "food", "Milk", date(2024, 2, 1))

    series = aggregation.monthly_series()

    assert series["2024-01"] == MonthlyTotals(income=Decimal("50"), expenses=Decimal("10"))
    assert series["2024-02"] == MonthlyTotals(income=Decimal("0"), expenses=Decimal("7"))


def test_monthly_series_keys_sort_chronologically(ledger, aggregation):
    """Test that zero-padded keys sort in calendar order."""
    ledger.add("income", Decimal("1"), "other", "Late", date(2024, 11, 1))
    ledger.add("income", Decimal("1"), "other", "Early", date(2024, 2, 1))
    ledger.add("income", Decimal("1"), "other", "Previous year", date(2023, 12, 31))

    assert sorted(aggregation.monthly_series()) == ["2023-12", "2024-02", "2024-11"]


def test_aggregates_reflect_latest_state(ledger, aggregation, sample_transactions):
    """Test that results change as soon as the ledger does."""
    assert aggregation.balance().total_expenses == Decimal("255000")

    ledger.delete(sample_transactions[2].id)

    assert aggregation.balance().total_expenses == Decimal("105000")
    assert "transport" not in aggregation.totals_by_category()
