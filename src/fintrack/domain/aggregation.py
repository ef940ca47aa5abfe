"""Aggregation domain service."""

from decimal import Decimal
from typing import Optional

from fintrack.database.adapter import PersistenceAdapter
from fintrack.domain.entities import (
    BalanceSummary,
    MonthlyTotals,
    Transaction,
    TransactionType,
)

ZERO = Decimal("0")


def month_key(txn: Transaction) -> str:
    """Return the "YYYY-MM" bucket key for a transaction's date."""
    return f"{txn.date.year:04d}-{txn.date.month:02d}"


class AggregationService:
    """Service deriving balances and totals from the stored transactions.

    Nothing is cached: each call reloads the collection, so results always
    reflect the latest persisted state.
    """

    def __init__(self, adapter: PersistenceAdapter):
        """Initialize aggregation service.

        Args:
            adapter: Persistence adapter for the transaction collection
        """
        self.adapter = adapter

    def balance(self) -> BalanceSummary:
        """Compute total income, total expenses and their difference."""
        total_income = ZERO
        total_expenses = ZERO
        for txn in self.adapter.load_transactions():
            if txn.type == TransactionType.INCOME:
                total_income += txn.amount
            else:
                total_expenses += txn.amount

        return BalanceSummary(
            balance=total_income - total_expenses,
            total_income=total_income,
            total_expenses=total_expenses,
        )

    def totals_by_category(
        self, type: Optional[TransactionType] = None
    ) -> dict[str, Decimal]:
        """Sum amounts per category.

        Args:
            type: If given, only transactions of this type are counted

        Returns:
            Dict of category to total; categories with no matching
            transactions are absent
        """
        totals: dict[str, Decimal] = {}
        for txn in self.adapter.load_transactions():
            if type is not None and txn.type != type:
                continue
            totals[txn.category] = totals.get(txn.category, ZERO) + txn.amount
        return totals

    def monthly_series(self) -> dict[str, MonthlyTotals]:
        """Bucket income and expenses by year-month of the transaction date.

        Keys are "YYYY-MM" strings; sorting them lexicographically sorts them
        chronologically. The dict itself is in first-seen order.
        """
        series: dict[str, MonthlyTotals] = {}
        for txn in self.adapter.load_transactions():
            key = month_key(txn)
            bucket = series.get(key, MonthlyTotals())
            if txn.type == TransactionType.INCOME:
                bucket = MonthlyTotals(income=bucket.income + txn.amount, expenses=bucket.expenses)
            else:
                bucket = MonthlyTotals(income=bucket.income, expenses=bucket.expenses + txn.amount)
            series[key] = bucket
        return series
