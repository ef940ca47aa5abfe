"""Domain layer for fintrack application.

Services live in their own modules (``fintrack.domain.ledger``,
``fintrack.domain.aggregation``, ``fintrack.domain.budget``) and are imported
from there so the database layer can depend on entities without a cycle.
"""

from fintrack.domain.entities import (
    BalanceSummary,
    BudgetProgress,
    MonthlyTotals,
    Severity,
    Transaction,
    TransactionFilters,
    TransactionType,
)

__all__ = [
    "BalanceSummary",
    "BudgetProgress",
    "MonthlyTotals",
    "Severity",
    "Transaction",
    "TransactionFilters",
    "TransactionType",
]
