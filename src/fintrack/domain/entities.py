"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
how they are serialized into storage. Services hand these out instead of
live references into stored state.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Direction of money flow for a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class Severity(str, Enum):
    """Severity of a user-facing notification."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


# Categories offered by the front end. The ledger accepts any label.
DEFAULT_CATEGORIES = (
    "food",
    "transport",
    "entertainment",
    "shopping",
    "bills",
    "healthcare",
    "education",
    "other",
)


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: str
    type: TransactionType
    amount: Decimal
    category: str
    description: str
    date: date
    timestamp: datetime


@dataclass(frozen=True)
class TransactionFilters:
    """Optional, conjunctive filters for listing transactions."""

    type: Optional[TransactionType] = None
    category: Optional[str] = None
    search: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


@dataclass(frozen=True)
class BalanceSummary:
    """Overall balance derived from all transactions."""

    balance: Decimal
    total_income: Decimal
    total_expenses: Decimal


@dataclass(frozen=True)
class MonthlyTotals:
    """Income and expense sums for one year-month bucket."""

    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")


@dataclass(frozen=True)
class BudgetProgress:
    """Spend against a category ceiling."""

    spent: Decimal
    ceiling: Decimal
    percentage: Decimal

    @property
    def over_budget(self) -> bool:
        return self.percentage > 100
