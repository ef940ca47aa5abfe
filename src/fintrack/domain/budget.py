"""Budget domain service."""

from decimal import Decimal
from typing import Any, Mapping, Optional
import structlog

from fintrack.database.adapter import PersistenceAdapter
from fintrack.domain.aggregation import AggregationService
from fintrack.domain.entities import BudgetProgress, Severity, TransactionType
from fintrack.domain.errors import ValidationError
from fintrack.domain.notifications import Notifier

logger = structlog.get_logger(__name__)


class BudgetService:
    """Service for per-category spending ceilings."""

    def __init__(
        self,
        adapter: PersistenceAdapter,
        aggregation: Optional[AggregationService] = None,
        notifier: Optional[Notifier] = None,
    ):
        """Initialize budget service.

        Args:
            adapter: Persistence adapter for the budget map
            aggregation: Source of expense totals (built from adapter if None)
            notifier: Sink for user messages (defaults to the adapter's)
        """
        self.adapter = adapter
        self.aggregation = aggregation or AggregationService(adapter)
        self.notifier = notifier or adapter.notifier

    def set_budget(self, ceilings: Mapping[str, Any]) -> bool:
        """Replace the whole budget map.

        Ceilings of zero or less are dropped rather than stored.

        Args:
            ceilings: Category to ceiling amount

        Returns:
            True if the new budget was saved
        """
        try:
            budget = {}
            for category, value in ceilings.items():
                ceiling = _to_decimal(category, value)
                if ceiling > 0:
                    budget[category] = ceiling
        except ValidationError as e:
            logger.warning("budget_rejected", error=str(e))
            self.notifier.notify(str(e), Severity.ERROR)
            return False

        if not self.adapter.save_budget(budget):
            return False

        logger.info("budget_saved", categories=sorted(budget))
        self.notifier.notify("Budget updated successfully", Severity.SUCCESS)
        return True

    def get_budget(self) -> dict[str, Decimal]:
        """Get the stored budget map."""
        return self.adapter.load_budget()

    def progress(self) -> dict[str, BudgetProgress]:
        """Compare expense totals with each stored ceiling.

        Only categories with a ceiling appear. Percentages are not clamped,
        so overspending shows as more than 100.
        """
        budget = self.adapter.load_budget()
        spent_by_category = self.aggregation.totals_by_category(TransactionType.EXPENSE)

        result = {}
        for category, ceiling in budget.items():
            spent = spent_by_category.get(category, Decimal("0"))
            percentage = spent / ceiling * 100 if ceiling > 0 else Decimal("0")
            result[category] = BudgetProgress(spent=spent, ceiling=ceiling, percentage=percentage)
        return result


def _to_decimal(category: str, value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"Invalid budget for '{category}': {value!r}")
    try:
        ceiling = value if isinstance(value, Decimal) else Decimal(str(value))
    except ArithmeticError:
        raise ValidationError(f"Invalid budget for '{category}': {value!r}")
    if not ceiling.is_finite():
        raise ValidationError(f"Invalid budget for '{category}': {value!r}")
    return ceiling
