"""Tests for the budget service."""

from datetime import date
from decimal import Decimal

from fintrack.domain.entities import BudgetProgress


def test_set_budget_replaces_whole_map(budget_service, notifier):
    """Test that set_budget is a replacement, not a patch."""
    assert budget_service.set_budget({"food": Decimal("100"), "transport": Decimal("50")})
    assert budget_service.set_budget({"food": Decimal("200")})

    assert budget_service.get_budget() == {"food": Decimal("200")}
    assert notifier.successes == ["Budget updated successfully"] * 2


def test_set_budget_drops_non_positive_ceilings(budget_service):
    """Test that zero and negative ceilings are not stored."""
    assert budget_service.set_budget({"food": 100, "bills": 0, "shopping": "-5"})
    assert budget_service.get_budget() == {"food": Decimal("100")}


def test_set_budget_rejects_non_numeric(budget_service, notifier):
    """Test that an invalid ceiling leaves the stored budget unchanged."""
    budget_service.set_budget({"food": Decimal("100")})

    assert budget_service.set_budget({"food": "lots"}) is False

    assert budget_service.get_budget() == {"food": Decimal("100")}
    assert notifier.errors == ["Invalid budget for 'food': 'lots'"]


def test_set_budget_reports_save_failure(temp_storage, budget_service, notifier):
    """Test that a storage failure is reported and returns False."""
    temp_storage.quota = 5

    assert budget_service.set_budget({"food": Decimal("100")}) is False
    assert notifier.errors == ["Error saving budget"]


def test_progress_over_budget(ledger, budget_service):
    """Test that spending over the ceiling is not clamped."""
    ledger.add("expense", Decimal("120"), "food", "Feast", date(2024, 1, 1))
    budget_service.set_budget({"food": Decimal("100")})

    progress = budget_service.progress()

    assert progress == {
        "food": BudgetProgress(spent=Decimal("120"), ceiling=Decimal("100"), percentage=Decimal("120"))
    }
    assert progress["food"].over_budget


def test_progress_counts_only_expenses(ledger, budget_service):
    """Test that income in a budgeted category does not count as spending."""
    ledger.add("expense", Decimal("25"), "food", "Lunch", date(2024, 1, 1))
    ledger.add("income", Decimal("500"), "food", "Catering job", date(2024, 1, 2))
    budget_service.set_budget({"food": Decimal("100")})

    item = budget_service.progress()["food"]

    assert item.spent == Decimal("25")
    assert item.percentage == Decimal("25")
    assert not item.over_budget


def test_progress_zero_spent(budget_service):
    """Test that a budget without expenses shows zero spent."""
    budget_service.set_budget({"education": Decimal("300")})

    assert budget_service.progress() == {
        "education": BudgetProgress(spent=Decimal("0"), ceiling=Decimal("300"), percentage=Decimal("0"))
    }


def test_progress_only_for_budgeted_categories(ledger, budget_service):
    """Test that spending without a ceiling produces no entry."""
    ledger.add("expense", Decimal("40"), "transport", "Taxi", date(2024, 1, 1))
    budget_service.set_budget({"food": Decimal("100")})

    assert set(budget_service.progress()) == {"food"}


def test_progress_empty_without_budget(ledger, budget_service):
    """Test that no budget means no progress entries."""
    ledger.add("expense", Decimal("40"), "food", "Pizza", date(2024, 1, 1))
    assert budget_service.progress() == {}
