import json
import pytest
from decimal import Decimal

from services.budgets import BUDGETS_KEY, BudgetRegistry
from tests.helpers import FailingStorageManager, InMemoryStorageManager


class TestBudgetRegistry:
    """Tests for BudgetRegistry in memory."""

    def test_add_budget(self):
        registry = BudgetRegistry()

        budget = registry.add_budget("Food", "400")

        assert budget.category == "Food"
        assert budget.limit == Decimal("400")
        assert registry.find("Food") is budget

    @pytest.mark.parametrize("limit", [0, -10, "abc"])
    def test_add_rejects_non_positive_limit(self, limit):
        registry = BudgetRegistry()

        with pytest.raises(ValueError):
            registry.add_budget("Food", limit)
        assert len(registry) == 0

    def test_add_rejects_income(self):
        with pytest.raises(ValueError):
            BudgetRegistry().add_budget("Income", 100)

    def test_add_rejects_unknown_category(self):
        with pytest.raises(ValueError):
            BudgetRegistry().add_budget("Gadgets", 100)

    def test_add_rejects_duplicate_category(self):
        registry = BudgetRegistry()
        registry.add_budget("Food", 100)

        with pytest.raises(ValueError):
            registry.add_budget("Food", 200)
        assert registry.find("Food").limit == Decimal("100")

    def test_available_categories(self):
        registry = BudgetRegistry()
        registry.add_budget("Food", 100)
        registry.add_budget("Other", 50)

        assert registry.available_categories() == [
            "Shopping",
            "Transport",
            "Utilities",
            "Entertainment",
            "Health",
        ]

    def test_edit_budget(self):
        registry = BudgetRegistry()
        registry.add_budget("Food", 100)

        registry.edit_budget("Food", "250.5")

        assert registry.find("Food").limit == Decimal("250.5")

    def test_edit_allows_zero_but_not_negative(self):
        registry = BudgetRegistry()
        registry.add_budget("Food", 100)

        registry.edit_budget("Food", 0)
        assert registry.find("Food").limit == Decimal("0")

        with pytest.raises(ValueError):
            registry.edit_budget("Food", -1)

    def test_edit_unknown_budget(self):
        with pytest.raises(ValueError):
            BudgetRegistry().edit_budget("Food", 10)

    def test_delete_budget(self):
        registry = BudgetRegistry()
        registry.add_budget("Food", 100)

        assert registry.delete_budget("Food") is True
        assert registry.delete_budget("Food") is False
        assert "Food" in registry.available_categories()

    def test_in_memory_registry_forgets_on_new_instance(self):
        registry = BudgetRegistry()
        registry.add_budget("Food", 100)
        registry.load()

        assert registry.find("Food") is not None
        assert BudgetRegistry().budgets == []


class TestBudgetEditSession:
    """Tests for draft limits while editing a budget."""

    def test_draft_starts_at_committed_limit(self):
        registry = BudgetRegistry()
        registry.add_budget("Food", 100)

        assert registry.begin_edit("Food") == Decimal("100")
        assert registry.is_editing("Food")
        assert registry.draft_for("Food") == Decimal("100")

    def test_draft_does_not_touch_committed_limit(self):
        registry = BudgetRegistry()
        registry.add_budget("Food", 100)
        registry.begin_edit("Food")

        registry.set_draft("Food", 300)

        assert registry.find("Food").limit == Decimal("100")
        assert registry.draft_for("Food") == Decimal("300")

    def test_save_commits_draft(self):
        registry = BudgetRegistry()
        registry.add_budget("Food", 100)
        registry.begin_edit("Food")
        registry.set_draft("Food", 300)

        registry.save_edit("Food")

        assert registry.find("Food").limit == Decimal("300")
        assert not registry.is_editing("Food")

    def test_cancel_discards_draft(self):
        registry = BudgetRegistry()
        registry.add_budget("Food", 100)
        registry.begin_edit("Food")
        registry.set_draft("Food", 300)

        registry.cancel_edit("Food")

        assert registry.find("Food").limit == Decimal("100")
        assert registry.draft_for("Food") is None

    def test_set_draft_requires_edit_session(self):
        registry = BudgetRegistry()
        registry.add_budget("Food", 100)

        with pytest.raises(ValueError):
            registry.set_draft("Food", 10)
        with pytest.raises(ValueError):
            registry.save_edit("Food")

    def test_drafts_are_not_persisted(self):
        storage = InMemoryStorageManager()
        registry = BudgetRegistry(storage)
        registry.add_budget("Food", 100)
        registry.begin_edit("Food")
        registry.set_draft("Food", 999)

        stored = json.loads(storage.get(BUDGETS_KEY))
        assert stored == [{"category": "Food", "limit": "100.00"}]


class TestPersistentBudgetRegistry:
    """Tests for budgets saved to storage."""

    def test_budgets_survive_reload(self):
        storage = InMemoryStorageManager()
        registry = BudgetRegistry(storage)
        registry.add_budget("Food", 100)
        registry.add_budget("Health", "75.25")
        registry.edit_budget("Food", 120)

        reloaded = BudgetRegistry(storage)
        reloaded.load()

        assert reloaded.budgets == registry.budgets

    def test_delete_is_persisted(self):
        storage = InMemoryStorageManager()
        registry = BudgetRegistry(storage)
        registry.add_budget("Food", 100)
        registry.delete_budget("Food")

        reloaded = BudgetRegistry(storage)
        reloaded.load()

        assert reloaded.budgets == []

    def test_corrupt_slot_loads_empty(self):
        registry = BudgetRegistry(InMemoryStorageManager({BUDGETS_KEY: "[{oops"}))
        registry.load()

        assert registry.budgets == []
        assert registry.error is not None

    def test_invalid_stored_entries_are_skipped(self):
        """Test that hand-edited budgets cannot break one budget per category."""
        stored = [
            {"category": "Food", "limit": "100.00"},
            {"category": "Food", "limit": "999.00"},
            {"category": "Income", "limit": "50"},
            {"category": "Gadgets", "limit": "10"},
            {"category": "Health", "limit": "-5"},
            {"category": "Transport", "limit": 40.5},
        ]
        registry = BudgetRegistry(InMemoryStorageManager({BUDGETS_KEY: json.dumps(stored)}))
        registry.load()

        assert [(b.category, b.limit) for b in registry.budgets] == [
            ("Food", Decimal("100.00")),
            ("Transport", Decimal("40.5")),
        ]
        assert registry.error is None
        assert "Income" not in registry.available_categories()
        assert "Health" in registry.available_categories()

    def test_write_failure_sets_error(self):
        registry = BudgetRegistry(FailingStorageManager())

        registry.add_budget("Food", 100)

        assert registry.find("Food") is not None
        assert registry.error is not None

    def test_services_respect_persist_setting(self, test_config, storage):
        from services.base import Services

        test_config.persist_budgets = False
        services = Services(test_config, storage_manager=storage)
        services.budgets.add_budget("Food", 100)

        assert not services.budgets.persistent
        assert not storage.exists(BUDGETS_KEY)
