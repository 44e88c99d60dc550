"""Budget registry: one spending limit per category."""

import json
from decimal import Decimal
from typing import Dict, List, Optional
from models.budget import Budget
from models.category import CATEGORIES, INCOME_CATEGORY, is_valid_category
from services.transactions import parse_amount, to_cents
from logger import get_logger

logger = get_logger()

BUDGETS_KEY = "expenseTrackerBudgets"


def _parse_limit(limit) -> Decimal:
    """Parse a limit for an edit, where zero is allowed."""
    value = to_cents(limit)
    if value < 0:
        raise ValueError("Limit cannot be negative.")
    return value


class BudgetRegistry:
    """Registry of budgets, at most one per category.

    The amount spent against a budget is never stored here; see
    tools.aggregates.budget_progress.

    Each budget can have a pending edit (a draft limit) that lives next to
    the committed budget until it is saved or cancelled. Drafts are never
    persisted.

    Args:
        storage_manager: Optional storage manager. When given, budgets are
            loaded from and saved to a storage slot; otherwise they only live
            for the lifetime of the registry.
    """

    def __init__(self, storage_manager=None):
        self.storage_manager = storage_manager
        self._budgets: List[Budget] = []
        self._drafts: Dict[str, Decimal] = {}
        self.error: Optional[str] = None

    @property
    def persistent(self) -> bool:
        return self.storage_manager is not None

    @property
    def budgets(self) -> List[Budget]:
        return list(self._budgets)

    def __len__(self) -> int:
        return len(self._budgets)

    def find(self, category: str) -> Optional[Budget]:
        for budget in self._budgets:
            if budget.category == category:
                return budget
        return None

    def available_categories(self) -> List[str]:
        """Categories a new budget can be added for.

        Everything except Income and the categories that already have a budget.
        """
        budgeted = {b.category for b in self._budgets}
        return [c for c in CATEGORIES if c != INCOME_CATEGORY and c not in budgeted]

    def load(self) -> None:
        """Load budgets from storage. A no-op for in-memory registries.

        Entries for Income, unknown or already loaded categories, or with a
        negative limit are skipped with a warning.
        """
        self.error = None
        if not self.persistent:
            return
        try:
            raw = self.storage_manager.get(BUDGETS_KEY)
            if raw is None:
                self._budgets = []
                return
            budgets: List[Budget] = []
            for entry in json.loads(raw):
                budget = Budget.from_dict(entry)
                seen = {b.category for b in budgets}
                if (
                    not is_valid_category(budget.category)
                    or budget.category == INCOME_CATEGORY
                    or budget.category in seen
                    or not budget.limit.is_finite()
                    or budget.limit < 0
                ):
                    logger.warning(f"Skipping invalid stored budget: {entry!r}")
                    continue
                budgets.append(budget)
            self._budgets = budgets
        except Exception as e:
            logger.error(f"Error loading budgets from storage: {e}")
            self._budgets = []
            self.error = "Failed to load budgets from local storage."

    def add_budget(self, category: str, limit) -> Budget:
        """Add a budget for a category.

        Raises:
            ValueError: If the category is Income, unknown or already budgeted,
                or the limit is not greater than zero.
        """
        self.error = None
        if not is_valid_category(category):
            raise ValueError(f"Unknown category: {category}")
        if category not in self.available_categories():
            raise ValueError(f"Cannot add a budget for '{category}'.")
        budget = Budget(category=category, limit=parse_amount(limit))
        self._budgets.append(budget)
        self._save()
        logger.debug(f"Added budget for {category}: {budget.limit}")
        return budget

    def edit_budget(self, category: str, new_limit) -> Budget:
        """Change the limit of an existing budget.

        Raises:
            ValueError: If the category has no budget or the limit is negative.
        """
        self.error = None
        budget = self.find(category)
        if budget is None:
            raise ValueError(f"No budget set for '{category}'.")
        budget.limit = _parse_limit(new_limit)
        self._drafts.pop(category, None)
        self._save()
        return budget

    def delete_budget(self, category: str) -> bool:
        """Delete the budget for a category.

        Returns:
            True if a budget was deleted, False if none existed.
        """
        self.error = None
        remaining = [b for b in self._budgets if b.category != category]
        if len(remaining) == len(self._budgets):
            return False
        self._budgets = remaining
        self._drafts.pop(category, None)
        self._save()
        return True

    def begin_edit(self, category: str) -> Decimal:
        """Start editing a budget; the draft starts at the committed limit."""
        budget = self.find(category)
        if budget is None:
            raise ValueError(f"No budget set for '{category}'.")
        self._drafts[category] = budget.limit
        return budget.limit

    def set_draft(self, category: str, limit) -> Decimal:
        if category not in self._drafts:
            raise ValueError(f"Budget for '{category}' is not being edited.")
        self._drafts[category] = _parse_limit(limit)
        return self._drafts[category]

    def draft_for(self, category: str) -> Optional[Decimal]:
        return self._drafts.get(category)

    def is_editing(self, category: str) -> bool:
        return category in self._drafts

    def save_edit(self, category: str) -> Budget:
        """Commit the draft limit and end the edit."""
        if category not in self._drafts:
            raise ValueError(f"Budget for '{category}' is not being edited.")
        return self.edit_budget(category, self._drafts[category])

    def cancel_edit(self, category: str) -> None:
        """Discard the draft, leaving the committed limit untouched."""
        self._drafts.pop(category, None)

    def _save(self) -> None:
        if not self.persistent:
            return
        try:
            data = json.dumps([b.to_dict() for b in self._budgets])
            self.storage_manager.set(BUDGETS_KEY, data)
        except Exception as e:
            logger.error(f"Error saving budgets to storage: {e}")
            self.error = "Failed to save budgets. Data might not persist."
