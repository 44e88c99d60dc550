"""Transaction categories.

Categories are a fixed set. "Income" is reserved for income transactions and
"Other" is the catch-all for expenses that fit nowhere else.
"""

from typing import List

INCOME_CATEGORY = "Income"
FALLBACK_CATEGORY = "Other"

CATEGORIES = (
    "Food",
    "Shopping",
    "Transport",
    "Utilities",
    "Entertainment",
    "Health",
    INCOME_CATEGORY,
    FALLBACK_CATEGORY,
)


def is_valid_category(name: str) -> bool:
    """Check whether a name is one of the known categories (case-sensitive)."""
    return name in CATEGORIES


def expense_categories() -> List[str]:
    """Categories an expense can be filed under."""
    return [c for c in CATEGORIES if c != INCOME_CATEGORY]


def editable_categories() -> List[str]:
    """Categories offered when re-filing an existing transaction."""
    return [c for c in CATEGORIES if c not in (INCOME_CATEGORY, FALLBACK_CATEGORY)]
