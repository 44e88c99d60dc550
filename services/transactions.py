"""Transaction service backed by a storage slot."""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import List, Optional, Union
from models.category import INCOME_CATEGORY, editable_categories, is_valid_category
from models.transaction import Transaction
from services.collection import PersistedCollection

TRANSACTIONS_KEY = "expenseTrackerTransactions"

CENTS = Decimal("0.01")
MAX_AMOUNT = Decimal("1000000000000")


def to_cents(amount) -> Decimal:
    """Parse a money amount and round it to cents.

    Raises:
        ValueError: If the amount is not a finite number or exceeds MAX_AMOUNT.
    """
    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        raise ValueError(f"Invalid amount: {amount!r}")
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")
    if abs(value) > MAX_AMOUNT:
        raise ValueError(f"Amount cannot exceed {MAX_AMOUNT:,}.")
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def parse_amount(amount) -> Decimal:
    """Parse a user-entered amount, which must be at least one cent.

    Raises:
        ValueError: If the amount is not a number or is not positive.
    """
    value = to_cents(amount)
    if value <= 0:
        raise ValueError("Amount must be greater than 0.")
    return value


def _require_description(description: str) -> str:
    description = (description or "").strip()
    if not description:
        raise ValueError("Description cannot be empty.")
    return description


class TransactionService(PersistedCollection[Transaction]):
    """Service for managing transactions.

    Transactions are kept newest first. After creation only the category of a
    transaction may change; the history is only ever removed as a whole with
    clear_all().
    """

    storage_key = TRANSACTIONS_KEY
    entity_name = "transaction"
    entity_class = Transaction
    reverse_sort = True

    def sort_key(self, transaction: Transaction) -> float:
        return transaction.date.timestamp()

    def add_income(
        self,
        description: str,
        amount,
        when: Union[date, datetime, None] = None,
    ) -> Transaction:
        """Record income.

        Args:
            description: What the income was for.
            amount: Positive amount received.
            when: Day or timestamp of the income. Defaults to now.

        Returns:
            The stored Transaction.

        Raises:
            ValueError: If the description is empty or the amount is not positive.
            OSError: If the transactions could not be saved.
        """
        transaction = Transaction.income(
            _require_description(description), parse_amount(amount), when
        )
        return self.add(transaction)

    def add_expense(
        self,
        description: str,
        category: str,
        amount,
        when: Union[date, datetime, None] = None,
    ) -> Transaction:
        """Record an expense.

        Args:
            description: What the money was spent on.
            category: Expense category (anything except "Income").
            amount: Positive amount spent; stored negated.
            when: Day or timestamp of the expense. Defaults to now.

        Returns:
            The stored Transaction.

        Raises:
            ValueError: On an empty description, bad category or non-positive amount.
            OSError: If the transactions could not be saved.
        """
        description = _require_description(description)
        if not is_valid_category(category) or category == INCOME_CATEGORY:
            raise ValueError(f"Invalid expense category: {category}")
        transaction = Transaction.expense(
            description, category, parse_amount(amount), when
        )
        return self.add(transaction)

    def update_category(self, transaction_id: str, category: str) -> Optional[Transaction]:
        """Re-file an expense under a different category.

        Income always stays under "Income", and an expense can only move to
        one of the editable categories.

        Returns:
            The updated Transaction, or None if the ID is unknown.

        Raises:
            ValueError: If the transaction is income or the category is not
                an editable category.
        """
        if category not in editable_categories():
            raise ValueError(f"Cannot re-file a transaction under '{category}'.")
        transaction = self.find(transaction_id)
        if transaction is None:
            return None
        if transaction.is_income:
            raise ValueError("Income transactions cannot be re-categorized.")
        return self.update(transaction_id, category=category)

    def expenses(self) -> List[Transaction]:
        return [t for t in self._items if t.is_expense]

    def incomes(self) -> List[Transaction]:
        return [t for t in self._items if t.is_income]
