from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional, Union
import uuid

from dateutil.parser import isoparse

from models.category import INCOME_CATEGORY

INCOME = "income"
EXPENSE = "expense"


def to_local_datetime(value: Union[date, datetime, None]) -> datetime:
    """Normalize a user-supplied date into a timezone-aware local datetime.

    A bare date becomes local midnight of that day; None means now.
    """
    if value is None:
        return datetime.now().astimezone()
    if isinstance(value, datetime):
        return value.astimezone()
    return datetime.combine(value, time()).astimezone()


def local_day(value: datetime) -> date:
    """The calendar day a timestamp falls on, in local time."""
    return value.astimezone().date()


@dataclass
class Transaction:
    id: str  # random UUID, never reused
    date: datetime
    description: str
    category: str
    amount: Decimal  # positive for income, negative for expenses
    type: str  # 'income' or 'expense'

    def __post_init__(self):
        if self.type not in (INCOME, EXPENSE):
            raise ValueError(f"Unknown transaction type: {self.type}")
        if self.type == INCOME and self.amount <= 0:
            raise ValueError("Income amounts must be positive")
        if self.type == EXPENSE and self.amount >= 0:
            raise ValueError("Expense amounts must be negative")

    @classmethod
    def income(
        cls, description: str, amount: Decimal, when: Optional[datetime] = None
    ) -> "Transaction":
        """Create an income transaction from a positive amount."""
        return cls(
            id=str(uuid.uuid4()),
            date=to_local_datetime(when),
            description=description,
            category=INCOME_CATEGORY,
            amount=abs(Decimal(amount)),
            type=INCOME,
        )

    @classmethod
    def expense(
        cls,
        description: str,
        category: str,
        amount: Decimal,
        when: Optional[datetime] = None,
    ) -> "Transaction":
        """Create an expense transaction; the amount is stored negated."""
        return cls(
            id=str(uuid.uuid4()),
            date=to_local_datetime(when),
            description=description,
            category=category,
            amount=-abs(Decimal(amount)),
            type=EXPENSE,
        )

    @property
    def is_expense(self) -> bool:
        return self.type == EXPENSE

    @property
    def is_income(self) -> bool:
        return self.type == INCOME

    @property
    def day(self) -> date:
        return local_day(self.date)

    def to_dict(self) -> dict:
        """Convert transaction to a JSON-friendly dictionary for storage."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "description": self.description,
            "category": self.category,
            "amount": str(self.amount),
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Rebuild a transaction from its stored dictionary."""
        return cls(
            id=data["id"],
            date=isoparse(data["date"]),
            description=data["description"],
            category=data["category"],
            # accepts a string or a JSON number; str() keeps 12.3 exact
            amount=Decimal(str(data["amount"])),
            type=data["type"],
        )
