from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Budget:
    category: str  # any category except "Income"
    limit: Decimal  # spending limit; spent is always derived from transactions

    def to_dict(self) -> dict:
        return {"category": self.category, "limit": str(self.limit)}

    @classmethod
    def from_dict(cls, data: dict) -> "Budget":
        return cls(category=data["category"], limit=Decimal(str(data["limit"])))
