"""To-do model for calendar productivity items."""

from dataclasses import dataclass
from datetime import date, datetime
import uuid

from dateutil.parser import isoparse


@dataclass
class ToDoItem:
    """A to-do attached to a calendar day.

    Attributes:
        id: Unique identifier (random UUID).
        date: The day the to-do belongs to.
        description: What needs doing.
        completed: Whether it has been ticked off.
        created_at: When the to-do was created; collections sort on this.
    """

    id: str
    date: date
    description: str
    completed: bool
    created_at: datetime

    @classmethod
    def create(cls, description: str, day: date) -> "ToDoItem":
        """Create a new, not yet completed to-do stamped with the current time."""
        return cls(
            id=str(uuid.uuid4()),
            date=day,
            description=description,
            completed=False,
            created_at=datetime.now().astimezone(),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "description": self.description,
            "completed": self.completed,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ToDoItem":
        return cls(
            id=data["id"],
            date=isoparse(data["date"]).date(),
            description=data["description"],
            completed=bool(data.get("completed", False)),
            created_at=isoparse(data["createdAt"]),
        )
