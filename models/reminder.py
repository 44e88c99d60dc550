"""Reminder model for calendar productivity items."""

from dataclasses import dataclass
from datetime import date, datetime
import uuid

from dateutil.parser import isoparse


@dataclass
class ReminderItem:
    """A reminder attached to a calendar day.

    Attributes:
        id: Unique identifier (random UUID).
        date: The day the reminder is for.
        description: Reminder text.
        created_at: When the reminder was created; collections sort on this.
    """

    id: str
    date: date
    description: str
    created_at: datetime

    @classmethod
    def create(cls, description: str, day: date) -> "ReminderItem":
        return cls(
            id=str(uuid.uuid4()),
            date=day,
            description=description,
            created_at=datetime.now().astimezone(),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "description": self.description,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ReminderItem":
        return cls(
            id=data["id"],
            date=isoparse(data["date"]).date(),
            description=data["description"],
            created_at=isoparse(data["createdAt"]),
        )
