"""Reminder service backed by a storage slot."""

from datetime import date
from typing import List
from models.reminder import ReminderItem
from services.collection import PersistedCollection

REMINDERS_KEY = "expenseTrackerReminders"


class ReminderService(PersistedCollection[ReminderItem]):
    """Service for managing reminders, kept in creation order.

    Reminders are never edited; they are only created and deleted.
    """

    storage_key = REMINDERS_KEY
    entity_name = "reminder"
    entity_class = ReminderItem

    def sort_key(self, item: ReminderItem) -> float:
        return item.created_at.timestamp()

    def add_reminder(self, description: str, day: date) -> ReminderItem:
        """Create a reminder for a day.

        Raises:
            ValueError: If the description is blank.
            OSError: If the reminders could not be saved.
        """
        description = (description or "").strip()
        if not description:
            raise ValueError("Please enter a description for your reminder.")
        return self.add(ReminderItem.create(description, day))

    def delete(self, reminder_id: str) -> bool:
        return self.remove(reminder_id)

    def for_day(self, day: date) -> List[ReminderItem]:
        return [reminder for reminder in self._items if reminder.date == day]
