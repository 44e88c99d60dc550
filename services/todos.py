"""To-do service backed by a storage slot."""

from datetime import date
from typing import List, Optional
from models.todo import ToDoItem
from services.collection import PersistedCollection

TODOS_KEY = "expenseTrackerTodos"


class ToDoService(PersistedCollection[ToDoItem]):
    """Service for managing to-dos, kept in creation order."""

    storage_key = TODOS_KEY
    entity_name = "to-do"
    entity_class = ToDoItem

    def sort_key(self, item: ToDoItem) -> float:
        return item.created_at.timestamp()

    def add_todo(self, description: str, day: date) -> ToDoItem:
        """Create a to-do for a day.

        Raises:
            ValueError: If the description is blank.
            OSError: If the to-dos could not be saved.
        """
        description = (description or "").strip()
        if not description:
            raise ValueError("Please enter a description for your to-do.")
        return self.add(ToDoItem.create(description, day))

    def toggle_completed(self, todo_id: str) -> Optional[ToDoItem]:
        """Flip a to-do between done and not done.

        Returns:
            The updated to-do, or None if the ID is unknown.
        """
        todo = self.find(todo_id)
        if todo is None:
            return None
        return self.update(todo_id, completed=not todo.completed)

    def delete(self, todo_id: str) -> bool:
        return self.remove(todo_id)

    def for_day(self, day: date) -> List[ToDoItem]:
        return [todo for todo in self._items if todo.date == day]
