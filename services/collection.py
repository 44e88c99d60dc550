"""Base class for collections persisted to a durable storage slot."""

import json
from dataclasses import replace
from typing import Any, Generic, Iterator, List, Optional, TypeVar
from logger import get_logger

logger = get_logger()

T = TypeVar("T")


class PersistedCollection(Generic[T]):
    """An ordered in-memory collection mirrored to one storage slot.

    Every mutation re-serializes the whole collection. Storage failures never
    escape the public methods except from add(), which re-raises so callers
    can tell the user the entity was not saved. The last failure is kept in
    ``error`` as a user-facing message.

    Subclasses set ``storage_key``, ``entity_name`` and ``entity_class`` and
    implement ``sort_key``.

    Args:
        storage_manager: Storage manager holding the durable slots.
    """

    storage_key: str = ""
    entity_name: str = "item"
    reverse_sort: bool = False
    entity_class: type

    def __init__(self, storage_manager):
        self.storage_manager = storage_manager
        self._items: List[T] = []
        self.error: Optional[str] = None

    def sort_key(self, item: T) -> Any:
        raise NotImplementedError

    @property
    def items(self) -> List[T]:
        """A copy of the collection in its sorted order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def find(self, item_id: str) -> Optional[T]:
        """Get a single entity by ID, or None if absent."""
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def load(self) -> None:
        """Load the collection from its slot.

        An absent slot yields an empty collection. Unreadable or corrupt data
        also yields an empty collection and sets ``error``.
        """
        self.error = None
        try:
            raw = self.storage_manager.get(self.storage_key)
            if raw is None:
                self._items = []
                return
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            self._items = [self.entity_class.from_dict(entry) for entry in data]
            self._sort()
            logger.debug(f"Loaded {len(self._items)} {self.entity_name}(s)")
        except Exception as e:
            logger.error(f"Error loading {self.entity_name}s from storage: {e}")
            self._items = []
            self.error = f"Failed to load {self.entity_name}s from local storage."

    def serialize(self) -> str:
        """Serialize the whole collection to the slot's JSON format."""
        return json.dumps([item.to_dict() for item in self._items], ensure_ascii=False)

    def add(self, item: T) -> T:
        """Insert an entity, re-sort and persist.

        Raises:
            OSError: If the collection could not be written. The entity is
                not retained in that case.
        """
        self.error = None
        self._items.append(item)
        self._sort()
        try:
            self._persist()
        except Exception as e:
            self._items = [existing for existing in self._items if existing is not item]
            logger.error(f"Error adding {self.entity_name}: {e}")
            self.error = f"Failed to add {self.entity_name}."
            raise
        return item

    def update(self, item_id: str, **changes) -> Optional[T]:
        """Replace fields on an entity, keeping its identity.

        Returns:
            The updated entity, or None if no entity has that ID.
        """
        self.error = None
        for index, item in enumerate(self._items):
            if item.id == item_id:
                updated = replace(item, **changes)
                self._items[index] = updated
                self._sort()
                self._save(f"Failed to update {self.entity_name}.")
                return updated
        return None

    def remove(self, item_id: str) -> bool:
        """Remove an entity by ID.

        Returns:
            True if it was removed, False if not found.
        """
        self.error = None
        remaining = [item for item in self._items if item.id != item_id]
        if len(remaining) == len(self._items):
            return False
        self._items = remaining
        self._save(f"Failed to delete {self.entity_name}.")
        return True

    def clear_all(self) -> None:
        """Empty the collection and delete its slot, as if never used."""
        self.error = None
        self._items = []
        try:
            self.storage_manager.remove(self.storage_key)
        except Exception as e:
            logger.error(f"Error clearing {self.entity_name}s: {e}")
            self.error = f"Failed to clear {self.entity_name}s."
            raise

    def _sort(self) -> None:
        # sorted() is stable, so ties keep insertion order
        self._items = sorted(self._items, key=self.sort_key, reverse=self.reverse_sort)

    def _persist(self) -> None:
        self.storage_manager.set(self.storage_key, self.serialize())

    def _save(self, message: str) -> None:
        try:
            self._persist()
        except Exception as e:
            logger.error(f"Error saving {self.entity_name}s to storage: {e}")
            self.error = f"{message} Data might not persist."
