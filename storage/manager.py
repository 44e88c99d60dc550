"""Storage manager for durable key-value slots."""

from pathlib import Path
from typing import Optional
from config import Config


class StorageManager:
    """Manages durable slots, one JSON file per key under the storage directory.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        """Initialize the storage manager.

        Args:
            config: Config object containing the storage directory.
        """
        self.config = config

    def get_slot_path(self, key: str) -> Path:
        """Get the file path backing a slot.

        Args:
            key: Slot key, e.g. "expenseTrackerTransactions".

        Returns:
            Path: Path to the slot file.
        """
        return self.config.storage_dir / f"{key}.json"

    def exists(self, key: str) -> bool:
        """Check whether a slot has been written."""
        return self.get_slot_path(key).exists()

    def get(self, key: str) -> Optional[str]:
        """Read a slot.

        Args:
            key: Slot key.

        Returns:
            The stored text, or None if the slot does not exist.

        Raises:
            OSError: If the slot exists but cannot be read.
        """
        path = self.get_slot_path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        """Write a slot, replacing any previous value.

        The value is written to a temporary file first and moved into place so
        a failed write never leaves a half-written slot behind.

        Args:
            key: Slot key.
            value: Text to store.

        Raises:
            OSError: If the slot cannot be written (disk full, permissions).
        """
        path = self.get_slot_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)

        tmp_path = path.with_suffix(".json.tmp")
        try:
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(path)
        finally:
            tmp_path.unlink(missing_ok=True)

    def remove(self, key: str) -> None:
        """Delete a slot entirely. Missing slots are ignored.

        Args:
            key: Slot key.
        """
        self.get_slot_path(key).unlink(missing_ok=True)
