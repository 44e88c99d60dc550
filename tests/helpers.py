"""Helper utilities for tests."""

from typing import Dict, Optional


class InMemoryStorageManager:
    """Storage manager that keeps slots in a dict instead of files."""

    def __init__(self, slots: Optional[Dict[str, str]] = None):
        self.slots: Dict[str, str] = dict(slots or {})
        self.writes = 0

    def exists(self, key: str) -> bool:
        return key in self.slots

    def get(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        self.slots[key] = value

    def remove(self, key: str) -> None:
        self.slots.pop(key, None)


class FailingStorageManager(InMemoryStorageManager):
    """Storage manager whose reads and/or writes raise OSError."""

    def __init__(self, slots=None, fail_reads=False, fail_writes=True):
        super().__init__(slots)
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise OSError("storage unavailable")
        return super().get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("No space left on device")
        super().set(key, value)


class FakeLLMProvider:
    """LLM provider that records its input and returns canned tips."""

    def __init__(self, tips="Cook at home more often.", error=None):
        self.tips = tips
        self.error = error
        self.calls = []

    def get_savings_tips(self, spending_data: str) -> str:
        self.calls.append(spending_data)
        if self.error:
            raise self.error
        return self.tips
