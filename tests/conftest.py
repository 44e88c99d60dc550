"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from services.base import Services
from tests.helpers import InMemoryStorageManager


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "spendwise",
        storage_dir=tmp_path / "spendwise" / "storage",
        log_level="DEBUG",
        log_dir=tmp_path / "spendwise" / "logs",
        locale="en_US",
        persist_budgets=True,
        llm_enabled=False,
        llm_provider="openai",
        llm_openai_api_key="",
        llm_openai_model="gpt-4o-mini",
    )


@pytest.fixture
def storage():
    """An empty in-memory storage manager."""
    return InMemoryStorageManager()


@pytest.fixture
def services(test_config, storage):
    """Create a Services container backed by in-memory storage.

    Args:
        test_config: Test configuration fixture.
        storage: In-memory storage manager fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, storage_manager=storage)
