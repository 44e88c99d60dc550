"""Base services container for dependency injection."""

from config import Config
from storage.manager import StorageManager


class Services:
    """Container for all application services.

    Builds every service once around a single storage manager and loads their
    persisted state. Tests pass an in-memory storage manager instead.

    Args:
        config: Application configuration object.
        storage_manager: Optional storage manager for testing. If None, one is
            created from config.
    """

    def __init__(self, config: Config, storage_manager=None):
        self.config = config
        self.storage_manager = storage_manager or StorageManager(config)

        # Lazy import to avoid circular dependencies
        from services.transactions import TransactionService
        from services.todos import ToDoService
        from services.reminders import ReminderService
        from services.budgets import BudgetRegistry
        from services.currency import CurrencyService

        self.transactions = TransactionService(self.storage_manager)
        self.todos = ToDoService(self.storage_manager)
        self.reminders = ReminderService(self.storage_manager)
        self.budgets = BudgetRegistry(
            self.storage_manager if config.persist_budgets else None
        )
        self.currency = CurrencyService(self.storage_manager, locale=config.locale)

        self.load()

    def load(self) -> None:
        """(Re)load every service from storage."""
        for service in (
            self.transactions,
            self.todos,
            self.reminders,
            self.budgets,
            self.currency,
        ):
            service.load()

    @property
    def errors(self) -> list:
        """User-facing errors currently flagged by any service."""
        services = (
            self.transactions,
            self.todos,
            self.reminders,
            self.budgets,
            self.currency,
        )
        return [service.error for service in services if service.error]
