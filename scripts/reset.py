#!/usr/bin/env python3
"""Reset script for Spendwise.

Deletes every storage slot (transactions, to-dos, reminders, budgets and the
selected currency) so the next run behaves like a first run. Logs and the
config file are left alone.
"""

import sys

from config import load_config
from services.base import Services
from services.budgets import BUDGETS_KEY
from services.currency import CURRENCY_KEY


def reset(services: Services) -> None:
    """Clear all stored data held by the given services."""
    services.transactions.clear_all()
    services.todos.clear_all()
    services.reminders.clear_all()
    services.storage_manager.remove(BUDGETS_KEY)
    services.storage_manager.remove(CURRENCY_KEY)
    services.load()


def main():
    print("Spendwise Reset Script")
    print("=" * 50)

    config = load_config()
    print(f"\nStorage directory: {config.storage_dir}")

    response = input("\nThis will delete ALL data. Continue? (yes/no): ")
    if response.lower() != "yes":
        print("Reset cancelled.")
        sys.exit(0)

    reset(Services(config))

    print("\n" + "=" * 50)
    print("Reset complete! All stored data has been removed.")


if __name__ == "__main__":
    main()
