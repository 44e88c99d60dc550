from datetime import date

from scripts.reset import reset
from services.budgets import BUDGETS_KEY
from services.currency import CURRENCY_KEY


def test_reset_removes_every_slot(services, storage):
    services.transactions.add_expense("Lunch", "Food", 10)
    services.todos.add_todo("Call bank", date(2024, 1, 1))
    services.reminders.add_reminder("Bill due", date(2024, 1, 2))
    services.budgets.add_budget("Food", 100)
    services.currency.set_selected("EUR")

    reset(services)

    assert storage.slots == {}
    assert len(services.transactions) == 0
    assert services.budgets.budgets == []
    assert services.currency.selected.code == "USD"
    assert not storage.exists(BUDGETS_KEY)
    assert not storage.exists(CURRENCY_KEY)
