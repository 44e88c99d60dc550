"""Tests for savings-tips requests."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

import insights
from insights import (
    FAILED_MESSAGE,
    NO_EXPENSES_MESSAGE,
    NO_TRANSACTIONS_MESSAGE,
    InsightError,
    build_spending_data,
    get_savings_tips,
)
from models.currency import find_currency
from models.transaction import Transaction
from tests.helpers import FakeLLMProvider

WHEN = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def transactions():
    return [
        Transaction.expense("Lunch", "Food", Decimal("12.5"), WHEN),
        Transaction.income("Salary", Decimal("3000"), WHEN),
        Transaction.expense("Bus pass", "Transport", Decimal("40"), WHEN),
    ]


class TestBuildSpendingData:
    """Tests for build_spending_data."""

    def test_one_line_per_expense(self, transactions):
        data = build_spending_data(transactions, "EUR")

        lines = data.splitlines()
        assert len(lines) == 2
        assert lines[0].endswith(": Lunch (Food) - EUR 12.50")
        assert lines[1].endswith(": Bus pass (Transport) - EUR 40.00")
        assert "Salary" not in data

    def test_no_expenses_gives_empty_string(self):
        assert build_spending_data([Transaction.income("Pay", Decimal("1"), WHEN)], "USD") == ""


class TestGetSavingsTips:
    """Tests for get_savings_tips."""

    def test_returns_provider_tips(self, transactions):
        provider = FakeLLMProvider(tips="Cook at home.")

        tips = get_savings_tips(transactions, find_currency("USD"), provider=provider)

        assert tips == "Cook at home."
        assert provider.calls == [build_spending_data(transactions, "USD")]

    def test_no_transactions_rejected_before_any_call(self, monkeypatch, test_config):
        provider = FakeLLMProvider()

        def fail_if_called(config):
            raise AssertionError("provider should not be created")

        monkeypatch.setattr(insights, "get_llm_provider", fail_if_called)

        with pytest.raises(InsightError, match=NO_TRANSACTIONS_MESSAGE):
            get_savings_tips([], find_currency("USD"), test_config)
        with pytest.raises(InsightError):
            get_savings_tips([], find_currency("USD"), provider=provider)
        assert provider.calls == []

    def test_income_only_reports_no_expenses(self):
        provider = FakeLLMProvider()

        with pytest.raises(InsightError) as exc_info:
            get_savings_tips(
                [Transaction.income("Salary", Decimal("3000"), WHEN)],
                find_currency("USD"),
                provider=provider,
            )

        assert str(exc_info.value) == NO_EXPENSES_MESSAGE
        assert provider.calls == []

    def test_accepts_a_generator(self, transactions):
        provider = FakeLLMProvider(tips="Tip")

        get_savings_tips((t for t in transactions), find_currency("USD"), provider=provider)

        assert provider.calls == [build_spending_data(transactions, "USD")]

    def test_provider_failure_reported_as_user_message(self, transactions):
        provider = FakeLLMProvider(error=ConnectionError("network down"))

        with pytest.raises(InsightError) as exc_info:
            get_savings_tips(transactions, find_currency("USD"), provider=provider)

        assert str(exc_info.value) == FAILED_MESSAGE
        assert len(provider.calls) == 1

    def test_disabled_llm(self, transactions, test_config):
        with pytest.raises(InsightError, match="disabled"):
            get_savings_tips(transactions, find_currency("USD"), test_config)

    def test_misconfigured_llm(self, transactions, test_config):
        test_config.llm_enabled = True
        test_config.llm_openai_api_key = ""

        with pytest.raises(InsightError, match="misconfigured"):
            get_savings_tips(transactions, find_currency("USD"), test_config)

    def test_uses_configured_provider(self, transactions, test_config, monkeypatch):
        provider = FakeLLMProvider(tips="Tip")
        monkeypatch.setattr(insights, "get_llm_provider", lambda config: provider)

        assert get_savings_tips(transactions, find_currency("GBP"), test_config) == "Tip"
        assert "GBP 12.50" in provider.calls[0]

    def test_does_not_change_transactions(self, services):
        services.transactions.add_expense("Lunch", "Food", 10)
        before = services.transactions.items

        with pytest.raises(InsightError):
            get_savings_tips(
                services.transactions.items,
                services.currency.selected,
                provider=FakeLLMProvider(error=RuntimeError("boom")),
            )

        assert services.transactions.items == before
