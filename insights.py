"""Savings tips generated by an LLM from the user's expenses.

The expenses are flattened into one text line each and handed to the
configured LLM provider. Failures are reported as InsightError carrying a
message that can be shown to the user as-is; nothing is retried and no
state is changed.
"""

from typing import Iterable, Optional
from config import Config
from llm import get_llm_provider
from llm.providers.base import LLMProvider
from models.currency import Currency
from models.transaction import Transaction
from logger import get_logger

logger = get_logger()

NO_TRANSACTIONS_MESSAGE = (
    "No spending data available to generate suggestions. "
    "Please add some transactions first."
)
NO_EXPENSES_MESSAGE = "No expense data available to generate suggestions."
FAILED_MESSAGE = "Failed to generate suggestions. Please try again."


class InsightError(Exception):
    """A savings-tips request that could not be completed."""


def build_spending_data(transactions: Iterable[Transaction], currency_code: str) -> str:
    """Flatten expenses into the text summary sent to the LLM.

    Each expense becomes "{date}: {description} ({category}) - {CODE} {amount}".
    Income is left out.
    """
    return "\n".join(
        f"{t.date.isoformat()}: {t.description} ({t.category}) - "
        f"{currency_code} {abs(t.amount):.2f}"
        for t in transactions
        if t.is_expense
    )


def get_savings_tips(
    transactions: Iterable[Transaction],
    currency: Currency,
    config: Optional[Config] = None,
    provider: Optional[LLMProvider] = None,
) -> str:
    """Ask the LLM for savings tips based on the user's expenses.

    Args:
        transactions: All transactions; only expenses are used.
        currency: Selected currency, whose code is attached to each amount.
        config: Application config used to build a provider when none is given.
        provider: Provider to use instead of the configured one.

    Returns:
        Free-text savings tips.

    Raises:
        InsightError: If there are no transactions or no expenses, the LLM
            is unavailable, or the request fails.
    """
    transactions = list(transactions)
    if not transactions:
        logger.warning("Savings tips requested without any transactions")
        raise InsightError(NO_TRANSACTIONS_MESSAGE)

    spending_data = build_spending_data(transactions, currency.code)
    if not spending_data:
        logger.warning("Savings tips requested without any expenses")
        raise InsightError(NO_EXPENSES_MESSAGE)

    if provider is None:
        if config is None:
            raise InsightError("AI suggestions are not configured.")
        try:
            provider = get_llm_provider(config)
        except Exception as e:
            logger.error(f"Failed to initialize LLM provider: {e}")
            raise InsightError(f"AI suggestions are misconfigured: {e}") from e
        if provider is None:
            raise InsightError(
                "AI suggestions are disabled. Enable [llm] in the config file."
            )

    try:
        return provider.get_savings_tips(spending_data)
    except Exception as e:
        logger.error(f"Error getting spending insights: {e}")
        raise InsightError(FAILED_MESSAGE) from e
