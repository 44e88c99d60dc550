"""Currency selection and money formatting."""

from decimal import Decimal
from typing import Optional, Union
from babel.numbers import format_currency
from models.currency import (
    DEFAULT_CURRENCY_CODE,
    SUPPORTED_CURRENCIES,
    Currency,
    find_currency,
)
from logger import get_logger

logger = get_logger()

CURRENCY_KEY = "expenseTrackerSelectedCurrency"


def format_amount(
    amount: Union[Decimal, float, int], currency: Currency, locale: str = "en_US"
) -> str:
    """Format an amount in a currency for the given locale.

    Falls back to the currency symbol followed by the amount with two decimals
    when the locale or currency cannot be formatted.

    Args:
        amount: Amount to format. Its sign is kept.
        currency: Currency to display the amount in.
        locale: Babel locale identifier, e.g. "en_US" or "de_DE".

    Returns:
        The formatted amount.
    """
    try:
        return format_currency(
            amount,
            currency.code,
            format="¤#,##0.00",
            locale=locale,
            currency_digits=False,
        )
    except Exception as e:
        logger.error(f"Error formatting currency {currency.code} for {locale}: {e}")
        return f"{currency.symbol}{Decimal(str(amount)):.2f}"


class CurrencyService:
    """Holds the selected display currency and formats money with it.

    Changing the currency only changes how amounts are displayed; stored
    amounts are never converted.

    Args:
        storage_manager: Storage manager holding the selected currency slot.
        locale: Locale used for formatting.
    """

    def __init__(self, storage_manager, locale: str = "en_US"):
        self.storage_manager = storage_manager
        self.locale = locale
        self._code = DEFAULT_CURRENCY_CODE
        self.error: Optional[str] = None

    @property
    def selected(self) -> Currency:
        return find_currency(self._code) or find_currency(DEFAULT_CURRENCY_CODE)

    @property
    def supported(self):
        return SUPPORTED_CURRENCIES

    def load(self) -> None:
        """Load the selected currency, keeping the default if none is stored."""
        self.error = None
        self._code = DEFAULT_CURRENCY_CODE
        try:
            stored = self.storage_manager.get(CURRENCY_KEY)
        except Exception as e:
            logger.error(f"Error reading currency from storage: {e}")
            self.error = "Failed to load currency from local storage."
            return

        if stored is None:
            return
        stored = stored.strip()
        if find_currency(stored) is None:
            logger.warning(f"Ignoring unsupported stored currency: {stored!r}")
            return
        self._code = stored

    def set_selected(self, code: str) -> Currency:
        """Select a currency and remember it.

        Raises:
            ValueError: If the code is not a supported currency.
        """
        self.error = None
        currency = find_currency(code.upper())
        if currency is None:
            supported = ", ".join(c.code for c in SUPPORTED_CURRENCIES)
            raise ValueError(f"Unsupported currency: {code} (supported: {supported})")

        self._code = currency.code
        try:
            self.storage_manager.set(CURRENCY_KEY, currency.code)
        except Exception as e:
            logger.error(f"Error saving currency to storage: {e}")
            self.error = "Failed to save currency selection."
        return currency

    def format(self, amount: Union[Decimal, float, int]) -> str:
        """Format an amount in the selected currency."""
        return format_amount(amount, self.selected, self.locale)
