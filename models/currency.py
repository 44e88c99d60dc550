"""Supported display currencies."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Currency:
    """A display currency.

    Attributes:
        code: ISO 4217 code, e.g. "USD".
        symbol: Symbol used by the fallback formatter, e.g. "$".
        name: Human readable name.
    """

    code: str
    symbol: str
    name: str


SUPPORTED_CURRENCIES = (
    Currency(code="USD", symbol="$", name="US Dollar"),
    Currency(code="EUR", symbol="€", name="Euro"),
    Currency(code="INR", symbol="₹", name="Indian Rupee"),
    Currency(code="JPY", symbol="¥", name="Japanese Yen"),
    Currency(code="GBP", symbol="£", name="British Pound"),
)

DEFAULT_CURRENCY_CODE = "USD"


def find_currency(code: str) -> Optional[Currency]:
    """Look up a supported currency by code.

    Returns:
        The Currency, or None if the code is not supported.
    """
    for currency in SUPPORTED_CURRENCIES:
        if currency.code == code:
            return currency
    return None
