"""Currency symbol lookup and code validation.

Both functions work from fixed tables in roinorm.constants and never consult
CLDR: the symbol table drives the fallback formatter (which must work when
Babel cannot), and the code allow-list is a product decision, not ISO 4217.

Python 3.13+. Zero external dependencies.
"""

import re

from roinorm.constants import CURRENCY_SYMBOLS, VALID_CURRENCY_CODES

__all__ = [
    "CurrencyCode",
    "get_currency_symbol",
    "is_valid_currency_code",
]

type CurrencyCode = str
"""Three-letter uppercase currency code (e.g., 'EUR', 'USD')."""

_CODE_SHAPE = re.compile(r"[A-Z]{3}")


def get_currency_symbol(currency: str) -> str:
    """Look up the display symbol for a currency code.

    Args:
        currency: Currency code, e.g. "EUR"

    Returns:
        The symbol, or the code itself when the table has no entry.

    Examples:
        >>> get_currency_symbol("EUR")
        '€'
        >>> get_currency_symbol("HKD")
        'HK$'
        >>> get_currency_symbol("XYZ")
        'XYZ'
    """
    return CURRENCY_SYMBOLS.get(currency, currency)


def is_valid_currency_code(currency: object) -> bool:
    """Check a currency code against the accepted allow-list.

    Case-sensitive: "eur" is rejected. Codes that are well-formed but not on
    the list (e.g. "XYZ", or real ISO codes such as "ARS") are rejected too.

    Examples:
        >>> is_valid_currency_code("EUR")
        True
        >>> is_valid_currency_code("eur")
        False
        >>> is_valid_currency_code("XYZ")
        False
    """
    if not isinstance(currency, str) or not _CODE_SHAPE.fullmatch(currency):
        return False
    return currency in VALID_CURRENCY_CODES
