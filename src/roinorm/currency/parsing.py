"""Total parsing of locale-formatted currency strings.

parse_currency_amount() never raises and never reports errors: live input
echo calls it on every keystroke, so anything unreadable becomes 0.

Separator heuristic:
    Input can come from Dutch ("1.234,56") or English ("1,234.56") habits
    and carries no locale tag. The rules are:

    - "," and "." both present: the one that occurs last is the decimal
      point, the other is a thousands separator.
    - only "," present: a decimal comma when there is exactly one comma with
      at most two digits after it ("12,5", "99,95"); otherwise every comma
      is a thousands separator ("1,234", "1,234,567").
    - only "." present: left to float parsing ("1.234" is 1.234).

    The heuristic is lossy by nature ("1,234" can never mean 1.234) and
    downstream code depends on it; keep it stable.

Python 3.13+.
"""

import functools
import logging
import re
from decimal import Decimal

from babel.numbers import get_currency_symbol as get_babel_currency_symbol

from roinorm.constants import CURRENCY_SYMBOLS, VALID_CURRENCY_CODES
from roinorm.diagnostics import ErrorTemplate

__all__ = ["parse_currency_amount", "resolve_separators"]

logger = logging.getLogger(__name__)

# Locales whose CLDR currency symbols are stripped along with the built-in
# table. Babel renders USD as "US$" for nl_NL, which the table alone misses.
_SYMBOL_LOCALES: tuple[str, ...] = ("nl_NL", "en_US", "de_DE")

# Characters that belong to the number itself and must never be stripped.
_NUMERIC_CHARS = frozenset("0123456789.,+-")

_WHITESPACE = re.compile(r"\s+")

# Leading numeric prefix, the same shape JavaScript's parseFloat accepts.
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_MAX_DECIMAL_COMMA_DIGITS = 2


@functools.cache
def _token_pattern() -> re.Pattern[str]:
    """Build the code/symbol regex once, from the table and CLDR data.

    Tokens are sorted longest first so "HK$" wins over "$" and "US$" over "$".
    """
    tokens: set[str] = set(VALID_CURRENCY_CODES) | set(CURRENCY_SYMBOLS.values())
    for locale_code in _SYMBOL_LOCALES:
        for currency_code in VALID_CURRENCY_CODES:
            symbol = get_babel_currency_symbol(currency_code, locale=locale_code)
            if symbol and not _NUMERIC_CHARS.intersection(symbol):
                tokens.add(symbol)
    ordered = sorted(tokens, key=lambda token: (-len(token), token))
    return re.compile("|".join(re.escape(token) for token in ordered))


def resolve_separators(cleaned: str) -> str:
    """Rewrite a symbol-free amount so "." is the only decimal separator.

    When both "," and "." appear, whichever comes last is the decimal
    separator, so "1.234,56" reads as 1234.56 (the nl-NL format).

    Examples:
        >>> resolve_separators("1,234.56")
        '1234.56'
        >>> resolve_separators("1.234,56")
        '1234.56'
        >>> resolve_separators("12,5")
        '12.5'
        >>> resolve_separators("1,234")
        '1234'
    """
    has_comma = "," in cleaned
    has_dot = "." in cleaned

    if has_comma and has_dot:
        if cleaned.rfind(",") > cleaned.rfind("."):
            return cleaned.replace(".", "").replace(",", ".")
        return cleaned.replace(",", "")

    if has_comma:
        parts = cleaned.split(",")
        if len(parts) == 2 and len(parts[1]) <= _MAX_DECIMAL_COMMA_DIGITS:
            return cleaned.replace(",", ".")
        return cleaned.replace(",", "")

    return cleaned


def parse_currency_amount(
    value: str | int | float | Decimal | None,
) -> int | float | Decimal:
    """Parse a currency string into a number.

    Args:
        value: Raw amount. Numbers are returned unchanged; strings may carry
            currency codes, symbols and whitespace anywhere.

    Returns:
        The parsed amount as float, the input itself when it already is a
        number, or 0 for empty and unreadable input.

    Examples:
        >>> parse_currency_amount("€ 1.234,56")
        1234.56
        >>> parse_currency_amount("$1,234.56")
        1234.56
        >>> parse_currency_amount("12,5")
        12.5
        >>> parse_currency_amount("HK$ 1,234")
        1234.0
        >>> parse_currency_amount("n/a")
        0.0
        >>> parse_currency_amount(42)
        42
    """
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return value
    if not value:
        return 0.0

    text = str(value)
    cleaned = _token_pattern().sub("", text)
    cleaned = _WHITESPACE.sub("", cleaned)
    cleaned = resolve_separators(cleaned)

    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        logger.debug("%s", ErrorTemplate.parse_amount_invalid(text, cleaned).format_error())
        return 0.0
    return float(match.group(0))
