"""Currency, percentage and magnitude formatting.

Every function here returns a string for any numeric input. Locale-aware
rendering goes through LocaleContext (Babel); when it raises FormattingError
the functions switch to a deterministic fallback built from the symbol table:

    "{symbol} {grouped fixed-decimal number}"

Python 3.13+. Uses Babel for i18n.
"""

import logging
from decimal import Decimal
from typing import Literal

from roinorm.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_FRACTION_DIGITS,
    DEFAULT_LOCALE,
    EXCHANGE_RATE_DECIMALS,
    LARGE_AMOUNT_DECIMALS,
    MAGNITUDE_SUFFIXES,
    PERCENTAGE_DEFAULT_DECIMALS,
)
from roinorm.core.errors import FormattingError
from roinorm.runtime.locale_context import LocaleContext

from .symbols import get_currency_symbol

__all__ = [
    "format_currency",
    "format_currency_amount",
    "format_currency_percentage",
    "format_exchange_rate",
    "format_large_currency",
    "format_percentage",
    "format_whole_currency",
]

logger = logging.getLogger(__name__)

type Amount = int | float | Decimal


def _grouped_number(
    ctx: LocaleContext,
    amount: Amount,
    minimum_fraction_digits: int,
    maximum_fraction_digits: int,
    use_grouping: bool,
) -> str:
    try:
        return ctx.format_number(
            amount,
            minimum_fraction_digits=minimum_fraction_digits,
            maximum_fraction_digits=maximum_fraction_digits,
            use_grouping=use_grouping,
        )
    except FormattingError as e:
        logger.debug("Number formatting fell back to plain rendering: %s", e)
        return e.fallback_value


def format_currency(
    amount: Amount,
    currency: str = DEFAULT_CURRENCY,
    *,
    locale_code: str = DEFAULT_LOCALE,
    minimum_fraction_digits: int = DEFAULT_FRACTION_DIGITS,
    maximum_fraction_digits: int = DEFAULT_FRACTION_DIGITS,
    use_grouping: bool = True,
    currency_display: Literal["symbol", "code"] = "symbol",
) -> str:
    """Format an amount as locale-correct currency.

    Args:
        amount: Monetary amount
        currency: Currency code (default: EUR)
        locale_code: BCP 47 locale (default: nl-NL)
        minimum_fraction_digits: Minimum decimal places (default: 2)
        maximum_fraction_digits: Maximum decimal places (default: 2)
        use_grouping: Use thousands separator (default: True)
        currency_display: "symbol" or "code"

    Returns:
        Formatted string. When Babel cannot format the pair (malformed
        code, invalid digit options) the fallback "{symbol} {number}" is
        returned instead.

    Examples:
        >>> format_currency(1234.5)
        '€\\xa01.234,50'
        >>> format_currency(1234.5, "USD", locale_code="en-US")
        '$1,234.50'
        >>> format_currency(1234.5, "EURO")
        'EURO 1.234,50'
    """
    ctx = LocaleContext.create(locale_code)
    try:
        return ctx.format_currency(
            amount,
            currency=currency,
            minimum_fraction_digits=minimum_fraction_digits,
            maximum_fraction_digits=maximum_fraction_digits,
            use_grouping=use_grouping,
            currency_display=currency_display,
        )
    except FormattingError as e:
        logger.debug("Currency formatting fell back for %r %r: %s", currency, amount, e)

    symbol = get_currency_symbol(currency)
    number = _grouped_number(
        ctx, amount, minimum_fraction_digits, maximum_fraction_digits, use_grouping
    )
    return f"{symbol} {number}"


def format_currency_amount(
    amount: Amount,
    currency: str = DEFAULT_CURRENCY,
    *,
    locale_code: str = DEFAULT_LOCALE,
) -> str:
    """Format an amount as a grouped, two-decimal number without symbol.

    The currency is accepted so call sites read the same as format_currency;
    the output does not depend on it.

    Examples:
        >>> format_currency_amount(1234.5)
        '1.234,50'
        >>> format_currency_amount(1234.5, "USD", locale_code="en-US")
        '1,234.50'
    """
    ctx = LocaleContext.create(locale_code)
    try:
        return ctx.format_number(
            amount,
            minimum_fraction_digits=DEFAULT_FRACTION_DIGITS,
            maximum_fraction_digits=DEFAULT_FRACTION_DIGITS,
        )
    except FormattingError as e:
        logger.debug("Amount formatting fell back for %r %r: %s", currency, amount, e)
        return e.fallback_value


def format_whole_currency(
    amount: Amount,
    currency: str = DEFAULT_CURRENCY,
    *,
    locale_code: str = DEFAULT_LOCALE,
) -> str:
    """Format currency rounded to whole units, as on dashboard KPI tiles.

    Example:
        >>> format_whole_currency(1234.56)
        '€\\xa01.235'
    """
    return format_currency(
        amount,
        currency,
        locale_code=locale_code,
        minimum_fraction_digits=0,
        maximum_fraction_digits=0,
    )


def format_exchange_rate(
    rate: Amount,
    from_currency: str,
    to_currency: str,
) -> str:
    """Render an exchange rate as "1 FROM = X.XXXX TO".

    Example:
        >>> format_exchange_rate(1.08347, "EUR", "USD")
        '1 EUR = 1.0835 USD'
    """
    return f"1 {from_currency} = {rate:.{EXCHANGE_RATE_DECIMALS}f} {to_currency}"


def format_currency_percentage(
    value: Amount,
    *,
    fraction_digits: int = PERCENTAGE_DEFAULT_DECIMALS,
    show_sign: bool = False,
) -> str:
    """Format a percentage figure (already x100) for return displays.

    Args:
        value: Percentage, e.g. 7.5 for 7.5%
        fraction_digits: Decimal places (default: 2); negative counts as 0
        show_sign: Prefix "+" or "-"; zero never gets a sign

    Examples:
        >>> format_currency_percentage(7.5)
        '7.50%'
        >>> format_currency_percentage(-7.5)
        '7.50%'
        >>> format_currency_percentage(-7.5, show_sign=True)
        '-7.50%'
        >>> format_currency_percentage(0, show_sign=True)
        '0.00%'
    """
    formatted = f"{abs(value):.{max(fraction_digits, 0)}f}"
    if show_sign and value != 0:
        sign = "+" if value > 0 else "-"
        return f"{sign}{formatted}%"
    return f"{formatted}%"


def format_percentage(
    value: Amount,
    *,
    locale_code: str = DEFAULT_LOCALE,
    fraction_digits: int = 1,
) -> str:
    """Format a 0-100 percentage with locale separators.

    Examples:
        >>> format_percentage(12.5)
        '12,5%'
        >>> format_percentage(12.5, locale_code="en-US")
        '12.5%'
    """
    ctx = LocaleContext.create(locale_code)
    try:
        return ctx.format_percent(value / 100, fraction_digits=fraction_digits)
    except FormattingError as e:
        logger.debug("Percentage formatting fell back for %r: %s", value, e)
        return e.fallback_value


def format_large_currency(
    amount: Amount,
    currency: str = DEFAULT_CURRENCY,
    *,
    locale_code: str = DEFAULT_LOCALE,
) -> str:
    """Abbreviate large amounts with B, M or K suffixes.

    Thresholds compare the absolute value; the sign stays on the number.
    Amounts below one thousand are formatted with format_currency.

    Examples:
        >>> format_large_currency(1_500_000)
        '€ 1.5M'
        >>> format_large_currency(-2500, "USD")
        '$ -2.5K'
        >>> format_large_currency(2_300_000_000, "GBP")
        '£ 2.3B'
    """
    symbol = get_currency_symbol(currency)
    numeric = float(amount)
    for threshold, suffix in MAGNITUDE_SUFFIXES:
        if abs(numeric) >= threshold:
            return f"{symbol} {numeric / threshold:.{LARGE_AMOUNT_DECIMALS}f}{suffix}"
    return format_currency(amount, currency, locale_code=locale_code)
