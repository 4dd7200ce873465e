"""Bidirectional currency handling: amounts <-> locale-formatted text.

Formatting: Python number -> locale-aware display string (Babel, with a
symbol-table fallback). Parsing: display or user-typed string -> number,
with a fixed heuristic for ambiguous "," / "." separators.

Public API:
    Formatting Functions:
        format_currency - Locale currency with symbol or code
        format_currency_amount - Grouped two-decimal number, no symbol
        format_whole_currency - Currency rounded to whole units
        format_large_currency - Abbreviated K / M / B amounts
        format_exchange_rate - "1 EUR = 1.0835 USD"
        format_currency_percentage - "+7.50%" style return figures
        format_percentage - Locale percentage of a 0-100 value

    Parsing and Comparison:
        parse_currency_amount - Total string -> number parsing
        compare_currency_amounts - -1 / 0 / 1 at a decimal precision

    Lookup:
        get_currency_symbol - Symbol table lookup, code when unknown
        is_valid_currency_code - Allow-list membership check

    Facade:
        CurrencyNormalizer, NormalizerConfig

All functions are total: they return a best-effort value and never raise for
bad input.

Python 3.13+. Uses Babel for i18n.
"""

from .comparison import compare_currency_amounts
from .formatting import (
    format_currency,
    format_currency_amount,
    format_currency_percentage,
    format_exchange_rate,
    format_large_currency,
    format_percentage,
    format_whole_currency,
)
from .normalizer import CurrencyNormalizer, NormalizerConfig
from .parsing import parse_currency_amount
from .symbols import CurrencyCode, get_currency_symbol, is_valid_currency_code

__all__ = [
    "CurrencyCode",
    "CurrencyNormalizer",
    "NormalizerConfig",
    "compare_currency_amounts",
    "format_currency",
    "format_currency_amount",
    "format_currency_percentage",
    "format_exchange_rate",
    "format_large_currency",
    "format_percentage",
    "format_whole_currency",
    "get_currency_symbol",
    "is_valid_currency_code",
    "parse_currency_amount",
]
