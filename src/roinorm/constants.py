"""Shared constants for roinorm.

Single source of truth for defaults used by the validation and currency
packages. Placing them here keeps the two packages independent of each other.

Constants are grouped by domain:
- Locale and currency defaults
- Currency tables: symbols and the accepted ISO code allow-list
- Formatting: magnitude abbreviations and fixed precisions
- Cache limits

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Defaults
    "DEFAULT_LOCALE",
    "DEFAULT_CURRENCY",
    "DEFAULT_FRACTION_DIGITS",
    "DEFAULT_COMPARISON_PRECISION",
    "FALLBACK_LOCALE",
    # Currency tables
    "CURRENCY_SYMBOLS",
    "VALID_CURRENCY_CODES",
    "ISO_CURRENCY_CODE_LENGTH",
    # Formatting
    "EXCHANGE_RATE_DECIMALS",
    "LARGE_AMOUNT_DECIMALS",
    "MAGNITUDE_SUFFIXES",
    "PERCENTAGE_DEFAULT_DECIMALS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# DEFAULTS
# ============================================================================

# The calculator UI is Dutch; every formatter defaults to this locale.
DEFAULT_LOCALE: str = "nl-NL"

DEFAULT_CURRENCY: str = "EUR"

# Financial amounts are displayed and compared at cent granularity.
DEFAULT_FRACTION_DIGITS: int = 2
DEFAULT_COMPARISON_PRECISION: int = 2

# Substituted by LocaleContext when a requested locale is unknown to CLDR.
FALLBACK_LOCALE: str = "en_US"

# ============================================================================
# CURRENCY TABLES
# ============================================================================

ISO_CURRENCY_CODE_LENGTH: int = 3

# Display symbols used by the fallback formatter and the magnitude
# abbreviations. Codes missing here are displayed as the code itself.
CURRENCY_SYMBOLS: dict[str, str] = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
    "JPY": "¥",
    "CHF": "CHF",
    "CNY": "¥",
    "CAD": "C$",
    "AUD": "A$",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr",
    "SGD": "S$",
    "HKD": "HK$",
    "NZD": "NZ$",
    "ZAR": "R",
    "BRL": "R$",
    "MXN": "$",
    "INR": "₹",
    "RUB": "₽",
    "KRW": "₩",
}

# Accepted currency codes. Deliberately a short list of common codes rather
# than full ISO 4217 coverage.
VALID_CURRENCY_CODES: frozenset[str] = frozenset({
    "EUR", "USD", "GBP", "JPY", "CHF", "CNY", "CAD", "AUD",
    "SEK", "NOK", "DKK", "SGD", "HKD", "NZD", "ZAR", "BRL",
    "MXN", "INR", "RUB", "KRW", "IDR", "MYR", "PHP", "THB",
    "VND", "PLN", "CZK", "HUF", "RON", "BGN", "HRK", "ISK",
})

# ============================================================================
# FORMATTING
# ============================================================================

EXCHANGE_RATE_DECIMALS: int = 4
LARGE_AMOUNT_DECIMALS: int = 1
PERCENTAGE_DEFAULT_DECIMALS: int = 2

# (threshold, suffix) pairs, largest first. Compared against abs(amount).
MAGNITUDE_SUFFIXES: tuple[tuple[float, str], ...] = (
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
)

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of LocaleContext instances kept alive. A calculator session
# touches a handful of locales; the bound only matters for long-lived services.
MAX_LOCALE_CACHE_SIZE: int = 128
