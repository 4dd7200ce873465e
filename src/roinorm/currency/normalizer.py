"""CurrencyNormalizer: configured facade over the currency functions.

The module functions take their locale and currency per call. Callers that
always work in one locale and currency (a calculator session, a report)
bind them once in a NormalizerConfig and use a CurrencyNormalizer.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

from roinorm.constants import (
    DEFAULT_COMPARISON_PRECISION,
    DEFAULT_CURRENCY,
    DEFAULT_FRACTION_DIGITS,
    DEFAULT_LOCALE,
    PERCENTAGE_DEFAULT_DECIMALS,
)
from roinorm.locale_utils import get_system_locale

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
from .parsing import parse_currency_amount
from .symbols import get_currency_symbol, is_valid_currency_code

__all__ = ["CurrencyNormalizer", "NormalizerConfig"]

type Amount = int | float | Decimal

_CODE_SHAPE = re.compile(r"[A-Z]{3}")


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    """Immutable configuration for a CurrencyNormalizer.

    All fields have defaults matching the Dutch calculator UI; constructing
    ``NormalizerConfig()`` with no arguments produces a usable configuration.

    Attributes:
        locale_code: BCP 47 locale for Babel formatting (default: nl-NL)
        default_currency: Currency used when a call omits one (default: EUR).
            Must be three uppercase letters; it does not have to be on the
            validation allow-list.
        comparison_precision: Decimal places for compare() (default: 2)
        fraction_digits: Decimal places for format_currency() (default: 2)

    Example:
        >>> config = NormalizerConfig(locale_code="en-US", default_currency="USD")
        >>> CurrencyNormalizer(config).format_currency(12)
        '$12.00'
    """

    locale_code: str = DEFAULT_LOCALE
    default_currency: str = DEFAULT_CURRENCY
    comparison_precision: int = DEFAULT_COMPARISON_PRECISION
    fraction_digits: int = DEFAULT_FRACTION_DIGITS

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If locale_code is empty, default_currency is not three
                uppercase letters, or a precision is negative.
        """
        if not self.locale_code:
            msg = "locale_code must not be empty"
            raise ValueError(msg)
        if not _CODE_SHAPE.fullmatch(self.default_currency):
            msg = f"default_currency must be three uppercase letters, got {self.default_currency!r}"
            raise ValueError(msg)
        if self.comparison_precision < 0:
            msg = "comparison_precision must be non-negative"
            raise ValueError(msg)
        if self.fraction_digits < 0:
            msg = "fraction_digits must be non-negative"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class CurrencyNormalizer:
    """Bidirectional amount <-> currency text conversion for one locale.

    Every method is total: formatting degrades to the symbol-table fallback,
    parsing degrades to 0.

    Example:
        >>> normalizer = CurrencyNormalizer()
        >>> normalizer.format_currency_amount(1234.5)
        '1.234,50'
        >>> normalizer.parse_currency_amount("€ 1.234,50")
        1234.5
    """

    config: NormalizerConfig = field(default_factory=NormalizerConfig)

    @classmethod
    def for_system_locale(cls, default_currency: str = DEFAULT_CURRENCY) -> CurrencyNormalizer:
        """Build a normalizer for the host locale (see get_system_locale)."""
        return cls(NormalizerConfig(
            locale_code=get_system_locale(), default_currency=default_currency
        ))

    @property
    def locale_code(self) -> str:
        """Locale used for Babel formatting."""
        return self.config.locale_code

    def format_currency(
        self,
        amount: Amount,
        currency: str | None = None,
        *,
        use_grouping: bool = True,
        currency_display: Literal["symbol", "code"] = "symbol",
    ) -> str:
        """Format with the configured locale and fraction digits."""
        digits = self.config.fraction_digits
        return format_currency(
            amount,
            currency or self.config.default_currency,
            locale_code=self.config.locale_code,
            minimum_fraction_digits=digits,
            maximum_fraction_digits=digits,
            use_grouping=use_grouping,
            currency_display=currency_display,
        )

    def format_currency_amount(self, amount: Amount, currency: str | None = None) -> str:
        return format_currency_amount(
            amount,
            currency or self.config.default_currency,
            locale_code=self.config.locale_code,
        )

    def format_whole_currency(self, amount: Amount, currency: str | None = None) -> str:
        return format_whole_currency(
            amount,
            currency or self.config.default_currency,
            locale_code=self.config.locale_code,
        )

    def format_large_currency(self, amount: Amount, currency: str | None = None) -> str:
        return format_large_currency(
            amount,
            currency or self.config.default_currency,
            locale_code=self.config.locale_code,
        )

    def format_percentage(self, value: Amount, *, fraction_digits: int = 1) -> str:
        return format_percentage(
            value, locale_code=self.config.locale_code, fraction_digits=fraction_digits
        )

    def compare(self, a: Amount, b: Amount) -> Literal[-1, 0, 1]:
        """Compare two amounts at the configured precision."""
        return compare_currency_amounts(a, b, self.config.comparison_precision)

    # Locale-independent operations, exposed so callers need one object.

    @staticmethod
    def get_currency_symbol(currency: str) -> str:
        return get_currency_symbol(currency)

    @staticmethod
    def is_valid_currency_code(currency: object) -> bool:
        return is_valid_currency_code(currency)

    @staticmethod
    def parse_currency_amount(value: str | Amount | None) -> Amount:
        return parse_currency_amount(value)

    @staticmethod
    def format_exchange_rate(rate: Amount, from_currency: str, to_currency: str) -> str:
        return format_exchange_rate(rate, from_currency, to_currency)

    @staticmethod
    def format_currency_percentage(
        value: Amount,
        *,
        fraction_digits: int = PERCENTAGE_DEFAULT_DECIMALS,
        show_sign: bool = False,
    ) -> str:
        return format_currency_percentage(
            value, fraction_digits=fraction_digits, show_sign=show_sign
        )
