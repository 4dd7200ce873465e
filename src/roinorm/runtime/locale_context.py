"""Locale context for thread-safe number and currency formatting.

This is the locale engine behind every roinorm formatter. It wraps Babel so
that formatting never touches Python's process-global ``locale`` module.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - Failures raise FormattingError carrying a plain fallback rendering;
      the currency layer decides what to do with it

Python 3.13+. Uses Babel for i18n.
"""

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import ClassVar, Literal

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from roinorm.constants import FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE
from roinorm.core.errors import FormattingError
from roinorm.diagnostics import ErrorTemplate
from roinorm.locale_utils import get_babel_locale, normalize_locale

__all__ = ["LocaleContext", "plain_number"]

logger = logging.getLogger(__name__)

# Babel failure modes observed for bad values, patterns and currencies.
_FORMAT_ERRORS: tuple[type[Exception], ...] = (
    ValueError,
    TypeError,
    InvalidOperation,
    AttributeError,
    KeyError,
    babel_numbers.UnknownCurrencyError,
)

_CURRENCY_CODE = re.compile(r"[A-Za-z]{3}")

# Digit/grouping run of a CLDR pattern, e.g. "#,##0.00" in "¤ #,##0.00".
_NUMBER_RUN = re.compile(r"[#0,.]+")


def plain_number(value: int | float | Decimal, fraction_digits: int) -> str:
    """Render a number with "," grouping and fixed decimals, no locale data.

    Used as the fallback rendering when Babel cannot format a value.

    Example:
        >>> plain_number(1234.5, 2)
        '1,234.50'
    """
    try:
        return f"{value:,.{max(fraction_digits, 0)}f}"
    except (TypeError, ValueError):
        return str(value)


def _number_pattern(
    minimum_fraction_digits: int,
    maximum_fraction_digits: int,
    use_grouping: bool,
) -> str:
    # '#,##0'      = integer with grouping
    # '#,##0.00'   = exactly 2 decimals with grouping
    # '0.0##'      = 1-3 decimals, no grouping
    integer_part = "#,##0" if use_grouping else "0"
    if maximum_fraction_digits == 0:
        return integer_part
    required = "0" * minimum_fraction_digits
    optional = "#" * (maximum_fraction_digits - minimum_fraction_digits)
    return f"{integer_part}.{required}{optional}"


def _check_fraction_digits(minimum: int, maximum: int, value: object) -> None:
    if minimum < 0 or maximum < minimum:
        raise FormattingError(
            ErrorTemplate.fraction_digits_invalid(minimum, maximum),
            fallback_value=plain_number(value, maximum),  # type: ignore[arg-type]
        )


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Use LocaleContext.create() to construct instances; it validates the
    locale and shares instances through an LRU cache.

    Examples:
        >>> ctx = LocaleContext.create("nl-NL")
        >>> ctx.format_number(1234.5, minimum_fraction_digits=2, maximum_fraction_digits=2)
        '1.234,50'

        >>> ctx = LocaleContext.create("en-US")
        >>> ctx.format_currency(1234.5, currency="USD")
        '$1,234.50'

        >>> # Unknown locales fall back to en_US with a warning logged
        >>> ctx = LocaleContext.create("xx-UNKNOWN")
        >>> ctx.is_fallback
        True

    Thread Safety:
        Instances are immutable and can be shared freely. Cache operations
        are protected by an RLock.
    """

    # OrderedDict provides LRU semantics with O(1) operations
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or malformed locales, logs a warning and formats with
        en_US rules. The original locale_code is preserved for debugging.
        This method always succeeds.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'nl-NL', 'en-US')

        Returns:
            Cached or newly created LocaleContext
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = get_babel_locale(cache_key)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
            )
            babel_locale = get_babel_locale(FALLBACK_LOCALE)
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                FALLBACK_LOCALE,
            )
            babel_locale = get_babel_locale(FALLBACK_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale used for formatting (en_US when is_fallback)."""
        return self._babel_locale

    def format_number(
        self,
        value: int | float | Decimal,
        *,
        minimum_fraction_digits: int = 0,
        maximum_fraction_digits: int = 3,
        use_grouping: bool = True,
        pattern: str | None = None,
    ) -> str:
        """Format number with locale-specific separators.

        Args:
            value: Number to format (int, float, or Decimal)
            minimum_fraction_digits: Minimum decimal places (default: 0)
            maximum_fraction_digits: Maximum decimal places (default: 3)
            use_grouping: Use thousands separator (default: True)
            pattern: Custom Babel number pattern (overrides other parameters)

        Returns:
            Formatted number string according to locale rules

        Raises:
            FormattingError: If the digit options are invalid or Babel fails

        Examples:
            >>> LocaleContext.create("nl-NL").format_number(1234.5)
            '1.234,5'
            >>> LocaleContext.create("en-US").format_number(1234.5)
            '1,234.5'
        """
        if pattern is None:
            _check_fraction_digits(minimum_fraction_digits, maximum_fraction_digits, value)
        try:
            if pattern is None:
                pattern = _number_pattern(
                    minimum_fraction_digits, maximum_fraction_digits, use_grouping
                )
            return str(
                babel_numbers.format_decimal(value, format=pattern, locale=self.babel_locale)
            )
        except _FORMAT_ERRORS as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("number", value, str(e)),
                fallback_value=plain_number(value, maximum_fraction_digits),
            ) from e

    def format_currency(
        self,
        value: int | float | Decimal,
        *,
        currency: str,
        minimum_fraction_digits: int = 2,
        maximum_fraction_digits: int = 2,
        use_grouping: bool = True,
        currency_display: Literal["symbol", "code"] = "symbol",
    ) -> str:
        """Format currency with locale-specific rules.

        The locale's standard CLDR currency pattern decides symbol placement
        and spacing; its digit run is replaced so the fraction digit options
        apply to every currency (JPY included).

        Args:
            value: Monetary amount (int, float, or Decimal)
            currency: Three-letter currency code, case-insensitive
            minimum_fraction_digits: Minimum decimal places (default: 2)
            maximum_fraction_digits: Maximum decimal places (default: 2)
            use_grouping: Use thousands separator (default: True)
            currency_display: "symbol" (default) or "code" (ISO code display)

        Returns:
            Formatted currency string according to locale rules

        Raises:
            FormattingError: If the currency code is malformed, the digit
                options are invalid, or Babel fails

        Examples:
            >>> LocaleContext.create("en-US").format_currency(1234.5, currency="EUR")
            '€1,234.50'
            >>> LocaleContext.create("nl-NL").format_currency(-5, currency="EUR")
            '€\\xa0-5,00'
        """
        fallback = f"{currency} {plain_number(value, maximum_fraction_digits)}"
        if not isinstance(currency, str) or not _CURRENCY_CODE.fullmatch(currency):
            raise FormattingError(
                ErrorTemplate.currency_code_malformed(str(currency)),
                fallback_value=fallback,
            )
        _check_fraction_digits(minimum_fraction_digits, maximum_fraction_digits, value)

        try:
            raw_pattern = self.babel_locale.currency_formats["standard"].pattern
            number_pattern = _number_pattern(
                minimum_fraction_digits, maximum_fraction_digits, use_grouping
            )
            pattern = _NUMBER_RUN.sub(number_pattern, raw_pattern)
            if currency_display == "code":
                # Single U+00A4 = symbol, double U+00A4 U+00A4 = ISO code per CLDR
                pattern = pattern.replace("\xa4", "\xa4\xa4")
            return str(
                babel_numbers.format_currency(
                    value,
                    currency.upper(),
                    format=pattern,
                    locale=self.babel_locale,
                    currency_digits=False,
                )
            )
        except _FORMAT_ERRORS as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("currency", value, str(e)),
                fallback_value=fallback,
            ) from e

    def format_percent(
        self,
        ratio: int | float | Decimal,
        *,
        fraction_digits: int = 1,
    ) -> str:
        """Format a ratio (0.125) as a locale percentage ("12,5%" in nl-NL).

        Raises:
            FormattingError: If fraction_digits is negative or Babel fails
        """
        fallback = f"{plain_number(ratio * 100, fraction_digits)}%"
        if fraction_digits < 0:
            raise FormattingError(
                ErrorTemplate.fraction_digits_invalid(fraction_digits, fraction_digits),
                fallback_value=fallback,
            )
        try:
            pattern = _number_pattern(fraction_digits, fraction_digits, True) + "%"
            return str(
                babel_numbers.format_percent(ratio, format=pattern, locale=self.babel_locale)
            )
        except _FORMAT_ERRORS as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("percent", ratio, str(e)),
                fallback_value=fallback,
            ) from e
