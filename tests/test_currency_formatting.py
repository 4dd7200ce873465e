"""Tests for the currency formatting functions.

Babel output uses CLDR data whose exact spacing characters (U+00A0 vs
U+202F) can differ between releases, so locale-formatted assertions check
symbol and digits rather than whole strings where spacing is involved.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from unittest.mock import patch

import pytest
from hypothesis import given
from hypothesis import strategies as st

from roinorm.currency import (
    format_currency,
    format_currency_amount,
    format_currency_percentage,
    format_exchange_rate,
    format_large_currency,
    format_percentage,
    format_whole_currency,
)
from roinorm.runtime.locale_context import babel_numbers
from tests.strategies import currency_amounts, known_currency_codes

# ============================================================================
# format_currency
# ============================================================================


class TestFormatCurrency:
    """format_currency() Babel rendering and fallback."""

    def test_default_is_dutch_euro(self) -> None:
        """Defaults render EUR in nl-NL."""
        result = format_currency(1234.5)
        assert result.startswith("€")
        assert result.endswith("1.234,50")

    def test_us_dollar(self) -> None:
        """en-US places the symbol directly before the number."""
        assert format_currency(1234.5, "USD", locale_code="en-US") == "$1,234.50"

    def test_us_negative(self) -> None:
        """en-US negative amounts get a leading minus."""
        assert format_currency(-5, "USD", locale_code="en-US") == "-$5.00"

    def test_dutch_negative(self) -> None:
        """nl-NL keeps the symbol first and signs the number."""
        result = format_currency(-5, "EUR")
        assert result.startswith("€")
        assert result.endswith("-5,00")

    def test_german_symbol_after_number(self) -> None:
        """de-DE places the symbol after the number."""
        result = format_currency(1234.5, "EUR", locale_code="de-DE")
        assert result.startswith("1.234,50")
        assert result.endswith("€")

    def test_code_display(self) -> None:
        """currency_display='code' shows the ISO code instead of the symbol."""
        result = format_currency(1234.5, "EUR", currency_display="code")
        assert "EUR" in result
        assert "€" not in result
        assert result.endswith("1.234,50")

    def test_fraction_digits_apply_to_jpy(self) -> None:
        """Fraction digit options override the currency's own precision."""
        result = format_currency(1234.5, "JPY", locale_code="en-US")
        assert result.endswith("1,234.50")

    def test_whole_units(self) -> None:
        """Zero fraction digits round to whole units."""
        result = format_currency(
            1234.56, "USD", locale_code="en-US",
            minimum_fraction_digits=0, maximum_fraction_digits=0,
        )
        assert result == "$1,235"

    def test_without_grouping(self) -> None:
        """use_grouping=False drops the thousands separator."""
        result = format_currency(1234567.891, "USD", locale_code="en-US", use_grouping=False)
        assert result == "$1234567.89"

    def test_decimal_amount(self) -> None:
        """Decimal amounts are formatted exactly."""
        assert format_currency(Decimal("0.10"), "USD", locale_code="en-US") == "$0.10"

    def test_unlisted_code_shows_code(self) -> None:
        """Well-formed codes unknown to the symbol table still format."""
        result = format_currency(10, "XYZ", locale_code="en-US")
        assert "XYZ" in result
        assert result.endswith("10.00")

    def test_malformed_code_falls_back(self) -> None:
        """A malformed code uses the '{symbol} {number}' fallback."""
        assert format_currency(1234.5, "EURO") == "EURO 1.234,50"

    def test_invalid_digit_options_fall_back(self) -> None:
        """Inverted digit options fall back to the plain rendering."""
        result = format_currency(1, "EUR", minimum_fraction_digits=3, maximum_fraction_digits=2)
        assert result == "€ 1.00"

    def test_babel_failure_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """An exception inside Babel yields the fallback format and a debug log."""
        with (
            patch.object(babel_numbers, "format_currency", side_effect=ValueError("boom")),
            caplog.at_level(logging.DEBUG, logger="roinorm.currency.formatting"),
        ):
            result = format_currency(1234.5, "EUR")
        assert result == "€ 1.234,50"
        assert "fell back" in caplog.text

    def test_unknown_locale_formats_as_en_us(self) -> None:
        """Unknown locales format with en_US rules instead of failing."""
        assert format_currency(1234.5, "USD", locale_code="xx-UNKNOWN") == "$1,234.50"

    @given(amount=currency_amounts(), code=known_currency_codes())
    def test_never_raises(self, amount: Decimal, code: str) -> None:
        """Every allow-listed code formats every realistic amount."""
        assert format_currency(amount, code)


# ============================================================================
# Other amount formatters
# ============================================================================


class TestFormatCurrencyAmount:
    """format_currency_amount() bare numbers."""

    def test_dutch(self) -> None:
        """nl-NL uses '.' grouping and ',' decimals."""
        assert format_currency_amount(1234.5) == "1.234,50"

    def test_english(self) -> None:
        """en-US uses ',' grouping and '.' decimals."""
        assert format_currency_amount(1234.5, "USD", locale_code="en-US") == "1,234.50"

    def test_currency_does_not_change_output(self) -> None:
        """The currency argument does not affect the rendering."""
        assert format_currency_amount(10, "JPY") == format_currency_amount(10, "EUR")

    def test_rounds_to_cents(self) -> None:
        """Amounts are rounded to two decimals."""
        assert format_currency_amount(0.129) == "0,13"


class TestFormatWholeCurrency:
    """format_whole_currency() rounding to whole units."""

    def test_rounds(self) -> None:
        """Fractions are rounded away."""
        result = format_whole_currency(1234.56)
        assert result.startswith("€")
        assert result.endswith("1.235")
        assert "," not in result

    def test_english(self) -> None:
        """Locale rules still apply."""
        assert format_whole_currency(1234.56, "USD", locale_code="en-US") == "$1,235"


class TestFormatLargeCurrency:
    """format_large_currency() magnitude abbreviations."""

    @pytest.mark.parametrize(
        ("amount", "currency", "expected"),
        [
            (1_500_000, "EUR", "€ 1.5M"),
            (2_300_000_000, "GBP", "£ 2.3B"),
            (2500, "USD", "$ 2.5K"),
            (1000, "EUR", "€ 1.0K"),
            (-2500, "USD", "$ -2.5K"),
            (1_000_000, "PLN", "PLN 1.0M"),
        ],
    )
    def test_abbreviations(self, amount: float, currency: str, expected: str) -> None:
        """Thresholds compare absolute values; the sign stays on the number."""
        assert format_large_currency(amount, currency) == expected

    def test_small_amount_uses_locale_format(self) -> None:
        """Amounts under one thousand are formatted normally."""
        assert format_large_currency(999, "USD", locale_code="en-US") == "$999.00"


# ============================================================================
# Rates and percentages
# ============================================================================


class TestFormatExchangeRate:
    """format_exchange_rate() fixed four-decimal rendering."""

    def test_rate(self) -> None:
        """Rates render with four decimals."""
        assert format_exchange_rate(1.08347, "EUR", "USD") == "1 EUR = 1.0835 USD"

    def test_integer_rate(self) -> None:
        """Integral rates are padded."""
        assert format_exchange_rate(2, "USD", "PLN") == "1 USD = 2.0000 PLN"


class TestFormatCurrencyPercentage:
    """format_currency_percentage() signed return figures."""

    @pytest.mark.parametrize(
        ("value", "show_sign", "expected"),
        [
            (7.5, False, "7.50%"),
            (-7.5, False, "7.50%"),
            (7.5, True, "+7.50%"),
            (-7.5, True, "-7.50%"),
            (0, True, "0.00%"),
        ],
    )
    def test_sign_handling(self, value: float, show_sign: bool, expected: str) -> None:
        """Zero is never signed; negatives are only signed on request."""
        assert format_currency_percentage(value, show_sign=show_sign) == expected

    def test_fraction_digits(self) -> None:
        """fraction_digits controls the decimals."""
        assert format_currency_percentage(12.3456, fraction_digits=1) == "12.3%"

    def test_negative_fraction_digits_treated_as_zero(self) -> None:
        """A negative digit count renders whole percentages."""
        assert format_currency_percentage(12.4, fraction_digits=-1) == "12%"
        assert format_currency_percentage(-12.4, fraction_digits=-3, show_sign=True) == "-12%"

    @given(value=st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
    def test_always_ends_with_percent(self, value: float) -> None:
        """Output always carries the percent sign."""
        assert format_currency_percentage(value, show_sign=True).endswith("%")


class TestFormatPercentage:
    """format_percentage() locale percentages."""

    def test_dutch(self) -> None:
        """nl-NL uses a decimal comma."""
        assert format_percentage(12.5) == "12,5%"

    def test_english(self) -> None:
        """en-US uses a decimal point."""
        assert format_percentage(12.5, locale_code="en-US") == "12.5%"

    def test_fraction_digits(self) -> None:
        """fraction_digits controls the decimals."""
        assert format_percentage(7, locale_code="en-US", fraction_digits=2) == "7.00%"

    def test_invalid_digits_fall_back(self) -> None:
        """Negative fraction digits fall back to the plain rendering."""
        assert format_percentage(12.5, locale_code="en-US", fraction_digits=-1) == "12%"
