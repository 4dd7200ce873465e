"""Tests for diagnostic codes, message templates and the error hierarchy."""

from __future__ import annotations

import pytest

from roinorm import FormattingError, RoiNormError
from roinorm.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate, format_bound


class TestFormatBound:
    """format_bound() renders bounds the way users typed them."""

    @pytest.mark.parametrize(
        ("bound", "expected"),
        [(1, "1"), (1.0, "1"), (-10, "-10"), (0, "0"), (2.5, "2.5"), (-0.25, "-0.25")],
    )
    def test_format_bound(self, bound: float, expected: str) -> None:
        """Integral values drop the '.0'; fractions are kept."""
        assert format_bound(bound) == expected


class TestErrorTemplate:
    """Message text produced by ErrorTemplate."""

    def test_field_required(self) -> None:
        """Required message is fixed."""
        diagnostic = ErrorTemplate.field_required("term")
        assert diagnostic.message == "This field is required"
        assert diagnostic.code is DiagnosticCode.VALIDATION_REQUIRED
        assert diagnostic.field_name == "term"

    def test_invalid_number_hint_mentions_value(self) -> None:
        """The hint echoes the unreadable value."""
        diagnostic = ErrorTemplate.invalid_number("term", "12abc")
        assert diagnostic.message == "Enter a valid number"
        assert "'12abc'" in (diagnostic.hint or "")

    def test_bounds_messages(self) -> None:
        """Minimum and maximum messages interpolate the bound."""
        assert ErrorTemplate.below_minimum("x", 1.0).message == "Minimum value is 1"
        assert ErrorTemplate.above_maximum("x", 20).message == "Maximum value is 20"

    def test_dependency_missing(self) -> None:
        """Dependency message names the trigger field."""
        diagnostic = ErrorTemplate.dependency_missing("loanRate", "loanAmount")
        assert diagnostic.message == "Required when loanAmount is greater than zero"
        assert diagnostic.field_name == "loanRate"
        assert diagnostic.code is DiagnosticCode.VALIDATION_DEPENDENCY_MISSING

    def test_parse_amount_invalid_is_warning(self) -> None:
        """Unreadable amounts are warnings, not errors."""
        diagnostic = ErrorTemplate.parse_amount_invalid("abc", "abc")
        assert diagnostic.severity == "warning"
        assert diagnostic.code is DiagnosticCode.PARSE_AMOUNT_INVALID

    def test_formatting_failed(self) -> None:
        """Formatting failures name the kind and the reason."""
        diagnostic = ErrorTemplate.formatting_failed("currency", 1.5, "boom")
        assert diagnostic.message == "Currency formatting failed for 1.5: boom"


class TestDiagnostic:
    """Diagnostic rendering."""

    def test_str_is_message(self) -> None:
        """str() returns the user-facing message only."""
        assert str(ErrorTemplate.field_required("term")) == "This field is required"

    def test_format_error_full(self) -> None:
        """format_error() includes code, field and hint lines."""
        text = ErrorTemplate.below_minimum("term", 1).format_error()
        assert text == (
            "error[VALIDATION_BELOW_MINIMUM]: Minimum value is 1\n"
            "  --> field: term\n"
            "  = help: Enter a value of at least 1"
        )

    def test_format_error_minimal(self) -> None:
        """Optional lines are omitted when absent."""
        diagnostic = Diagnostic(code=DiagnosticCode.FORMATTING_FAILED, message="boom")
        assert diagnostic.format_error() == "error[FORMATTING_FAILED]: boom"

    def test_codes_unique(self) -> None:
        """Every diagnostic code has a distinct value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestErrors:
    """RoiNormError and FormattingError."""

    def test_error_from_string(self) -> None:
        """A plain message leaves diagnostic unset."""
        error = RoiNormError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_error_from_diagnostic(self) -> None:
        """A diagnostic supplies the message and is kept."""
        diagnostic = ErrorTemplate.currency_code_malformed("EURO")
        error = RoiNormError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == "Malformed currency code 'EURO'"

    def test_formatting_error_carries_fallback(self) -> None:
        """FormattingError is a RoiNormError with a fallback value."""
        error = FormattingError("boom", fallback_value="EUR 1.00")
        assert isinstance(error, RoiNormError)
        assert error.fallback_value == "EUR 1.00"
