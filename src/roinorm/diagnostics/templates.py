"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate", "format_bound"]


def format_bound(bound: float) -> str:
    """Render a rule bound the way users typed it.

    Integral bounds lose the trailing ".0" so messages read "Minimum value
    is 1" rather than "Minimum value is 1.0".

    Example:
        >>> format_bound(1.0)
        '1'
        >>> format_bound(-10)
        '-10'
        >>> format_bound(2.5)
        '2.5'
    """
    if isinstance(bound, int) or float(bound).is_integer():
        return str(int(bound))
    return str(bound)


class ErrorTemplate:
    """Centralized error message templates.

    All user-visible message text is created here, so wording changes (or a
    future translation layer) touch exactly one module.
    """

    # ------------------------------------------------------------------
    # Field validation
    # ------------------------------------------------------------------

    @staticmethod
    def field_required(field_name: str) -> Diagnostic:
        """Required field left empty.

        Args:
            field_name: The form field that was empty

        Returns:
            Diagnostic for VALIDATION_REQUIRED
        """
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_REQUIRED,
            message="This field is required",
            hint="Provide a numeric value for this field",
            field_name=field_name,
        )

    @staticmethod
    def invalid_number(field_name: str, value: object) -> Diagnostic:
        """Field value could not be coerced to a number.

        Args:
            field_name: The form field being validated
            value: The raw value supplied by the form layer

        Returns:
            Diagnostic for VALIDATION_INVALID_NUMBER
        """
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_INVALID_NUMBER,
            message="Enter a valid number",
            hint=f"Could not read {value!r} as a number",
            field_name=field_name,
        )

    @staticmethod
    def below_minimum(field_name: str, minimum: float) -> Diagnostic:
        """Value below the rule's inclusive minimum."""
        bound = format_bound(minimum)
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_BELOW_MINIMUM,
            message=f"Minimum value is {bound}",
            hint=f"Enter a value of at least {bound}",
            field_name=field_name,
        )

    @staticmethod
    def above_maximum(field_name: str, maximum: float) -> Diagnostic:
        """Value above the rule's inclusive maximum."""
        bound = format_bound(maximum)
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_ABOVE_MAXIMUM,
            message=f"Maximum value is {bound}",
            hint=f"Enter a value of at most {bound}",
            field_name=field_name,
        )

    @staticmethod
    def dependency_missing(field_name: str, trigger: str) -> Diagnostic:
        """Dependent field missing while its trigger field is active.

        Args:
            field_name: The dependent field that must be filled in
            trigger: The field whose positive value requires it

        Returns:
            Diagnostic for VALIDATION_DEPENDENCY_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_DEPENDENCY_MISSING,
            message=f"Required when {trigger} is greater than zero",
            hint=f"Enter a value greater than zero for {field_name}",
            field_name=field_name,
        )

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    @staticmethod
    def currency_code_malformed(currency: str) -> Diagnostic:
        """Currency code is not three ASCII letters."""
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_MALFORMED,
            message=f"Malformed currency code {currency!r}",
            hint="Use a three-letter ISO 4217 code such as EUR or USD",
        )

    @staticmethod
    def fraction_digits_invalid(minimum: int, maximum: int) -> Diagnostic:
        """Fraction digit options are negative or inverted."""
        return Diagnostic(
            code=DiagnosticCode.FRACTION_DIGITS_INVALID,
            message=(
                f"Invalid fraction digits: minimum={minimum}, maximum={maximum}"
            ),
            hint="Use 0 <= minimum_fraction_digits <= maximum_fraction_digits",
        )

    @staticmethod
    def formatting_failed(kind: str, value: object, reason: str) -> Diagnostic:
        """Babel raised while formatting a value.

        Args:
            kind: What was being formatted ("number", "currency", "percent")
            value: The value being formatted
            reason: Text of the underlying exception

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=f"{kind.capitalize()} formatting failed for {value!r}: {reason}",
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @staticmethod
    def parse_amount_invalid(value: str, cleaned: str) -> Diagnostic:
        """No numeric prefix left after stripping symbols and separators."""
        return Diagnostic(
            code=DiagnosticCode.PARSE_AMOUNT_INVALID,
            message=f"No amount found in {value!r} (cleaned: {cleaned!r})",
            severity="warning",
        )
