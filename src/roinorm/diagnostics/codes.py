"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by validation
results and formatting errors.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        2000-2999: Formatting errors (locale engine failures)
        4000-4999: Parsing errors (amount normalization)
        5000-5099: Field validation errors (single-field rules)
        5100-5199: Cross-field validation errors (dependencies)
    """

    # Formatting errors (2000-2999)
    FORMATTING_FAILED = 2001
    CURRENCY_CODE_MALFORMED = 2002
    FRACTION_DIGITS_INVALID = 2003

    # Parsing errors (4000-4999)
    PARSE_AMOUNT_INVALID = 4001

    # Field validation errors (5000-5099)
    VALIDATION_REQUIRED = 5001
    VALIDATION_INVALID_NUMBER = 5002
    VALIDATION_BELOW_MINIMUM = 5003
    VALIDATION_ABOVE_MAXIMUM = 5004

    # Cross-field validation errors (5100-5199)
    VALIDATION_DEPENDENCY_MISSING = 5101


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description, shown to end users
        hint: Suggestion for fixing the error (developer-facing)
        field_name: Form field the diagnostic refers to, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    field_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic for logs.

        Example output:
            error[VALIDATION_BELOW_MINIMUM]: Minimum value is 1
              --> field: term
              = help: Enter a value of at least 1

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.field_name is not None:
            lines.append(f"  --> field: {self.field_name}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
