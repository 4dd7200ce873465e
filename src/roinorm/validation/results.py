"""Validation result types.

Results are immutable values produced by a single RuleValidator call; they
are never stored or mutated afterwards.

Python 3.13+.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from roinorm.diagnostics import Diagnostic, DiagnosticCode

__all__ = ["FieldValidationResult", "FormValidationResult"]


@dataclass(frozen=True, slots=True)
class FieldValidationResult:
    """Outcome of validating one field.

    Attributes:
        valid: Whether the value satisfies the field's rule
        error_message: User-facing message, present iff not valid
        code: Diagnostic code of the failure, present iff not valid

    Example:
        >>> FieldValidationResult.ok().valid
        True
    """

    valid: bool
    error_message: str | None = None
    code: DiagnosticCode | None = None

    @staticmethod
    def ok() -> "FieldValidationResult":
        """Create a passing result."""
        return _OK

    @staticmethod
    def failed(diagnostic: Diagnostic) -> "FieldValidationResult":
        """Create a failing result from a diagnostic.

        Args:
            diagnostic: Diagnostic produced by ErrorTemplate

        Returns:
            FieldValidationResult carrying the diagnostic's message and code
        """
        return FieldValidationResult(
            valid=False, error_message=diagnostic.message, code=diagnostic.code
        )


_OK = FieldValidationResult(valid=True)


@dataclass(frozen=True, slots=True)
class FormValidationResult:
    """Aggregate outcome of validating a form.

    Attributes:
        is_valid: True iff no field produced an error
        errors: Field name -> error message, invalid fields only (read-only)

    Example:
        >>> result = FormValidationResult.from_errors({"term": "Minimum value is 1"})
        >>> result.is_valid
        False
        >>> result.error_count
        1
    """

    is_valid: bool
    errors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @staticmethod
    def from_errors(errors: Mapping[str, str]) -> "FormValidationResult":
        """Build a result whose validity follows from the error mapping."""
        return FormValidationResult(
            is_valid=not errors, errors=MappingProxyType(dict(errors))
        )
