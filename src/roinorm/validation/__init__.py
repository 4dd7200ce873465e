"""Form input validation for the ROI calculator.

Public API:
    RuleValidator - Field, form and cross-field validation
    ValidationRule - Per-field numeric constraint (required, min, max)
    FieldDependency - "trigger > 0 implies dependents > 0" rule
    FieldValidationResult, FormValidationResult - Immutable outcomes
    DEFAULT_RULES, DEFAULT_DEPENDENCIES - The calculator's rule set

Python 3.13+. Zero external dependencies.
"""

from .results import FieldValidationResult, FormValidationResult
from .rules import (
    DEFAULT_DEPENDENCIES,
    DEFAULT_RULES,
    FieldDependency,
    FieldValue,
    ValidationRule,
)
from .validator import RuleValidator, coerce_number, is_empty

__all__ = [
    "DEFAULT_DEPENDENCIES",
    "DEFAULT_RULES",
    "FieldDependency",
    "FieldValidationResult",
    "FieldValue",
    "FormValidationResult",
    "RuleValidator",
    "ValidationRule",
    "coerce_number",
    "is_empty",
]
