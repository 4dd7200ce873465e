"""roinorm - Financial input normalization and validation for an ROI calculator.

Validates raw form values against numeric field rules and converts amounts
between Python numbers and locale-formatted currency text.

Public API:
    RuleValidator - Field, form and cross-field validation
    ValidationRule - Per-field numeric constraint
    FieldDependency - Cross-field "trigger > 0" dependency
    FieldValidationResult, FormValidationResult - Validation outcomes
    CurrencyNormalizer - Locale-bound currency formatting, parsing, comparison
    NormalizerConfig - Locale, default currency and precision settings

Exceptions:
    RoiNormError - Base exception class
    FormattingError - Locale formatting failed (carries a fallback value)

Submodules:
    roinorm.currency - Currency formatting, parsing and comparison functions
    roinorm.validation - Validation rules and results
    roinorm.diagnostics - Diagnostic codes and message templates
    roinorm.runtime.locale_context - Thread-safe LocaleContext for formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import FormattingError
from .currency import CurrencyNormalizer, NormalizerConfig
from .diagnostics import RoiNormError
from .validation import (
    FieldDependency,
    FieldValidationResult,
    FormValidationResult,
    RuleValidator,
    ValidationRule,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("roinorm")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyNormalizer",
    "FieldDependency",
    "FieldValidationResult",
    "FormValidationResult",
    "FormattingError",
    "NormalizerConfig",
    "RoiNormError",
    "RuleValidator",
    "ValidationRule",
    "__version__",
]
