"""Core error types shared across the formatting layer.

Python 3.13+.
"""

from roinorm.diagnostics import Diagnostic, RoiNormError

__all__ = ["FormattingError"]


class FormattingError(RoiNormError):
    """Raised when locale-aware formatting fails.

    LocaleContext raises this instead of returning a half-formatted string.
    The currency formatters catch it and switch to the symbol-table fallback,
    so it never reaches callers of the public formatting functions.

    Attributes:
        fallback_value: Plain rendering of the value to use when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
