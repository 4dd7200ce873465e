"""roinorm exception hierarchy with structured diagnostics.

Public operations never raise these for bad user input; they are used
internally (formatting fallback) and for programming errors.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["RoiNormError"]


class RoiNormError(Exception):
    """Base exception for all roinorm errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize RoiNormError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)
