"""Core utilities shared by the formatting layer.

Exports:
    FormattingError: Exception raised when locale formatting fails

Python 3.13+.
"""

from .errors import FormattingError

__all__ = ["FormattingError"]
