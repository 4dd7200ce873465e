"""Diagnostic system for roinorm.

Provides structured diagnostics with codes and hints. Every user-visible
message text originates from ErrorTemplate.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import RoiNormError
from .templates import ErrorTemplate, format_bound

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "RoiNormError",
    "format_bound",
]
