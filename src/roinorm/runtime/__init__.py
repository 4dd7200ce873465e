"""Locale-aware formatting runtime.

Exports:
    LocaleContext: Immutable, cached Babel formatting context

Python 3.13+. Uses Babel for i18n.
"""

from .locale_context import LocaleContext

__all__ = ["LocaleContext"]
