"""Locale utilities for BCP-47 to POSIX conversion.

Form layers hand us browser-style tags ("nl-NL"); Babel wants POSIX
identifiers ("nl_NL"). Normalize once at the boundary and use the normalized
form for cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from roinorm.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

_PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX", ""})


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale tag to the POSIX form Babel expects.

    Args:
        locale_code: BCP-47 locale code (e.g., "nl-NL", "en-US")

    Returns:
        POSIX-formatted locale code (e.g., "nl_NL", "en_US")

    Example:
        >>> normalize_locale("nl-NL")
        'nl_NL'
        >>> normalize_locale("nl_NL")
        'nl_NL'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def _strip_encoding(value: str) -> str:
    # "nl_NL.UTF-8" -> "nl_NL", "de_DE@euro" -> "de_DE"
    return value.split(".")[0].split("@")[0]


def get_system_locale() -> str:
    """Detect the host locale for currency display.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable
    3. LC_MESSAGES environment variable
    4. LANG environment variable

    The "C" and "POSIX" pseudo-locales are skipped. When nothing usable is
    found the calculator default (nl_NL) is returned.

    Returns:
        Locale code in POSIX format, e.g. "de_DE" for LANG=de_DE.UTF-8.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None

    if system_locale and system_locale not in _PSEUDO_LOCALES:
        return normalize_locale(_strip_encoding(system_locale))

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in _PSEUDO_LOCALES:
            stripped = _strip_encoding(value)
            if stripped and stripped not in _PSEUDO_LOCALES:
                return normalize_locale(stripped)

    return normalize_locale(DEFAULT_LOCALE)
