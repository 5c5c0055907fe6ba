"""Locale utilities backed by Babel's CLDR data.

Centralizes Babel Locale lookups used throughout the codebase so that every
caller shares one cache and one notion of which languages exist.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from lexcatalog.constants import MAX_LOCALE_CACHE_SIZE, UNDETERMINED_LANGUAGE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "require_known_language",
]


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(locale_code.replace("-", "_"))


def require_known_language(language: str) -> None:
    """Check that CLDR knows a language subtag.

    The undetermined language "und" is always accepted.

    Args:
        language: Lowercase language subtag (e.g. "en", "fil")

    Raises:
        ValueError: If Babel has no locale data for the language

    Example:
        >>> require_known_language("de")
        >>> require_known_language("messages")
        Traceback (most recent call last):
        ...
        ValueError: 'messages' is not a known language
    """
    if language == UNDETERMINED_LANGUAGE:
        return
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        get_babel_locale(language)
    except UnknownLocaleError as e:
        msg = f"{language!r} is not a known language"
        raise ValueError(msg) from e


def clear_locale_cache() -> None:
    """Drop all cached Babel Locale objects."""
    get_babel_locale.cache_clear()
