"""Shared constants for LexCatalog.

This module provides centralized configuration constants used across
the catalog and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Template delimiters: Defaults applied when a message declares none
- Locale tags: The undetermined language subtag
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template delimiters
    "DEFAULT_LEFT_DELIM",
    "DEFAULT_RIGHT_DELIM",
    # Locale tags
    "UNDETERMINED_LANGUAGE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_TEMPLATE_CLASS_CACHE_SIZE",
]

# ============================================================================
# TEMPLATE DELIMITERS
# ============================================================================

# Used by MessageTemplate when a message leaves leftDelim/rightDelim empty.
DEFAULT_LEFT_DELIM: str = "{{"
DEFAULT_RIGHT_DELIM: str = "}}"

# ============================================================================
# LOCALE TAGS
# ============================================================================

# BCP-47 "undetermined" language subtag. A catalog file without a locale
# segment in its name (e.g. "path/to/.json") parses to this tag.
UNDETERMINED_LANGUAGE: str = "und"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum cached string.Template subclasses, one per delimiter pair.
# Applications normally use one or two delimiter pairs.
MAX_TEMPLATE_CLASS_CACHE_SIZE: int = 32
