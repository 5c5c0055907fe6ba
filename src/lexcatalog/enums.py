"""Enumerations for LexCatalog type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralForm(StrEnum):
    """CLDR plural category a message template is written for.

    StrEnum provides automatic string conversion: str(PluralForm.ONE) == "one"

    Member values match the category names returned by Babel's
    ``Locale.plural_form``, so a selected category can be used as a key
    directly.
    """

    ZERO = "zero"
    """Used by e.g. Arabic and Latvian for n = 0"""

    ONE = "one"
    """Singular in most languages"""

    TWO = "two"
    """Dual forms (e.g. Arabic, Welsh)"""

    FEW = "few"
    """Paucal forms (e.g. Polish 2-4)"""

    MANY = "many"
    """Large-number forms (e.g. Polish 5+)"""

    OTHER = "other"
    """Required fallback category; plain messages use it"""


__all__ = [
    "PluralForm",
]
