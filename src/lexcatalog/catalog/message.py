"""Catalog message records and the raw-data constructor.

A Message is one translatable unit. Catalog decoders produce untyped trees;
``new_message`` turns one entry of such a tree into a Message.

Accepted raw shapes:
    "Hello"                               -> Message(other="Hello")
    {"description": "...", "one": "...", "other": "..."}
    {"id": "Hello", "translation": "..."}  (legacy flat-list layout)
    {"id": "Cats", "translation": {"one": "...", "other": "..."}}

Python 3.13+.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from lexcatalog.diagnostics import InvalidMessageError
from lexcatalog.enums import PluralForm

__all__ = [
    "Message",
    "new_message",
]

# Lowercased raw key -> Message field name
_FIELD_BY_KEY: dict[str, str] = {
    "id": "id",
    "hash": "hash",
    "description": "description",
    "leftdelim": "left_delim",
    "rightdelim": "right_delim",
    **{form.value: form.value for form in PluralForm},
}

_LEGACY_TRANSLATION_KEY = "translation"


@dataclass(frozen=True, slots=True)
class Message:
    """A translatable string with optional plural variants.

    Attributes:
        id: Unique key within a catalog
        hash: Hash of the source message the translation was made from
        description: Context for translators
        left_delim: Left template delimiter; empty means the default "{{"
        right_delim: Right template delimiter; empty means the default "}}"
        zero: Template for the CLDR "zero" category
        one: Template for the CLDR "one" category
        two: Template for the CLDR "two" category
        few: Template for the CLDR "few" category
        many: Template for the CLDR "many" category
        other: Template for the CLDR "other" category (plain messages)
    """

    id: str = ""
    hash: str = ""
    description: str = ""
    left_delim: str = ""
    right_delim: str = ""
    zero: str = ""
    one: str = ""
    two: str = ""
    few: str = ""
    many: str = ""
    other: str = ""

    def plural_forms(self) -> dict[PluralForm, str]:
        """Return the non-empty plural form templates keyed by category."""
        return {form: src for form in PluralForm if (src := getattr(self, form.value))}


def new_message(raw: object) -> Message:
    """Build a Message from one decoded catalog entry.

    Keys are matched case-insensitively; unknown keys are ignored. The ID is
    only set when the entry carries it (flat-list layout); keyed catalogs
    assign it afterwards.

    Args:
        raw: A string, or a mapping of field name to string

    Returns:
        The constructed Message

    Raises:
        InvalidMessageError: If raw has another shape, a non-string key,
            or a non-string value
    """
    kwargs = {
        _FIELD_BY_KEY[key.lower()]: value
        for key, value in _string_map(raw).items()
        if key.lower() in _FIELD_BY_KEY
    }
    return Message(**kwargs)


def _string_map(raw: object) -> dict[str, str]:
    """Flatten raw message data into a str -> str mapping."""
    match raw:
        case str():
            return {PluralForm.OTHER.value: raw}
        case Mapping():
            result: dict[str, str] = {}
            for key, value in raw.items():
                if not isinstance(key, str):
                    msg = f"Expected message key to be a string but got {key!r}"
                    raise InvalidMessageError(msg)
                if key.lower() == _LEGACY_TRANSLATION_KEY:
                    # Legacy layout: plain string or a mapping of plural forms
                    result.update(_string_map(value))
                    continue
                if not isinstance(value, str):
                    msg = f"Expected value for key {key!r} to be a string but got {value!r}"
                    raise InvalidMessageError(msg)
                result[key] = value
            return result
        case _:
            msg = f"Unsupported message data of type {type(raw).__name__}: {raw!r}"
            raise InvalidMessageError(msg)
