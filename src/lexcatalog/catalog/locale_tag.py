"""Validated BCP-47 locale tags.

LocaleTag is the immutable identifier attached to every parsed catalog file.
Syntax checking is delegated to Babel's ``parse_locale`` and the language
subtag must be one CLDR knows, so file names such as "messages.json" do not
yield a tag.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from babel.core import parse_locale

from lexcatalog.constants import UNDETERMINED_LANGUAGE
from lexcatalog.locale_utils import get_babel_locale, require_known_language

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["LocaleTag"]

_MIN_LANGUAGE_LENGTH = 2
_MAX_LANGUAGE_LENGTH = 8
# Four-letter primary subtags are reserved by BCP-47
_RESERVED_LANGUAGE_LENGTH = 4


@dataclass(frozen=True, slots=True)
class LocaleTag:
    """Immutable, validated language identifier.

    Construct with ``LocaleTag.parse``; direct construction skips validation.

    Attributes:
        language: Lowercase language subtag (e.g. "en", "und")
        script: Titlecase script subtag (e.g. "Hans"), if any
        territory: Uppercase region subtag (e.g. "US", "419"), if any
        variant: Variant subtag, if any
    """

    language: str
    script: str | None = None
    territory: str | None = None
    variant: str | None = None

    @classmethod
    def parse(cls, text: str) -> LocaleTag:
        """Parse and canonicalize a locale identifier.

        Both "-" (BCP-47) and "_" (POSIX) separators are accepted. The empty
        string parses to the undetermined tag "und".

        Args:
            text: Locale identifier, e.g. "en-US", "zh_Hans_CN"

        Returns:
            Canonical LocaleTag

        Raises:
            ValueError: If text is not a well-formed locale identifier, or its
                language is unknown to CLDR

        Example:
            >>> str(LocaleTag.parse("pt_br"))
            'pt-BR'
            >>> LocaleTag.parse("").is_undetermined
            True
        """
        if not text:
            return cls(UNDETERMINED_LANGUAGE)
        if not text.isascii() or "@" in text or "." in text:
            msg = f"{text!r} is not a well-formed locale identifier"
            raise ValueError(msg)

        language, territory, script, variant = parse_locale(text.replace("_", "-"), sep="-")[:4]
        if (
            not _MIN_LANGUAGE_LENGTH <= len(language) <= _MAX_LANGUAGE_LENGTH
            or len(language) == _RESERVED_LANGUAGE_LENGTH
        ):
            msg = f"{language!r} is not a valid language subtag in {text!r}"
            raise ValueError(msg)
        require_known_language(language)
        return cls(language=language, script=script, territory=territory, variant=variant)

    @property
    def subtags(self) -> tuple[str, ...]:
        """Present subtags in BCP-47 order."""
        return tuple(
            part
            for part in (self.language, self.script, self.territory, self.variant)
            if part
        )

    @property
    def is_undetermined(self) -> bool:
        """True for the "und" tag produced by files without a locale segment."""
        return self.language == UNDETERMINED_LANGUAGE and len(self.subtags) == 1

    @property
    def posix(self) -> str:
        """Underscore-separated form accepted by Babel (e.g. "zh_Hans_CN")."""
        return "_".join(self.subtags)

    def to_babel(self) -> Locale:
        """Resolve the tag to a cached Babel Locale.

        Raises:
            babel.core.UnknownLocaleError: If Babel has no CLDR data for the tag
        """
        return get_babel_locale(self.posix)

    def __str__(self) -> str:
        return "-".join(self.subtags)
