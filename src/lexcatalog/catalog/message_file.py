"""Message catalog file parsing.

Turns the raw bytes of one catalog file into a MessageFile: the locale and
format are inferred from the file name, the bytes are decoded by the decoder
registered for that format, and every decoded entry becomes a Message.

File naming:
    active.en-US.json   -> locale "en-US", format "json"
    en-US.json          -> locale "en-US", format "json"
    path/to/fr.yaml     -> locale "fr", format "yaml" (directories ignored)

Decoded shapes:
    {"id": {...}, ...}  -> keyed catalog, mapping key becomes Message.id
    [{"id": ...}, ...]  -> legacy flat list, ids embedded in each entry

This module performs no I/O; reading the file is the caller's job.

Python 3.13+.
"""

import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace

from lexcatalog.catalog.locale_tag import LocaleTag
from lexcatalog.catalog.message import Message, new_message
from lexcatalog.catalog.types import DecoderRegistry, FormatName
from lexcatalog.diagnostics import (
    MalformedLocaleError,
    NonStringKeyError,
    UnregisteredFormatError,
    UnsupportedShapeError,
)

__all__ = [
    "MessageFile",
    "parse_message_file_bytes",
    "parse_path",
]

logger = logging.getLogger(__name__)

_PATH_SEPARATORS: tuple[str, ...] = tuple(sep for sep in (os.sep, os.altsep) if sep)


@dataclass(frozen=True, slots=True)
class MessageFile:
    """Messages parsed from one catalog file.

    Attributes:
        path: Source path the locale and format were inferred from
        tag: Locale of the messages
        format: Serialization format (e.g. "json")
        messages: Messages in decode order
    """

    path: str
    tag: LocaleTag
    format: FormatName
    messages: tuple[Message, ...] = ()


def parse_path(path: str) -> tuple[str, FormatName]:
    """Infer the locale and format segments from a catalog path.

    Only the file name is inspected. The format is the last dot-separated
    suffix and the locale is the segment before it; a file name with a single
    dot uses its whole stem as the locale.

    Args:
        path: Catalog path, using the platform path separators

    Returns:
        (locale, format); both empty when the file name has no dot

    Example:
        >>> parse_path("path/to/active.en.toml")
        ('en', 'toml')
        >>> parse_path("en-US.json")
        ('en-US', 'json')
        >>> parse_path("README")
        ('', '')
    """
    filename = path
    for sep in _PATH_SEPARATORS:
        filename = filename.rpartition(sep)[2]
    stem, dot, format_name = filename.rpartition(".")
    if not dot:
        return "", ""
    return stem.rpartition(".")[2], format_name


def parse_message_file_bytes(
    data: bytes,
    path: str,
    decoders: DecoderRegistry | None,
    *,
    message_factory: Callable[[object], Message] = new_message,
) -> MessageFile:
    """Parse the contents of one catalog file.

    Empty content yields a MessageFile without messages and without
    consulting the decoders. Otherwise the whole file is parsed or nothing:
    the first failing entry aborts the parse.

    Args:
        data: Raw file contents
        path: File path used to infer locale and format
        decoders: Format name to decoder (see ``default_decoders``)
        message_factory: Converts one decoded entry into a Message

    Returns:
        The parsed MessageFile

    Raises:
        MalformedLocaleError: If the inferred locale is not a valid tag
        UnregisteredFormatError: If no decoder is registered for the format
        UnsupportedShapeError: If the decoded tree is not a mapping or list
        NonStringKeyError: If a decoded mapping has a non-string key
        InvalidMessageError: If an entry cannot be converted to a Message

    Decoder exceptions propagate unchanged.

    Example:
        >>> decoders = default_decoders()
        >>> mf = parse_message_file_bytes(b'{"hello": "Hello!"}', "active.en.json", decoders)
        >>> mf.messages[0].id, mf.messages[0].other
        ('hello', 'Hello!')
    """
    locale, format_name = parse_path(path)
    try:
        tag = LocaleTag.parse(locale)
    except ValueError as e:
        raise MalformedLocaleError(locale, path, str(e)) from e

    if not data:
        return MessageFile(path=path, tag=tag, format=format_name)

    decoder = decoders.get(format_name) if decoders is not None else None
    if decoder is None:
        raise UnregisteredFormatError(format_name, path)

    raw = decoder(data)
    match raw:
        case Mapping():
            messages = _keyed_messages(raw, path, message_factory)
        case list() | tuple():
            # Legacy flat-list layout: ids live inside each entry
            messages = tuple(message_factory(entry) for entry in raw)
        case _:
            raise UnsupportedShapeError(type(raw).__name__, path)

    logger.debug(
        "Parsed %d messages from %s (locale=%s, format=%s)",
        len(messages),
        path,
        tag,
        format_name,
    )
    return MessageFile(path=path, tag=tag, format=format_name, messages=messages)


def _keyed_messages(
    raw: Mapping[object, object],
    path: str,
    message_factory: Callable[[object], Message],
) -> tuple[Message, ...]:
    messages: list[Message] = []
    for key, entry in raw.items():
        if not isinstance(key, str):
            raise NonStringKeyError(key, path)
        messages.append(replace(message_factory(entry), id=key))
    return tuple(messages)
