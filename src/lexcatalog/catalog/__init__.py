"""Catalog file parsing.

Exports:
    parse_message_file_bytes: Parse one catalog file's bytes into a MessageFile
    parse_path: Infer (locale, format) from a catalog path
    MessageFile: Parsed catalog file
    Message: One translatable unit
    new_message: Build a Message from one decoded entry
    LocaleTag: Validated BCP-47 locale identifier
    default_decoders: Built-in decoders for json, yaml and toml

Python 3.13+.
"""

from .formats import decode_json, decode_toml, decode_yaml, default_decoders
from .locale_tag import LocaleTag
from .message import Message, new_message
from .message_file import MessageFile, parse_message_file_bytes, parse_path
from .types import Decoder, DecoderRegistry, FormatName, MessageId

__all__ = [
    "Decoder",
    "DecoderRegistry",
    "FormatName",
    "LocaleTag",
    "Message",
    "MessageFile",
    "MessageId",
    "decode_json",
    "decode_toml",
    "decode_yaml",
    "default_decoders",
    "new_message",
    "parse_message_file_bytes",
    "parse_path",
]
