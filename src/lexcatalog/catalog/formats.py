"""Default decoders for common catalog formats.

The parser never chooses a decoder itself: callers pass a registry. These
decoders cover the formats catalogs are usually written in and can be
combined with custom ones:

    >>> decoders = {**default_decoders(), "ini": my_ini_decoder}
    >>> parse_message_file_bytes(data, "active.en.ini", decoders)

Python 3.13+.
"""

import json
import tomllib

import yaml

from lexcatalog.catalog.types import Decoder, FormatName

__all__ = [
    "decode_json",
    "decode_toml",
    "decode_yaml",
    "default_decoders",
]


def decode_json(data: bytes) -> object:
    """Decode a JSON catalog.

    Raises:
        json.JSONDecodeError: If data is not valid JSON
    """
    return json.loads(data)


def decode_yaml(data: bytes) -> object:
    """Decode a YAML catalog with the safe loader.

    Unquoted numeric or boolean keys stay non-strings, which the parser
    reports as NonStringKeyError.

    Raises:
        yaml.YAMLError: If data is not valid YAML
    """
    return yaml.safe_load(data)


def decode_toml(data: bytes) -> object:
    """Decode a UTF-8 TOML catalog.

    Raises:
        tomllib.TOMLDecodeError: If data is not valid TOML
        UnicodeDecodeError: If data is not UTF-8
    """
    return tomllib.loads(data.decode("utf-8"))


def default_decoders() -> dict[FormatName, Decoder]:
    """Return a fresh registry of the built-in decoders.

    Returns:
        Mapping for "json", "yaml", "yml" and "toml"
    """
    return {
        "json": decode_json,
        "yaml": decode_yaml,
        "yml": decode_yaml,
        "toml": decode_toml,
    }
