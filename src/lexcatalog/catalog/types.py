"""Type aliases for the catalog domain.

Provides semantic type aliases used throughout the catalog package
and by user code when annotating decoder registries.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Mapping

__all__ = [
    "Decoder",
    "DecoderRegistry",
    "FormatName",
    "MessageId",
]

type MessageId = str
"""Identifier for a catalog message (e.g., 'welcome', 'PersonCats')."""

type FormatName = str
"""Serialization format inferred from a file suffix (e.g., 'json', 'toml')."""

type Decoder = Callable[[bytes], object]
"""Decodes raw catalog bytes into a tree of dicts, lists and scalars.

Decoding failures are raised by the decoder and propagate unchanged.
"""

type DecoderRegistry = Mapping[FormatName, Decoder | None]
"""Format name to decoder. A None entry counts as unregistered."""
