"""Hypothesis strategies for LexCatalog property-based testing.

Strategies are organized by domain:

- catalog: locale codes, catalog paths, message ids and plain texts

Usage:
    from tests.strategies.catalog import catalog_paths, locale_codes
"""

from .catalog import (
    catalog_names,
    catalog_paths,
    format_names,
    locale_codes,
    message_ids,
    plain_texts,
)

__all__ = [
    "catalog_names",
    "catalog_paths",
    "format_names",
    "locale_codes",
    "message_ids",
    "plain_texts",
]
