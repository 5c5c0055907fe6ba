"""LexCatalog - message catalog parsing and lazy template compilation.

Loads localized message catalogs from JSON, YAML or TOML bytes and compiles
message templates on first use.

Public API:
    parse_message_file_bytes - Parse one catalog file into a MessageFile
    parse_path - Infer (locale, format) from a catalog file name
    default_decoders - Built-in decoder registry (json, yaml, yml, toml)
    Message - One translatable unit with plural variants
    MessageFile - Messages of one catalog file
    LocaleTag - Validated BCP-47 locale identifier
    Template - Lazily compiled, memoized message template
    MessageTemplate - Per-plural-form templates of a Message

Exceptions:
    CatalogError - Base exception class
    MalformedLocaleError, UnregisteredFormatError, UnsupportedShapeError,
    NonStringKeyError, InvalidMessageError - Catalog parse errors
    TemplateCompileError, TemplateExecutionError, MissingPluralFormError -
    Template errors

Submodules:
    lexcatalog.catalog - File parsing, messages, locale tags, decoders
    lexcatalog.runtime - Templates and template engines
    lexcatalog.diagnostics - Error types and diagnostic codes
"""

from .catalog import (
    LocaleTag,
    Message,
    MessageFile,
    default_decoders,
    new_message,
    parse_message_file_bytes,
    parse_path,
)
from .diagnostics import (
    CatalogError,
    InvalidMessageError,
    MalformedLocaleError,
    MissingPluralFormError,
    NonStringKeyError,
    TemplateCompileError,
    TemplateExecutionError,
    UnregisteredFormatError,
    UnsupportedShapeError,
)
from .enums import PluralForm
from .runtime import MessageTemplate, Template

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lexcatalog")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogError",
    "InvalidMessageError",
    "LocaleTag",
    "MalformedLocaleError",
    "Message",
    "MessageFile",
    "MessageTemplate",
    "MissingPluralFormError",
    "NonStringKeyError",
    "PluralForm",
    "Template",
    "TemplateCompileError",
    "TemplateExecutionError",
    "UnregisteredFormatError",
    "UnsupportedShapeError",
    "__version__",
    "default_decoders",
    "new_message",
    "parse_message_file_bytes",
    "parse_path",
]
