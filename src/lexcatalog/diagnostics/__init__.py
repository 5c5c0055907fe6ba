"""Diagnostic system for catalog errors.

Provides structured error diagnostics with codes, hints, and file paths.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
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

__all__ = [
    "CatalogError",
    "Diagnostic",
    "DiagnosticCode",
    "InvalidMessageError",
    "MalformedLocaleError",
    "MissingPluralFormError",
    "NonStringKeyError",
    "TemplateCompileError",
    "TemplateExecutionError",
    "UnregisteredFormatError",
    "UnsupportedShapeError",
]
