"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic attached to catalog errors.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Catalog file errors (path inference, decoding, shapes)
        2000-2999: Template errors (compilation and rendering)
    """

    # Catalog file errors (1000-1999)
    MALFORMED_LOCALE = 1001
    UNREGISTERED_FORMAT = 1002
    UNSUPPORTED_SHAPE = 1003
    NON_STRING_KEY = 1004
    INVALID_MESSAGE = 1005

    # Template errors (2000-2999)
    TEMPLATE_COMPILE_FAILED = 2001
    TEMPLATE_EXECUTION_FAILED = 2002
    PLURAL_FORM_MISSING = 2003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries the code and context of a
    catalog error for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        path: Catalog file the error relates to, when known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNREGISTERED_FORMAT]: No decoder registered for format 'ini'
              --> locales/active.en.ini
              = help: Register a decoder for 'ini' in the decoder mapping

        Control characters in the message are escaped so that a hostile file
        name cannot forge extra log lines.

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.path:
            lines.append(f"  --> {_escape(self.path)}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")
