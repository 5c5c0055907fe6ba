"""Catalog exception hierarchy with structured diagnostics.

All exceptions store an optional Diagnostic object for rich error
information. Errors that describe a bad value also derive from the matching
builtin (ValueError, TypeError, LookupError) so callers can catch them
without importing this module.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "CatalogError",
    "InvalidMessageError",
    "MalformedLocaleError",
    "MissingPluralFormError",
    "NonStringKeyError",
    "TemplateCompileError",
    "TemplateExecutionError",
    "UnregisteredFormatError",
    "UnsupportedShapeError",
]


class CatalogError(Exception):
    """Base exception for all catalog errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CatalogError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MalformedLocaleError(CatalogError, ValueError):
    """Locale segment inferred from a catalog path is not a valid tag.

    The underlying parse failure is available as ``__cause__``.

    Attributes:
        locale: The rejected locale string
        path: Catalog path the locale was inferred from
    """

    def __init__(self, locale: str, path: str, reason: str) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.MALFORMED_LOCALE,
                message=f"Malformed locale {locale!r}: {reason}",
                hint="Name catalog files '<name>.<locale>.<format>', e.g. 'active.en-US.json'",
                path=path,
            )
        )
        self.locale = locale
        self.path = path


class UnregisteredFormatError(CatalogError, LookupError):
    """No decoder is registered for the format inferred from the path.

    Attributes:
        format_name: Inferred format (may be empty when the path has no suffix)
        path: Catalog path the format was inferred from
    """

    def __init__(self, format_name: str, path: str) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.UNREGISTERED_FORMAT,
                message=f"No decoder registered for format {format_name!r}",
                hint=f"Register a decoder for {format_name!r} in the decoder mapping",
                path=path,
            )
        )
        self.format_name = format_name
        self.path = path


class UnsupportedShapeError(CatalogError, TypeError):
    """Decoded catalog is neither a mapping nor a sequence of messages.

    Attributes:
        type_name: Name of the decoded value's type
        path: Catalog path
    """

    def __init__(self, type_name: str, path: str) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.UNSUPPORTED_SHAPE,
                message=f"Unsupported decoded shape: got type {type_name}",
                hint="A catalog must decode to a mapping of id -> message or a list of messages",
                path=path,
            )
        )
        self.type_name = type_name
        self.path = path


class NonStringKeyError(CatalogError, TypeError):
    """A decoded catalog mapping has a key that is not a string.

    Attributes:
        key: The offending key
        path: Catalog path
    """

    def __init__(self, key: object, path: str) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.NON_STRING_KEY,
                message=f"Expected string key, got {key!r}",
                hint="Quote numeric or boolean message ids",
                path=path,
            )
        )
        self.key = key
        self.path = path


class InvalidMessageError(CatalogError, ValueError):
    """Raw message data cannot be converted into a Message."""

    def __init__(self, message: str) -> None:
        super().__init__(Diagnostic(code=DiagnosticCode.INVALID_MESSAGE, message=message))


class TemplateCompileError(CatalogError):
    """Template source could not be compiled.

    Memoized on the Template that attempted compilation. The engine's own
    exception, if any, is available as ``__cause__``.

    Attributes:
        src: Template source that failed to compile
    """

    def __init__(self, src: str, reason: str) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.TEMPLATE_COMPILE_FAILED,
                message=f"Cannot compile template {src!r}: {reason}",
            )
        )
        self.src = src


class TemplateExecutionError(CatalogError):
    """Compiled template could not be rendered with the given data.

    Attributes:
        name: Placeholder name that failed, when known
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.TEMPLATE_EXECUTION_FAILED,
                message=message,
                hint="Pass a value for every placeholder in the template data",
            )
        )
        self.name = name


class MissingPluralFormError(CatalogError, LookupError):
    """A message has no template for the requested plural form.

    Attributes:
        message_id: Message identifier
        plural_form: Requested plural form
    """

    def __init__(self, message_id: str, plural_form: str) -> None:
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.PLURAL_FORM_MISSING,
                message=f"Message {message_id!r} has no plural form {plural_form!r}",
            )
        )
        self.message_id = message_id
        self.plural_form = plural_form
