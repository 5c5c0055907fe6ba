"""Lazily compiled message templates.

A Template holds a message's raw source and compiles it the first time it is
needed. The outcome of that single attempt (success, "not a template", or a
compile error) is memoized on the instance:

    NotAttempted  -> ensure_compiled() has never run
    Compiled      -> attempted; artifact is None when src has no left delimiter
    CompileFailed -> attempted; the error is returned on every later call

The memo belongs to the instance, not to a delimiter pair. A later call with
different delimiters returns the first result, so an instance must always be
compiled with the same pair.

Python 3.13+.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from threading import Lock

from lexcatalog.constants import DEFAULT_LEFT_DELIM, DEFAULT_RIGHT_DELIM
from lexcatalog.diagnostics import TemplateCompileError
from lexcatalog.runtime.engine import CompiledTemplate, DelimitedTemplateEngine, TemplateEngine

__all__ = [
    "CompileFailed",
    "CompileState",
    "Compiled",
    "NotAttempted",
    "Template",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NotAttempted:
    """Compilation has not been attempted yet."""


@dataclass(frozen=True, slots=True)
class Compiled:
    """Compilation succeeded.

    Attributes:
        artifact: Compiled template, or None when the source contains no
            left delimiter and is rendered verbatim
    """

    artifact: CompiledTemplate | None


@dataclass(frozen=True, slots=True)
class CompileFailed:
    """Compilation failed.

    Attributes:
        error: The memoized compile error
    """

    error: TemplateCompileError


type CompileState = NotAttempted | Compiled | CompileFailed

_NOT_ATTEMPTED = NotAttempted()


class Template:
    """Template source with a compile-once cache.

    The first ensure_compiled() call is serialized by a per-instance lock,
    so concurrent first uses compile once.

    Attributes:
        src: Raw template source (read-only)
        state: Current CompileState
    """

    __slots__ = ("_engine", "_lock", "_src", "_state")

    def __init__(self, src: str, engine: TemplateEngine | None = None) -> None:
        """Initialize Template.

        Args:
            src: Raw template source
            engine: Engine used for compilation (default: DelimitedTemplateEngine)
        """
        self._src = src
        self._engine: TemplateEngine = engine if engine is not None else DelimitedTemplateEngine()
        self._state: CompileState = _NOT_ATTEMPTED
        self._lock = Lock()

    @property
    def src(self) -> str:
        """Raw template source."""
        return self._src

    @property
    def state(self) -> CompileState:
        """Current compile state."""
        return self._state

    @property
    def attempted(self) -> bool:
        """True once ensure_compiled() has recorded a result."""
        return not isinstance(self._state, NotAttempted)

    @property
    def compiled(self) -> CompiledTemplate | None:
        """Compiled artifact, if compilation produced one."""
        match self._state:
            case Compiled(artifact=artifact):
                return artifact
            case _:
                return None

    @property
    def parse_error(self) -> TemplateCompileError | None:
        """Memoized compile error, if compilation failed."""
        match self._state:
            case CompileFailed(error=error):
                return error
            case _:
                return None

    def ensure_compiled(self, left_delim: str, right_delim: str) -> TemplateCompileError | None:
        """Compile the source once and return the memoized outcome.

        Sources that do not contain left_delim are not templates: success is
        recorded without invoking the engine and no artifact is kept.

        Args:
            left_delim: Left template delimiter (e.g. "{{")
            right_delim: Right template delimiter (e.g. "}}")

        Returns:
            None on success, otherwise the memoized TemplateCompileError.
            Later calls return the same value whatever delimiters they pass.
        """
        if isinstance(self._state, NotAttempted):
            with self._lock:
                if isinstance(self._state, NotAttempted):
                    self._state = self._compile(left_delim, right_delim)
        return self.parse_error

    def execute(
        self,
        data: Mapping[str, object] | None = None,
        left_delim: str = DEFAULT_LEFT_DELIM,
        right_delim: str = DEFAULT_RIGHT_DELIM,
    ) -> str:
        """Render the template, compiling it first if needed.

        Args:
            data: Placeholder values
            left_delim: Left delimiter used if compilation has not happened yet
            right_delim: Right delimiter used if compilation has not happened yet

        Returns:
            Rendered text, or src verbatim when src is not a template

        Raises:
            TemplateCompileError: The memoized compile error
            TemplateExecutionError: If data lacks a placeholder value
        """
        error = self.ensure_compiled(left_delim, right_delim)
        if error is not None:
            raise error
        artifact = self.compiled
        if artifact is None:
            return self._src
        return artifact.render(data)

    def _compile(self, left_delim: str, right_delim: str) -> CompileState:
        if left_delim not in self._src:
            return Compiled(None)
        try:
            artifact = self._engine.compile(self._src, left_delim, right_delim)
        except TemplateCompileError as e:
            logger.debug("Template compile failed: %s", e)
            return CompileFailed(e)
        except Exception as e:  # noqa: BLE001 - memoized like TemplateCompileError
            error = TemplateCompileError(self._src, f"{type(e).__name__}: {e}")
            error.__cause__ = e
            logger.debug("Template engine raised %s: %s", type(e).__name__, e)
            return CompileFailed(error)
        logger.debug("Compiled template %r", self._src[:50])
        return Compiled(artifact)

    def __repr__(self) -> str:
        return f"Template(src={self._src!r}, state={self._state!r})"
