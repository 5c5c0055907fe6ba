"""Template engines used to compile message templates.

A TemplateEngine turns template source plus a delimiter pair into a
CompiledTemplate. Template only depends on that contract, so tests and
applications can plug in their own engine.

The default DelimitedTemplateEngine builds on ``string.Template``:

    Hello {{ name }}!      -> placeholder "name"
    Hello {{.Name}}!       -> placeholder "Name" (leading dot accepted)
    Literal {{{{ braces    -> doubled left delimiter renders one "{{"
    Broken {{ 1st }}       -> TemplateCompileError

Python 3.13+.
"""

import functools
import re
import string
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from lexcatalog.constants import MAX_TEMPLATE_CLASS_CACHE_SIZE
from lexcatalog.diagnostics import TemplateCompileError, TemplateExecutionError

__all__ = [
    "CompiledTemplate",
    "DelimitedTemplateEngine",
    "TemplateEngine",
]


class CompiledTemplate(Protocol):
    """Executable form of a template."""

    def render(self, data: Mapping[str, object] | None = None) -> str:
        """Render the template.

        Raises:
            TemplateExecutionError: If data lacks a value the template needs
        """
        ...


class TemplateEngine(Protocol):
    """Compiles template source with a given delimiter pair.

    This is a Protocol (structural typing) rather than ABC so that any object
    with a matching compile() method can be used.
    """

    def compile(self, src: str, left_delim: str, right_delim: str) -> CompiledTemplate:
        """Compile src.

        Raises:
            TemplateCompileError: If src is not a valid template
        """
        ...


@functools.lru_cache(maxsize=MAX_TEMPLATE_CLASS_CACHE_SIZE)
def _template_class(left_delim: str, right_delim: str) -> type[string.Template]:
    """Build (once per delimiter pair) a string.Template subclass."""
    left = re.escape(left_delim)
    right = re.escape(right_delim)
    # string.Template compiles `pattern` with re.VERBOSE when the class is created
    pattern = rf"""
    {left}(?:
        (?P<escaped>{left})
      | \s*\.?(?P<braced>(?a:[_a-z][_a-z0-9]*))\s*{right}
      | (?P<named>(?!))
      | (?P<invalid>)
    )
    """
    return type(
        "DelimitedTemplate",
        (string.Template,),
        {"delimiter": left_delim, "pattern": pattern},
    )


@dataclass(frozen=True, slots=True)
class _DelimitedCompiledTemplate:
    template: string.Template

    def render(self, data: Mapping[str, object] | None = None) -> str:
        try:
            return self.template.substitute(data or {})
        except KeyError as e:
            name = e.args[0]
            msg = f"No value for placeholder {name!r} in template {self.template.template!r}"
            raise TemplateExecutionError(msg, name=name) from e


@dataclass(frozen=True, slots=True)
class DelimitedTemplateEngine:
    """Default engine: ``string.Template`` with configurable delimiters.

    Placeholders are identifiers wrapped in the delimiter pair, optionally
    padded with whitespace and prefixed with a dot. Every other occurrence of
    the left delimiter, except a doubled one, is a compile error.
    """

    def compile(self, src: str, left_delim: str, right_delim: str) -> CompiledTemplate:
        if not left_delim or not right_delim:
            msg = f"Template delimiters must be non-empty, got {left_delim!r} and {right_delim!r}"
            raise ValueError(msg)

        template_class = _template_class(left_delim, right_delim)
        for match in template_class.pattern.finditer(src):
            if match.group("invalid") is not None:
                start = match.start("invalid") - len(left_delim)
                line = src.count("\n", 0, start) + 1
                column = start - (src.rfind("\n", 0, start) + 1) + 1
                reason = f"invalid placeholder at line {line}, column {column}"
                raise TemplateCompileError(src, reason)
        return _DelimitedCompiledTemplate(template_class(src))
