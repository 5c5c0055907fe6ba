"""Per-plural-form templates of a Message.

MessageTemplate groups one lazily compiled Template per non-empty plural form
of a Message and renders the form the caller selected. Choosing the plural
form for a count is left to the caller (e.g. ``Locale.plural_form`` in Babel).

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from lexcatalog.catalog.message import Message
from lexcatalog.constants import DEFAULT_LEFT_DELIM, DEFAULT_RIGHT_DELIM
from lexcatalog.diagnostics import MissingPluralFormError
from lexcatalog.enums import PluralForm
from lexcatalog.runtime.engine import TemplateEngine
from lexcatalog.runtime.template import Template

__all__ = ["MessageTemplate"]


@dataclass(frozen=True, slots=True)
class MessageTemplate:
    """Executable templates for every plural form of a message.

    Attributes:
        message: Source message
        templates: Template per plural form present in the message
        left_delim: Left delimiter all templates compile with
        right_delim: Right delimiter all templates compile with
    """

    message: Message
    templates: Mapping[PluralForm, Template]
    left_delim: str = DEFAULT_LEFT_DELIM
    right_delim: str = DEFAULT_RIGHT_DELIM

    @classmethod
    def from_message(
        cls, message: Message, engine: TemplateEngine | None = None
    ) -> MessageTemplate | None:
        """Build templates for a message.

        Empty delimiters on the message fall back to "{{" and "}}".

        Args:
            message: Message to build templates for
            engine: Engine shared by all templates (default engine if None)

        Returns:
            MessageTemplate, or None if the message has no plural forms
        """
        forms = message.plural_forms()
        if not forms:
            return None
        return cls(
            message=message,
            templates={form: Template(src, engine) for form, src in forms.items()},
            left_delim=message.left_delim or DEFAULT_LEFT_DELIM,
            right_delim=message.right_delim or DEFAULT_RIGHT_DELIM,
        )

    def execute(self, plural_form: PluralForm | str, data: Mapping[str, object] | None = None) -> str:
        """Render the template for a plural form.

        Args:
            plural_form: CLDR plural category ("one", "other", ...)
            data: Placeholder values

        Returns:
            Rendered text

        Raises:
            MissingPluralFormError: If the message has no such form
            TemplateCompileError: If the form's template does not compile
            TemplateExecutionError: If data lacks a placeholder value
        """
        template = self.templates.get(plural_form)  # type: ignore[arg-type]
        if template is None:
            raise MissingPluralFormError(self.message.id, str(plural_form))
        return template.execute(data, self.left_delim, self.right_delim)
