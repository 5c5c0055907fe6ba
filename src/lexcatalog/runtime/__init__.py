"""Template compilation and rendering.

Exports:
    Template: Template source with a compile-once cache
    MessageTemplate: Per-plural-form templates of a Message
    TemplateEngine: Protocol for template engines
    DelimitedTemplateEngine: Default string.Template based engine

Python 3.13+.
"""

from .engine import CompiledTemplate, DelimitedTemplateEngine, TemplateEngine
from .message_template import MessageTemplate
from .template import CompileFailed, Compiled, CompileState, NotAttempted, Template

__all__ = [
    "CompileFailed",
    "CompileState",
    "Compiled",
    "CompiledTemplate",
    "DelimitedTemplateEngine",
    "MessageTemplate",
    "NotAttempted",
    "Template",
    "TemplateEngine",
]
