"""Tests for Template lazy compilation and memoization.

Python 3.13+.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lexcatalog.diagnostics import TemplateCompileError
from lexcatalog.runtime import CompileFailed, Compiled, NotAttempted, Template
from tests.helpers.engines import CountingEngine
from tests.strategies.catalog import plain_texts


class TestInitialState:
    """A fresh Template has not attempted compilation."""

    def test_not_attempted(self, counting_engine: CountingEngine) -> None:
        """No state, no artifact, no error, no engine calls."""
        template = Template("Hello {{name}}", counting_engine)
        assert template.state == NotAttempted()
        assert not template.attempted
        assert template.compiled is None
        assert template.parse_error is None
        assert counting_engine.calls == []

    def test_src_read_only(self) -> None:
        """src cannot be reassigned."""
        template = Template("Hello")
        with pytest.raises(AttributeError):
            template.src = "Bye"  # type: ignore[misc]


class TestCompileOnce:
    """ensure_compiled() memoizes its first result."""

    def test_compiles_once(self, counting_engine: CountingEngine) -> None:
        """Two calls with the same delimiters invoke the engine once."""
        template = Template("Hello {{name}}", counting_engine)
        assert template.ensure_compiled("{{", "}}") is None
        assert template.ensure_compiled("{{", "}}") is None
        assert counting_engine.calls == [("Hello {{name}}", "{{", "}}")]
        assert isinstance(template.state, Compiled)
        assert template.compiled is not None

    def test_failure_memoized(self, failing_engine: CountingEngine) -> None:
        """A compile failure is returned on every call without recompiling."""
        template = Template("Hello {{name}}", failing_engine)
        first = template.ensure_compiled("{{", "}}")
        second = template.ensure_compiled("{{", "}}")
        assert isinstance(first, TemplateCompileError)
        assert second is first
        assert template.parse_error is first
        assert template.state == CompileFailed(first)
        assert template.compiled is None
        assert len(failing_engine.calls) == 1

    def test_foreign_engine_error_memoized(self) -> None:
        """Exceptions outside the engine contract are wrapped and memoized."""
        engine = CountingEngine(crash_with=RuntimeError("engine bug"))
        template = Template("Hello {{name}}", engine)
        first = template.ensure_compiled("{{", "}}")
        assert isinstance(first, TemplateCompileError)
        assert isinstance(first.__cause__, RuntimeError)
        assert "RuntimeError: engine bug" in str(first)
        assert template.ensure_compiled("{{", "}}") is first
        assert template.state == CompileFailed(first)
        assert len(engine.calls) == 1

    def test_empty_delimiter_memoized(self) -> None:
        """The default engine's usage error is memoized as a compile error."""
        template = Template("Hello {{name}}")
        error = template.ensure_compiled("{{", "")
        assert isinstance(error, TemplateCompileError)
        assert isinstance(error.__cause__, ValueError)
        assert template.ensure_compiled("{{", "}}") is error

    def test_real_engine_failure(self) -> None:
        """The default engine reports invalid placeholders."""
        template = Template("Hello {{ 1 }}")
        error = template.ensure_compiled("{{", "}}")
        assert isinstance(error, TemplateCompileError)
        assert "line 1, column 7" in str(error)


class TestNotATemplate:
    """Sources without the left delimiter skip the engine."""

    def test_no_left_delimiter(self, counting_engine: CountingEngine) -> None:
        """Success is recorded with no artifact and no engine call."""
        template = Template("Hello world", counting_engine)
        assert template.ensure_compiled("{{", "}}") is None
        assert template.attempted
        assert template.state == Compiled(None)
        assert template.compiled is None
        assert counting_engine.calls == []

    def test_right_delimiter_alone_is_irrelevant(self, counting_engine: CountingEngine) -> None:
        """Only the left delimiter decides; a stray right one is plain text."""
        template = Template("100% }} done", counting_engine)
        assert template.ensure_compiled("{{", "}}") is None
        assert template.compiled is None
        assert counting_engine.calls == []

    @given(src=plain_texts(), right=st.text(min_size=1, max_size=3))
    def test_never_compiled(self, src: str, right: str) -> None:
        """PROPERTY: without the left delimiter there is never an error or artifact."""
        engine = CountingEngine(fail_with="must not be called")
        template = Template(src, engine)
        assert template.ensure_compiled("{{", right) is None
        assert template.compiled is None
        assert engine.calls == []


class TestStaleDelimiterMemo:
    """The memo is per instance, not per delimiter pair."""

    def test_success_reused_for_other_delimiters(self, counting_engine: CountingEngine) -> None:
        """A later call with other delimiters returns the first result."""
        template = Template("Hello {{name}} <<name>>", counting_engine)
        assert template.ensure_compiled("{{", "}}") is None
        artifact = template.compiled
        assert template.ensure_compiled("<<", ">>") is None
        assert template.compiled is artifact
        assert len(counting_engine.calls) == 1

    def test_failure_reused_for_other_delimiters(self, failing_engine: CountingEngine) -> None:
        """A memoized failure survives a delimiter change."""
        template = Template("Hello {{name}} <<name>>", failing_engine)
        error = template.ensure_compiled("{{", "}}")
        assert error is not None
        assert template.ensure_compiled("<<", ">>") is error
        assert len(failing_engine.calls) == 1

    def test_not_a_template_reused_for_other_delimiters(
        self, counting_engine: CountingEngine
    ) -> None:
        """A "not a template" result is kept even if the new left delimiter occurs."""
        template = Template("Hi <<name>>", counting_engine)
        assert template.ensure_compiled("{{", "}}") is None
        assert template.ensure_compiled("<<", ">>") is None
        assert template.compiled is None
        assert counting_engine.calls == []


class TestExecute:
    """Template.execute()."""

    def test_renders(self) -> None:
        """Compiled templates render with data."""
        assert Template("Hello {{name}}!").execute({"name": "Ada"}) == "Hello Ada!"

    def test_plain_source_verbatim(self) -> None:
        """Non-templates render as the raw source, ignoring data."""
        assert Template("Hello $name}}").execute({"name": "Ada"}) == "Hello $name}}"

    def test_custom_delimiters(self) -> None:
        """Delimiters passed to execute() are used for the first compile."""
        assert Template("Hi <<name>>").execute({"name": "Bo"}, "<<", ">>") == "Hi Bo"

    def test_compile_error_raised(self, failing_engine: CountingEngine) -> None:
        """The memoized compile error is raised."""
        template = Template("{{x}}", failing_engine)
        with pytest.raises(TemplateCompileError):
            template.execute({"x": 1})
        with pytest.raises(TemplateCompileError):
            template.execute({"x": 1})
        assert len(failing_engine.calls) == 1


class TestConcurrentFirstUse:
    """Concurrent first calls compile once."""

    def test_single_compile(self, counting_engine: CountingEngine) -> None:
        """Many threads racing on a fresh Template trigger one compile."""
        template = Template("Hello {{name}}", counting_engine)
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: template.ensure_compiled("{{", "}}"), range(64)))
        assert results == [None] * 64
        assert len(counting_engine.calls) == 1
