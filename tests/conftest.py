"""Shared test fixtures for codeblock tests."""

import textwrap

import pytest


@pytest.fixture
def swift_file(tmp_path):
    """A small Swift source file."""
    path = tmp_path / "CounterView.swift"
    path.write_text(textwrap.dedent("""\
        /* Counter example */
        struct CounterView: View {
            @State private var counter = 0
            // tap to increment
            let label = "Count"
        }
    """))
    return path


@pytest.fixture
def python_file(tmp_path):
    """A small Python source file."""
    path = tmp_path / "app.py"
    path.write_text(textwrap.dedent('''\
        """Module docstring."""
        def compute(x):
            return x * 2.5  # scale
    '''))
    return path


@pytest.fixture
def styled_texts():
    """Return a helper listing ``(text, style)`` for every span of a StyledText."""
    def _texts(styled, style=None):
        return [
            (styled.text[s.start:s.end], s.style)
            for s in styled.spans
            if style is None or s.style is style
        ]
    return _texts
