"""Highlight skill – regex-overlay syntax highlighting of code snippets.

Public API
----------
- highlight(code, language) -> StyledText
- highlight_snippet(code, *, language="swift", fmt="html", style="codeblock") -> dict
- highlight_file(path, *, language=None, fmt="html", style="codeblock") -> dict
"""

from codeblock.skills.highlight.highlighter import (  # noqa: F401
    Span,
    Style,
    StyledText,
    highlight,
)
from codeblock.skills.highlight.renderer import (  # noqa: F401
    highlight_file,
    highlight_snippet,
    render,
)
