"""Gallery skill – the property-wrapper example snippets.

Public API
----------
- list_snippets(section=None) -> dict
- get_snippet(name) -> Snippet
- show(name, *, fmt="html", style="codeblock") -> dict
"""

from __future__ import annotations

import logging
from typing import Any

from codeblock.errors import SnippetNotFoundError
from codeblock.skills.gallery.catalog import CATALOG, SECTIONS, Snippet
from codeblock.skills.highlight.renderer import DEFAULT_STYLE, highlight_snippet

logger = logging.getLogger(__name__)


def list_snippets(section: str | None = None) -> dict[str, Any]:
    """List gallery entries in sidebar order, optionally for one section.

    Returns dict with keys: count, sections, snippets.
    """
    entries = CATALOG
    if section is not None:
        wanted = section.strip().lower()
        entries = [s for s in CATALOG if s.section.lower() == wanted]

    return {
        "count": len(entries),
        "sections": list(SECTIONS),
        "snippets": [s.summary() for s in entries],
    }


def get_snippet(name: str) -> Snippet:
    """Find a snippet by name (``state``) or title (``@State``)."""
    key = name.strip().lower()
    for snippet in CATALOG:
        if key in (snippet.name, snippet.title.lower()):
            return snippet
    raise SnippetNotFoundError(
        f"No snippet named '{name}'. "
        f"Available: {', '.join(s.name for s in CATALOG)}"
    )


def show(
    name: str,
    *,
    fmt: str = "html",
    style: str = DEFAULT_STYLE,
) -> dict[str, Any]:
    """Return a snippet's metadata together with its highlighted code."""
    snippet = get_snippet(name)
    logger.debug("showing snippet %s", snippet.name)

    result = snippet.summary()
    result.update(
        highlight_snippet(snippet.code, language=snippet.language, fmt=fmt, style=style)
    )
    return result
