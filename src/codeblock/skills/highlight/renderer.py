"""Pygments-based rendering of highlighted code."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from pygments import format as _pygments_format
from pygments.formatters import HtmlFormatter, Terminal256Formatter
from pygments.style import Style as PygmentsStyle
from pygments.styles import get_style_by_name
from pygments.token import Comment, Keyword, Number, String, Text
from pygments.util import ClassNotFound

from codeblock.errors import UnknownStyleError, UnsupportedFormatError
from codeblock.lang import Language, detect_language, resolve_language
from codeblock.skills.highlight.highlighter import Style, StyledText, highlight

logger = logging.getLogger(__name__)

FORMATS = ["html", "terminal", "json"]

DEFAULT_STYLE = "codeblock"

STYLE_TOKENS = {
    Style.KEYWORD: Keyword,
    Style.STRING: String,
    Style.NUMBER: Number,
    Style.COMMENT: Comment,
}


class CodeBlockStyle(PygmentsStyle):
    """Palette of the gallery's code block: one accent color per style."""

    name = "codeblock"
    background_color = "#f2f2f2"

    styles = {
        Keyword: "#af52de",  # purple
        String: "#ff2d55",  # pink
        Number: "#007aff",  # blue
        Comment: "#34c759",  # green
    }


def resolve_style(name: str) -> type[PygmentsStyle]:
    """Return the Pygments style class for *name*."""
    if name == DEFAULT_STYLE:
        return CodeBlockStyle
    try:
        return get_style_by_name(name)
    except ClassNotFound:
        raise UnknownStyleError(f"Unknown Pygments style '{name}'") from None


def to_tokens(styled: StyledText) -> Iterator[tuple[Any, str]]:
    """Convert styled text into a Pygments token stream."""
    for chunk, style in styled.runs():
        yield (STYLE_TOKENS[style] if style is not None else Text), chunk


def render(styled: StyledText, fmt: str = "html", style: str = DEFAULT_STYLE) -> str:
    """Render styled text as HTML, ANSI terminal output or JSON."""
    style_cls = resolve_style(style)
    if fmt == "json":
        return json.dumps(styled.to_dict())
    if fmt == "html":
        formatter = HtmlFormatter(style=style_cls, nowrap=True)
    elif fmt == "terminal":
        formatter = Terminal256Formatter(style=style_cls)
    else:
        raise UnsupportedFormatError(fmt, FORMATS)
    return _pygments_format(to_tokens(styled), formatter)


def highlight_snippet(
    code: str,
    *,
    language: str | Language = "swift",
    fmt: str = "html",
    style: str = DEFAULT_STYLE,
) -> dict[str, Any]:
    """Highlight a code string.

    Returns dict with the language, raw source, styled spans and the
    rendered output.
    """
    lang = resolve_language(language)
    styled = highlight(code, lang)
    logger.debug("rendering %d spans as %s (style=%s)", len(styled.spans), fmt, style)

    return {
        "language": lang.value,
        "source": code,
        "spans": styled.to_dict()["spans"],
        "highlighted": render(styled, fmt, style),
        "format": fmt,
        "style": style,
    }


def highlight_file(
    path: str,
    *,
    language: str | Language | None = None,
    fmt: str = "html",
    style: str = DEFAULT_STYLE,
) -> dict[str, Any]:
    """Highlight the contents of a source file.

    The language is detected from the file extension when not given.
    """
    if language is None:
        language = detect_language(path)

    code = Path(path).read_text(encoding="utf-8", errors="replace")
    result = highlight_snippet(code, language=language, fmt=fmt, style=style)
    result["file"] = str(path)
    return result
