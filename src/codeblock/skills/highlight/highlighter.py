"""Regex-overlay syntax highlighting.

The highlighter is not a lexer.  It runs a fixed sequence of passes over the
raw code, each marking the character ranges its pattern matches:

1. keywords, one ``\\b<keyword>\\b`` pass per keyword in list order
2. string literals (double- or single-quoted)
3. numeric literals
4. single-line comments (marker to end of line)
5. block comments (opening delimiter through the next closing delimiter)

Later passes overwrite earlier ones, so a keyword inside a string is styled
as a string and anything after a comment marker is styled as a comment, even
when that marker itself sits inside a string literal.
"""

from __future__ import annotations

import itertools
import logging
import re
from dataclasses import dataclass
from enum import Enum
from functools import cached_property, lru_cache
from typing import Any, Iterator

from codeblock.lang import Language

logger = logging.getLogger(__name__)

STRING_PATTERN = re.compile(r""""[^"]*"|'[^']*'""")
NUMBER_PATTERN = re.compile(r"\b\d+\.?\d*\b")


class Style(Enum):
    """Display classification attached to a range of code."""

    KEYWORD = "keyword"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"


@dataclass(frozen=True)
class Span:
    """A half-open ``[start, end)`` range of code carrying one style."""

    start: int
    end: int
    style: Style


@dataclass(frozen=True)
class StyledText:
    """Original code plus the style of every character offset.

    ``styles[i]`` is the style of ``text[i]`` or ``None`` when unstyled.
    """

    text: str
    styles: tuple[Style | None, ...]

    @cached_property
    def spans(self) -> tuple[Span, ...]:
        """Maximal runs of a single style, in text order."""
        return tuple(
            Span(start, end, style)
            for start, end, style in self._segments()
            if style is not None
        )

    def style_at(self, offset: int) -> Style | None:
        return self.styles[offset]

    def spans_of(self, style: Style) -> list[Span]:
        return [span for span in self.spans if span.style is style]

    def runs(self) -> Iterator[tuple[str, Style | None]]:
        """Yield ``(chunk, style)`` pairs covering the whole text."""
        for start, end, style in self._segments():
            yield self.text[start:end], style

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "spans": [
                {
                    "start": span.start,
                    "end": span.end,
                    "style": span.style.value,
                    "text": self.text[span.start:span.end],
                }
                for span in self.spans
            ],
        }

    def _segments(self) -> Iterator[tuple[int, int, Style | None]]:
        offset = 0
        for style, group in itertools.groupby(self.styles):
            length = sum(1 for _ in group)
            yield offset, offset + length, style
            offset += length


@dataclass(frozen=True)
class _CompiledLanguage:
    keywords: tuple[re.Pattern, ...]
    single_line_comment: re.Pattern
    block_start: re.Pattern
    block_end: re.Pattern


@lru_cache(maxsize=None)
def _compile(language: Language) -> _CompiledLanguage:
    config = language.config
    return _CompiledLanguage(
        keywords=tuple(
            re.compile(rf"\b{re.escape(kw)}\b") for kw in config.keywords
        ),
        single_line_comment=re.compile(config.single_line_comment, re.MULTILINE),
        block_start=re.compile(config.multi_line_comment_start),
        block_end=re.compile(config.multi_line_comment_end),
    )


def _mark(styles: list[Style | None], start: int, end: int, style: Style) -> None:
    styles[start:end] = [style] * (end - start)


def _mark_matches(
    styles: list[Style | None], code: str, pattern: re.Pattern, style: Style
) -> int:
    count = 0
    for m in pattern.finditer(code):
        _mark(styles, m.start(), m.end(), style)
        count += 1
    return count


def _mark_block_comments(
    styles: list[Style | None], code: str, start: re.Pattern, end: re.Pattern
) -> int:
    """Mark each opener..closer region; stop at the first unclosed opener."""
    count = 0
    pos = 0
    while pos < len(code):
        opener = start.search(code, pos)
        if opener is None:
            break
        closer = end.search(code, opener.end())
        if closer is None:
            break
        _mark(styles, opener.start(), closer.end(), Style.COMMENT)
        count += 1
        pos = closer.end()
    return count


def highlight(code: str, language: Language) -> StyledText:
    """Classify the keywords, literals and comments of *code*.

    Never fails: code with no matches comes back with no styled ranges.
    """
    compiled = _compile(language)
    styles: list[Style | None] = [None] * len(code)

    keywords = sum(
        _mark_matches(styles, code, pattern, Style.KEYWORD)
        for pattern in compiled.keywords
    )
    strings = _mark_matches(styles, code, STRING_PATTERN, Style.STRING)
    numbers = _mark_matches(styles, code, NUMBER_PATTERN, Style.NUMBER)
    comments = _mark_matches(
        styles, code, compiled.single_line_comment, Style.COMMENT
    )
    blocks = _mark_block_comments(
        styles, code, compiled.block_start, compiled.block_end
    )

    logger.debug(
        "highlighted %d chars of %s: %d keywords, %d strings, %d numbers, "
        "%d line comments, %d block comments",
        len(code), language.value, keywords, strings, numbers, comments, blocks,
    )
    return StyledText(code, tuple(styles))
