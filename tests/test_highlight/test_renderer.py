"""Tests for the highlight renderer — uses real Pygments formatters."""

import json

import pytest
from pygments.token import Comment, Keyword, Number, String, Text

from codeblock.errors import UnknownStyleError, UnsupportedFormatError
from codeblock.lang import Language
from codeblock.skills.highlight.highlighter import Style, highlight
from codeblock.skills.highlight.renderer import (
    CodeBlockStyle,
    STYLE_TOKENS,
    render,
    resolve_style,
    to_tokens,
)


# ---------------------------------------------------------------------------
# to_tokens — pure function
# ---------------------------------------------------------------------------
class TestToTokens:
    def test_maps_styles_to_pygments_tokens(self):
        styled = highlight('let s = "a" // c\nvar n = 1', Language.SWIFT)
        assert list(to_tokens(styled)) == [
            (Keyword, "let"),
            (Text, " s = "),
            (String, '"a"'),
            (Text, " "),
            (Comment, "// c"),
            (Text, "\n"),
            (Keyword, "var"),
            (Text, " n = "),
            (Number, "1"),
        ]

    def test_empty(self):
        assert list(to_tokens(highlight("", Language.SWIFT))) == []

    def test_every_style_has_a_token(self):
        assert set(STYLE_TOKENS) == set(Style)


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------
class TestRender:
    def test_html_uses_token_classes(self):
        html = render(highlight("let x = 1 // note", Language.SWIFT), "html")
        assert '<span class="k">let</span>' in html
        assert '<span class="m">1</span>' in html
        assert '<span class="c">// note</span>' in html
        assert "<div" not in html  # nowrap

    def test_html_escapes_quotes(self):
        html = render(highlight('"<b>"', Language.SWIFT), "html")
        assert "&lt;b&gt;" in html
        assert '<span class="s">' in html

    def test_terminal_emits_ansi(self):
        out = render(highlight("return 42", Language.SWIFT), "terminal")
        assert "\x1b[" in out
        assert "return" in out
        assert "42" in out

    def test_json(self):
        code = "func f() {}"
        data = json.loads(render(highlight(code, Language.SWIFT), "json"))
        assert data["text"] == code
        assert data["spans"] == [{"start": 0, "end": 4, "style": "keyword", "text": "func"}]

    def test_other_pygments_style(self):
        html = render(highlight("let x", Language.SWIFT), "html", "monokai")
        assert "let" in html

    def test_unknown_format(self):
        with pytest.raises(UnsupportedFormatError, match="pdf"):
            render(highlight("let", Language.SWIFT), "pdf")

    def test_unknown_style(self):
        with pytest.raises(UnknownStyleError):
            render(highlight("let", Language.SWIFT), "html", "no_such_style_xyz")

    def test_unknown_style_with_json(self):
        with pytest.raises(UnknownStyleError, match="no_such_style_xyz"):
            render(highlight("let", Language.SWIFT), "json", "no_such_style_xyz")

    def test_empty_input(self):
        assert render(highlight("", Language.SWIFT), "html") == ""


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------
class TestStyles:
    def test_default_style_resolves_to_palette(self):
        assert resolve_style("codeblock") is CodeBlockStyle

    def test_registered_style_resolves(self):
        assert resolve_style("monokai").__name__ == "MonokaiStyle"

    def test_palette_has_four_distinct_colors(self):
        colors = {
            CodeBlockStyle.style_for_token(token)["color"]
            for token in (Keyword, String, Number, Comment)
        }
        assert len(colors) == 4
        assert None not in colors
