"""Language table and detection shared across skills.

Each supported language is a member of the closed :class:`Language`
enumeration and maps to a fixed :class:`LanguageConfig` record.  Adding a
language means adding an enum member and its record, nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from codeblock.errors import UnknownLanguageError


class Language(Enum):
    """Source languages the highlighter knows about."""

    SWIFT = "swift"
    PYTHON = "python"
    JAVASCRIPT = "javascript"

    @property
    def config(self) -> LanguageConfig:
        return LANGUAGE_CONFIGS[self]


@dataclass(frozen=True)
class LanguageConfig:
    """Keyword list and comment patterns for one language."""

    keywords: tuple[str, ...]
    single_line_comment: str
    multi_line_comment_start: str
    multi_line_comment_end: str


LANGUAGE_CONFIGS = {
    Language.SWIFT: LanguageConfig(
        keywords=(
            "struct", "let", "var", "func", "private", "View", "some",
            "init", "if", "else", "return", "class", "protocol",
        ),
        single_line_comment=r"//[^\r\n\u2028\u2029\x85]*",
        multi_line_comment_start=r"/\*",
        multi_line_comment_end=r"\*/",
    ),
    Language.PYTHON: LanguageConfig(
        keywords=(
            "def", "class", "if", "else", "elif", "for", "while", "import",
            "from", "as", "return", "True", "False", "None",
        ),
        single_line_comment=r"#[^\r\n\u2028\u2029\x85]*",
        multi_line_comment_start=r'"""',
        multi_line_comment_end=r'"""',
    ),
    Language.JAVASCRIPT: LanguageConfig(
        keywords=(
            "function", "let", "const", "var", "if", "else", "for", "while",
            "return", "class", "new", "this",
        ),
        single_line_comment=r"//[^\r\n\u2028\u2029\x85]*",
        multi_line_comment_start=r"/\*",
        multi_line_comment_end=r"\*/",
    ),
}

# The gallery UI only ever renders Swift snippets.
DEFAULT_LANGUAGE = Language.SWIFT

ALIASES = {
    "swift": Language.SWIFT,
    "python": Language.PYTHON,
    "py": Language.PYTHON,
    "javascript": Language.JAVASCRIPT,
    "js": Language.JAVASCRIPT,
}

EXT_MAP = {
    ".swift": Language.SWIFT,
    ".py": Language.PYTHON,
    ".pyw": Language.PYTHON,
    ".js": Language.JAVASCRIPT,
    ".mjs": Language.JAVASCRIPT,
    ".cjs": Language.JAVASCRIPT,
}


def language_names() -> list[str]:
    """Canonical names of all supported languages, in enum order."""
    return [lang.value for lang in Language]


def resolve_language(name: str | Language) -> Language:
    """Map a language name or alias (case-insensitive) to a :class:`Language`."""
    if isinstance(name, Language):
        return name
    lang = ALIASES.get(name.strip().lower())
    if lang is None:
        raise UnknownLanguageError(name, language_names())
    return lang


def detect_language(path: str) -> Language:
    """Guess the language of a file from its extension."""
    return EXT_MAP.get(Path(path).suffix.lower(), DEFAULT_LANGUAGE)
