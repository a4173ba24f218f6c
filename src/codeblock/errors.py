"""Shared exception classes for codeblock skills."""

from __future__ import annotations


class CodeblockError(Exception):
    """Base class for errors surfaced by codeblock skills."""


class UnknownLanguageError(CodeblockError):
    """Raised when a language name does not match a supported language."""

    def __init__(self, name: str, supported: list[str]) -> None:
        self.name = name
        super().__init__(
            f"Unknown language '{name}'.\n"
            f"Supported languages: {', '.join(supported)}"
        )


class UnsupportedFormatError(CodeblockError):
    """Raised when an output format has no renderer."""

    def __init__(self, fmt: str, supported: list[str]) -> None:
        self.fmt = fmt
        super().__init__(
            f"Unsupported output format '{fmt}'.\n"
            f"Supported formats: {', '.join(supported)}"
        )


class UnknownStyleError(CodeblockError):
    """Raised when a Pygments style name cannot be resolved."""


class SnippetNotFoundError(CodeblockError):
    """Raised when a gallery snippet cannot be found by name or title."""
