"""Syntax highlighting for extracted file content."""

from highlight.highlight_adapter import HighlightAdapter
from highlight.highlight_exceptions import HighlightError, HighlightLanguageError
from highlight.highlight_fragment import HighlightFragment
from highlight.highlight_language import LanguageResolver, resolve_language
from highlight.highlighter import Highlighter, PygmentsHighlighter


__all__ = [
    "HighlightAdapter",
    "HighlightError",
    "HighlightFragment",
    "HighlightLanguageError",
    "Highlighter",
    "LanguageResolver",
    "PygmentsHighlighter",
    "resolve_language",
]
