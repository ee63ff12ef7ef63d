"""Shared fixtures for highlighting tests."""

from typing import List, Tuple

import pytest

from highlight.highlight_exceptions import HighlightLanguageError
from highlight.highlighter import Highlighter


class RecordingHighlighter(Highlighter):
    """Deterministic highlighter that records its calls."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def highlight(self, text: str, language: str) -> str:
        self.calls.append((text, language))
        return f'<span class="{language}">{text}</span>'


class FailingHighlighter(Highlighter):
    """Highlighter that raises the given exception on every call."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def highlight(self, text: str, language: str) -> str:
        self.calls += 1
        raise self.error


class NoGrammarHighlighter(Highlighter):
    """Highlighter with no grammars at all."""

    def highlight(self, text: str, language: str) -> str:
        raise HighlightLanguageError(f"No lexer registered for language: {language}", {"language": language})


@pytest.fixture
def recording_highlighter():
    """Create a recording highlighter."""
    return RecordingHighlighter()


@pytest.fixture
def failing_highlighter():
    """Factory for highlighters that fail with a given exception."""
    def _create(error: Exception | None = None) -> FailingHighlighter:
        return FailingHighlighter(error if error is not None else RuntimeError("tokenizer crashed"))

    return _create


@pytest.fixture
def no_grammar_highlighter():
    """Create a highlighter that knows no languages."""
    return NoGrammarHighlighter()
