"""Shared fixtures for diff review tests."""

import os

import pytest

from diffreview.diff_renderer import DiffRenderer
from highlight.highlight_adapter import HighlightAdapter
from highlight.highlighter import Highlighter


FIXTURES_DIR = os.path.join(os.path.dirname(__file__), '..', 'fixtures')


class TaggingHighlighter(Highlighter):
    """Deterministic highlighter that wraps text in a tag naming the language."""

    def __init__(self) -> None:
        self.call_count = 0

    def highlight(self, text: str, language: str) -> str:
        self.call_count += 1
        return f'<code data-lang="{language}">{text}</code>'


@pytest.fixture
def load_diff():
    """Factory that reads a diff from the shared fixtures directory."""
    def _load(name: str) -> str:
        with open(os.path.join(FIXTURES_DIR, name), 'r', encoding='utf-8') as f:
            return f.read()

    return _load


@pytest.fixture
def fixture_path():
    """Factory that returns the path of a shared fixture."""
    def _path(name: str) -> str:
        return os.path.join(FIXTURES_DIR, name)

    return _path


@pytest.fixture
def tagging_highlighter():
    """Create a deterministic highlighter."""
    return TaggingHighlighter()


@pytest.fixture
def renderer(tagging_highlighter):
    """Create a renderer backed by the deterministic highlighter."""
    return DiffRenderer(adapter=HighlightAdapter(tagging_highlighter))
