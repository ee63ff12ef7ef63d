"""Shared fixtures and utilities for diff tests."""

import os

import pytest

from diff.diff_parser import DiffParser


FIXTURES_DIR = os.path.join(os.path.dirname(__file__), '..', 'fixtures')


@pytest.fixture
def parser():
    """Create a diff parser for testing."""
    return DiffParser()


@pytest.fixture
def load_diff():
    """Factory that reads a diff from the shared fixtures directory."""
    def _load(name: str) -> str:
        with open(os.path.join(FIXTURES_DIR, name), 'r', encoding='utf-8') as f:
            return f.read()

    return _load
