"""
Unified diff parsing.

This package turns unified diff text into an immutable tree of files, hunks
and line changes, and rebuilds the new content of each file from it.
"""

from diff.diff_content import extract_new_content, extract_new_lines
from diff.diff_exceptions import DiffError, DiffParseError
from diff.diff_parser import DiffParser
from diff.diff_types import (
    DiffChange,
    DiffChangeType,
    DiffFile,
    DiffFileType,
    DiffHunk,
)

__all__ = [
    # Exceptions
    'DiffError',
    'DiffParseError',
    # Types
    'DiffChange',
    'DiffChangeType',
    'DiffFile',
    'DiffFileType',
    'DiffHunk',
    # Core
    'DiffParser',
    'extract_new_content',
    'extract_new_lines',
]
