"""Tests for diff types."""

import dataclasses

import pytest

from diff.diff_types import DiffChange, DiffChangeType, DiffFile, DiffFileType, DiffHunk


class TestDiffChange:
    """Test DiffChange."""

    def test_type_properties(self):
        """Test the is_insert, is_delete and is_normal helpers."""
        insert = DiffChange(DiffChangeType.INSERT, 'a')
        delete = DiffChange(DiffChangeType.DELETE, 'b')
        normal = DiffChange(DiffChangeType.NORMAL, 'c')

        assert (insert.is_insert, insert.is_delete, insert.is_normal) == (True, False, False)
        assert (delete.is_insert, delete.is_delete, delete.is_normal) == (False, True, False)
        assert (normal.is_insert, normal.is_delete, normal.is_normal) == (False, False, True)

    def test_line_numbers_default_to_none(self):
        """Test default line numbers."""
        change = DiffChange(DiffChangeType.INSERT, 'a')

        assert change.old_line is None
        assert change.new_line is None

    def test_frozen(self):
        """Test that changes cannot be modified."""
        change = DiffChange(DiffChangeType.INSERT, 'a')

        with pytest.raises(dataclasses.FrozenInstanceError):
            change.content = 'b'  # type: ignore[misc]


class TestDiffFile:
    """Test DiffFile."""

    def test_defaults(self):
        """Test default field values."""
        diff_file = DiffFile()

        assert diff_file.old_path is None
        assert diff_file.new_path is None
        assert diff_file.hunks == ()
        assert diff_file.type == DiffFileType.MODIFY
        assert diff_file.is_binary is False

    def test_renderable(self):
        """Test a file with a new path and a hunk."""
        diff_file = DiffFile(new_path='x.js', hunks=(DiffHunk(),))

        assert diff_file.is_renderable is True

    @pytest.mark.parametrize("new_path, hunks", [
        (None, (DiffHunk(),)),
        ('', (DiffHunk(),)),
        ('x.js', ()),
        (None, ()),
    ])
    def test_not_renderable(self, new_path, hunks):
        """Test that a missing or empty path, or no hunks, is not renderable."""
        diff_file = DiffFile(new_path=new_path, hunks=hunks)

        assert diff_file.is_renderable is False

    def test_frozen(self):
        """Test that files cannot be modified."""
        diff_file = DiffFile(new_path='x.js')

        with pytest.raises(dataclasses.FrozenInstanceError):
            diff_file.new_path = 'y.js'  # type: ignore[misc]

    def test_equality(self):
        """Test value equality."""
        hunk = DiffHunk(changes=(DiffChange(DiffChangeType.NORMAL, 'a', 1, 1),), header='@@ -1 +1 @@')

        assert DiffFile(new_path='x', hunks=(hunk,)) == DiffFile(new_path='x', hunks=(hunk,))
        assert DiffFile(new_path='x', hunks=(hunk,)) != DiffFile(new_path='y', hunks=(hunk,))
