"""Reconstruct the new version of a file from its hunks."""

from typing import List, Tuple

from diff.diff_types import DiffFile


def extract_new_lines(diff_file: DiffFile) -> List[Tuple[int | None, str]]:
    """
    Collect the lines present in the new version of a file.

    Deleted lines are skipped; inserted and unchanged lines are returned in
    hunk order, then change order.

    Args:
        diff_file: Parsed file

    Returns:
        List of (new line number, content) tuples. Line numbers are None for
        hunks whose header could not be read.
    """
    return [
        (change.new_line, change.content)
        for hunk in diff_file.hunks
        for change in hunk.changes
        if not change.is_delete
    ]


def extract_new_content(diff_file: DiffFile) -> str:
    """
    Get the text of the new version of a file, as far as the diff shows it.

    Args:
        diff_file: Parsed file

    Returns:
        Inserted and unchanged lines joined by newlines; empty if the file has no hunks
    """
    return '\n'.join(content for _, content in extract_new_lines(diff_file))
