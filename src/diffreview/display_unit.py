"""Rendered view of one file from a diff."""

from dataclasses import dataclass

from highlight.highlight_fragment import HighlightFragment


@dataclass(frozen=True)
class DisplayUnit:
    """
    One file's new content, ready for review.

    Units are produced in diff order; `index` is the unit's position in that
    order and serves as its key in rendering layers that need one.
    """

    title: str  # The file's new path
    body: HighlightFragment
    index: int = 0
    language: str = ""
    text: str = ""  # Unhighlighted new content
    line_count: int = 0
