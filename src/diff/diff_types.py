"""Shared dataclasses for parsed diffs."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class DiffChangeType(Enum):
    """Kind of a single line within a hunk."""
    INSERT = auto()
    DELETE = auto()
    NORMAL = auto()


class DiffFileType(Enum):
    """Kind of change a diff makes to a file."""
    ADD = auto()
    DELETE = auto()
    MODIFY = auto()
    RENAME = auto()
    COPY = auto()


@dataclass(frozen=True)
class DiffChange:
    """Represents a single line in a diff hunk."""

    type: DiffChangeType
    content: str  # The line text without its marker prefix
    old_line: int | None = None  # Line number in the original file (1-indexed)
    new_line: int | None = None  # Line number in the new file (1-indexed)

    @property
    def is_insert(self) -> bool:
        return self.type is DiffChangeType.INSERT

    @property
    def is_delete(self) -> bool:
        return self.type is DiffChangeType.DELETE

    @property
    def is_normal(self) -> bool:
        return self.type is DiffChangeType.NORMAL


@dataclass(frozen=True)
class DiffHunk:
    """Represents a single hunk from a unified diff."""

    changes: Tuple[DiffChange, ...] = ()
    header: str = ""  # The raw "@@ ... @@" line
    old_start: int = 0
    old_count: int = 0
    new_start: int = 0
    new_count: int = 0


@dataclass(frozen=True)
class DiffFile:
    """
    Represents one file touched by a diff.

    A path is None when the diff never names it (or names /dev/null), and an
    empty string when its header line was cut short, e.g. "+++ b/".
    """

    old_path: str | None = None
    new_path: str | None = None
    hunks: Tuple[DiffHunk, ...] = ()
    type: DiffFileType = DiffFileType.MODIFY
    old_revision: str | None = None
    new_revision: str | None = None
    old_mode: str | None = None
    new_mode: str | None = None
    is_binary: bool = False

    @property
    def is_renderable(self) -> bool:
        """True if the file has content to show and a name to show it under."""
        return bool(self.hunks) and self.new_path is not None and self.new_path != ""
