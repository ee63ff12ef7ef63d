"""Unified diff parsing."""

from dataclasses import dataclass, field
import logging
import re
from typing import Any, List, Tuple

from diff.diff_exceptions import DiffParseError
from diff.diff_types import DiffChange, DiffChangeType, DiffFile, DiffFileType, DiffHunk


@dataclass
class _PendingHunk:
    """A hunk while its body lines are still being read."""

    header: str
    old_start: int = 0
    old_count: int = 0
    new_start: int = 0
    new_count: int = 0
    counted: bool = False  # False if the header could not be read
    old_seen: int = 0
    new_seen: int = 0
    changes: List[DiffChange] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.counted and self.old_seen >= self.old_count and self.new_seen >= self.new_count

    def add(self, change_type: DiffChangeType, content: str) -> None:
        old_line = None
        new_line = None
        if change_type is not DiffChangeType.INSERT:
            if self.counted:
                old_line = self.old_start + self.old_seen

            self.old_seen += 1

        if change_type is not DiffChangeType.DELETE:
            if self.counted:
                new_line = self.new_start + self.new_seen

            self.new_seen += 1

        self.changes.append(DiffChange(change_type, content, old_line, new_line))

    def freeze(self) -> DiffHunk:
        return DiffHunk(
            changes=tuple(self.changes),
            header=self.header,
            old_start=self.old_start,
            old_count=self.old_count,
            new_start=self.new_start,
            new_count=self.new_count
        )


@dataclass
class _PendingFile:
    """A file while its headers and hunks are still being read."""

    git_old_path: str | None = None
    git_new_path: str | None = None
    old_path: str | None = None
    new_path: str | None = None
    saw_old_header: bool = False
    saw_new_header: bool = False
    type: DiffFileType | None = None
    old_revision: str | None = None
    new_revision: str | None = None
    old_mode: str | None = None
    new_mode: str | None = None
    is_binary: bool = False
    hunks: List[_PendingHunk] = field(default_factory=list)

    def freeze(self) -> DiffFile:
        # "---"/"+++" lines win over the "diff --git" line, even when they name /dev/null
        old_path = self.old_path if self.saw_old_header else self.git_old_path
        new_path = self.new_path if self.saw_new_header else self.git_new_path

        file_type = self.type
        if file_type is None:
            if old_path is None and new_path is not None and self.saw_old_header:
                file_type = DiffFileType.ADD

            elif new_path is None and old_path is not None and self.saw_new_header:
                file_type = DiffFileType.DELETE

            else:
                file_type = DiffFileType.MODIFY

        return DiffFile(
            old_path=old_path,
            new_path=new_path,
            hunks=tuple(hunk.freeze() for hunk in self.hunks),
            type=file_type,
            old_revision=self.old_revision,
            new_revision=self.new_revision,
            old_mode=self.old_mode,
            new_mode=self.new_mode,
            is_binary=self.is_binary
        )


class DiffParser:
    """
    Parser for unified diff text, as produced by `git diff` or `diff -u`.

    The parser accepts any input. Text that is not a diff, or is only part of
    one, produces an empty list or files with missing fields; it never raises.
    """

    HUNK_HEADER_PATTERN = re.compile(r'^@@\s+-(\d+)(?:,(\d+))?\s+\+(\d+)(?:,(\d+))?\s+@@')
    INDEX_PATTERN = re.compile(r'^index ([0-9A-Za-z]+)\.\.([0-9A-Za-z]+)(?: (\d+))?')

    def __init__(self) -> None:
        """Initialize the parser."""
        self._logger = logging.getLogger("DiffParser")

    def parse(self, diff_text: Any) -> List[DiffFile]:
        """
        Parse unified diff text into files, hunks and changes.

        Args:
            diff_text: Unified diff text. Anything other than a string parses
                as an empty diff.

        Returns:
            Parsed files in the order they appear in the diff
        """
        if not isinstance(diff_text, str):
            if diff_text is not None:
                self._logger.warning("Ignoring diff input of type %s", type(diff_text).__name__)

            return []

        lines = diff_text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
        if lines and lines[-1] == '':
            lines.pop()

        files: List[_PendingFile] = []
        hunk: _PendingHunk | None = None

        for i, line in enumerate(lines):
            if hunk is not None:
                if self._is_hunk_body(hunk, line, lines, i):
                    self._add_body_line(hunk, line)
                    continue

                hunk = None

            hunk = self._parse_header_line(files, line, lines, i)

        result = [pending.freeze() for pending in files]
        self._logger.debug("Parsed %d file(s) from %d line(s) of diff", len(result), len(lines))
        return result

    def _is_hunk_body(self, hunk: _PendingHunk, line: str, lines: List[str], index: int) -> bool:
        """
        Decide whether a line continues the current hunk.

        Args:
            hunk: The hunk being read
            line: The line to check
            lines: All lines from the diff
            index: Index of the line

        Returns:
            True if the line belongs to the hunk body
        """
        if line.startswith('diff --git ') or line.startswith('@@'):
            return False

        if hunk.is_complete:
            return False

        if not line.startswith('--- ') or index + 1 >= len(lines) or not lines[index + 1].startswith('+++ '):
            return True

        # A "---"/"+++" pair starts a new file; inside a counted hunk it must also be
        # followed by a hunk header
        if hunk.counted:
            return index + 2 >= len(lines) or not lines[index + 2].startswith('@@')

        return False

    def _add_body_line(self, hunk: _PendingHunk, line: str) -> None:
        """
        Add one body line to a hunk.

        Args:
            hunk: The hunk being read
            line: The body line, including its marker
        """
        if line.startswith('+'):
            hunk.add(DiffChangeType.INSERT, line[1:])

        elif line.startswith('-'):
            hunk.add(DiffChangeType.DELETE, line[1:])

        elif line.startswith('\\'):
            # "\ No newline at end of file"
            pass

        elif line.startswith(' '):
            hunk.add(DiffChangeType.NORMAL, line[1:])

        else:
            # Context lines sometimes lose their leading space when diffs are pasted
            hunk.add(DiffChangeType.NORMAL, line)

    def _parse_header_line(
        self,
        files: List[_PendingFile],
        line: str,
        lines: List[str],
        index: int
    ) -> _PendingHunk | None:
        """
        Handle a line that sits outside any hunk body.

        Args:
            files: Files parsed so far; may be extended
            line: The line to handle
            lines: All lines from the diff
            index: Index of the line

        Returns:
            A new hunk if the line opened one, otherwise None
        """
        current = files[-1] if files else None

        if line.startswith('diff --git '):
            old_path, new_path = self._parse_git_paths(line[len('diff --git '):])
            files.append(_PendingFile(git_old_path=old_path, git_new_path=new_path))
            return None

        if line.startswith('@@'):
            if current is None:
                current = _PendingFile()
                files.append(current)

            hunk = self._start_hunk(line, index)
            current.hunks.append(hunk)
            return hunk

        if line.startswith('--- '):
            if current is None or current.hunks or current.saw_old_header:
                current = _PendingFile()
                files.append(current)

            current.old_path = self._parse_path(line[4:])
            current.saw_old_header = True
            return None

        if line.startswith('+++ '):
            if current is None or current.hunks or current.saw_new_header:
                current = _PendingFile()
                files.append(current)

            current.new_path = self._parse_path(line[4:])
            current.saw_new_header = True
            return None

        if current is not None:
            self._parse_extended_header(current, line)

        return None

    def _parse_extended_header(self, current: _PendingFile, line: str) -> None:
        """
        Record git's extended header lines (index, modes, renames, binary markers).

        Args:
            current: The file the header belongs to
            line: The header line
        """
        if line.startswith('index '):
            match = self.INDEX_PATTERN.match(line)
            if match:
                current.old_revision = match.group(1)
                current.new_revision = match.group(2)
                if match.group(3):
                    current.old_mode = match.group(3)
                    current.new_mode = match.group(3)

        elif line.startswith('new file mode '):
            current.type = DiffFileType.ADD
            current.new_mode = line[len('new file mode '):].strip()

        elif line.startswith('deleted file mode '):
            current.type = DiffFileType.DELETE
            current.old_mode = line[len('deleted file mode '):].strip()

        elif line.startswith('old mode '):
            current.old_mode = line[len('old mode '):].strip()

        elif line.startswith('new mode '):
            current.new_mode = line[len('new mode '):].strip()

        elif line.startswith('rename from ') or line.startswith('copy from '):
            current.type = DiffFileType.RENAME if line.startswith('rename') else DiffFileType.COPY
            current.git_old_path = line.split(' from ', 1)[1]

        elif line.startswith('rename to ') or line.startswith('copy to '):
            current.git_new_path = line.split(' to ', 1)[1]

        elif line.startswith('Binary files ') or line.startswith('GIT binary patch'):
            current.is_binary = True

    def _start_hunk(self, header: str, index: int) -> _PendingHunk:
        """
        Open a hunk from its header line.

        A header that cannot be read still opens a hunk, without line counts.

        Args:
            header: The "@@" line
            index: Index of the header line in the diff

        Returns:
            The new hunk
        """
        try:
            old_start, old_count, new_start, new_count = self._parse_hunk_header(header, index + 1)

        except DiffParseError as e:
            self._logger.debug("Reading hunk at line %d without line counts: %s", e.line_number, e)
            return _PendingHunk(header=header)

        return _PendingHunk(
            header=header,
            old_start=old_start,
            old_count=old_count,
            new_start=new_start,
            new_count=new_count,
            counted=True
        )

    def _parse_hunk_header(self, header: str, line_number: int | None = None) -> Tuple[int, int, int, int]:
        """
        Parse a hunk header: @@ -old_start,old_count +new_start,new_count @@

        Args:
            header: The "@@" line
            line_number: 1-based line of the header in the diff, if known

        Returns:
            Tuple of (old_start, old_count, new_start, new_count)

        Raises:
            DiffParseError: If the header is not in unified diff format
        """
        match = self.HUNK_HEADER_PATTERN.match(header)
        if not match:
            raise DiffParseError(f"Invalid hunk header format: {header}", line_number, {"header": header})

        old_start = int(match.group(1))
        old_count = int(match.group(2)) if match.group(2) else 1
        new_start = int(match.group(3))
        new_count = int(match.group(4)) if match.group(4) else 1
        return old_start, old_count, new_start, new_count

    def _parse_git_paths(self, paths: str) -> Tuple[str | None, str | None]:
        """
        Split the paths of a "diff --git a/<old> b/<new>" line.

        Args:
            paths: Text following "diff --git "

        Returns:
            Tuple of (old path, new path); either may be None
        """
        split_at = paths.rfind(' b/')
        if split_at == -1:
            split_at = paths.rfind(' "b/')

        if split_at != -1:
            return self._parse_path(paths[:split_at]), self._parse_path(paths[split_at + 1:])

        parts = paths.split(' ')
        if len(parts) == 2:
            return self._parse_path(parts[0]), self._parse_path(parts[1])

        return None, None

    def _parse_path(self, raw: str) -> str | None:
        """
        Clean a path from a diff header.

        Handles quoting, a/ and b/ prefixes, and trailing timestamps.

        Args:
            raw: Path text from the header

        Returns:
            The path, None for /dev/null, or an empty string if only a prefix was given
        """
        path = raw.split('\t', 1)[0]
        if len(path) >= 2 and path.startswith('"') and path.endswith('"'):
            path = path[1:-1]

        if path == '/dev/null':
            return None

        if path.startswith('a/') or path.startswith('b/'):
            path = path[2:]

        return path
