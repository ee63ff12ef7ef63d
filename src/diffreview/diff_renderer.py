"""Turn diff text into highlighted per-file views."""

import logging
from typing import List, Sequence

from diff.diff_content import extract_new_content, extract_new_lines
from diff.diff_parser import DiffParser
from diff.diff_types import DiffFile
from highlight.highlight_adapter import HighlightAdapter
from highlight.highlight_language import LanguageResolver
from highlight.highlighter import PygmentsHighlighter

from diffreview.display_unit import DisplayUnit
from diffreview.review_settings import ReviewSettings


class DiffRenderer:
    """
    Build display units from parsed diffs.

    Holds only configuration, so one renderer can serve any number of
    diffs, including from several threads at once.
    """

    def __init__(
        self,
        parser: DiffParser | None = None,
        resolver: LanguageResolver | None = None,
        adapter: HighlightAdapter | None = None
    ) -> None:
        """
        Initialize the renderer.

        Args:
            parser: Diff parser; a new DiffParser if None
            resolver: Language resolver; the built-in allow-list if None
            adapter: Highlight adapter; Pygments-backed if None
        """
        self._logger = logging.getLogger("DiffRenderer")
        self._parser = parser if parser is not None else DiffParser()
        self._resolver = resolver if resolver is not None else LanguageResolver()
        self._adapter = adapter if adapter is not None else HighlightAdapter()

    @classmethod
    def from_settings(cls, settings: ReviewSettings) -> "DiffRenderer":
        """
        Create a renderer configured from review settings.

        Args:
            settings: Settings to apply

        Returns:
            Configured renderer
        """
        resolver = LanguageResolver(settings.language_extensions, settings.default_language)
        highlighter = PygmentsHighlighter(style=settings.style, css_class=settings.css_class)
        return cls(resolver=resolver, adapter=HighlightAdapter(highlighter))

    @property
    def adapter(self) -> HighlightAdapter:
        return self._adapter

    def render(self, diff_text: str | None) -> List[DisplayUnit]:
        """
        Parse diff text and build its display units.

        Args:
            diff_text: Unified diff text; may be empty, partial or not a diff

        Returns:
            Display units in diff order; empty if nothing can be shown
        """
        return self.assemble(self._parser.parse(diff_text))

    def assemble(self, files: Sequence[DiffFile] | None) -> List[DisplayUnit]:
        """
        Build display units for parsed files.

        Files without hunks or without a new path are skipped.

        Args:
            files: Parsed files

        Returns:
            One display unit per renderable file, in input order
        """
        units: List[DisplayUnit] = []
        if not files:
            return units

        for diff_file in files:
            if not diff_file.is_renderable:
                self._logger.debug(
                    "Skipping file %r -> %r with %d hunk(s)",
                    diff_file.old_path,
                    diff_file.new_path,
                    len(diff_file.hunks)
                )
                continue

            # is_renderable guarantees a non-empty new path
            title = diff_file.new_path or ""
            language = self._resolver.resolve(title)
            text = extract_new_content(diff_file)
            body = self._adapter.highlight(text, language)
            units.append(DisplayUnit(
                title=title,
                body=body,
                index=len(units),
                language=language,
                text=text,
                line_count=len(extract_new_lines(diff_file))
            ))

        return units


_default_renderer: DiffRenderer | None = None


def render_diff(diff_text: str | None) -> List[DisplayUnit]:
    """
    Render diff text with the default renderer.

    Args:
        diff_text: Unified diff text

    Returns:
        Display units in diff order
    """
    global _default_renderer  # pylint: disable=global-statement
    if _default_renderer is None:
        _default_renderer = DiffRenderer()

    return _default_renderer.render(diff_text)
