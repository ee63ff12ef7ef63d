"""Highlighting that falls back to plain text instead of failing."""

import html
import logging

from highlight.highlight_exceptions import HighlightLanguageError
from highlight.highlight_fragment import HighlightFragment
from highlight.highlighter import Highlighter, PygmentsHighlighter


class HighlightAdapter:
    """
    Wrap a highlighter so that highlighting never fails.

    Highlighting only improves presentation. If the highlighter has no grammar
    for a language, or fails in any other way, the text is shown escaped but
    otherwise unchanged.
    """

    def __init__(self, highlighter: Highlighter | None = None) -> None:
        """
        Initialize the adapter.

        Args:
            highlighter: Highlighter to delegate to; a PygmentsHighlighter if None
        """
        self._logger = logging.getLogger("HighlightAdapter")
        self._highlighter = highlighter if highlighter is not None else PygmentsHighlighter()

    @property
    def highlighter(self) -> Highlighter:
        return self._highlighter

    def highlight(self, text: str, language: str) -> HighlightFragment:
        """
        Highlight text, or return it as plain markup if highlighting fails.

        Args:
            text: Source text
            language: Language identifier

        Returns:
            Fragment holding the markup. Empty text gives an empty fragment
            without calling the highlighter.
        """
        if not text:
            return HighlightFragment("", False, language)

        try:
            markup = self._highlighter.highlight(text, language)

        except HighlightLanguageError as e:
            self._logger.info("Showing plain text: %s", e)
            return self.plain(text, language)

        except Exception as e:
            self._logger.exception("Highlighter failed for language %s: %s", language, str(e))
            return self.plain(text, language)

        if not isinstance(markup, str):
            self._logger.warning(
                "Highlighter returned %s for language %s, showing plain text",
                type(markup).__name__,
                language
            )
            return self.plain(text, language)

        return HighlightFragment(markup, True, language)

    def plain(self, text: str, language: str) -> HighlightFragment:
        """
        Build an unhighlighted fragment.

        Args:
            text: Source text
            language: Language identifier to record on the fragment

        Returns:
            Fragment holding the HTML-escaped text
        """
        return HighlightFragment(html.escape(text), False, language)
