"""Syntax highlighters that turn source text into HTML markup."""

from abc import ABC, abstractmethod
import logging

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from highlight.highlight_exceptions import HighlightLanguageError


class Highlighter(ABC):
    """Abstract base class for syntax highlighters."""

    @abstractmethod
    def highlight(self, text: str, language: str) -> str:
        """
        Highlight source text.

        Args:
            text: Source text to highlight
            language: Language identifier

        Returns:
            HTML markup for the text

        Raises:
            HighlightLanguageError: If no grammar is registered for the language
        """


class PygmentsHighlighter(Highlighter):
    """Highlighter backed by Pygments lexers and its HTML formatter."""

    def __init__(self, style: str = "default", css_class: str = "highlight") -> None:
        """
        Initialize the highlighter.

        Args:
            style: Pygments style name; "default" is used if the name is unknown
            css_class: CSS class the style sheet is scoped to
        """
        self._logger = logging.getLogger("PygmentsHighlighter")
        self._css_class = css_class

        try:
            self._formatter = HtmlFormatter(nowrap=True, style=style, cssclass=css_class)

        except ClassNotFound:
            self._logger.warning("Unknown Pygments style '%s', using default", style)
            self._formatter = HtmlFormatter(nowrap=True, cssclass=css_class)

    @property
    def css_class(self) -> str:
        return self._css_class

    def highlight(self, text: str, language: str) -> str:
        try:
            # Keep leading and trailing newlines so the markup lines up with the source
            lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)

        except ClassNotFound as e:
            raise HighlightLanguageError(
                f"No lexer registered for language: {language}",
                {"language": language}
            ) from e

        return pygments_highlight(text, lexer, self._formatter)

    def style_defs(self) -> str:
        """
        Get the CSS rules for the configured style.

        Returns:
            Style sheet text scoped to the highlighter's CSS class
        """
        return self._formatter.get_style_defs(f".{self._css_class}")
