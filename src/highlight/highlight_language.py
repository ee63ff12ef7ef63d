"""
Choose a highlighting language for a file from its path.

Only a small set of extensions is recognised; every other path maps to a
single default language so that each file always gets exactly one answer.
"""

import logging
from typing import Dict, List


class LanguageResolver:
    """
    Map file paths to highlighting language identifiers.

    Identifiers are Pygments lexer aliases.
    """

    # Mapping from lower-case file extensions (without the dot) to languages
    DEFAULT_EXTENSIONS: Dict[str, str] = {
        "css": "css",
        "html": "html",
        "javascript": "javascript",
        "js": "javascript",
        "json": "json",
        "jsx": "jsx",
    }

    DEFAULT_LANGUAGE = "javascript"

    def __init__(
        self,
        extensions: Dict[str, str] | None = None,
        default_language: str | None = None
    ) -> None:
        """
        Initialize the resolver.

        Args:
            extensions: Extension to language mapping; the built-in allow-list if None
            default_language: Language for unrecognised paths; javascript if None
        """
        self._logger = logging.getLogger("LanguageResolver")
        source = self.DEFAULT_EXTENSIONS if extensions is None else extensions
        self._extensions = {ext.lower().lstrip('.'): language for ext, language in source.items()}
        self._default_language = default_language or self.DEFAULT_LANGUAGE

    @property
    def default_language(self) -> str:
        return self._default_language

    def get_supported_extensions(self) -> List[str]:
        """
        Get the recognised extensions.

        Returns:
            Sorted list of extensions without leading dots
        """
        return sorted(self._extensions)

    def resolve(self, path: str | None) -> str:
        """
        Pick the highlighting language for a path.

        The extension is whatever follows the final "." in the path.

        Args:
            path: File path, or None

        Returns:
            The language for the extension, or the default language if the path
            is missing, has no extension, or its extension is not recognised
        """
        if not path or '.' not in path:
            return self._default_language

        extension = path.rsplit('.', 1)[1].lower()
        language = self._extensions.get(extension)
        if language is None:
            self._logger.debug("No language for extension '%s', using %s", extension, self._default_language)
            return self._default_language

        return language


_default_resolver = LanguageResolver()


def resolve_language(path: str | None) -> str:
    """
    Pick the highlighting language for a path using the built-in allow-list.

    Args:
        path: File path, or None

    Returns:
        Language identifier
    """
    return _default_resolver.resolve(path)
