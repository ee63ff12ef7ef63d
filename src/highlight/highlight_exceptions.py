"""Custom exceptions for syntax highlighting."""

from typing import Any


class HighlightError(Exception):
    """Base exception for highlighting failures."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class HighlightLanguageError(HighlightError):
    """Raised when no grammar is registered for a language."""
