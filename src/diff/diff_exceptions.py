"""Exceptions raised while reading submitted diffs."""

from typing import Any


class DiffError(Exception):
    """Base exception for diff handling."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class DiffParseError(DiffError):
    """
    Raised when part of a diff cannot be read.

    The parser catches these itself; they carry the 1-based line of the diff
    that could not be read so that the fault can be logged against it.
    """

    def __init__(self, message: str, line_number: int | None = None, error_details: dict[str, Any] | None = None):
        details = dict(error_details or {})
        if line_number is not None:
            details["line"] = line_number

        super().__init__(message, details or None)
        self.line_number = line_number
