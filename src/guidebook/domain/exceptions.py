"""
Guidelines-specific exceptions.

These exceptions are raised during guideline loading, parsing, and querying.
"""

from typing import Optional


class GuidelinesError(Exception):
    """Base class for every error raised by the guideline knowledge base."""
    pass


class GuidelinesLoadError(GuidelinesError):
    """
    Raised when a guidelines source exists but cannot be loaded.

    This indicates issues such as:
    - File specified but not found
    - File not readable as UTF-8 text
    - Source text that cannot be parsed (see MalformedSourceError)
    """
    pass


class MalformedSourceError(GuidelinesLoadError):
    """
    Raised when source text cannot be partitioned into the fixed categories.

    Fatal: a store is never built from a partially parsed source.
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class GuidelinesQueryError(GuidelinesError, ValueError):
    """Raised when a query against a loaded store is invalid."""
    pass


class InvalidCategoryError(GuidelinesQueryError):
    """Raised when a category string is outside the fixed enumeration."""
    pass


class UnknownContextError(GuidelinesQueryError):
    """Raised when a development context name is not known."""
    pass


class GuidelineNotFoundError(GuidelinesQueryError):
    """Raised when no entry carries the requested ID."""
    pass
