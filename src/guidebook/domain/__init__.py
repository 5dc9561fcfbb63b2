"""
Domain layer for Guidebook.

Contains all domain models and exceptions with no I/O.
"""

from .models import (
    GuidelineCategory,
    GuidelineEntry,
    GuidelineExample,
    GuidelineSourceInfo,
)
from .exceptions import (
    GuidelinesError,
    GuidelinesLoadError,
    MalformedSourceError,
    GuidelinesQueryError,
    InvalidCategoryError,
    UnknownContextError,
    GuidelineNotFoundError,
)

__all__ = [
    # Models
    "GuidelineCategory",
    "GuidelineEntry",
    "GuidelineExample",
    "GuidelineSourceInfo",
    # Exceptions
    "GuidelinesError",
    "GuidelinesLoadError",
    "MalformedSourceError",
    "GuidelinesQueryError",
    "InvalidCategoryError",
    "UnknownContextError",
    "GuidelineNotFoundError",
]
