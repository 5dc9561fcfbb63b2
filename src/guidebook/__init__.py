"""
Guidebook - guideline knowledge base for AI coding assistants.

Indexes a categorized guidance document and surfaces the rules relevant to
a development task.
"""

from .core.guidelines import GuidelineStore, load
from .domain import (
    GuidelineCategory,
    GuidelineEntry,
    GuidelineExample,
    GuidelinesError,
    GuidelinesLoadError,
    MalformedSourceError,
    InvalidCategoryError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "GuidelineStore",
    "load",
    "GuidelineCategory",
    "GuidelineEntry",
    "GuidelineExample",
    "GuidelinesError",
    "GuidelinesLoadError",
    "MalformedSourceError",
    "InvalidCategoryError",
]
