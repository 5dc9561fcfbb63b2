"""
Guidelines package.

This package provides parsing and indexing of guideline source documents.
The main entry point is the GuidelineStore class, built once from markdown
text and queried by category, keyword or development context afterwards.

Public API:
    GuidelineStore: Immutable index over guideline entries
    GuidelinesParser: Parser for guideline markdown (typically used internally)
    load: Shortcut for GuidelineStore.load
    DevelopmentContext: Named tasks that map onto categories
"""

from .store import GuidelineStore, load
from .parser import GuidelinesParser
from .categories import DevelopmentContext, categories_for_context
from .formatting import entry_to_dict, format_entries_markdown

__all__ = [
    'GuidelineStore',
    'GuidelinesParser',
    'load',
    'DevelopmentContext',
    'categories_for_context',
    'entry_to_dict',
    'format_entries_markdown',
]
