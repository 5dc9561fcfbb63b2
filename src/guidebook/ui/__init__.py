"""
UI layer for Guidebook.

Contains console output and progress reporting.
"""

from .console import console, err_console, GUIDEBOOK_THEME, BRAND_BORDER
from .progress import RichProgressReporter, CIProgressReporter, NullProgressReporter
from .render import render_entries, render_categories

__all__ = [
    "console",
    "err_console",
    "GUIDEBOOK_THEME",
    "BRAND_BORDER",
    "RichProgressReporter",
    "CIProgressReporter",
    "NullProgressReporter",
    "render_entries",
    "render_categories",
]
