"""
Services layer for Guidebook.

Contains source resolution and store construction.
"""

from .guidelines import GuidelinesProvider

__all__ = [
    "GuidelinesProvider",
]
