"""
Port interfaces (protocols) for Guidebook.

These define the contracts that UI implementations must satisfy.
"""

from typing import Protocol


class ProgressReporter(Protocol):
    """User-facing status output, decoupled from how it is displayed."""

    def info(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def success(self, message: str) -> None:
        ...
