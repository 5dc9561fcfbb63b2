"""
Progress reporter implementations for different output contexts.

Provides three implementations:
- RichProgressReporter: Interactive terminal with colors
- CIProgressReporter: CI-friendly with simple lines, no ANSI
- NullProgressReporter: Silent for tests
"""

import sys

from .console import err_console


class RichProgressReporter:
    """
    Interactive terminal reporter using Rich library.

    Status messages go to stderr so query output on stdout stays pipeable.
    """

    def info(self, message: str) -> None:
        """Display an informational message."""
        err_console.print(f"[info]{message}[/info]")

    def warning(self, message: str) -> None:
        """Display a warning message."""
        err_console.print(f"[warning]{message}[/warning]")

    def success(self, message: str) -> None:
        """Display a success message."""
        err_console.print(f"[success]{message}[/success]")


class CIProgressReporter:
    """
    CI-friendly reporter with simple line output.

    Uses plain print() without ANSI codes for compatibility with CI logs.
    """

    def info(self, message: str) -> None:
        """Display an informational message."""
        print(f"[INFO] {message}", file=sys.stderr)

    def warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARNING] {message}", file=sys.stderr)

    def success(self, message: str) -> None:
        """Display a success message."""
        print(f"[SUCCESS] {message}", file=sys.stderr)


class NullProgressReporter:
    """
    Silent reporter for tests.

    All methods are no-ops.
    """

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass
