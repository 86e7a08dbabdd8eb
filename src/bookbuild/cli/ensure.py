"""CLI error handling utilities with styled output.

Ensure asserts invariants in CLI commands with consistent, user-friendly error
messages. All errors use the red "Error:" prefix and exit with code 1.
"""

from pathlib import Path

from bookbuild.cli.output import error_output


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            error_output(error_message)
            raise SystemExit(1)

    @staticmethod
    def book_dir_exists(book_dir: Path) -> None:
        """Ensure the book directory exists before any step runs.

        Raises:
            SystemExit: If book_dir is missing or not a directory
        """
        if not book_dir.is_dir():
            error_output(f"Book directory not found: {book_dir}")
            raise SystemExit(1)
