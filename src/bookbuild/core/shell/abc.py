"""Shell operations interface for running the book's external tools.

This module defines the abstract interface for locating executables and running
blocking commands, following the ops pattern with ABC-based dependency
injection for testability.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Shell(ABC):
    """Abstract interface for shell operations.

    Real implementations use shutil and subprocess. Fake implementations are
    pure in-memory for unit tests that must not spawn processes.
    """

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Look up a tool on the execution search path.

        Args:
            tool_name: Command name to look up (e.g., "mdbook")

        Returns:
            Absolute path of the executable, or None if it is not on PATH
        """
        ...

    @abstractmethod
    def run_command(self, command: list[str], cwd: Path) -> int:
        """Run a command to completion and return its exit code.

        Output is not captured; whatever the command prints reaches the
        user's terminal unchanged.

        Args:
            command: Command and arguments to execute
            cwd: Working directory for the command

        Returns:
            Exit code of the process. 127 if the executable does not exist,
            126 if it exists but cannot be executed.
        """
        ...
