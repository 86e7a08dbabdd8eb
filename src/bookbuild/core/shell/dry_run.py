"""No-op wrapper for shell operations."""

from pathlib import Path

from bookbuild.cli.output import user_output
from bookbuild.core.shell.abc import Shell


class DryRunShell(Shell):
    """No-op wrapper that prevents execution of commands.

    Tool lookups are read-only and delegate to the wrapped implementation.
    Command execution prints what would have run and reports success.

    Usage:
        real_shell = RealShell()
        noop_shell = DryRunShell(real_shell)

        # Prints instead of running mdbook
        noop_shell.run_command(["mdbook", "build"], book_dir)
    """

    def __init__(self, wrapped: Shell) -> None:
        """Create a dry-run wrapper around a Shell implementation.

        Args:
            wrapped: The Shell implementation to wrap (usually RealShell)
        """
        self._wrapped = wrapped

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Look up tool (read-only, delegates to wrapped)."""
        return self._wrapped.get_installed_tool_path(tool_name)

    def run_command(self, command: list[str], cwd: Path) -> int:
        """Print the command instead of running it."""
        user_output(f"[DRY RUN] Would run: {' '.join(command)} (in {cwd})")
        return 0
