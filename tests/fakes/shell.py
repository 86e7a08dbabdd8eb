"""Fake implementation of Shell for testing.

This fake enables testing the build pipeline without spawning processes or
depending on which tools happen to be installed.
"""

from pathlib import Path

from bookbuild.core.shell.abc import Shell


class FakeShell(Shell):
    """In-memory fake implementation of shell operations.

    Constructor Injection:
    - All state is provided via constructor parameters
    - Only call tracking changes after construction

    Examples:
        # mdbook installed, every command succeeds
        >>> shell = FakeShell(installed_tools={"mdbook": "/usr/bin/mdbook"})

        # Pre-build helper fails with exit code 2
        >>> shell = FakeShell(exit_codes={"./ci/build-highlight-js": 2})
    """

    def __init__(
        self,
        *,
        installed_tools: dict[str, str] | None = None,
        exit_codes: dict[str, int] | None = None,
    ) -> None:
        """Initialize fake with predetermined tool availability and exit codes.

        Args:
            installed_tools: Mapping of tool name to executable path. Tools not in
                this mapping are reported as missing from PATH
            exit_codes: Mapping of program (first element of the command) to the
                exit code run_command() returns for it. Unlisted programs exit 0
        """
        self._installed_tools = installed_tools or {}
        self._exit_codes = exit_codes or {}
        self._lookup_calls: list[str] = []
        self._command_calls: list[tuple[list[str], Path]] = []
        self._process_cwds: list[Path] = []

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the tool path if configured, None otherwise."""
        self._lookup_calls.append(tool_name)
        return self._installed_tools.get(tool_name)

    def run_command(self, command: list[str], cwd: Path) -> int:
        """Track call to run_command and return the configured exit code.

        Also records the process working directory at call time so tests can
        check the command ran inside the entered directory.
        """
        self._command_calls.append((list(command), cwd))
        self._process_cwds.append(Path.cwd())
        return self._exit_codes.get(command[0], 0)

    @property
    def lookup_calls(self) -> list[str]:
        """Tool names passed to get_installed_tool_path(), for test assertions."""
        return self._lookup_calls.copy()

    @property
    def command_calls(self) -> list[tuple[list[str], Path]]:
        """Get the list of run_command() calls that were made.

        Returns list of (command, cwd) tuples.

        This property is for test assertions only.
        """
        return self._command_calls.copy()

    @property
    def commands(self) -> list[list[str]]:
        """Commands passed to run_command(), without their cwd."""
        return [command for command, _ in self._command_calls]

    @property
    def process_cwds(self) -> list[Path]:
        """Path.cwd() observed at each run_command() call."""
        return self._process_cwds.copy()
