"""Real shell operations using shutil and subprocess."""

import logging
import shutil
import subprocess
from pathlib import Path

from bookbuild.core.shell.abc import Shell

logger = logging.getLogger(__name__)

# Exit codes a POSIX shell reports for commands it cannot start
COMMAND_NOT_FOUND_EXIT_CODE = 127
COMMAND_NOT_EXECUTABLE_EXIT_CODE = 126
# A process killed by signal N exits with 128 + N
SIGNAL_EXIT_CODE_BASE = 128


class RealShell(Shell):
    """Production implementation that runs commands via subprocess.run().

    Commands inherit stdin/stdout/stderr so tool diagnostics reach the user
    as-is. No timeout is applied; a run blocks until the process exits.
    """

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the PATH location of tool_name using shutil.which."""
        path = shutil.which(tool_name)
        logger.debug("Tool lookup: name=%s, path=%s", tool_name, path)
        return path

    def run_command(self, command: list[str], cwd: Path) -> int:
        """Run command in cwd and return its exit code.

        A missing or non-executable program is reported through the exit
        code, the same way the shell would, rather than raised. A process
        killed by a signal reports 128 + signal number, as bash does.
        """
        logger.debug("Running command: %s (cwd=%s)", command, cwd)
        try:
            result = subprocess.run(command, cwd=cwd, check=False)
        except FileNotFoundError:
            logger.debug("Command not found: %s", command[0])
            return COMMAND_NOT_FOUND_EXIT_CODE
        except PermissionError:
            logger.debug("Command not executable: %s", command[0])
            return COMMAND_NOT_EXECUTABLE_EXIT_CODE

        exit_code = result.returncode
        if exit_code < 0:
            exit_code = SIGNAL_EXIT_CODE_BASE - exit_code
        logger.debug("Command finished: %s -> %d", command, exit_code)
        return exit_code
