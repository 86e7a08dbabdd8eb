"""Scoped working-directory changes."""

import logging
import os
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


@contextmanager
def change_directory(target_dir: Path) -> Generator[Path]:
    """Change into target_dir for the duration of the with block.

    This context manager:
    1. Saves the original directory
    2. Changes to the target directory
    3. Restores the original directory on exit (even if an exception is raised)

    Yields:
        The resolved target directory

    Example:
        with change_directory(repo_root / "book") as book_dir:
            shell.run_command(["mdbook", "build"], book_dir)
        # Automatically restored to original directory
    """
    original_dir = Path.cwd()
    os.chdir(target_dir)
    entered = Path.cwd()
    logger.debug("Entered directory: %s (from %s)", entered, original_dir)

    try:
        yield entered
    finally:
        os.chdir(original_dir)
        logger.debug("Restored directory: %s", original_dir)
