"""Application context with dependency injection."""

from dataclasses import dataclass, replace
from pathlib import Path

from bookbuild.cli.config import LoadedConfig, load_config
from bookbuild.core.release.abc import ReleaseFetcher
from bookbuild.core.release.dry_run import DryRunReleaseFetcher
from bookbuild.core.release.real import RealReleaseFetcher
from bookbuild.core.shell.abc import Shell
from bookbuild.core.shell.dry_run import DryRunShell
from bookbuild.core.shell.real import RealShell


@dataclass(frozen=True)
class BookBuildContext:
    """Immutable context holding all dependencies for bookbuild operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    shell: Shell
    fetcher: ReleaseFetcher
    config: LoadedConfig
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool

    @property
    def book_dir(self) -> Path:
        """Absolute book directory the build runs in."""
        return self.cwd / self.config.book_dir

    def with_book_dir(self, book_dir: Path) -> "BookBuildContext":
        """Return a copy of this context building a different book directory."""
        return replace(self, config=replace(self.config, book_dir=book_dir))

    @staticmethod
    def for_test(
        *,
        shell: Shell,
        fetcher: ReleaseFetcher,
        cwd: Path,
        config: LoadedConfig | None = None,
        dry_run: bool = False,
    ) -> "BookBuildContext":
        """Create a context for tests, defaulting config to the built-in defaults."""
        from bookbuild.cli.config import default_config

        return BookBuildContext(
            shell=shell,
            fetcher=fetcher,
            config=config if config is not None else default_config(),
            cwd=cwd,
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool) -> BookBuildContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap the shell and fetcher so nothing is executed
            or downloaded

    Returns:
        BookBuildContext with real implementations, wrapped in dry-run
        wrappers if dry_run=True

    Raises:
        ValueError: If bookbuild.toml in the current directory is malformed
    """
    cwd = Path.cwd()
    config = load_config(cwd)

    shell: Shell = RealShell()
    fetcher: ReleaseFetcher = RealReleaseFetcher()

    if dry_run:
        shell = DryRunShell(shell)
        fetcher = DryRunReleaseFetcher(fetcher)

    return BookBuildContext(
        shell=shell,
        fetcher=fetcher,
        config=config,
        cwd=cwd,
        dry_run=dry_run,
    )
