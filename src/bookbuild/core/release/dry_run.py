"""No-op wrapper for release downloads."""

from pathlib import Path

from bookbuild.cli.output import user_output
from bookbuild.core.release.abc import ReleaseFetcher


class DryRunReleaseFetcher(ReleaseFetcher):
    """Prints the archive that would be downloaded instead of fetching it."""

    def __init__(self, wrapped: ReleaseFetcher) -> None:
        """Create a dry-run wrapper around a ReleaseFetcher implementation.

        ReleaseFetcher has no read-only operations, so nothing is delegated;
        the wrapped fetcher is kept so both dry-run wrappers are built the
        same way in create_context.

        Args:
            wrapped: The ReleaseFetcher implementation to wrap (usually RealReleaseFetcher)
        """
        self._wrapped = wrapped

    def fetch_and_extract(self, url: str, dest: Path) -> None:
        """No-op for the download in dry-run mode."""
        user_output(f"[DRY RUN] Would download: {url} (into {dest})")
