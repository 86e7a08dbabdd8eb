"""Documentation tool resolution.

The tool is resolved once per run, either to the copy already on PATH or to a
pinned release unpacked into the book directory, and the result is passed
explicitly to the build step.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from bookbuild.cli.output import user_output
from bookbuild.core.release.abc import PinnedRelease, ReleaseFetcher
from bookbuild.core.shell.abc import Shell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstalledTool:
    """Tool found on PATH; invoked by name."""

    command: str
    path: str

    def describe(self) -> str:
        return f"{self.command} ({self.path})"


@dataclass(frozen=True)
class DownloadedTool:
    """Tool unpacked from a pinned release; invoked by relative path."""

    command: str
    release: PinnedRelease

    def describe(self) -> str:
        return f"{self.command} (downloaded {self.release.version})"


ResolvedTool = InstalledTool | DownloadedTool


def find_installed_tool(shell: Shell, tool_name: str) -> InstalledTool | None:
    """Return the installed tool if tool_name is on PATH."""
    path = shell.get_installed_tool_path(tool_name)
    if path is None:
        return None
    return InstalledTool(command=tool_name, path=path)


def resolve_tool(
    shell: Shell, fetcher: ReleaseFetcher, release: PinnedRelease, dest: Path
) -> ResolvedTool:
    """Resolve the documentation tool, downloading it if it is not installed.

    PATH is never modified; a downloaded binary only affects this run.

    Args:
        shell: Used for the PATH lookup
        fetcher: Used to download the pinned release when the lookup fails
        release: Archive to download when the tool is missing
        dest: Directory the archive is extracted into (the book directory)

    Returns:
        InstalledTool when found on PATH, DownloadedTool otherwise

    Raises:
        ReleaseFetchError: If the fallback download or extraction fails
    """
    installed = find_installed_tool(shell, release.name)
    if installed is not None:
        logger.debug("Using installed tool: %s", installed.path)
        return installed

    user_output(f"Installing {release.name}..")
    fetcher.fetch_and_extract(release.url, dest)
    downloaded = DownloadedTool(command=f"./{release.binary_name}", release=release)
    logger.debug("Using downloaded tool: %s from %s", downloaded.command, release.url)
    return downloaded
