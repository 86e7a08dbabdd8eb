"""Release download interface for fetching a pinned tool archive.

Defines the abstract interface for downloading a gzipped tarball and unpacking
it into a directory, plus the value type describing which archive to fetch.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


class ReleaseFetchError(RuntimeError):
    """Raised when a release archive cannot be downloaded or extracted."""


@dataclass(frozen=True)
class PinnedRelease:
    """A specific, hard-coded release of a tool for one platform.

    The URL is derived from url_template by substituting {name}, {version}
    and {platform}. The archive is expected to contain the binary at its top
    level, named after the tool.
    """

    name: str
    version: str
    platform: str
    url_template: str

    @property
    def url(self) -> str:
        return self.url_template.format(
            name=self.name, version=self.version, platform=self.platform
        )

    @property
    def binary_name(self) -> str:
        return self.name


class ReleaseFetcher(ABC):
    """Abstract interface for fetching release archives."""

    @abstractmethod
    def fetch_and_extract(self, url: str, dest: Path) -> None:
        """Download a .tar.gz archive and extract it into dest.

        No checksum or signature verification is performed.

        Args:
            url: Location of the archive
            dest: Existing directory to extract into

        Raises:
            ReleaseFetchError: If the download or the extraction fails
        """
        ...
