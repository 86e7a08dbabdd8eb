"""Real release fetcher using httpx for the download and tarfile to unpack."""

import logging
import tarfile
import tempfile
from pathlib import Path
from typing import IO

import httpx

from bookbuild.core.release.abc import ReleaseFetcher, ReleaseFetchError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class RealReleaseFetcher(ReleaseFetcher):
    """Streams an archive over HTTP(S) and extracts it with tarfile.

    Redirects are followed (release hosts answer with a redirect to a CDN)
    and no timeout is applied. Nothing is retried.

    Example:
        fetcher = RealReleaseFetcher()
        fetcher.fetch_and_extract(release.url, Path.cwd())
    """

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        """Create a fetcher.

        Args:
            transport: Optional httpx transport, used by tests to serve
                archives without touching the network
        """
        self._transport = transport

    def fetch_and_extract(self, url: str, dest: Path) -> None:
        logger.debug("Fetching release archive: url=%s, dest=%s", url, dest)
        with tempfile.TemporaryFile() as archive:
            self._download(url, archive)
            archive.seek(0)
            self._extract(url, archive, dest)

    def _download(self, url: str, archive: IO[bytes]) -> None:
        try:
            with httpx.Client(
                transport=self._transport, follow_redirects=True, timeout=None
            ) as client:
                with client.stream("GET", url) as response:
                    response.raise_for_status()
                    size = 0
                    for chunk in response.iter_bytes(CHUNK_SIZE):
                        archive.write(chunk)
                        size += len(chunk)
        except httpx.HTTPStatusError as e:
            raise ReleaseFetchError(
                f"Failed to download release archive\n"
                f"URL: {url}\n"
                f"Status: {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise ReleaseFetchError(
                f"Failed to download release archive\nURL: {url}\nError: {e}"
            ) from e
        except OSError as e:
            raise ReleaseFetchError(
                f"Failed to store release archive\nURL: {url}\nError: {e}"
            ) from e

        logger.debug("Downloaded %d bytes from %s", size, url)

    def _extract(self, url: str, archive: IO[bytes], dest: Path) -> None:
        try:
            with tarfile.open(fileobj=archive, mode="r:gz") as tar:
                members = tar.getnames()
                tar.extractall(dest, filter="data")
        except (tarfile.TarError, OSError) as e:
            raise ReleaseFetchError(
                f"Failed to extract release archive\nURL: {url}\nError: {e}"
            ) from e

        logger.debug("Extracted %s into %s", members, dest)
