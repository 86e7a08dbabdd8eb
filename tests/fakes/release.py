"""Fake ReleaseFetcher implementation for testing.

FakeReleaseFetcher records download requests and, optionally, drops a stub
binary into the destination instead of touching the network.
"""

from pathlib import Path

from bookbuild.core.release.abc import ReleaseFetcher, ReleaseFetchError


class FakeReleaseFetcher(ReleaseFetcher):
    """In-memory fake that tracks fetches without downloading.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        error: ReleaseFetchError | None = None,
        extracted_files: tuple[str, ...] = ("mdbook",),
    ) -> None:
        """Create FakeReleaseFetcher.

        Args:
            error: If set, fetch_and_extract() raises it after recording the call
            extracted_files: Names of empty files created in dest on success
        """
        self._error = error
        self._extracted_files = extracted_files
        self._fetch_calls: list[tuple[str, Path]] = []

    @property
    def fetch_calls(self) -> list[tuple[str, Path]]:
        """Get the list of (url, dest) pairs passed to fetch_and_extract().

        This property is for test assertions only.
        """
        return self._fetch_calls.copy()

    def fetch_and_extract(self, url: str, dest: Path) -> None:
        self._fetch_calls.append((url, dest))
        if self._error is not None:
            raise self._error
        for name in self._extracted_files:
            (dest / name).touch()
