from bookbuild.core.release.abc import PinnedRelease, ReleaseFetcher, ReleaseFetchError
from bookbuild.core.release.dry_run import DryRunReleaseFetcher
from bookbuild.core.release.real import RealReleaseFetcher

__all__ = [
    "DryRunReleaseFetcher",
    "PinnedRelease",
    "RealReleaseFetcher",
    "ReleaseFetchError",
    "ReleaseFetcher",
]
