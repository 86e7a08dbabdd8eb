from bookbuild.core.shell.abc import Shell
from bookbuild.core.shell.dry_run import DryRunShell
from bookbuild.core.shell.real import RealShell

__all__ = [
    "DryRunShell",
    "RealShell",
    "Shell",
]
