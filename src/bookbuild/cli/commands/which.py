from pathlib import Path

import click

from bookbuild.cli.output import machine_output, user_output
from bookbuild.core.context import BookBuildContext
from bookbuild.core.tool import find_installed_tool


@click.command(name="which")
@click.option(
    "--book-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Book directory, relative to the current directory (default: book)",
)
@click.pass_obj
def which_cmd(ctx: BookBuildContext, book_dir: Path | None) -> None:
    """Show which mdbook a build would use, without downloading anything.

    The path of the installed tool (or the URL a build would download) goes to
    stdout; the explanation goes to stderr.
    """
    if book_dir is not None:
        ctx = ctx.with_book_dir(book_dir)

    release = ctx.config.release
    installed = find_installed_tool(ctx.shell, release.name)

    if installed is not None:
        user_output(f"{release.name}: installed")
        machine_output(installed.path)
        return

    user_output(f"{release.name}: not on PATH, a build would download {release.version}")
    machine_output(release.url)
    user_output(f"  into {ctx.book_dir / release.binary_name}")
