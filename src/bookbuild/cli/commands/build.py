"""Build command - pre-build assets, resolve mdbook and build the book."""

import time
from dataclasses import replace
from pathlib import Path

import click

from bookbuild.cli.ensure import Ensure
from bookbuild.cli.output import format_build_summary, print_panel, user_output
from bookbuild.core.context import BookBuildContext
from bookbuild.core.orchestrator import run_build
from bookbuild.core.release.dry_run import DryRunReleaseFetcher
from bookbuild.core.shell.dry_run import DryRunShell


def _as_dry_run(ctx: BookBuildContext) -> BookBuildContext:
    if ctx.dry_run:
        return ctx
    return replace(
        ctx,
        shell=DryRunShell(ctx.shell),
        fetcher=DryRunReleaseFetcher(ctx.fetcher),
        dry_run=True,
    )


@click.command(name="build")
@click.option(
    "--book-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Book directory, relative to the current directory (default: book)",
)
@click.option("--dry-run", is_flag=True, help="Show what would be done without running anything")
@click.option("--summary/--no-summary", default=True, help="Print a summary box at the end")
@click.pass_obj
def build_cmd(
    ctx: BookBuildContext, book_dir: Path | None, dry_run: bool, summary: bool
) -> None:
    """Build the book.

    Runs the highlight.js pre-build helper, uses mdbook from PATH (or
    downloads the pinned release into the book directory when it is
    missing) and runs `mdbook build`. Stops at the first failing step and
    exits with its exit code.
    """
    if book_dir is not None:
        ctx = ctx.with_book_dir(book_dir)
    if dry_run:
        ctx = _as_dry_run(ctx)
        user_output("[DRY RUN MODE - No changes will be made]\n")

    Ensure.book_dir_exists(ctx.book_dir)

    start_time = time.monotonic()
    try:
        outcome = run_build(ctx)
    except KeyboardInterrupt:
        user_output("\n✗ Interrupted by user")
        raise SystemExit(130) from None
    duration = time.monotonic() - start_time

    if summary:
        print_panel(
            format_build_summary(
                success=outcome.success,
                duration=duration,
                tool_description=outcome.tool.describe() if outcome.tool is not None else None,
                failed_step=outcome.failed_step.value if outcome.failed_step is not None else None,
                exit_code=outcome.exit_code,
            )
        )

    if not outcome.success:
        raise SystemExit(outcome.exit_code)
