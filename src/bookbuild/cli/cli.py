import logging
import os

import click

from bookbuild.cli.commands.build import build_cmd
from bookbuild.cli.commands.init import init_cmd
from bookbuild.cli.commands.which import which_cmd
from bookbuild.cli.output import error_output
from bookbuild.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Enable debug logging if BOOKBUILD_DEBUG environment variable is set
DEBUG_ENV_VAR = "BOOKBUILD_DEBUG"


def configure_logging() -> None:
    if os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="bookbuild")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Build the documentation book with mdbook."""
    configure_logging()
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=False)
        except ValueError as e:
            error_output(str(e))
            raise SystemExit(1) from None


cli.add_command(build_cmd)
cli.add_command(init_cmd)
cli.add_command(which_cmd)


def main() -> None:
    """CLI entry point used by the `bookbuild` console script."""
    cli()
