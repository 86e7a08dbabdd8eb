import click

from bookbuild.cli.config import CONFIG_FILENAME, default_config, save_config
from bookbuild.cli.ensure import Ensure
from bookbuild.cli.output import user_output
from bookbuild.core.context import BookBuildContext


@click.command(name="init")
@click.option("--force", is_flag=True, help=f"Overwrite an existing {CONFIG_FILENAME}")
@click.pass_obj
def init_cmd(ctx: BookBuildContext, force: bool) -> None:
    """Write a bookbuild.toml with the default settings."""
    cfg_path = ctx.cwd / CONFIG_FILENAME
    Ensure.invariant(
        force or not cfg_path.exists(),
        f"{cfg_path} already exists - use --force to overwrite it",
    )

    written = save_config(ctx.cwd, default_config())
    user_output(f"✓ Wrote {written}")
