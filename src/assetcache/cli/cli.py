import logging
from pathlib import Path

import click

from assetcache.cli.commands.cache import cache_group
from assetcache.cli.commands.precompile import precompile_cmd
from assetcache.cli.commands.status import status_cmd
from assetcache.cli.commands.sweep import sweep_cmd
from assetcache.cli.commands.touch import touch_cmd
from assetcache.cli.config import ConfigError
from assetcache.core.context import create_context
from assetcache.output import user_output

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="assetcache")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Print what would change without changing it")
@click.option(
    "--app-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Application root (defaults to the current directory)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool, app_dir: Path | None) -> None:
    """Cache precompiled assets between deploys and expire unused ones."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run, app_dir=app_dir)
        except ConfigError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e


cli.add_command(precompile_cmd)
cli.add_command(touch_cmd)
cli.add_command(sweep_cmd)
cli.add_command(cache_group)
cli.add_command(status_cmd)
