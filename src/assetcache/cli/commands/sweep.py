"""Remove assets that have not been used recently."""

from datetime import timedelta

import click

from assetcache.cli.config import EXPIRE_AFTER_ENV_VAR
from assetcache.core.context import AssetCacheContext
from assetcache.core.sweeper import sweep_expired_artifacts
from assetcache.output import machine_output, user_output


@click.command("sweep")
@click.option(
    "--expire-after",
    type=click.IntRange(min=0),
    default=None,
    help=f"Seconds to keep unused assets (overrides {EXPIRE_AFTER_ENV_VAR} and config)",
)
@click.pass_obj
def sweep_cmd(ctx: AssetCacheContext, expire_after: int | None) -> None:
    """Delete assets whose last use is older than the expiration threshold.

    Examples:

    \b
      # Expire with the configured threshold (default one week)
      assetcache sweep

    \b
      # Remove everything not touched in the last hour
      assetcache sweep --expire-after 3600
    """
    config = ctx.config
    threshold = timedelta(seconds=expire_after) if expire_after is not None else config.expire_after

    removed = sweep_expired_artifacts(
        ctx.mtime_store, config.artifact_dir, threshold, now=ctx.time.now()
    )
    if not removed:
        user_output("No expired assets")
        return

    for rel_path in removed:
        machine_output(rel_path)
    user_output(f"Removed {len(removed)} expired asset(s)")
