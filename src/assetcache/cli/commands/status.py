"""Show the state of the asset pipeline for this app."""

import click

from assetcache.core.context import AssetCacheContext
from assetcache.core.manifest import manifest_exists
from assetcache.gateway.fallback.abc import FallbackStateError
from assetcache.output import user_output


@click.command("status")
@click.pass_obj
def status_cmd(ctx: AssetCacheContext) -> None:
    """Report manifest, cache and runtime-compilation status."""
    config = ctx.config

    if manifest_exists(config.manifest_path):
        user_output(click.style("✓ ", fg="green") + f"Manifest present: {config.manifest_path}")
    else:
        user_output(f"   No manifest at {config.manifest_path}")

    if ctx.artifact_cache.has(config.namespace):
        user_output(
            click.style("✓ ", fg="green") + f"Cache namespace '{config.namespace}' populated"
        )
    else:
        user_output(f"   Cache namespace '{config.namespace}' is empty")

    user_output(f"   Expire unused assets after {int(config.expire_after.total_seconds())}s")

    try:
        plugins = ctx.fallback.enabled_plugins(ctx.app_dir)
    except FallbackStateError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
    if plugins:
        user_output(
            click.style("⚠️  ", fg="yellow") + f"Runtime compilation enabled: {', '.join(plugins)}"
        )
