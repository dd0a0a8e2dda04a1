"""Manage the asset cache namespace directly."""

import click

from assetcache.core.context import AssetCacheContext
from assetcache.output import user_output


@click.group("cache")
def cache_group() -> None:
    """Load, store or clear cached assets."""


@cache_group.command("load")
@click.pass_obj
def load_cmd(ctx: AssetCacheContext) -> None:
    """Restore cached assets into the asset directory."""
    config = ctx.config
    if ctx.artifact_cache.load(config.namespace, config.artifact_dir):
        user_output(click.style("✓ ", fg="green") + f"Loaded '{config.namespace}'")
    else:
        user_output(f"Cache namespace '{config.namespace}' is empty")


@cache_group.command("store")
@click.pass_obj
def store_cmd(ctx: AssetCacheContext) -> None:
    """Replace the cached assets with the current asset directory."""
    config = ctx.config
    if not config.artifact_dir.is_dir():
        user_output(click.style("Error: ", fg="red") + f"{config.artifact_dir} does not exist")
        raise SystemExit(1)

    ctx.artifact_cache.store(config.namespace, config.artifact_dir)
    user_output(click.style("✓ ", fg="green") + f"Stored '{config.namespace}'")


@cache_group.command("clear")
@click.pass_obj
def clear_cmd(ctx: AssetCacheContext) -> None:
    """Drop everything stored under the cache namespace."""
    ctx.artifact_cache.clear(ctx.config.namespace)
    user_output(click.style("✓ ", fg="green") + f"Cleared '{ctx.config.namespace}'")
