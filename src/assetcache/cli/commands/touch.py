"""Refresh last-used timestamps for assets listed in the manifest."""

import click

from assetcache.core.context import AssetCacheContext
from assetcache.core.freshness import touch_artifacts
from assetcache.core.manifest import load_manifest_entries
from assetcache.output import machine_output, user_output


@click.command("touch")
@click.pass_obj
def touch_cmd(ctx: AssetCacheContext) -> None:
    """Mark every asset referenced by the manifest as used now."""
    config = ctx.config
    entries = load_manifest_entries(config.manifest_path)
    if not entries:
        user_output(f"No entries in {config.manifest_path}, nothing to touch")
        return

    touched = touch_artifacts(ctx.mtime_store, config.artifact_dir, entries, now=ctx.time.now())
    for path in touched:
        machine_output(path.relative_to(config.artifact_dir).as_posix())
    user_output(f"Touched {len(touched)} asset file(s)")
