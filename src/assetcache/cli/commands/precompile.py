"""Run the asset precompile pipeline."""

import click

from assetcache.core.context import AssetCacheContext
from assetcache.core.orchestrator import build_request, run_precompile
from assetcache.output import user_output


@click.command("precompile")
@click.pass_obj
def precompile_cmd(ctx: AssetCacheContext) -> None:
    """Build assets, reusing and refreshing the asset cache.

    Skips everything when a manifest is already present. A failed build
    enables runtime asset compilation instead of failing the deploy.

    Examples:

    \b
      # Precompile in the current app
      assetcache precompile

    \b
      # Keep unused assets for one day
      EXPIRE_ASSETS_AFTER=86400 assetcache precompile
    """
    if not ctx.detector.build_step_applies():
        user_output("No asset build step defined, skipping precompilation")
        return

    user_output(click.style("Preparing app for asset pipeline", bold=True))
    outcome = run_precompile(ctx, build_request(ctx))

    if outcome.status == "skipped":
        return

    if outcome.status == "degraded":
        user_output(
            click.style("⚠️  ", fg="yellow")
            + "Assets will be compiled at runtime. Fix the build to restore precompiled assets."
        )
        return

    removed_note = f", {len(outcome.removed)} expired" if outcome.removed else ""
    user_output(
        click.style("✓ ", fg="green")
        + f"Assets precompiled ({len(outcome.touched)} refreshed{removed_note})"
    )
