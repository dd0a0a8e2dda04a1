"""Precompile pipeline: decide whether to build assets, and keep the cache fresh.

The pipeline runs as a fixed sequence of steps:

    check manifest -> skip
                   -> load cache -> touch current assets -> build
                                                -> store cache -> sweep expired
                                                -> enable runtime compilation

A manifest already on disk means assets were compiled out-of-band, so nothing
else runs, not even the sweep. A failed build is not retried and never touches
the cache; the application falls back to compiling assets at runtime.
"""

import logging
import shlex
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Literal

import click

from assetcache.core.build_env import BuildEnvironment, resolve_build_environment
from assetcache.core.context import AssetCacheContext
from assetcache.core.freshness import touch_artifacts
from assetcache.core.manifest import load_manifest_entries, manifest_exists
from assetcache.core.sweeper import sweep_expired_artifacts
from assetcache.gateway.fallback.abc import RUNTIME_COMPILATION_PLUGIN
from assetcache.output import user_output

logger = logging.getLogger(__name__)

PrecompileStatus = Literal["skipped", "success", "degraded"]


@dataclass(frozen=True)
class PrecompileRequest:
    """Everything one precompile run needs, resolved before it starts."""

    build_command: list[str]
    artifact_dir: Path
    manifest_path: Path
    namespace: str
    expire_after: timedelta
    build_env: BuildEnvironment


@dataclass(frozen=True)
class PrecompileOutcome:
    """Result of a precompile run."""

    status: PrecompileStatus
    started_at: datetime
    cache_restored: bool
    touched: list[Path]
    removed: list[str]
    elapsed_seconds: float | None
    cache_stored: bool = False

    @property
    def fallback_enabled(self) -> bool:
        return self.status == "degraded"


def build_request(ctx: AssetCacheContext) -> PrecompileRequest:
    """Resolve a PrecompileRequest from the context's config and detector."""
    config = ctx.config
    build_env = resolve_build_environment(
        base_env=ctx.environ,
        configured_env=config.env,
        detector=ctx.detector,
        app_dir=ctx.app_dir,
        default_scheme=config.database_scheme,
    )
    return PrecompileRequest(
        build_command=list(config.build_command),
        artifact_dir=config.artifact_dir,
        manifest_path=config.manifest_path,
        namespace=config.namespace,
        expire_after=config.expire_after,
        build_env=build_env,
    )


def run_precompile(ctx: AssetCacheContext, request: PrecompileRequest) -> PrecompileOutcome:
    """Run the precompile pipeline once, to completion."""
    started_at = ctx.time.now()

    if manifest_exists(request.manifest_path):
        user_output(
            f"Detected {request.manifest_path.name}, assuming assets were compiled locally"
        )
        return PrecompileOutcome(
            status="skipped",
            started_at=started_at,
            cache_restored=False,
            touched=[],
            removed=[],
            elapsed_seconds=None,
        )

    if not ctx.dry_run:
        request.artifact_dir.parent.mkdir(parents=True, exist_ok=True)

    cache_restored = ctx.artifact_cache.load(request.namespace, request.artifact_dir)
    if not cache_restored:
        logger.debug("No cached assets under %s, building from scratch", request.namespace)

    entries = load_manifest_entries(request.manifest_path)
    touched = touch_artifacts(
        ctx.mtime_store, request.artifact_dir, entries, now=ctx.time.now()
    )

    user_output(f"Running: {shlex.join(request.build_command)}")
    result = ctx.build_runner.run(
        request.build_command,
        cwd=ctx.app_dir,
        env=request.build_env.as_overlay(),
    )

    if not result.success:
        logger.debug("Build exited with %s", result.exit_code)
        user_output(
            click.style("Warning: ", fg="yellow")
            + "Precompiling assets failed, enabling runtime asset compilation"
        )
        ctx.fallback.activate(ctx.app_dir, [RUNTIME_COMPILATION_PLUGIN])
        return PrecompileOutcome(
            status="degraded",
            started_at=started_at,
            cache_restored=cache_restored,
            touched=touched,
            removed=[],
            elapsed_seconds=result.elapsed_seconds,
        )

    user_output(f"Asset precompilation completed ({result.elapsed_seconds:.2f}s)")

    cache_stored = _store_artifacts(ctx, request)

    removed = sweep_expired_artifacts(
        ctx.mtime_store, request.artifact_dir, request.expire_after, now=ctx.time.now()
    )
    for rel_path in removed:
        user_output(f"Removing expired asset: {rel_path}")

    return PrecompileOutcome(
        status="success",
        started_at=started_at,
        cache_restored=cache_restored,
        touched=touched,
        removed=removed,
        elapsed_seconds=result.elapsed_seconds,
        cache_stored=cache_stored,
    )


def _store_artifacts(ctx: AssetCacheContext, request: PrecompileRequest) -> bool:
    """Store the built tree. A failed store keeps the previous cache and the build result."""
    try:
        ctx.artifact_cache.store(request.namespace, request.artifact_dir)
    except OSError as e:
        logger.warning("Storing %s under %s failed: %s", request.artifact_dir, request.namespace, e)
        user_output(
            click.style("Warning: ", fg="yellow")
            + f"Could not store assets in the cache, keeping the previous cache: {e}"
        )
        return False
    return True

