"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from assetcache.cli.config import AssetCacheConfig, load_config
from assetcache.gateway.artifact_cache.abc import ArtifactCache
from assetcache.gateway.artifact_cache.dry_run import DryRunArtifactCache
from assetcache.gateway.artifact_cache.real import RealArtifactCache
from assetcache.gateway.build_runner.abc import BuildRunner
from assetcache.gateway.build_runner.dry_run import DryRunBuildRunner
from assetcache.gateway.build_runner.real import RealBuildRunner
from assetcache.gateway.detector.abc import DependencyDetector
from assetcache.gateway.detector.real import RealDependencyDetector
from assetcache.gateway.fallback.abc import FallbackActivator
from assetcache.gateway.fallback.dry_run import DryRunFallbackActivator
from assetcache.gateway.fallback.real import RealFallbackActivator
from assetcache.gateway.mtime_store.abc import MtimeStore
from assetcache.gateway.mtime_store.dry_run import DryRunMtimeStore
from assetcache.gateway.mtime_store.real import RealMtimeStore
from assetcache.gateway.time.abc import Time
from assetcache.gateway.time.real import RealTime


@dataclass(frozen=True)
class AssetCacheContext:
    """Immutable context holding all dependencies for assetcache operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    time: Time
    mtime_store: MtimeStore
    artifact_cache: ArtifactCache
    build_runner: BuildRunner
    fallback: FallbackActivator
    detector: DependencyDetector
    app_dir: Path
    config: AssetCacheConfig
    environ: dict[str, str]  # Process environment captured at CLI invocation
    dry_run: bool

    @staticmethod
    def for_test(
        *,
        app_dir: Path,
        time: Time | None = None,
        mtime_store: MtimeStore | None = None,
        artifact_cache: ArtifactCache | None = None,
        build_runner: BuildRunner | None = None,
        fallback: FallbackActivator | None = None,
        detector: DependencyDetector | None = None,
        config: AssetCacheConfig | None = None,
        environ: dict[str, str] | None = None,
        dry_run: bool = False,
    ) -> "AssetCacheContext":
        """Create test context with optional pre-configured implementations.

        Any dependency left as None gets its fake implementation.

        Example:
            >>> cache = FakeArtifactCache()
            >>> ctx = AssetCacheContext.for_test(app_dir=tmp_path, artifact_cache=cache)
        """
        from assetcache.cli.config import default_config
        from assetcache.gateway.artifact_cache.fake import FakeArtifactCache
        from assetcache.gateway.build_runner.fake import FakeBuildRunner
        from assetcache.gateway.detector.fake import FakeDependencyDetector
        from assetcache.gateway.fallback.fake import FakeFallbackActivator
        from assetcache.gateway.mtime_store.fake import FakeMtimeStore
        from assetcache.gateway.time.fake import FakeTime

        if time is None:
            time = FakeTime()

        if mtime_store is None:
            mtime_store = FakeMtimeStore()

        if artifact_cache is None:
            artifact_cache = FakeArtifactCache()

        if build_runner is None:
            build_runner = FakeBuildRunner.create_succeeding()

        if fallback is None:
            fallback = FakeFallbackActivator()

        if detector is None:
            detector = FakeDependencyDetector()

        if config is None:
            config = default_config(app_dir)

        # Apply dry-run wrappers if needed (matching production behavior)
        if dry_run:
            mtime_store = DryRunMtimeStore(mtime_store)
            artifact_cache = DryRunArtifactCache(artifact_cache)
            build_runner = DryRunBuildRunner(build_runner)
            fallback = DryRunFallbackActivator(fallback)

        return AssetCacheContext(
            time=time,
            mtime_store=mtime_store,
            artifact_cache=artifact_cache,
            build_runner=build_runner,
            fallback=fallback,
            detector=detector,
            app_dir=app_dir,
            config=config,
            environ=environ if environ is not None else {},
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, app_dir: Path | None = None) -> AssetCacheContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap all mutating dependencies with dry-run wrappers
                 that print intended actions without executing them
        app_dir: Application root. Defaults to the current directory.

    Raises:
        ConfigError: If .assetcache/config.toml or EXPIRE_ASSETS_AFTER is invalid
    """
    resolved_app_dir = (app_dir if app_dir is not None else Path.cwd()).resolve()
    environ = dict(os.environ)
    config = load_config(resolved_app_dir, environ)

    mtime_store: MtimeStore = RealMtimeStore()
    artifact_cache: ArtifactCache = RealArtifactCache(config.cache_dir)
    build_runner: BuildRunner = RealBuildRunner()
    fallback: FallbackActivator = RealFallbackActivator()

    if dry_run:
        mtime_store = DryRunMtimeStore(mtime_store)
        artifact_cache = DryRunArtifactCache(artifact_cache)
        build_runner = DryRunBuildRunner(build_runner)
        fallback = DryRunFallbackActivator(fallback)

    return AssetCacheContext(
        time=RealTime(),
        mtime_store=mtime_store,
        artifact_cache=artifact_cache,
        build_runner=build_runner,
        fallback=fallback,
        detector=RealDependencyDetector(resolved_app_dir),
        app_dir=resolved_app_dir,
        config=config,
        environ=environ,
        dry_run=dry_run,
    )
