"""Tests for assetcache status and root group behavior."""

from pathlib import Path

from click.testing import CliRunner

from assetcache.cli.cli import cli
from assetcache.cli.commands.status import status_cmd
from assetcache.core.context import AssetCacheContext
from assetcache.gateway.artifact_cache.fake import FakeArtifactCache
from assetcache.gateway.fallback.abc import RUNTIME_COMPILATION_PLUGIN
from assetcache.gateway.fallback.fake import FakeFallbackActivator
from assetcache.gateway.fallback.real import RealFallbackActivator, get_fallback_path


def test_status_fresh_app(tmp_app: Path) -> None:
    ctx = AssetCacheContext.for_test(app_dir=tmp_app)

    result = CliRunner().invoke(status_cmd, [], obj=ctx)

    assert result.exit_code == 0
    assert "No manifest at" in result.output
    assert "Cache namespace 'public/assets' is empty" in result.output
    assert "Expire unused assets after 604800s" in result.output
    assert "Runtime compilation enabled" not in result.output


def test_status_reports_cache_and_fallback(tmp_app: Path) -> None:
    fallback = FakeFallbackActivator(enabled={tmp_app: [RUNTIME_COMPILATION_PLUGIN]})
    cache = FakeArtifactCache(namespaces={"public/assets": {"app.js": ""}})
    ctx = AssetCacheContext.for_test(app_dir=tmp_app, artifact_cache=cache, fallback=fallback)

    result = CliRunner().invoke(status_cmd, [], obj=ctx)

    assert result.exit_code == 0
    assert "Cache namespace 'public/assets' populated" in result.output
    assert f"Runtime compilation enabled: {RUNTIME_COMPILATION_PLUGIN}" in result.output


def test_status_reads_fallback_recorded_on_disk(tmp_app: Path) -> None:
    RealFallbackActivator().activate(tmp_app, [RUNTIME_COMPILATION_PLUGIN])
    ctx = AssetCacheContext.for_test(app_dir=tmp_app, fallback=RealFallbackActivator())

    result = CliRunner().invoke(status_cmd, [], obj=ctx)

    assert result.exit_code == 0
    assert f"Runtime compilation enabled: {RUNTIME_COMPILATION_PLUGIN}" in result.output


def test_status_malformed_fallback_state_exits_with_error(tmp_app: Path) -> None:
    path = get_fallback_path(tmp_app)
    path.parent.mkdir(parents=True)
    path.write_text("[other]\nkey = 1\n", encoding="utf-8")
    ctx = AssetCacheContext.for_test(app_dir=tmp_app, fallback=RealFallbackActivator())

    result = CliRunner().invoke(status_cmd, [], obj=ctx)

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "fallback.toml" in result.output


def test_invalid_expire_after_env_exits_with_error(tmp_app: Path) -> None:
    result = CliRunner().invoke(
        cli,
        ["--app-dir", str(tmp_app), "status"],
        env={"EXPIRE_ASSETS_AFTER": "soon"},
    )

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "EXPIRE_ASSETS_AFTER" in result.output


def test_dry_run_flag_wraps_real_gateways(tmp_app: Path) -> None:
    result = CliRunner().invoke(
        cli,
        ["--app-dir", str(tmp_app), "--dry-run", "cache", "clear"],
        env={"EXPIRE_ASSETS_AFTER": None, "CACHE_DIR": None},
    )

    assert result.exit_code == 0, result.output
    assert "[DRY RUN] Would clear cache namespace 'public/assets'" in result.output
