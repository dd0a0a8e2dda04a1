"""Tests for assetcache sweep."""

from datetime import timedelta
from pathlib import Path

from click.testing import CliRunner

from assetcache.cli.commands.sweep import sweep_cmd
from assetcache.core.context import AssetCacheContext
from assetcache.gateway.mtime_store.fake import FakeMtimeStore
from assetcache.gateway.time.fake import DEFAULT_FAKE_NOW


def _ctx(app_dir: Path, mtime_store: FakeMtimeStore) -> AssetCacheContext:
    return AssetCacheContext.for_test(app_dir=app_dir, mtime_store=mtime_store)


def test_sweep_uses_default_week(tmp_app: Path) -> None:
    assets = tmp_app / "public" / "assets"
    store = FakeMtimeStore(
        files={
            assets / "stale.js": DEFAULT_FAKE_NOW - timedelta(days=8),
            assets / "current.js": DEFAULT_FAKE_NOW - timedelta(days=2),
        }
    )

    result = CliRunner().invoke(sweep_cmd, [], obj=_ctx(tmp_app, store))

    assert result.exit_code == 0
    assert "stale.js" in result.output
    assert "Removed 1 expired asset(s)" in result.output
    assert list(store.files) == [assets / "current.js"]


def test_sweep_expire_after_option_overrides_config(tmp_app: Path) -> None:
    assets = tmp_app / "public" / "assets"
    store = FakeMtimeStore(
        files={
            assets / "touched.js": DEFAULT_FAKE_NOW,
            assets / "untouched.js": DEFAULT_FAKE_NOW - timedelta(minutes=5),
        }
    )

    result = CliRunner().invoke(sweep_cmd, ["--expire-after", "0"], obj=_ctx(tmp_app, store))

    assert result.exit_code == 0
    assert list(store.files) == [assets / "touched.js"]


def test_sweep_nothing_expired(tmp_app: Path) -> None:
    result = CliRunner().invoke(sweep_cmd, [], obj=_ctx(tmp_app, FakeMtimeStore()))

    assert result.exit_code == 0
    assert "No expired assets" in result.output


def test_sweep_rejects_negative_threshold(tmp_app: Path) -> None:
    result = CliRunner().invoke(
        sweep_cmd, ["--expire-after", "-1"], obj=_ctx(tmp_app, FakeMtimeStore())
    )

    assert result.exit_code == 2
