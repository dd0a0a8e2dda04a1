"""Shared fixtures for assetcache tests."""

from pathlib import Path

import pytest


@pytest.fixture
def tmp_app(tmp_path: Path) -> Path:
    """Alias for tmp_path with semantic meaning as an application root.

    Tests that use 'tmp_app' communicate that they operate on a deployed
    application directory (public/assets, .assetcache/, Gemfile.lock).
    """
    app_dir = tmp_path / "app"
    app_dir.mkdir()
    return app_dir
