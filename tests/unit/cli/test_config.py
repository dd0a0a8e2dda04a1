"""Tests for configuration loading."""

from datetime import timedelta
from pathlib import Path

import pytest

from assetcache.cli.config import (
    ConfigError,
    default_config,
    get_config_path,
    load_config,
    parse_expire_after,
)


def _write_config(app_dir: Path, content: str) -> None:
    path = get_config_path(app_dir)
    path.parent.mkdir(parents=True)
    path.write_text(content, encoding="utf-8")


def test_load_config_defaults_without_file(tmp_app: Path) -> None:
    config = load_config(tmp_app, {})

    assert config == default_config(tmp_app)
    assert config.artifact_dir == tmp_app / "public" / "assets"
    assert config.manifest_path == tmp_app / "public" / "assets" / "manifest.yml"
    assert config.build_command == ["bundle", "exec", "rake", "assets:precompile"]
    assert config.cache_dir == tmp_app / ".assetcache" / "cache"
    assert config.namespace == "public/assets"
    assert config.expire_after == timedelta(days=7)
    assert config.database_scheme == "postgres"
    assert config.env == {}


def test_load_config_reads_file(tmp_app: Path) -> None:
    _write_config(
        tmp_app,
        """
artifact_dir = "static/build"
manifest = "manifest.json"
build_command = "npm run build -- --mode production"
expire_after = 3600
database_scheme = "mysql2"

[env]
NODE_ENV = "production"
""",
    )

    config = load_config(tmp_app, {})

    assert config.artifact_dir == tmp_app / "static" / "build"
    assert config.manifest_path == tmp_app / "static" / "build" / "manifest.json"
    assert config.build_command == ["npm", "run", "build", "--", "--mode", "production"]
    assert config.namespace == "static/build"
    assert config.expire_after == timedelta(hours=1)
    assert config.database_scheme == "mysql2"
    assert config.env == {"NODE_ENV": "production"}


def test_environment_overrides_file(tmp_app: Path) -> None:
    _write_config(tmp_app, "expire_after = 3600\ncache_dir = 'tmp/cache'\n")

    config = load_config(tmp_app, {"EXPIRE_ASSETS_AFTER": "60", "CACHE_DIR": "/var/cache"})

    assert config.expire_after == timedelta(seconds=60)
    assert config.cache_dir == Path("/var/cache")


def test_invalid_toml_raises_config_error(tmp_app: Path) -> None:
    _write_config(tmp_app, "artifact_dir = \n")

    with pytest.raises(ConfigError, match="Invalid"):
        load_config(tmp_app, {})


def test_invalid_expire_after_env_raises_config_error(tmp_app: Path) -> None:
    with pytest.raises(ConfigError, match="EXPIRE_ASSETS_AFTER"):
        load_config(tmp_app, {"EXPIRE_ASSETS_AFTER": "one week"})


def test_empty_build_command_raises_config_error(tmp_app: Path) -> None:
    _write_config(tmp_app, 'build_command = ""\n')

    with pytest.raises(ConfigError, match="build_command"):
        load_config(tmp_app, {})


@pytest.mark.parametrize(("raw", "seconds"), [(0, 0), ("604800", 604800), (" 30 ", 30)])
def test_parse_expire_after(raw: object, seconds: int) -> None:
    assert parse_expire_after(raw, source="test") == timedelta(seconds=seconds)


@pytest.mark.parametrize("raw", [-1, "-5", True, "1.5"])
def test_parse_expire_after_rejects_bad_values(raw: object) -> None:
    with pytest.raises(ConfigError):
        parse_expire_after(raw, source="test")
