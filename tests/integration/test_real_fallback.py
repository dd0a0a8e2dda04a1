"""Integration tests for RealFallbackActivator and fallback state I/O."""

from pathlib import Path

import pytest

from assetcache.gateway.fallback.abc import RUNTIME_COMPILATION_PLUGIN, FallbackStateError
from assetcache.gateway.fallback.real import (
    RealFallbackActivator,
    get_fallback_path,
    load_fallback_state,
)


def test_activate_writes_state(tmp_path: Path) -> None:
    RealFallbackActivator().activate(tmp_path, [RUNTIME_COMPILATION_PLUGIN])

    assert get_fallback_path(tmp_path).exists()
    state = load_fallback_state(tmp_path)
    assert state is not None
    assert state.plugins == [RUNTIME_COMPILATION_PLUGIN]


def test_activate_twice_does_not_duplicate_plugins(tmp_path: Path) -> None:
    activator = RealFallbackActivator()

    activator.activate(tmp_path, [RUNTIME_COMPILATION_PLUGIN])
    activator.activate(tmp_path, [RUNTIME_COMPILATION_PLUGIN, "serve_static_assets"])

    state = load_fallback_state(tmp_path)
    assert state is not None
    assert state.plugins == [RUNTIME_COMPILATION_PLUGIN, "serve_static_assets"]


def test_load_fallback_state_missing_returns_none(tmp_path: Path) -> None:
    assert load_fallback_state(tmp_path) is None


def _write_state(app_dir: Path, content: str) -> None:
    path = get_fallback_path(app_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.mark.parametrize(
    "content",
    [
        "[fallback\n",
        "[other]\nkey = 1\n",
        'fallback = "enabled"\n',
        '[fallback]\nplugins = "one"\n',
    ],
)
def test_load_fallback_state_malformed_raises(tmp_path: Path, content: str) -> None:
    _write_state(tmp_path, content)

    with pytest.raises(FallbackStateError, match="fallback.toml"):
        load_fallback_state(tmp_path)


def test_enabled_plugins_reads_state(tmp_path: Path) -> None:
    activator = RealFallbackActivator()
    assert activator.enabled_plugins(tmp_path) == []

    activator.activate(tmp_path, [RUNTIME_COMPILATION_PLUGIN])

    assert activator.enabled_plugins(tmp_path) == [RUNTIME_COMPILATION_PLUGIN]


def test_activate_replaces_malformed_state(tmp_path: Path) -> None:
    _write_state(tmp_path, "[other]\nkey = 1\n")

    RealFallbackActivator().activate(tmp_path, [RUNTIME_COMPILATION_PLUGIN])

    state = load_fallback_state(tmp_path)
    assert state is not None
    assert state.plugins == [RUNTIME_COMPILATION_PLUGIN]
