"""Real FallbackActivator that records enabled plugins in .assetcache/fallback.toml."""

import logging
from dataclasses import dataclass
from pathlib import Path

import tomli
import tomli_w

from assetcache.gateway.fallback.abc import FallbackActivator, FallbackStateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FallbackState:
    """State stored in .assetcache/fallback.toml."""

    plugins: list[str]


def get_fallback_path(app_dir: Path) -> Path:
    """Get path to fallback.toml file."""
    return app_dir / ".assetcache" / "fallback.toml"


def load_fallback_state(app_dir: Path) -> FallbackState | None:
    """Load state from .assetcache/fallback.toml.

    Returns None if file does not exist.

    Raises:
        FallbackStateError: If the file is not valid TOML or lacks a
            [fallback] table with a plugins list
    """
    path = get_fallback_path(app_dir)
    if not path.exists():
        return None
    with open(path, "rb") as f:
        try:
            data = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise FallbackStateError(f"Invalid {path}: {e}") from e

    fallback = data.get("fallback")
    plugins = fallback.get("plugins") if isinstance(fallback, dict) else None
    if not isinstance(plugins, list):
        raise FallbackStateError(f"Invalid {path}: expected a [fallback] plugins list")
    return FallbackState(plugins=[str(p) for p in plugins])


class RealFallbackActivator(FallbackActivator):
    def activate(self, app_dir: Path, plugins: list[str]) -> None:
        try:
            existing = load_fallback_state(app_dir)
        except FallbackStateError as e:
            logger.warning("Replacing unreadable fallback state: %s", e)
            existing = None
        merged = list(existing.plugins) if existing is not None else []
        for plugin in plugins:
            if plugin not in merged:
                merged.append(plugin)

        path = get_fallback_path(app_dir)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            tomli_w.dump({"fallback": {"plugins": merged}}, f)

    def enabled_plugins(self, app_dir: Path) -> list[str]:
        state = load_fallback_state(app_dir)
        if state is None:
            return []
        return list(state.plugins)
