from dataclasses import dataclass
from pathlib import Path

from assetcache.gateway.fallback.abc import FallbackActivator


@dataclass(frozen=True)
class ActivateCall:
    app_dir: Path
    plugins: list[str]


class FakeFallbackActivator(FallbackActivator):
    """Records activations without touching the filesystem.

    This class has NO public setup methods. Previously enabled plugins are
    provided via constructor.
    """

    def __init__(self, *, enabled: dict[Path, list[str]] | None = None) -> None:
        """Create FakeFallbackActivator.

        Args:
            enabled: Mapping of app directory to plugins already enabled there
        """
        self._enabled = {app_dir: list(plugins) for app_dir, plugins in (enabled or {}).items()}
        self._activate_calls: list[ActivateCall] = []

    def activate(self, app_dir: Path, plugins: list[str]) -> None:
        self._activate_calls.append(ActivateCall(app_dir=app_dir, plugins=list(plugins)))
        merged = self._enabled.setdefault(app_dir, [])
        for plugin in plugins:
            if plugin not in merged:
                merged.append(plugin)

    def enabled_plugins(self, app_dir: Path) -> list[str]:
        return list(self._enabled.get(app_dir, []))

    @property
    def activate_calls(self) -> list[ActivateCall]:
        return list(self._activate_calls)
