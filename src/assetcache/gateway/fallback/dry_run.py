"""No-op FallbackActivator wrapper for dry-run mode."""

from pathlib import Path

from assetcache.gateway.fallback.abc import FallbackActivator
from assetcache.output import user_output


class DryRunFallbackActivator(FallbackActivator):
    """No-op wrapper that prevents installing the fallback in dry-run mode."""

    def __init__(self, wrapped: FallbackActivator) -> None:
        self._wrapped = wrapped

    def activate(self, app_dir: Path, plugins: list[str]) -> None:
        user_output(f"[DRY RUN] Would enable runtime compilation: {', '.join(plugins)}")

    def enabled_plugins(self, app_dir: Path) -> list[str]:
        return self._wrapped.enabled_plugins(app_dir)
