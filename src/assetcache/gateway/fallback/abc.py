"""Runtime-compilation fallback gateway ABC.

When the asset build fails the deployed application compiles assets on
request instead. This gateway installs that fallback into the app bundle.
"""

from abc import ABC, abstractmethod
from pathlib import Path

RUNTIME_COMPILATION_PLUGIN = "rails31_enable_runtime_asset_compilation"


class FallbackStateError(Exception):
    """Raised when the recorded fallback state cannot be read."""


class FallbackActivator(ABC):
    """Abstract interface for enabling runtime asset compilation."""

    @abstractmethod
    def activate(self, app_dir: Path, plugins: list[str]) -> None:
        """Install the fallback plugins into the application bundle.

        Args:
            app_dir: Root of the application being deployed
            plugins: Plugin names to enable
        """
        ...

    @abstractmethod
    def enabled_plugins(self, app_dir: Path) -> list[str]:
        """List the fallback plugins currently enabled for the application.

        Args:
            app_dir: Root of the application being deployed

        Returns:
            Plugin names, empty when the fallback was never activated

        Raises:
            FallbackStateError: If the recorded state is malformed
        """
        ...
