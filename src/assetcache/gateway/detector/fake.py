"""Fake DependencyDetector implementation for testing."""

from assetcache.gateway.detector.abc import DependencyDetector


class FakeDependencyDetector(DependencyDetector):
    """Test double with constructor-injected values.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, bundled: set[str] | None = None, applies: bool = True) -> None:
        """Create FakeDependencyDetector.

        Args:
            bundled: Dependency names to report as locked. Defaults to none.
            applies: Value returned from build_step_applies()
        """
        self._bundled = bundled if bundled is not None else set()
        self._applies = applies

    def is_bundled(self, name: str) -> bool:
        return name in self._bundled

    def build_step_applies(self) -> bool:
        return self._applies
