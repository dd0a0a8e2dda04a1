"""Fake ArtifactCache implementation for testing.

FakeArtifactCache keeps each namespace as an in-memory dict of relative path
to content and records every load/store call for assertions. It never touches
the filesystem.
"""

from dataclasses import dataclass
from pathlib import Path

from assetcache.gateway.artifact_cache.abc import ArtifactCache


@dataclass(frozen=True)
class CacheCall:
    namespace: str
    directory: Path


class FakeArtifactCache(ArtifactCache):
    """In-memory fake implementation backed by dict.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        namespaces: dict[str, dict[str, str]] | None = None,
        stored_trees: dict[Path, dict[str, str]] | None = None,
        store_error: OSError | None = None,
    ) -> None:
        """Create FakeArtifactCache with pre-seeded namespaces.

        Args:
            namespaces: Mapping of namespace to {relative path: content}
            stored_trees: Mapping of source directory to the tree store() should
                record when called with that directory. Directories not listed
                are recorded as empty trees.
            store_error: Raised by store() after the call is recorded, leaving
                the namespace untouched
        """
        self._namespaces = (
            {name: dict(tree) for name, tree in namespaces.items()} if namespaces else {}
        )
        self._stored_trees = stored_trees if stored_trees is not None else {}
        self._store_error = store_error
        self._load_calls: list[CacheCall] = []
        self._store_calls: list[CacheCall] = []
        self._cleared: list[str] = []

    @property
    def namespaces(self) -> dict[str, dict[str, str]]:
        """Current namespace contents. Returns a copy."""
        return {name: dict(tree) for name, tree in self._namespaces.items()}

    @property
    def load_calls(self) -> list[CacheCall]:
        return list(self._load_calls)

    @property
    def store_calls(self) -> list[CacheCall]:
        return list(self._store_calls)

    @property
    def cleared(self) -> list[str]:
        return list(self._cleared)

    def has(self, namespace: str) -> bool:
        return bool(self._namespaces.get(namespace))

    def load(self, namespace: str, target_dir: Path) -> bool:
        self._load_calls.append(CacheCall(namespace=namespace, directory=target_dir))
        return self.has(namespace)

    def store(self, namespace: str, source_dir: Path) -> None:
        self._store_calls.append(CacheCall(namespace=namespace, directory=source_dir))
        if self._store_error is not None:
            raise self._store_error
        self._namespaces[namespace] = dict(self._stored_trees.get(source_dir, {}))

    def clear(self, namespace: str) -> None:
        self._cleared.append(namespace)
        self._namespaces.pop(namespace, None)
