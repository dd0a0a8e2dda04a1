"""Artifact cache gateway ABC.

The cache stores the entire artifact tree under a namespace as a single unit.
A namespace is never partially updated: store() replaces whatever was there.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ArtifactCache(ABC):
    """Abstract whole-tree cache keyed by namespace."""

    @abstractmethod
    def has(self, namespace: str) -> bool:
        """Check whether the namespace holds a stored tree.

        Args:
            namespace: Cache namespace (e.g., "public/assets")

        Returns:
            True if a previous store() left contents under the namespace
        """
        ...

    @abstractmethod
    def load(self, namespace: str, target_dir: Path) -> bool:
        """Restore the stored tree into target_dir.

        Files already in target_dir that are not in the cache are left alone.
        No-op when the namespace is empty (first run).

        Args:
            namespace: Cache namespace to restore
            target_dir: Working artifact directory

        Returns:
            True if anything was restored, False if the namespace was empty
        """
        ...

    @abstractmethod
    def store(self, namespace: str, source_dir: Path) -> None:
        """Persist source_dir under the namespace, replacing prior contents.

        Args:
            namespace: Cache namespace to write
            source_dir: Working artifact directory
        """
        ...

    @abstractmethod
    def clear(self, namespace: str) -> None:
        """Drop everything stored under the namespace.

        Args:
            namespace: Cache namespace to clear
        """
        ...
