"""Real ArtifactCache backed by a directory on disk.

Each namespace is a sub-directory of the cache root. Copies go through
shutil.copy2 so file modification times, which double as last-used
timestamps, survive a store/load round trip.
"""

import logging
import os
import shutil
from pathlib import Path

from assetcache.gateway.artifact_cache.abc import ArtifactCache

logger = logging.getLogger(__name__)


class RealArtifactCache(ArtifactCache):
    """Production implementation backed by a cache directory."""

    def __init__(self, cache_root: Path) -> None:
        """Create a cache rooted at cache_root.

        Args:
            cache_root: Directory holding one sub-directory per namespace
        """
        self._cache_root = cache_root

    def _namespace_dir(self, namespace: str) -> Path:
        return self._cache_root / namespace.strip("/")

    def has(self, namespace: str) -> bool:
        namespace_dir = self._namespace_dir(namespace)
        if not namespace_dir.is_dir():
            return False
        return any(namespace_dir.iterdir())

    def load(self, namespace: str, target_dir: Path) -> bool:
        if not self.has(namespace):
            logger.debug("Cache namespace %s is empty, nothing to load", namespace)
            return False

        namespace_dir = self._namespace_dir(namespace)
        target_dir.mkdir(parents=True, exist_ok=True)
        shutil.copytree(namespace_dir, target_dir, copy_function=shutil.copy2, dirs_exist_ok=True)
        logger.debug("Loaded cache namespace %s into %s", namespace, target_dir)
        return True

    def store(self, namespace: str, source_dir: Path) -> None:
        namespace_dir = self._namespace_dir(namespace)

        if not source_dir.is_dir():
            logger.debug("Nothing to store for %s: %s does not exist", namespace, source_dir)
            if namespace_dir.exists():
                shutil.rmtree(namespace_dir)
            return

        # Copy into a sibling first so a failed copy never replaces the last good tree
        staging_dir = namespace_dir.with_name(namespace_dir.name + ".tmp")
        retired_dir = namespace_dir.with_name(namespace_dir.name + ".old")
        for leftover in (staging_dir, retired_dir):
            if leftover.exists():
                shutil.rmtree(leftover)

        namespace_dir.parent.mkdir(parents=True, exist_ok=True)
        try:
            shutil.copytree(source_dir, staging_dir, copy_function=shutil.copy2)
        except OSError:
            shutil.rmtree(staging_dir, ignore_errors=True)
            raise

        if namespace_dir.exists():
            os.replace(namespace_dir, retired_dir)
        os.replace(staging_dir, namespace_dir)
        shutil.rmtree(retired_dir, ignore_errors=True)
        logger.debug("Stored %s into cache namespace %s", source_dir, namespace)

    def clear(self, namespace: str) -> None:
        namespace_dir = self._namespace_dir(namespace)
        if namespace_dir.exists():
            shutil.rmtree(namespace_dir)
