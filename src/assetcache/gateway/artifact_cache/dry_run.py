"""No-op ArtifactCache wrapper for dry-run mode."""

from pathlib import Path

from assetcache.gateway.artifact_cache.abc import ArtifactCache
from assetcache.output import user_output


class DryRunArtifactCache(ArtifactCache):
    """No-op wrapper that prevents cache writes in dry-run mode.

    load() writes into the working artifact directory, so it is treated as a
    mutation as well and only reports whether contents would be restored.
    """

    def __init__(self, wrapped: ArtifactCache) -> None:
        """Create a dry-run wrapper around an ArtifactCache implementation.

        Args:
            wrapped: The ArtifactCache implementation to wrap
        """
        self._wrapped = wrapped

    def has(self, namespace: str) -> bool:
        return self._wrapped.has(namespace)

    def load(self, namespace: str, target_dir: Path) -> bool:
        if not self._wrapped.has(namespace):
            return False
        user_output(f"[DRY RUN] Would load cache namespace '{namespace}' into {target_dir}")
        return True

    def store(self, namespace: str, source_dir: Path) -> None:
        user_output(f"[DRY RUN] Would store {source_dir} into cache namespace '{namespace}'")

    def clear(self, namespace: str) -> None:
        user_output(f"[DRY RUN] Would clear cache namespace '{namespace}'")
