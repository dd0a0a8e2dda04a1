"""Remove artifacts that have not been used for longer than a threshold."""

import logging
from datetime import datetime, timedelta
from pathlib import Path

from assetcache.gateway.mtime_store.abc import MtimeStore

logger = logging.getLogger(__name__)

DEFAULT_EXPIRE_AFTER = timedelta(days=7)


def sweep_expired_artifacts(
    mtime_store: MtimeStore,
    artifact_dir: Path,
    threshold: timedelta,
    *,
    now: datetime,
) -> list[str]:
    """Delete every file under artifact_dir last used before now - threshold.

    The cutoff is computed once from the supplied now, so a long sweep compares
    every file against the same instant.

    Returns:
        Sorted paths of removed artifacts, relative to artifact_dir
    """
    if threshold < timedelta(0):
        raise ValueError(f"Expiration threshold must not be negative, got {threshold}")

    cutoff = now - threshold
    removed: list[str] = []
    for path in mtime_store.list_files(artifact_dir):
        last_used = mtime_store.get_last_used(path)
        if last_used is None or last_used >= cutoff:
            continue
        if mtime_store.remove(path):
            rel_path = path.relative_to(artifact_dir).as_posix()
            logger.debug("Removed %s (last used %s)", rel_path, last_used.isoformat())
            removed.append(rel_path)

    return sorted(removed)
