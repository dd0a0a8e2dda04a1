"""Mark artifacts referenced by the manifest as recently used.

The mtime of an asset is the last time a deploy referenced it. Refreshing it
before the build keeps assets that are still current from being expired while
the build recomputes only what changed.
"""

import logging
import os
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from assetcache.gateway.mtime_store.abc import MtimeStore

logger = logging.getLogger(__name__)

GZIP_SUFFIX = ".gz"


def touch_artifacts(
    mtime_store: MtimeStore,
    artifact_dir: Path,
    entries: Sequence[str],
    *,
    now: datetime,
) -> list[Path]:
    """Set the last-used timestamp of every referenced artifact to now.

    Each entry is touched along with its gzipped sibling. Entries whose file is
    absent, or that resolve outside artifact_dir, are skipped.

    Returns:
        Paths whose timestamp was updated, in manifest order
    """
    root = Path(os.path.normpath(artifact_dir))
    touched: list[Path] = []
    for entry in entries:
        for candidate in (entry, f"{entry}{GZIP_SUFFIX}"):
            path = Path(os.path.normpath(root / candidate))
            if path == root or not path.is_relative_to(root):
                logger.debug("Skipping manifest entry outside %s: %s", artifact_dir, candidate)
                continue
            if mtime_store.get_last_used(path) is None:
                continue
            mtime_store.set_last_used(path, now)
            touched.append(path)

    logger.debug("Touched %d of %d manifest entries", len(touched), len(entries))
    return touched
