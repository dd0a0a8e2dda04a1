"""Read the asset manifest written by a previous build."""

import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


def manifest_exists(manifest_path: Path) -> bool:
    """Check whether a manifest is already on disk."""
    return manifest_path.is_file()


def flatten_manifest(data: object) -> list[str]:
    """Flatten parsed manifest data into artifact paths.

    A mapping of logical name to digested name yields both, key first, so
    undigested copies are kept fresh alongside their digested siblings. A
    sequence yields its items. Non-string entries are ignored.
    """
    if isinstance(data, dict):
        items: list[object] = []
        for key, value in data.items():
            items.append(key)
            items.append(value)
    elif isinstance(data, list):
        items = list(data)
    else:
        return []
    return [item for item in items if isinstance(item, str)]


def load_manifest_entries(manifest_path: Path) -> list[str]:
    """Load the artifact paths referenced by the manifest.

    Returns an empty list when no manifest exists (e.g., first build) or when
    it cannot be parsed; refreshing timestamps is best effort.
    """
    if not manifest_exists(manifest_path):
        return []
    try:
        with open(manifest_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable manifest %s: %s", manifest_path, e)
        return []
    return flatten_manifest(data)
