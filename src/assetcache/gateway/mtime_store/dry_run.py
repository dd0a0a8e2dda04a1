"""No-op MtimeStore wrapper for dry-run mode.

Delegates read-only methods to wrapped, no-ops mutations.
"""

from datetime import datetime
from pathlib import Path

from assetcache.gateway.mtime_store.abc import MtimeStore
from assetcache.output import user_output


class DryRunMtimeStore(MtimeStore):
    """No-op wrapper that prevents timestamp updates and deletions in dry-run mode."""

    def __init__(self, wrapped: MtimeStore) -> None:
        self._wrapped = wrapped

    def get_last_used(self, path: Path) -> datetime | None:
        return self._wrapped.get_last_used(path)

    def set_last_used(self, path: Path, instant: datetime) -> None:
        user_output(f"[DRY RUN] Would touch {path}")

    def list_files(self, root: Path) -> list[Path]:
        return self._wrapped.list_files(root)

    def remove(self, path: Path) -> bool:
        user_output(f"[DRY RUN] Would remove {path}")
        return self._wrapped.get_last_used(path) is not None
