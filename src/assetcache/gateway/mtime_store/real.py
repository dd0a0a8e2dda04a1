"""Real MtimeStore backed by file modification times."""

import os
from datetime import UTC, datetime
from pathlib import Path

from assetcache.gateway.mtime_store.abc import MtimeStore


class RealMtimeStore(MtimeStore):
    """Production implementation using os.stat() and os.utime()."""

    def get_last_used(self, path: Path) -> datetime | None:
        try:
            mtime = path.stat().st_mtime
        except FileNotFoundError:
            return None
        return datetime.fromtimestamp(mtime, tz=UTC)

    def set_last_used(self, path: Path, instant: datetime) -> None:
        if not path.is_file():
            return
        timestamp = instant.timestamp()
        try:
            os.utime(path, (timestamp, timestamp))
        except FileNotFoundError:
            # Removed between the check and the update
            return

    def list_files(self, root: Path) -> list[Path]:
        if not root.is_dir():
            return []
        return sorted(path for path in root.rglob("*") if path.is_file())

    def remove(self, path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True
