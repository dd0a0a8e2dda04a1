"""Fake MtimeStore implementation for testing.

FakeMtimeStore is an in-memory implementation backed by a dict mapping file
paths to their last-used timestamps.
"""

from datetime import datetime
from pathlib import Path

from assetcache.gateway.mtime_store.abc import MtimeStore


class FakeMtimeStore(MtimeStore):
    """In-memory fake implementation backed by dict.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, files: dict[Path, datetime] | None = None) -> None:
        """Create FakeMtimeStore with pre-seeded files.

        Args:
            files: Mapping of file path to last-used timestamp. Defaults to empty.
        """
        self._files = dict(files) if files is not None else {}
        self._touched: list[Path] = []
        self._removed: list[Path] = []

    @property
    def files(self) -> dict[Path, datetime]:
        """Current files and timestamps. Returns a copy."""
        return dict(self._files)

    @property
    def touched(self) -> list[Path]:
        """Paths updated via set_last_used(), in call order."""
        return list(self._touched)

    @property
    def removed(self) -> list[Path]:
        """Paths deleted via remove(), in call order."""
        return list(self._removed)

    def get_last_used(self, path: Path) -> datetime | None:
        return self._files.get(path)

    def set_last_used(self, path: Path, instant: datetime) -> None:
        if path not in self._files:
            return
        self._files[path] = instant
        self._touched.append(path)

    def list_files(self, root: Path) -> list[Path]:
        return sorted(path for path in self._files if path.is_relative_to(root))

    def remove(self, path: Path) -> bool:
        if path not in self._files:
            return False
        del self._files[path]
        self._removed.append(path)
        return True
