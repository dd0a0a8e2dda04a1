"""Last-used timestamp store for cached artifacts.

The last-used timestamp of an artifact is its file modification time. Every
operation tolerates the file disappearing between calls: a concurrent sweep or
rebuild removing an artifact is expected and never an error.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path


class MtimeStore(ABC):
    """Abstract filesystem timestamp operations for dependency injection."""

    @abstractmethod
    def get_last_used(self, path: Path) -> datetime | None:
        """Read the last-used timestamp of a file.

        Args:
            path: Path to the artifact file

        Returns:
            Timezone-aware UTC modification time, or None if the file is absent
        """
        ...

    @abstractmethod
    def set_last_used(self, path: Path, instant: datetime) -> None:
        """Set the last-used timestamp of a file.

        No-op if the file does not exist at call time.

        Args:
            path: Path to the artifact file
            instant: Timestamp to record
        """
        ...

    @abstractmethod
    def list_files(self, root: Path) -> list[Path]:
        """List every regular file under root, recursively.

        Args:
            root: Directory to scan

        Returns:
            Sorted list of file paths, empty if root does not exist
        """
        ...

    @abstractmethod
    def remove(self, path: Path) -> bool:
        """Delete a file, ignoring it if it is already gone.

        Args:
            path: Path to the artifact file

        Returns:
            True if a file was removed, False if it was already missing
        """
        ...
