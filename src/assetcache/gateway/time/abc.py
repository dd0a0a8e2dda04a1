"""Clock abstraction so timestamp decisions can be tested deterministically."""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract clock for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware UTC datetime."""
        ...
