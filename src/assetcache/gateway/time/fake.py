"""Fake clock for testing.

FakeTime returns a fixed instant that tests advance explicitly, so every
expiration decision is reproducible.
"""

from datetime import UTC, datetime, timedelta

from assetcache.gateway.time.abc import Time

DEFAULT_FAKE_NOW = datetime(2024, 1, 15, 14, 30, 0, tzinfo=UTC)


class FakeTime(Time):
    """In-memory clock that only moves when told to."""

    def __init__(self, *, now: datetime | None = None) -> None:
        """Create FakeTime starting at the given instant.

        Args:
            now: Starting instant. Defaults to DEFAULT_FAKE_NOW.
        """
        self._now = now if now is not None else DEFAULT_FAKE_NOW
        self._now_calls = 0

    def now(self) -> datetime:
        self._now_calls += 1
        return self._now

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward by delta."""
        self._now = self._now + delta

    @property
    def now_calls(self) -> int:
        """Number of times now() was read. For test assertions only."""
        return self._now_calls
