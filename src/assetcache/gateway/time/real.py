"""Real clock backed by the system time."""

from datetime import UTC, datetime

from assetcache.gateway.time.abc import Time


class RealTime(Time):
    """Production implementation using datetime.now()."""

    def now(self) -> datetime:
        return datetime.now(tz=UTC)
