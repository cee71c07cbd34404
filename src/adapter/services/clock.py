from datetime import UTC, datetime

from src.app.services.clock import Clock


class SystemClock(Clock):
    """Wall clock, UTC, tz-naive to match stored instants"""

    def now(self) -> datetime:
        return datetime.now(UTC).replace(tzinfo=None)
