"""Wall-clock time source (implements ClockProtocol)."""

from datetime import UTC, datetime


class SystemClock:
    """Returns the current time as an aware UTC datetime."""

    def now(self) -> datetime:
        return datetime.now(UTC)
