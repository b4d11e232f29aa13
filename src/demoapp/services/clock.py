"""Process-wide start clock and timestamp formatting.

The start time is captured exactly once by the lifespan startup hook, before
the listener accepts connections, and is read-only afterward. Every uptime
figure the service reports is derived from it.
"""

from __future__ import annotations

from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(moment: datetime) -> str:
    """Format a local datetime as ``yyyy-MM-dd HH:mm:ss``."""
    return moment.strftime(TIMESTAMP_FORMAT)


def now() -> datetime:
    return datetime.now()


class ClockError(RuntimeError):
    """Raised when the clock is started twice or read before it is started."""


class ServiceClock:
    """Set-once start timestamp with uptime arithmetic."""

    def __init__(self) -> None:
        self._start_time: datetime | None = None

    def start(self, moment: datetime | None = None) -> datetime:
        """Capture the start time. May only be called once."""
        if self._start_time is not None:
            raise ClockError("service clock already started")
        self._start_time = moment or now()
        return self._start_time

    @property
    def started(self) -> bool:
        return self._start_time is not None

    @property
    def start_time(self) -> datetime:
        if self._start_time is None:
            raise ClockError("service clock not started")
        return self._start_time

    def uptime_seconds(self, moment: datetime | None = None) -> int:
        """Whole seconds between the start time and ``moment`` (default: now).

        Clamped at zero so a wall-clock step backwards never yields a
        negative uptime.
        """
        elapsed = (moment or now()) - self.start_time
        return max(0, int(elapsed.total_seconds()))
