"""Clocks supplying timestamps to the ledgers."""

from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock:
    """A clock that only moves when told to. Used by tests and simulations.

    Example:
        >>> clock = FrozenClock(datetime(2026, 1, 1, 23, 59, tzinfo=timezone.utc))
        >>> clock.advance(minutes=2)
        >>> clock.now().day
        2
    """

    def __init__(self, start: datetime | None = None):
        if start is None:
            start = datetime.now(timezone.utc)
        if start.tzinfo is None:
            raise ValueError("FrozenClock needs a timezone-aware start time")
        self._now = start

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta | None = None, **kwargs) -> None:
        """Move the clock forward by a timedelta or timedelta keyword arguments."""
        if delta is None:
            delta = timedelta(**kwargs)
        if delta < timedelta(0):
            raise ValueError("FrozenClock cannot move backwards")
        self._now += delta
