"""Tests for clocks."""

from datetime import datetime, timedelta, timezone

import pytest

from oneway.clock import FrozenClock, SystemClock


class TestFrozenClock:
    def test_stays_put(self):
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)
        clock = FrozenClock(start)
        assert clock.now() == start
        assert clock.now() == start

    def test_advance(self):
        clock = FrozenClock(datetime(2026, 1, 1, 23, 59, tzinfo=timezone.utc))
        clock.advance(minutes=2)
        assert clock.now() == datetime(2026, 1, 2, 0, 1, tzinfo=timezone.utc)
        clock.advance(timedelta(days=1))
        assert clock.now().day == 3

    def test_cannot_go_backwards(self):
        clock = FrozenClock(datetime(2026, 1, 1, tzinfo=timezone.utc))
        with pytest.raises(ValueError):
            clock.advance(hours=-1)

    def test_needs_aware_start(self):
        with pytest.raises(ValueError):
            FrozenClock(datetime(2026, 1, 1))


def test_system_clock_is_aware():
    assert SystemClock().now().tzinfo is not None
