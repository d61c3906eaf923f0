"""Daily vote allowances with a lazy midnight reset."""

import logging
from dataclasses import dataclass
from datetime import date
from zoneinfo import ZoneInfo

from oneway.clock import Clock

logger = logging.getLogger(__name__)


@dataclass
class _Allowance:
    period: date
    remaining: int


class DailyAllowance:
    """Tracks how many votes each user has left in each contest today.

    An allowance is created at the maximum on first read and resets to the
    maximum the first time it is read on a later calendar day in ``timezone``.
    Nothing else sets it: only ``consume`` lowers it, by exactly one.
    """

    def __init__(self, clock: Clock, maximum: int = 5, timezone: str = "UTC"):
        if maximum < 1:
            raise ValueError(f"Daily vote maximum must be positive, got {maximum}")
        self.clock = clock
        self.maximum = maximum
        self.tz = ZoneInfo(timezone)
        self._allowances: dict[tuple[str, str], _Allowance] = {}

    def today(self) -> date:
        return self.clock.now().astimezone(self.tz).date()

    def _current(self, user_id: str, contest_id: str) -> _Allowance | None:
        allowance = self._allowances.get((user_id, contest_id))
        if allowance is not None and allowance.period != self.today():
            logger.debug("Resetting allowance for user %s in contest %s", user_id, contest_id)
            allowance.period = self.today()
            allowance.remaining = self.maximum
        return allowance

    def remaining(self, user_id: str, contest_id: str) -> int:
        """Votes left today for the user in the contest. Never negative."""
        allowance = self._current(user_id, contest_id)
        if allowance is None:
            return self.maximum
        return allowance.remaining

    def consume(self, user_id: str, contest_id: str) -> int:
        """Use one vote and return how many are left.

        The caller must have checked ``remaining`` first; consuming an empty
        allowance is a programming error.
        """
        allowance = self._current(user_id, contest_id)
        if allowance is None:
            allowance = _Allowance(period=self.today(), remaining=self.maximum)
            self._allowances[(user_id, contest_id)] = allowance
        if allowance.remaining <= 0:
            raise RuntimeError(f"No votes left for user {user_id} in contest {contest_id}")
        allowance.remaining -= 1
        return allowance.remaining
