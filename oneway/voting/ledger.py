"""The voting ledger: daily allowances, vote records and tallies."""

import logging
import threading
import uuid
from collections.abc import Iterable, Mapping

from oneway.clock import Clock, SystemClock
from oneway.config import settings
from oneway.models import Artist, LeaderboardEntry, Vote
from oneway.voting.allowance import DailyAllowance
from oneway.voting.leaderboard import rank_artists

logger = logging.getLogger(__name__)


class VoteError(Exception):
    """Base class for rejected votes."""
    pass


class VoteLimitExceeded(VoteError):
    """Raised when a user has no votes left today in a contest.

    Nothing is recorded when this is raised.
    """

    def __init__(self, user_id: str, contest_id: str):
        self.user_id = user_id
        self.contest_id = contest_id
        super().__init__(
            f"User {user_id} has used all daily votes for contest {contest_id}"
        )


class VotingLedger:
    """Owns every vote cast, the per-contest tallies and the daily allowances.

    Casting a vote lowers the voter's allowance, appends a Vote and raises the
    artist's tally in one step under a lock. Whether the artist exists is the
    caller's concern; the ledger counts whatever id it is given.

    Args:
        clock: Source of vote timestamps and of the date used for resets
        max_daily_votes: Votes per user per contest per calendar day
        timezone: IANA timezone whose midnight starts a new day
        seed_tallies: Counts carried over from before this ledger existed,
            as {contest_id: {artist_id: count}}. They are kept apart from the
            recorded votes and only added in when ranking.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        max_daily_votes: int | None = None,
        timezone: str | None = None,
        seed_tallies: Mapping[str, Mapping[str, int]] | None = None,
    ):
        self.clock = clock or SystemClock()
        self.allowance = DailyAllowance(
            self.clock,
            maximum=max_daily_votes if max_daily_votes is not None else settings.MAX_DAILY_VOTES,
            timezone=timezone or settings.TIMEZONE,
        )
        self._votes: list[Vote] = []
        self._tallies: dict[str, dict[str, int]] = {}
        self._baseline: dict[str, dict[str, int]] = {}
        self._lock = threading.Lock()

        for contest_id, counts in (seed_tallies or {}).items():
            for artist_id, count in counts.items():
                if count < 0:
                    raise ValueError(
                        f"Seed tally for artist {artist_id} in contest {contest_id} is negative"
                    )
                self._baseline.setdefault(contest_id, {})[artist_id] = count

    @property
    def max_daily_votes(self) -> int:
        return self.allowance.maximum

    @property
    def votes(self) -> tuple[Vote, ...]:
        """Every vote recorded, oldest first."""
        return tuple(self._votes)

    def cast_vote(self, contest_id: str, artist_id: str, user_id: str) -> Vote:
        """Record a vote for an artist in a contest.

        Returns:
            The recorded Vote

        Raises:
            VoteLimitExceeded: If the user has no votes left today in this
                contest. No state changes in that case.
        """
        with self._lock:
            if self.allowance.remaining(user_id, contest_id) <= 0:
                logger.info("Vote rejected: user %s is out of votes in contest %s", user_id, contest_id)
                raise VoteLimitExceeded(user_id, contest_id)

            remaining = self.allowance.consume(user_id, contest_id)
            vote = Vote(
                id=uuid.uuid4().hex,
                contest_id=contest_id,
                artist_id=artist_id,
                user_id=user_id,
                timestamp=self.clock.now(),
            )
            self._votes.append(vote)
            contest_tally = self._tallies.setdefault(contest_id, {})
            contest_tally[artist_id] = contest_tally.get(artist_id, 0) + 1

        logger.debug(
            "User %s voted for artist %s in contest %s (%d left today)",
            user_id, artist_id, contest_id, remaining,
        )
        return vote

    def get_votes_for_artist(self, contest_id: str, artist_id: str) -> int:
        """Votes recorded by this ledger for an artist in a contest, 0 if nobody voted."""
        return self._tallies.get(contest_id, {}).get(artist_id, 0)

    def get_total_votes(self, contest_id: str, artist_id: str) -> int:
        """Recorded votes plus any seeded baseline. This is what the leaderboard ranks."""
        baseline = self._baseline.get(contest_id, {}).get(artist_id, 0)
        return baseline + self.get_votes_for_artist(contest_id, artist_id)

    def get_remaining_votes(self, user_id: str, contest_id: str) -> int:
        """Votes the user can still cast today in the contest."""
        with self._lock:
            return self.allowance.remaining(user_id, contest_id)

    def get_tally(self, contest_id: str) -> dict[str, int]:
        """A copy of the {artist_id: count} map of recorded votes for a contest."""
        return dict(self._tallies.get(contest_id, {}))

    def votes_by_user(self, user_id: str, contest_id: str | None = None) -> list[Vote]:
        """Votes cast by a user, oldest first, optionally within one contest."""
        return [
            v for v in self._votes
            if v.user_id == user_id and (contest_id is None or v.contest_id == contest_id)
        ]

    def rank_leaderboard(
        self, contest_id: str, candidate_artists: Iterable[Artist], limit: int
    ) -> list[LeaderboardEntry]:
        """Rank candidates by their total votes in the contest, highest first.

        Equal counts keep the order of ``candidate_artists``. Read-only, so it
        can be recomputed whenever the leaderboard is shown.
        """
        return rank_artists(
            candidate_artists,
            lambda artist_id: self.get_total_votes(contest_id, artist_id),
            limit,
        )
