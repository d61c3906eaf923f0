"""Orchestrator: enter contests, cast votes, notify the user and build leaderboards."""

import logging
from dataclasses import dataclass
from typing import Any

from oneway.directory import ArtistDirectory
from oneway.models import Contest, LeaderboardEntry, Vote
from oneway.notifications import NotificationSink, NotificationType, vote_recorded_message
from oneway.voting.leaderboard import preset_limit
from oneway.voting.ledger import VotingLedger

logger = logging.getLogger(__name__)


class ContestError(Exception):
    """Base class for rejected contest actions."""
    pass


class UnknownContest(ContestError):
    def __init__(self, contest_id: str):
        self.contest_id = contest_id
        super().__init__(f"No contest with id {contest_id}")


class AlreadyEntered(ContestError):
    def __init__(self, user_id: str, contest_id: str):
        self.user_id = user_id
        self.contest_id = contest_id
        super().__init__(f"User {user_id} has already entered contest {contest_id}")


@dataclass
class VotingSummary:
    """A user's voting activity, as shown on the "My Votes" tab."""
    user_id: str
    total_votes: int
    votes_by_artist: dict[str, int]  # artist_id -> votes, in order of first vote

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "total_votes": self.total_votes,
            "votes_by_artist": self.votes_by_artist,
        }


class ContestService:
    """Consumer of the voting ledger used by the contest screens.

    The ledger itself never notifies anyone; this service emits the
    "Vote Recorded!" notification after each successful vote.
    """

    def __init__(self, ledger: VotingLedger, directory: ArtistDirectory,
                 notifications: NotificationSink):
        self.ledger = ledger
        self.directory = directory
        self.notifications = notifications
        self._entries: dict[str, list[str]] = {}  # user_id -> contest ids, in entry order

    def enter_contest(self, contest_id: str, user_id: str) -> Contest:
        """Enter a user into a contest and confirm it with a system notification.

        Raises:
            UnknownContest: If the contest is not in the directory
            AlreadyEntered: If the user has already entered this contest
        """
        contest = self.directory.get_contest(contest_id)
        if contest is None:
            raise UnknownContest(contest_id)
        entered = self._entries.setdefault(user_id, [])
        if contest_id in entered:
            raise AlreadyEntered(user_id, contest_id)
        entered.append(contest_id)
        logger.info("User %s entered contest %s", user_id, contest_id)

        self.notifications.push(
            NotificationType.SYSTEM,
            "Contest Entry Confirmed!",
            f"You've entered {contest.title}. Upload your music to complete your entry.",
            data={"contest_id": contest_id},
        )
        return contest

    def entered_contests(self, user_id: str) -> list[str]:
        return list(self._entries.get(user_id, []))

    def vote(self, contest_id: str, artist_id: str, user_id: str) -> Vote:
        """Cast a vote and notify the voter.

        Raises:
            VoteLimitExceeded: If the user's daily votes for the contest are
                used up. Nothing is recorded and no notification is sent.
        """
        vote = self.ledger.cast_vote(contest_id, artist_id, user_id)

        artist = self.directory.get_artist(artist_id)
        remaining = self.ledger.get_remaining_votes(user_id, contest_id)
        title, message = vote_recorded_message(artist.name if artist else None, remaining)
        self.notifications.push(
            NotificationType.VOTE, title, message,
            data={"contest_id": contest_id, "artist_id": artist_id, "vote_id": vote.id},
        )
        return vote

    def remaining_votes(self, user_id: str, contest_id: str) -> int:
        return self.ledger.get_remaining_votes(user_id, contest_id)

    def leaderboard(self, contest_id: str, preset: str = "top10") -> list[LeaderboardEntry]:
        """Rank every directory artist in the contest, cut to a preset size."""
        return self.ledger.rank_leaderboard(
            contest_id, self.directory.artists, preset_limit(preset)
        )

    def podium(self, contest_id: str) -> list[LeaderboardEntry]:
        """The top three of the leaderboard."""
        return self.leaderboard(contest_id)[:3]

    def my_votes(self, user_id: str) -> VotingSummary:
        votes_by_artist: dict[str, int] = {}
        votes = self.ledger.votes_by_user(user_id)
        for vote in votes:
            votes_by_artist[vote.artist_id] = votes_by_artist.get(vote.artist_id, 0) + 1
        return VotingSummary(user_id=user_id, total_votes=len(votes), votes_by_artist=votes_by_artist)
