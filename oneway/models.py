"""Core data models for contests, votes and leaderboards."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Self


@dataclass(frozen=True)
class Artist:
    """An artist from the directory.

    Attributes:
        id: Directory identifier
        name: Display name
        category: Platform category (e.g. "Beat Maker", "Ghost Writer")
        genre: Musical genre
        followers, plays, sales: Static popularity figures
        certification: One of "none", "gold", "platinum", "diamond"
        rank: Static platform rank (1 = most popular)
    """
    id: str
    name: str
    category: str
    genre: str
    followers: int = 0
    plays: int = 0
    sales: int = 0
    certification: str = "none"
    rank: int = 0
    verified: bool = False
    is_vip: bool = False


@dataclass(frozen=True)
class Contest:
    """A named competition with a prize. Tallies and allowances are scoped to it."""
    id: str
    title: str
    prize: int
    category: str
    description: str = ""


@dataclass(frozen=True)
class Vote:
    """A single vote. Created once per successful cast, never changed."""
    id: str
    contest_id: str
    artist_id: str
    user_id: str
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "contest_id": self.contest_id,
            "artist_id": self.artist_id,
            "user_id": self.user_id,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class LeaderboardEntry:
    """An artist's position on a contest leaderboard.

    Attributes:
        artist: The ranked artist
        votes: Current tally for the artist in the contest
        rank: 1-indexed placement (artists with equal votes share the same rank)
        tied: Whether this artist shares its vote count with others
    """
    artist: Artist
    votes: int
    rank: int
    tied: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "artist_id": self.artist.id,
            "name": self.artist.name,
            "category": self.artist.category,
            "votes": self.votes,
            "rank": self.rank,
            "tied": self.tied,
        }

    @classmethod
    def build_ranking(cls, ordered: list[tuple[Artist, int]]) -> list[Self]:
        """Build leaderboard entries from (artist, votes) pairs.

        Args:
            ordered: Pairs already sorted by descending votes. Neighbouring
                pairs with the same vote count form a tie.

        Returns:
            List of LeaderboardEntry objects with correct ranks and tied flags.
        """
        entries = []
        rank = 1
        i = 0
        while i < len(ordered):
            j = i
            while j < len(ordered) and ordered[j][1] == ordered[i][1]:
                j += 1
            tied = j - i > 1
            for artist, votes in ordered[i:j]:
                entries.append(cls(artist=artist, votes=votes, rank=rank, tied=tied))
            rank += j - i
            i = j

        return entries
