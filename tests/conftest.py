"""Shared test helpers."""

from datetime import datetime, timezone

from oneway.models import Artist, LeaderboardEntry

# Midday UTC, well clear of the daily reset boundary
START = datetime(2026, 3, 14, 12, 0, tzinfo=timezone.utc)


def make_artists(*ids: str) -> list[Artist]:
    """Build minimal Artists whose name is their id."""
    return [Artist(id=i, name=i, category="Beat Maker", genre="Hip-Hop") for i in ids]


def entry_names(entries: list[LeaderboardEntry]) -> list[str]:
    """Extract artist names from leaderboard entries, in order."""
    return [e.artist.name for e in entries]
