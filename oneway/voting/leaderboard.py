"""Contest leaderboard ranking."""

from collections.abc import Callable, Iterable

from oneway.models import Artist, LeaderboardEntry

# Leaderboard sizes offered by the app
LEADERBOARD_PRESETS: dict[str, int] = {
    "top10": 10,
    "top50": 50,
    "top100": 100,
}


def preset_limit(preset: str) -> int:
    """Return the entry limit for a preset name such as "top50"."""
    try:
        return LEADERBOARD_PRESETS[preset]
    except KeyError:
        raise ValueError(
            f"Unknown leaderboard preset {preset!r}, "
            f"expected one of {', '.join(LEADERBOARD_PRESETS)}"
        ) from None


def rank_artists(
    candidates: Iterable[Artist],
    tally: Callable[[str], int],
    limit: int,
) -> list[LeaderboardEntry]:
    """Rank candidate artists by descending vote count.

    Args:
        candidates: Artists to rank, in the order the caller lists them
        tally: Returns the current vote count for an artist id (0 if none)
        limit: Maximum number of entries to return

    Returns:
        At most ``limit`` entries. Artists with equal votes keep their input
        order, so the result is deterministic for a given tally snapshot.
    """
    if limit < 0:
        raise ValueError(f"Leaderboard limit must not be negative, got {limit}")

    scored = [(artist, tally(artist.id)) for artist in candidates]
    # sorted() is stable, which keeps input order among equal counts
    scored = sorted(scored, key=lambda pair: pair[1], reverse=True)
    return LeaderboardEntry.build_ranking(scored)[:limit]
