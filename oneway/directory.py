"""Static artist and contest reference data for the demo app."""

from collections.abc import Iterable

from oneway.models import Artist, Contest

ARTISTS: list[Artist] = [
    Artist("1", "DJ Nova", "Beat Maker", "Hip-Hop", 2500000, 45000000, 12500, "diamond", 1, True, True),
    Artist("2", "Lyric Storm", "Ghost Writer", "R&B", 1800000, 32000000, 9800, "diamond", 2, True, True),
    Artist("3", "Flow Master", "Freestyler", "Rap", 1500000, 28000000, 8200, "platinum", 3, True),
    Artist("4", "Melody Queen", "Featured Artist", "Pop", 1200000, 22000000, 7500, "platinum", 4, True, True),
    Artist("5", "Bass King", "Beat Maker", "EDM", 980000, 18000000, 6200, "gold", 5, True),
    Artist("6", "Verse Viper", "Ghost Writer", "Hip-Hop", 850000, 15000000, 5800, "gold", 6, True),
    Artist("7", "Rhythm Rebel", "Freestyler", "Trap", 720000, 12000000, 5200, "gold", 7, True),
    Artist("8", "Soul Sister", "Featured Artist", "Soul", 650000, 9500000, 4500, "none", 8, True),
    Artist("9", "Beat Wizard", "Beat Maker", "Lo-Fi", 580000, 8200000, 3800, "none", 9, False),
    Artist("10", "MC Thunder", "Ad-Live", "Hip-Hop", 520000, 7500000, 3200, "none", 10, True),
    Artist("11", "Vinyl Vince", "Videos", "R&B", 480000, 6800000, 2900, "none", 11, True),
    Artist("12", "Echo Elite", "VIP Artist", "EDM", 450000, 6200000, 2600, "none", 12, True, True),
]

CONTESTS: list[Contest] = [
    Contest("1", "Beat Battle Championship", 10000, "Beat Makers",
            "Show off your production skills in the ultimate beat battle"),
    Contest("2", "Freestyle Friday Finals", 5000, "Freestylers",
            "Live freestyle competition with real-time voting"),
    Contest("3", "Ghost Writer Challenge", 7500, "Ghost Writers",
            "Write the best verse for a mystery artist"),
    Contest("4", "Collab Contest", 15000, "Featured Artists",
            "Create the best collaboration track"),
]

# Tallies the demo contests open with, {contest_id: {artist_id: votes}}
SEED_TALLIES: dict[str, dict[str, int]] = {
    "1": {"1": 1250, "2": 980, "3": 875, "4": 720, "5": 650,
          "6": 580, "7": 490, "8": 420, "9": 380, "10": 310},
    "2": {"1": 890, "2": 750, "3": 680, "4": 590, "5": 520},
    "3": {"1": 1100, "2": 920, "3": 810, "4": 700, "5": 620},
}


class ArtistDirectory:
    """Read-only lookup over artists and contests."""

    def __init__(self, artists: Iterable[Artist] = ARTISTS, contests: Iterable[Contest] = CONTESTS):
        self._artists = {a.id: a for a in artists}
        self._contests = {c.id: c for c in contests}

    @property
    def artists(self) -> list[Artist]:
        """All artists in directory order."""
        return list(self._artists.values())

    @property
    def contests(self) -> list[Contest]:
        return list(self._contests.values())

    def get_artist(self, artist_id: str) -> Artist | None:
        return self._artists.get(artist_id)

    def get_contest(self, contest_id: str) -> Contest | None:
        return self._contests.get(contest_id)
