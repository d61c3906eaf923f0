"""Simulate a few days of fan voting in a demo contest.

Generates fake fans with faker using a fixed seed, lets each fan spend their
daily votes on random artists, and prints the resulting leaderboard. Useful
for eyeballing the daily reset and the leaderboard tie handling.

Usage:
    python scripts/simulate_contest.py
    python scripts/simulate_contest.py --contest 2 --fans 50 --days 3 --preset top50
"""

import argparse
import logging
import random
from datetime import datetime, timezone

from faker import Faker

from oneway.clock import FrozenClock
from oneway.config import settings
from oneway.contests import ContestService
from oneway.directory import SEED_TALLIES, ArtistDirectory
from oneway.notifications import NotificationCenter
from oneway.voting import LEADERBOARD_PRESETS, VoteLimitExceeded, VotingLedger

SEED = 20260101


def generate_fans(count: int, fake: Faker) -> list[str]:
    """Return unique fake user names to vote as."""
    fans: list[str] = []
    seen: set[str] = set()
    while len(fans) < count:
        name = fake.user_name()
        if name not in seen:
            seen.add(name)
            fans.append(name)
    return fans


def main():
    parser = argparse.ArgumentParser(
        description="Simulate fan voting in a demo contest")
    parser.add_argument("--contest", default="1", help="Contest id (default: 1)")
    parser.add_argument("--fans", type=int, default=20, help="Number of fake fans (default: 20)")
    parser.add_argument("--days", type=int, default=2, help="Days to simulate (default: 2)")
    parser.add_argument("--preset", default="top10", choices=list(LEADERBOARD_PRESETS),
                        help="Leaderboard size (default: top10)")
    parser.add_argument("--no-seed-tallies", action="store_true",
                        help="Start every artist at zero votes")
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    fake = Faker()
    Faker.seed(SEED)
    rng = random.Random(SEED)

    clock = FrozenClock(datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc))
    directory = ArtistDirectory()
    ledger = VotingLedger(clock=clock, seed_tallies=None if args.no_seed_tallies else SEED_TALLIES)
    inbox = NotificationCenter(clock=clock)
    service = ContestService(ledger, directory, inbox)

    contest = directory.get_contest(args.contest)
    if contest is None:
        parser.error(f"Unknown contest {args.contest!r}")

    fans = generate_fans(args.fans, fake)
    print(f"Simulating {args.days} day(s) of voting by {len(fans)} fans in {contest.title!r}")

    for day in range(args.days):
        rejected = 0
        for fan in fans:
            # One extra attempt per fan to exercise the daily limit
            for _ in range(ledger.max_daily_votes + 1):
                artist = rng.choice(directory.artists)
                try:
                    service.vote(contest.id, artist.id, fan)
                except VoteLimitExceeded:
                    rejected += 1
        print(f"Day {day + 1}: {len(ledger.votes)} votes recorded so far, {rejected} rejected today")
        clock.advance(days=1)

    print()
    print(f"{args.preset} leaderboard")
    for entry in service.leaderboard(contest.id, args.preset):
        marker = "=" if entry.tied else " "
        print(f"{entry.rank:>4}{marker} {entry.artist.name:<16} {entry.votes:>6}")

    print(f"\n{inbox.unread_count()} unread notifications")


if __name__ == "__main__":
    main()
