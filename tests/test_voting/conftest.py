"""Shared fixtures for voting tests."""

import pytest
from tests.conftest import START

from oneway.clock import FrozenClock
from oneway.voting.ledger import VotingLedger


@pytest.fixture
def clock():
    return FrozenClock(START)


@pytest.fixture
def ledger(clock):
    """A fresh ledger with the default allowance of 5 votes per day."""
    return VotingLedger(clock=clock, max_daily_votes=5, timezone="UTC")


@pytest.fixture
def tallied_ledger(clock):
    """Contest "c" with tallies A=10, B=25, C=5.

    Seeded rather than voted so the numbers match the leaderboard scenario
    without needing dozens of fans.
    """
    return VotingLedger(
        clock=clock,
        max_daily_votes=5,
        timezone="UTC",
        seed_tallies={"c": {"A": 10, "B": 25, "C": 5}},
    )
