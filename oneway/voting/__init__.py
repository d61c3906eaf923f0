"""Contest voting: allowances, tallies and leaderboards."""

from .leaderboard import LEADERBOARD_PRESETS, preset_limit, rank_artists  # noqa: F401
from .ledger import VoteError, VoteLimitExceeded, VotingLedger  # noqa: F401
