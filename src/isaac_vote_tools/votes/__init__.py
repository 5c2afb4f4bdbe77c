# ABOUTME: Vote API client and concurrent vote flood
# ABOUTME: Sends pairwise item votes to the current or legacy vote endpoint

from .base import VOTE_TARGETS, VoteOutcome, VoteRequest, VoteTarget, get_vote_target
from .client import VoteClient
from .flood import loser_range, run_vote_flood, send_single_vote

__all__ = [
    "VOTE_TARGETS",
    "VoteClient",
    "VoteOutcome",
    "VoteRequest",
    "VoteTarget",
    "get_vote_target",
    "loser_range",
    "run_vote_flood",
    "send_single_vote",
]
