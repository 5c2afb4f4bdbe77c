# ABOUTME: Concurrent fan-out of votes across a loser range, plus the single manual vote
# ABOUTME: Every vote is an independent task; results are joined and returned in loser order

import asyncio
from collections.abc import Iterable
from typing import Any

import httpx

from isaac_vote_tools.config import Config
from isaac_vote_tools.utils.logging import get_logger
from isaac_vote_tools.votes.base import VoteOutcome, VoteTarget
from isaac_vote_tools.votes.client import VoteClient

logger = get_logger(__name__)


def loser_range(config: Config) -> range:
    """Inclusive range of loser IDs from the configuration."""
    return range(config.loser_start, config.loser_end + 1)


async def run_vote_flood(
    client: VoteClient,
    losers: Iterable[int],
    winner: int | None = None,
    filter_num: int | None = None,
) -> list[VoteOutcome]:
    """Send one vote per loser concurrently and collect every outcome.

    Failures never cancel sibling requests: each outcome carries either the
    parsed response or the error for its loser.
    """
    losers = list(losers)
    logger.info("Starting vote flood", target=client.target.name, vote_count=len(losers))

    outcomes = await asyncio.gather(
        *(client.send_vote(loser, winner=winner, filter_num=filter_num) for loser in losers)
    )

    failed = sum(1 for outcome in outcomes if not outcome.success)
    logger.info("Vote flood finished", target=client.target.name, sent=len(outcomes), failed=failed)
    return list(outcomes)


async def send_single_vote(config: Config, client: httpx.AsyncClient | None = None) -> Any:
    """Send the fixed single vote to the legacy endpoint and return its JSON body.

    Errors propagate to the caller.
    """
    async with VoteClient(config, VoteTarget.legacy(config), client=client) as vote_client:
        vote = vote_client.build_request(config.single_vote_loser)
        data = await vote_client.post_vote(vote)
        logger.info("Single vote response", loser=vote.loser, response=data)
        return data
