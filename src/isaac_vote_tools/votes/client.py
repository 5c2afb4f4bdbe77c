# ABOUTME: Async httpx client for the vote API
# ABOUTME: Sends one vote per call and turns transport/parse failures into logged VoteOutcomes

from typing import Any

import httpx

from isaac_vote_tools.config import Config
from isaac_vote_tools.utils.logging import get_logger, log_api_call
from isaac_vote_tools.votes.base import (
    BASE_HEADERS,
    BROWSER_HEADERS,
    REFERRER_POLICY,
    VoteOutcome,
    VoteRequest,
    VoteTarget,
)


class VoteClient:
    """Client for sending votes to a single VoteTarget."""

    def __init__(self, config: Config, target: VoteTarget, client: httpx.AsyncClient | None = None):
        self.config = config
        self.target = target
        # No timeout: a hung request simply stays in flight
        self.http_client = client or httpx.AsyncClient(timeout=None)  # Allow for dependency injection
        self.logger = get_logger(__name__).bind(target=target.name)

    def build_headers(self) -> dict[str, str]:
        headers = dict(BASE_HEADERS)
        if self.target.browser_headers:
            headers.update(BROWSER_HEADERS)
        if self.target.send_session_cookie:
            headers["cookie"] = f"user_id={self.config.session_user_id}"
        headers["Referer"] = self.target.referer
        headers["Referrer-Policy"] = REFERRER_POLICY
        return headers

    def build_request(self, loser: int, winner: int | None = None, filter_num: int | None = None) -> VoteRequest:
        return VoteRequest(
            winner=self.config.winner if winner is None else winner,
            loser=loser,
            filter_num=self.config.filter_num if filter_num is None else filter_num,
        )

    @log_api_call("vote")
    async def post_vote(self, vote: VoteRequest) -> Any:
        """POST a vote and return the decoded JSON body.

        Raises:
            httpx.HTTPError: On transport failure
            ValueError: If the response body is not JSON
        """
        response = await self.http_client.post(self.target.url, json=vote.to_payload(), headers=self.build_headers())
        return response.json()

    async def send_vote(self, loser: int, winner: int | None = None, filter_num: int | None = None) -> VoteOutcome:
        """Send one vote; any failure is recorded in the outcome instead of raised."""
        vote = self.build_request(loser, winner=winner, filter_num=filter_num)
        try:
            data = await self.post_vote(vote)
        except Exception as e:
            self.logger.warning("Vote failed", loser=loser, error=str(e), error_type=type(e).__name__)
            return VoteOutcome(loser=loser, error=str(e) or type(e).__name__, error_type=type(e).__name__)

        self.logger.info("Vote sent", loser=loser, response=data)
        return VoteOutcome(loser=loser, response=data)

    async def close(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> "VoteClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
