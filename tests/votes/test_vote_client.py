# ABOUTME: Tests for the vote API client
# ABOUTME: Covers header profiles per target, request bodies and error capture

import httpx
import pytest

from isaac_vote_tools.config import Config
from isaac_vote_tools.votes.base import VoteRequest, VoteTarget, get_vote_target
from isaac_vote_tools.votes.client import VoteClient


@pytest.fixture
def config():
    return Config(_env_file=None)


class TestVoteRequest:
    """Test the vote body model."""

    def test_payload_uses_camel_case_filter_num(self):
        vote = VoteRequest(winner=628, loser=530, filter_num=705)
        assert vote.to_payload() == {"type": "item", "winner": 628, "loser": 530, "filterNum": 705}

    def test_accepts_alias_on_input(self):
        vote = VoteRequest(winner=1, loser=2, filterNum=3)
        assert vote.filter_num == 3


class TestVoteTargets:
    """Test the two endpoint profiles stay distinct."""

    def test_current_target(self, config):
        target = get_vote_target("current", config)
        assert target.url == "https://vote.qiuy.cloud/api/v1/vote/send"
        assert target.browser_headers
        assert target.send_session_cookie

    def test_legacy_target(self, config):
        target = get_vote_target("legacy", config)
        assert target.url == "http://114.55.238.72:8080/api/vote/sendVoting"
        assert not target.browser_headers
        assert not target.send_session_cookie

    def test_unknown_target(self, config):
        with pytest.raises(ValueError, match="Unknown vote target"):
            get_vote_target("staging", config)


class TestHeaders:
    """Test header construction per target."""

    def test_current_headers_include_cookie_and_browser_hints(self, config):
        client = VoteClient(config, VoteTarget.current(config))
        headers = client.build_headers()

        assert headers["cookie"] == "user_id=2a7b8050-b2a8-43a0-b5bd-d27805fbd160"
        assert headers["sec-fetch-site"] == "same-origin"
        assert headers["content-type"] == "application/json"
        assert headers["Referer"] == "https://vote.qiuy.cloud/"

    def test_legacy_headers_are_plain(self, config):
        client = VoteClient(config, VoteTarget.legacy(config))
        headers = client.build_headers()

        assert "cookie" not in headers
        assert "sec-ch-ua" not in headers
        assert headers["Referer"] == "http://114.55.238.72:8088/"

    def test_session_cookie_comes_from_config(self):
        config = Config(_env_file=None, session_user_id="abc")
        client = VoteClient(config, VoteTarget.current(config))
        assert client.build_headers()["cookie"] == "user_id=abc"


class TestSendVote:
    """Test a single vote round trip."""

    @pytest.mark.asyncio
    async def test_send_vote_success(self, config, httpx_mock):
        httpx_mock.add_response(url=config.vote_url, method="POST", json={"code": 200, "msg": "ok"})

        async with VoteClient(config, VoteTarget.current(config)) as client:
            outcome = await client.send_vote(530)

        assert outcome.success
        assert outcome.loser == 530
        assert outcome.response == {"code": 200, "msg": "ok"}

        request = httpx_mock.get_request()
        assert request.headers["cookie"] == "user_id=2a7b8050-b2a8-43a0-b5bd-d27805fbd160"

    @pytest.mark.asyncio
    async def test_send_vote_transport_error_is_captured(self, config, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))

        async with VoteClient(config, VoteTarget.current(config)) as client:
            outcome = await client.send_vote(531)

        assert not outcome.success
        assert outcome.loser == 531
        assert outcome.error_type == "ConnectError"
        assert "connection refused" in outcome.error

    @pytest.mark.asyncio
    async def test_send_vote_invalid_json_is_captured(self, config, httpx_mock):
        httpx_mock.add_response(text="<html>502 Bad Gateway</html>", status_code=502)

        async with VoteClient(config, VoteTarget.current(config)) as client:
            outcome = await client.send_vote(532)

        assert not outcome.success
        assert outcome.error_type == "JSONDecodeError"

    @pytest.mark.asyncio
    async def test_error_status_with_json_body_is_returned(self, config, httpx_mock):
        httpx_mock.add_response(status_code=429, json={"error": "too many votes"})

        async with VoteClient(config, VoteTarget.current(config)) as client:
            outcome = await client.send_vote(533)

        assert outcome.success
        assert outcome.response == {"error": "too many votes"}
