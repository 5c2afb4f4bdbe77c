# ABOUTME: Tests for the Isaac wiki parse API client
# ABOUTME: Covers the search template, query parameters and envelope validation

from urllib.parse import quote

import httpx
import pytest

from isaac_vote_tools.items.base import WikiResponseError
from isaac_vote_tools.items.wiki import (
    WikiItemClient,
    build_query_params,
    build_search_expression,
    extract_fragment,
)

C20_EXPRESSION = (
    '{{#invoke:IsaacGsearch|_find_and_get_result|&a"filter":&a"Type":&a"$regex":"道具","$options":"i"&b&b,'
    '"pagesize":16,"current_page":1,"keyword":"c20","version":"忏悔","type":"large"&b}}'
)

# Percent-encoded form the wiki front end sends for c20
C20_ENCODED = (
    "%7B%7B%23invoke%3AIsaacGsearch%7C_find_and_get_result%7C%26a%22filter%22%3A%26a%22Type%22%3A%26a%22"
    "%24regex%22%3A%22%E9%81%93%E5%85%B7%22%2C%22%24options%22%3A%22i%22%26b%26b%2C%22pagesize%22%3A16%2C"
    "%22current_page%22%3A1%2C%22keyword%22%3A%22c20%22%2C%22version%22%3A%22%E5%BF%8F%E6%82%94%22%2C"
    "%22type%22%3A%22large%22%26b%7D%7D"
)


class TestSearchExpression:
    def test_expression_for_c20(self):
        assert build_search_expression("c20") == C20_EXPRESSION

    def test_expression_matches_front_end_encoding(self):
        assert quote(build_search_expression("c20"), safe="") == C20_ENCODED

    def test_query_params(self):
        params = build_query_params("c1")
        assert params["action"] == "parse"
        assert params["format"] == "json"
        assert params["prop"] == "text"
        assert params["contentmodel"] == "wikitext"
        assert params["maxage"] == params["smaxage"] == "6000"
        assert '"keyword":"c1"' in params["text"]


class TestExtractFragment:
    def test_fragment_present(self, wiki_envelope):
        assert extract_fragment(wiki_envelope("<p>hi</p>")) == "<p>hi</p>"

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"error": {"code": "badvalue"}},
            {"parse": {"text": {}}},
            {"parse": None},
            [],
        ],
    )
    def test_fragment_missing(self, data):
        with pytest.raises(WikiResponseError):
            extract_fragment(data)

    def test_fragment_wrong_type(self):
        with pytest.raises(WikiResponseError, match="expected str"):
            extract_fragment({"parse": {"text": {"*": 12}}})


class TestWikiItemClient:
    @pytest.mark.asyncio
    async def test_fetch_fragment(self, config, httpx_mock, wiki_envelope, onion_fragment):
        httpx_mock.add_response(method="GET", json=wiki_envelope(onion_fragment))

        client = WikiItemClient(config)
        try:
            fragment = await client.fetch_fragment("c1")
        finally:
            await client.close()

        assert fragment == onion_fragment

        request = httpx_mock.get_request()
        assert request.url.host == "isaac.huijiwiki.com"
        assert request.url.path == "/api.php"
        assert request.url.params["text"] == build_search_expression("c1")
        assert request.headers["x-requested-with"] == "XMLHttpRequest"
        assert request.headers["Referer"] == config.wiki_referer

    @pytest.mark.asyncio
    async def test_fetch_fragment_invalid_json(self, config, httpx_mock):
        httpx_mock.add_response(text="<!DOCTYPE html>")

        client = WikiItemClient(config)
        with pytest.raises(ValueError):
            await client.fetch_fragment("c1")
        await client.close()

    @pytest.mark.asyncio
    async def test_fetch_fragment_transport_error(self, config, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("dns failure"))

        client = WikiItemClient(config)
        with pytest.raises(httpx.ConnectError):
            await client.fetch_fragment("c1")
        await client.close()

    @pytest.mark.asyncio
    async def test_custom_client_sends_browser_headers(self, config, httpx_mock, wiki_envelope, onion_fragment):
        httpx_mock.add_response(json=wiki_envelope(onion_fragment))

        custom_client = httpx.AsyncClient()
        client = WikiItemClient(config, client=custom_client)
        assert client.http_client is custom_client

        await client.fetch_fragment("c1")
        await client.close()

        request = httpx_mock.get_request()
        assert request.headers["x-requested-with"] == "XMLHttpRequest"
        assert request.headers["accept"] == "application/json, text/javascript, */*; q=0.01"
        assert request.headers["Referer"] == config.wiki_referer
