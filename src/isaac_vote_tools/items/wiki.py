# ABOUTME: httpx client for the Isaac wiki parse API
# ABOUTME: Renders an IsaacGsearch template per lookup key and returns the HTML fragment

import json
from typing import Any

import httpx

from isaac_vote_tools.config import Config
from isaac_vote_tools.items.base import WikiResponseError
from isaac_vote_tools.utils.logging import get_logger, log_api_call

WIKI_HEADERS = {
    "accept": "application/json, text/javascript, */*; q=0.01",
    "sec-ch-ua": '"Not(A:Brand";v="99", "Microsoft Edge";v="133", "Chromium";v="133"',
    "sec-ch-ua-mobile": "?0",
    "sec-ch-ua-platform": '"Linux"',
    "x-requested-with": "XMLHttpRequest",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def build_search_expression(key: str) -> str:
    """Build the wikitext that invokes the IsaacGsearch module for one item key.

    The module takes its JSON argument with braces escaped as &a / &b, since raw
    braces would close the template invocation.
    """
    query = {
        "filter": {"Type": {"$regex": "道具", "$options": "i"}},
        "pagesize": 16,
        "current_page": 1,
        "keyword": key,
        "version": "忏悔",
        "type": "large",
    }
    argument = json.dumps(query, ensure_ascii=False, separators=(",", ":"))
    argument = argument.replace("{", "&a").replace("}", "&b")
    return "{{#invoke:IsaacGsearch|_find_and_get_result|" + argument + "}}"


def build_query_params(key: str) -> dict[str, str]:
    return {
        "action": "parse",
        "format": "json",
        "text": build_search_expression(key),
        "utf8": "1",
        "prop": "text",
        "contentmodel": "wikitext",
        "maxage": "6000",
        "smaxage": "6000",
    }


def extract_fragment(data: Any) -> str:
    """Pull the rendered HTML out of a parse API envelope."""
    try:
        fragment = data["parse"]["text"]["*"]
    except (KeyError, TypeError) as e:
        raise WikiResponseError(f"Wiki response has no parse.text fragment: {e}") from e
    if not isinstance(fragment, str):
        raise WikiResponseError(f"Wiki fragment is {type(fragment).__name__}, expected str")
    return fragment


class WikiItemClient:
    """Looks up item search results on the Isaac wiki."""

    def __init__(self, config: Config, client: httpx.AsyncClient | None = None):
        self.api_url = config.wiki_api_url
        self.headers = {**WIKI_HEADERS, "Referer": config.wiki_referer}
        self.http_client = client or httpx.AsyncClient(timeout=None)  # Allow for dependency injection
        self.logger = get_logger(__name__)

    @log_api_call("huijiwiki")
    async def fetch_fragment(self, key: str) -> str:
        """Fetch the search-result HTML fragment for a lookup key.

        Raises:
            httpx.HTTPError: On transport failure
            ValueError: If the response body is not JSON
            WikiResponseError: If the envelope lacks the fragment
        """
        self.logger.debug("Querying wiki", key=key)
        response = await self.http_client.get(self.api_url, params=build_query_params(key), headers=self.headers)
        return extract_fragment(response.json())

    async def close(self) -> None:
        await self.http_client.aclose()
