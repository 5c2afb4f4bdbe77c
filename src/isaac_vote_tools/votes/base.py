# ABOUTME: Data models for the vote API: request body, endpoint targets and per-request outcomes
# ABOUTME: VoteTarget keeps the current and legacy endpoints as separate configurable targets

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from isaac_vote_tools.config import Config

# Browser-emulation headers the vote site expects from its own front end
BASE_HEADERS = {
    "accept": "application/json, text/plain, */*",
    "accept-language": "zh-CN,zh;q=0.9,en;q=0.8,en-GB;q=0.7,en-US;q=0.6",
    "cache-control": "no-cache",
    "content-type": "application/json",
    "pragma": "no-cache",
}

BROWSER_HEADERS = {
    "sec-ch-ua": '"Not(A:Brand";v="99", "Microsoft Edge";v="133", "Chromium";v="133"',
    "sec-ch-ua-mobile": "?0",
    "sec-ch-ua-platform": '"Linux"',
    "sec-fetch-dest": "empty",
    "sec-fetch-mode": "cors",
    "sec-fetch-site": "same-origin",
}

REFERRER_POLICY = "strict-origin-when-cross-origin"


class VoteRequest(BaseModel):
    """Body of a single pairwise vote."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["item"] = "item"
    winner: int
    loser: int
    filter_num: int = Field(alias="filterNum")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class VoteTarget(BaseModel):
    """A vote endpoint together with the header profile it is called with."""

    name: str
    url: str
    referer: str
    browser_headers: bool = False
    send_session_cookie: bool = False

    @classmethod
    def current(cls, config: Config) -> "VoteTarget":
        return cls(
            name="current",
            url=config.vote_url,
            referer=config.vote_referer,
            browser_headers=True,
            send_session_cookie=True,
        )

    @classmethod
    def legacy(cls, config: Config) -> "VoteTarget":
        return cls(name="legacy", url=config.legacy_vote_url, referer=config.legacy_vote_referer)


VOTE_TARGETS = ("current", "legacy")


def get_vote_target(name: str, config: Config) -> VoteTarget:
    """Resolve a target name to a configured VoteTarget."""
    if name == "current":
        return VoteTarget.current(config)
    if name == "legacy":
        return VoteTarget.legacy(config)
    raise ValueError(f"Unknown vote target {name!r}, expected one of {', '.join(VOTE_TARGETS)}")


class VoteOutcome(BaseModel):
    """Result of one vote request: the parsed JSON body or the error that replaced it."""

    loser: int
    response: Any = None
    error: str | None = None
    error_type: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None
