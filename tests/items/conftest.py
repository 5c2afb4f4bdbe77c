# ABOUTME: Shared fixtures for item catalogue tests
# ABOUTME: Sample wiki fragments and parse API envelopes

import pytest

from isaac_vote_tools.config import Config

ONION_FRAGMENT = """
<div class="mw-parser-output">
  <div class="i-gs-result">
    <div class="i-gs-icon-name"><a href="/wiki/c1"> </a><a href="/wiki/c1">悲伤洋葱</a></div>
    <span id="333">3</span>
  </div>
</div>
"""


@pytest.fixture
def onion_fragment() -> str:
    return ONION_FRAGMENT


@pytest.fixture
def make_fragment():
    """Factory for fragments with an optional name link and quality span."""

    def _make(name: str | None, quality: str | None) -> str:
        name_html = f'<div class="i-gs-icon-name"><a href="/wiki/{name}">{name}</a></div>' if name else ""
        quality_html = f'<span id="333">{quality}</span>' if quality is not None else ""
        return f'<div class="mw-parser-output">{name_html}{quality_html}</div>'

    return _make


@pytest.fixture
def wiki_envelope():
    """Factory wrapping an HTML fragment in a parse API response body."""

    def _wrap(html: str) -> dict:
        return {"parse": {"title": "API", "pageid": 0, "text": {"*": html}}}

    return _wrap


@pytest.fixture
def config(tmp_path):
    items_dir = tmp_path / "assets" / "items"
    items_dir.mkdir(parents=True)
    return Config(_env_file=None, items_dir=items_dir, output_path=tmp_path / "items.json")
