# ABOUTME: Tests for rich table builders
# ABOUTME: Renders tables to a recording console and checks their content

from rich.console import Console

from isaac_vote_tools.items.base import ItemRecord
from isaac_vote_tools.utils.rich_tables import (
    create_item_records_table,
    create_logging_status_table,
    create_vote_outcomes_table,
    print_rich_table,
)
from isaac_vote_tools.votes.base import VoteOutcome


def _render(table) -> str:
    console = Console(record=True, width=200)
    print_rich_table(console, table)
    return console.export_text()


def test_vote_outcomes_table():
    outcomes = [
        VoteOutcome(loser=530, response={"code": 200}),
        VoteOutcome(loser=531, error="connection refused", error_type="ConnectError"),
    ]
    text = _render(create_vote_outcomes_table(outcomes, "current"))

    assert "Votes sent to current" in text
    assert "530" in text and '{"code": 200}' in text
    assert "ConnectError: connection refused" in text


def test_item_records_table():
    text = _render(create_item_records_table([ItemRecord(id="c1", name="悲伤洋葱", quality="3"), ItemRecord(id="c2")]))

    assert "c1" in text
    assert "悲伤洋葱" in text
    assert "未找到道具名称" in text


def test_logging_status_table():
    status = {
        "mode": "production",
        "log_directory": None,
        "log_files": {"main": None, "json": None, "errors": None},
        "third_party_suppressed": ["httpx"],
    }
    text = _render(create_logging_status_table(status))

    assert "Logging Configuration" in text
    assert "N/A (production mode)" in text
