# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands for the vote flood, the single vote and item catalogue scraping

import json as jsonlib
from pathlib import Path

import asyncclick as click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from isaac_vote_tools.config import Config, get_config
from isaac_vote_tools.items import ItemMetadataFetcher
from isaac_vote_tools.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_run_context,
    with_vote_context,
)
from isaac_vote_tools.utils.rich_tables import (
    create_item_records_table,
    create_logging_status_table,
    create_vote_outcomes_table,
    print_rich_table,
)
from isaac_vote_tools.votes import (
    VOTE_TARGETS,
    VoteClient,
    get_vote_target,
    loser_range,
    run_vote_flood,
    send_single_vote,
)

console = Console()


def _config_with_overrides(**overrides) -> Config:
    """Return the global config with any non-None CLI overrides applied."""
    config = get_config()
    updates = {key: value for key, value in overrides.items() if value is not None}
    return config.model_copy(update=updates) if updates else config


@click.command(name="vote-flood")
@click.option("--target", type=click.Choice(VOTE_TARGETS), default="current", help="Vote endpoint to use")
@click.option("--start", type=int, help="First loser ID (inclusive)")
@click.option("--end", type=int, help="Last loser ID (inclusive)")
@click.option("--winner", type=int, help="Winner item ID")
@click.option("--filter-num", type=int, help="Filter number sent with each vote")
@click.pass_context
async def vote_flood(ctx, target: str, start: int | None, end: int | None, winner: int | None, filter_num: int | None):
    """
    🗳️ Send one vote per loser ID in a range, all at once.
    """
    config = _config_with_overrides(loser_start=start, loser_end=end, winner=winner, filter_num=filter_num)
    await _vote_flood_async(config, target, ctx.obj["json_output"])


async def _vote_flood_async(config: Config, target_name: str, json_output: bool):
    target = get_vote_target(target_name, config)

    with with_vote_context(target.name, config.winner) as logger:
        losers = loser_range(config)
        logger.info("Starting vote flood", loser_start=config.loser_start, loser_end=config.loser_end)

        async with VoteClient(config, target) as client:
            outcomes = await run_vote_flood(client, losers)

        if json_output:
            click.echo(jsonlib.dumps([outcome.model_dump() for outcome in outcomes], ensure_ascii=False, default=str))
            return

        print_rich_table(console, create_vote_outcomes_table(outcomes, target.name))


@click.command(name="single-vote")
@click.pass_context
async def single_vote(ctx):
    """
    🔎 Send the single fixed vote to the legacy endpoint and show the response.
    """
    ok = await _single_vote_async(get_config(), ctx.obj["json_output"])
    if not ok:
        ctx.exit(1)


async def _single_vote_async(config: Config, json_output: bool) -> bool:
    with with_run_context("single_vote", target="legacy") as logger:
        try:
            data = await send_single_vote(config)
        except Exception as e:
            logger.error("Single vote failed", error=str(e), error_type=type(e).__name__)
            if not json_output:
                console.print(f"[red]❌ Vote failed: {type(e).__name__}: {escape(str(e))}[/red]")
            return False

    if json_output:
        click.echo(jsonlib.dumps(data, ensure_ascii=False, default=str))
    else:
        response_text = jsonlib.dumps(data, ensure_ascii=False, indent=2, default=str)
        console.print(Panel(escape(response_text), title="📨 Response"))
    return True


@click.command(name="fetch-items")
@click.option("--items-dir", type=click.Path(path_type=Path), help="Directory of collectible sprite files")
@click.option("--output", type=click.Path(path_type=Path), help="Output JSON path")
@click.pass_context
async def fetch_items(ctx, items_dir: Path | None, output: Path | None):
    """
    📦 Build items.json from the sprite directory using the Isaac wiki.

    Items are looked up one at a time; the first failure aborts the run
    and nothing is written.
    """
    config = _config_with_overrides(items_dir=items_dir, output_path=output)
    ok = await _fetch_items_async(config, ctx.obj["json_output"])
    if not ok:
        ctx.exit(1)


async def _fetch_items_async(config: Config, json_output: bool) -> bool:
    with with_run_context("fetch_items", items_dir=str(config.items_dir)) as logger:
        fetcher = ItemMetadataFetcher(config)
        try:
            if json_output:
                records = await fetcher.run()
            else:
                with console.status("🔍 Looking up items on the wiki..."):
                    records = await fetcher.run()
        except Exception as e:
            logger.error("Item fetch failed", error=str(e), error_type=type(e).__name__)
            if not json_output:
                console.print(f"[red]❌ Item fetch failed: {type(e).__name__}: {escape(str(e))}[/red]")
            return False
        finally:
            await fetcher.close()

        logger.info("Item fetch complete", record_count=len(records), output=str(config.output_path))

    if json_output:
        click.echo(jsonlib.dumps({"output": str(config.output_path), "record_count": len(records)}))
    else:
        print_rich_table(console, create_item_records_table(records))
        console.print(f"💾 Saved {len(records)} items to [bold green]{config.output_path}[/bold green]")
    return True


@click.command(name="lookup-item")
@click.argument("key")
@click.pass_context
async def lookup_item(ctx, key: str):
    """
    🧾 Look up a single item by wiki key (e.g. c20) without writing anything.
    """
    ok = await _lookup_item_async(get_config(), key, ctx.obj["json_output"])
    if not ok:
        ctx.exit(1)


async def _lookup_item_async(config: Config, key: str, json_output: bool) -> bool:
    with with_run_context("lookup_item", key=key) as logger:
        fetcher = ItemMetadataFetcher(config)
        try:
            record = await fetcher.lookup(key)
        except Exception as e:
            logger.error("Item lookup failed", error=str(e), error_type=type(e).__name__)
            if not json_output:
                console.print(f"[red]❌ Item lookup failed: {type(e).__name__}: {escape(str(e))}[/red]")
            return False
        finally:
            await fetcher.close()

    if json_output:
        click.echo(record.model_dump_json())
    else:
        console.print(escape(f"道具 {record.id} 的品质是 {record.quality}，名称是 {record.name}"))
    return True


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else config.log_mode

    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    print_rich_table(console, create_logging_status_table(status))


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON logs instead of rich interface")
@click.option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🎲 Isaac Vote Tools - helpers for the Isaac item vote site

    Send votes to the vote API and build the item catalogue from the
    Isaac wiki.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    _initialize_logging(json, log_level, log_file)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(vote_flood)
app.add_command(single_vote)
app.add_command(fetch_items)
app.add_command(lookup_item)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
