# ABOUTME: Rich table builders for vote outcomes, item records and logging status
# ABOUTME: Shared key-value and multi-column table styling for CLI output

import json
from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.table import Table


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a two-column key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, no_wrap=False)
    table.add_column("Value", style=value_style, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_multi_column_table(
    title: str,
    columns: list[tuple[str, str]],
    rows: list[list[str]],
    title_style: str = "bold cyan",
    header_style: str = "bold magenta",
    alternate_row_styles: list[str] | None = None,
    box_style=ROUNDED,
) -> Table:
    """Create a multi-column table with zebra striping.

    Args:
        title: Table title with emoji/styling
        columns: List of (column_name, column_style) tuples
        rows: List of row data
        title_style: Style for the table title
        header_style: Style for column headers
        alternate_row_styles: Alternating row styles for zebra striping
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style=header_style,
        border_style="cyan",
        title_justify="left",
        row_styles=alternate_row_styles or ["", "dim"],
        expand=True,
    )

    for name, style in columns:
        table.add_column(name, style=style)

    for row in rows:
        table.add_row(*row)

    return table


def create_vote_outcomes_table(outcomes: list[Any], target: str) -> Table:
    """Create a table with one row per vote outcome.

    Args:
        outcomes: VoteOutcome objects, in loser order
        target: Name of the vote target for the title

    Returns:
        Styled vote outcome table
    """
    columns = [
        ("Loser", "cyan"),
        ("Status", "white"),
        ("Response / Error", "dim white"),
    ]

    rows = []
    for outcome in outcomes:
        if outcome.success:
            status = "[bold green]✅ Sent[/bold green]"
            detail = json.dumps(outcome.response, ensure_ascii=False, default=str)
        else:
            status = "[bold red]❌ Failed[/bold red]"
            detail = f"{outcome.error_type}: {outcome.error}"
        rows.append([str(outcome.loser), status, escape(detail[:120])])

    return create_multi_column_table(title=f"🗳️ Votes sent to {target}", columns=columns, rows=rows)


def create_item_records_table(records: list[Any], title: str = "📦 Item Catalogue") -> Table:
    """Create a table listing item records (id, name, quality)."""
    columns = [
        ("ID", "cyan"),
        ("Name", "green"),
        ("Quality", "yellow"),
    ]
    rows = [[escape(record.id), escape(record.name), escape(str(record.quality))] for record in records]
    return create_multi_column_table(title=title, columns=columns, rows=rows)


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["📊 JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()
    console.print(table)
    console.print()
