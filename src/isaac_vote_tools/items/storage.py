# ABOUTME: JSON serialisation of the item catalogue
# ABOUTME: Writes the full record list as a pretty-printed array, replacing any existing file

from pathlib import Path

from pydantic import TypeAdapter

from isaac_vote_tools.items.base import ItemRecord

_records_adapter = TypeAdapter(list[ItemRecord])


def write_items_json(records: list[ItemRecord], path: Path) -> Path:
    """Write records to path as an indented JSON array (UTF-8, non-ASCII kept)."""
    path = Path(path)
    path.write_bytes(_records_adapter.dump_json(records, indent=2))
    return path
