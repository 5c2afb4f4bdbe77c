# ABOUTME: Sequential item catalogue builder: sprite filenames -> wiki lookups -> items.json
# ABOUTME: One request in flight at a time; any failure aborts the run before anything is written

from __future__ import annotations

from pathlib import Path

from isaac_vote_tools.config import Config
from isaac_vote_tools.items.base import ItemRecord
from isaac_vote_tools.items.filenames import extract_item_id, list_item_files, make_lookup_key
from isaac_vote_tools.items.parsing import extract_item_details
from isaac_vote_tools.items.storage import write_items_json
from isaac_vote_tools.items.wiki import WikiItemClient
from isaac_vote_tools.utils.logging import get_logger


class ItemMetadataFetcher:
    """Builds the item catalogue from a directory of collectible sprites."""

    def __init__(self, config: Config, wiki: WikiItemClient | None = None):
        self.config = config
        self.wiki = wiki or WikiItemClient(config)
        self.logger = get_logger(__name__)

    async def lookup(self, key: str) -> ItemRecord:
        """Look up a single item by wiki key (e.g. "c20")."""
        fragment = await self.wiki.fetch_fragment(key)
        details = extract_item_details(fragment)
        if not details.has_quality or not details.has_name:
            self.logger.debug("Wiki fragment incomplete", key=key, name=details.name, quality=details.quality)
        record = details.to_record(key)
        self.logger.info("Item resolved", key=key, name=record.name, quality=record.quality)
        return record

    async def collect(self, directory: Path) -> list[ItemRecord]:
        """Look up every collectible in the directory, in filename order."""
        filenames = list_item_files(directory)
        self.logger.info("Collecting item metadata", directory=str(directory), file_count=len(filenames))

        records: list[ItemRecord] = []
        for filename in filenames:
            item_id = extract_item_id(filename)
            if item_id is None:
                self.logger.debug("Skipping file without collectible ID", filename=filename)
                continue
            key = make_lookup_key(item_id, self.config.item_key_prefix)
            records.append(await self.lookup(key))

        return records

    async def run(self, directory: Path | None = None, output: Path | None = None) -> list[ItemRecord]:
        """Collect all records and write them to the output JSON file."""
        directory = Path(directory or self.config.items_dir)
        output = Path(output or self.config.output_path)

        records = await self.collect(directory)
        write_items_json(records, output)

        self.logger.info("Item catalogue written", output=str(output), record_count=len(records))
        return records

    async def close(self) -> None:
        await self.wiki.close()
