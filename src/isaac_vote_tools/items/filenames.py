# ABOUTME: Local sprite directory listing and collectible ID extraction from filenames
# ABOUTME: Filenames look like collectibles_020_thesadonion.png; non-matching files are skipped

import re
from pathlib import Path

COLLECTIBLE_PATTERN = re.compile(r"collectibles_(\d+)_")


def list_item_files(directory: Path) -> list[str]:
    """List file names in the directory, sorted by name."""
    return sorted(entry.name for entry in Path(directory).iterdir() if entry.is_file())


def extract_item_id(filename: str) -> str | None:
    """Extract the collectible ID from a filename, or None if it has none."""
    # Example: "collectibles_20_whatever.png" -> "20"
    match = COLLECTIBLE_PATTERN.search(filename)
    return match.group(1) if match else None


def make_lookup_key(item_id: str, prefix: str = "c") -> str:
    """Turn a collectible ID into the wiki lookup key ("20" -> "c20")."""
    return f"{prefix}{item_id}"
