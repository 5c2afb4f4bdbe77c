# ABOUTME: Item catalogue scraping from the Isaac wiki
# ABOUTME: Filename parsing, wiki lookups, fragment extraction and JSON output

from .base import NAME_NOT_FOUND, QUALITY_NOT_FOUND, ItemDetails, ItemRecord, WikiResponseError
from .fetcher import ItemMetadataFetcher
from .filenames import extract_item_id, list_item_files, make_lookup_key
from .parsing import extract_item_details, extract_item_name, extract_quality, parse_fragment
from .storage import write_items_json
from .wiki import WikiItemClient, build_search_expression

__all__ = [
    "NAME_NOT_FOUND",
    "QUALITY_NOT_FOUND",
    "ItemDetails",
    "ItemMetadataFetcher",
    "ItemRecord",
    "WikiItemClient",
    "WikiResponseError",
    "build_search_expression",
    "extract_item_details",
    "extract_item_id",
    "extract_item_name",
    "extract_quality",
    "list_item_files",
    "make_lookup_key",
    "parse_fragment",
    "write_items_json",
]
