"""Services for Word Lookup."""

from .dictionary_client import DictionaryApiClient
from .entry_parser import is_not_found_payload, parse_entry, select_primary_entry

__all__ = [
    "DictionaryApiClient",
    "is_not_found_payload",
    "parse_entry",
    "select_primary_entry",
]
