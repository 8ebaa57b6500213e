"""Persistent cache of parsed wiktextract records.

Key Components:
    - RecordStore: one SQLite database per edition, rows keyed by language
    - CachedRecordSource: streams cached records into dictionary builds
    - JsonlRecordSource: streams the raw dump directly when caching is off

Usage Example:
    from wikidict.record_cache import RecordStore

    store = RecordStore.open("en", Path("data/db"))
    store.populate(Path("data/kaikki/en-extract.jsonl"))
    for entry in store.fetch_by_language("fr"):
        print(entry.word)
"""

from .codec import decode_entry, encode_entry
from .jsonl import iter_jsonl_entries
from .sources import CachedRecordSource, JsonlRecordSource, RecordSource
from .store import DB_FILENAME_TEMPLATE, RecordStore, resolve_store_path

__all__ = [
    "CachedRecordSource",
    "DB_FILENAME_TEMPLATE",
    "JsonlRecordSource",
    "RecordSource",
    "RecordStore",
    "decode_entry",
    "encode_entry",
    "iter_jsonl_entries",
    "resolve_store_path",
]
