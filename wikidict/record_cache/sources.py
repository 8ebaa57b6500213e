"""Record sources feeding word entries into a dictionary build."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable, Dict, Iterator, Protocol

from ..models.wiktextract import WordEntry
from .jsonl import iter_jsonl_entries
from .store import RecordStore


class RecordSource(Protocol):
    """Anything that streams the word entries of one language in an edition."""

    def records(self, edition: str, language: str) -> Iterator[WordEntry]:
        ...


class CachedRecordSource:
    """Stream records from the per-edition record cache."""

    def __init__(self, cache_dir: Path) -> None:
        self._cache_dir = Path(cache_dir)
        self._stores: Dict[str, RecordStore] = {}
        self._lock = threading.Lock()

    def store(self, edition: str) -> RecordStore:
        with self._lock:
            store = self._stores.get(edition)
            if store is None:
                store = RecordStore.open(edition, self._cache_dir)
                self._stores[edition] = store
            return store

    def records(self, edition: str, language: str) -> Iterator[WordEntry]:
        return self.store(edition).fetch_by_language(language)


class JsonlRecordSource:
    """Stream records straight from the raw dataset, without caching."""

    def __init__(self, locate: Callable[[str], Path]) -> None:
        self._locate = locate

    def records(self, edition: str, language: str) -> Iterator[WordEntry]:
        for _line_number, entry in iter_jsonl_entries(self._locate(edition)):
            if entry.lang_code == language:
                yield entry


__all__ = [
    "CachedRecordSource",
    "JsonlRecordSource",
    "RecordSource",
]
