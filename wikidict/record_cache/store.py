"""Per-edition persistent store of parsed wiktextract records.

The raw dump of an edition is parsed once and stored in a SQLite database as
``(language code, encoded record)`` rows. Later builds stream the rows of one
language instead of re-parsing the whole dump.

A store is imported at most once: :meth:`RecordStore.populate` is a no-op as
soon as the store holds any row, and the import runs in a single transaction
so a failed attempt leaves the store empty and safe to retry.
"""

from __future__ import annotations

import threading
import time
from pathlib import Path
from typing import Dict, Iterator, List

from sqlalchemy import func, insert, select
from sqlalchemy.exc import SQLAlchemyError

from .. import logging_manager as log_mgr
from ..database import Base, CachedRecordModel, begin_connection, get_engine
from ..errors import CacheStoreError
from ..models.wiktextract import WordEntry
from .codec import decode_entry, encode_entry
from .jsonl import iter_jsonl_entries

logger = log_mgr.get_logger().getChild("record_cache")

DB_FILENAME_TEMPLATE = "wiktextract_{edition}.db"
INSERT_BATCH_SIZE = 5_000
FETCH_BATCH_SIZE = 1_000

_populate_locks: Dict[str, threading.Lock] = {}
_populate_locks_guard = threading.Lock()


def _populate_lock(path: Path) -> threading.Lock:
    key = str(path.resolve())
    with _populate_locks_guard:
        lock = _populate_locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _populate_locks[key] = lock
        return lock


def resolve_store_path(edition: str, cache_dir: Path) -> Path:
    return Path(cache_dir) / DB_FILENAME_TEMPLATE.format(edition=edition)


class RecordStore:
    """Cached records of one edition, partitioned by language code."""

    def __init__(self, edition: str, path: Path) -> None:
        self.edition = edition
        self.path = Path(path)

    @classmethod
    def open(cls, edition: str, cache_dir: Path) -> "RecordStore":
        """Open the store of ``edition``, creating the database on first use."""

        path = resolve_store_path(edition, cache_dir)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            Base.metadata.create_all(get_engine(path))
        except (OSError, SQLAlchemyError) as exc:
            raise CacheStoreError(f"Failed to open record cache at {path}: {exc}") from exc
        return cls(edition, path)

    def count(self) -> int:
        """Return the number of cached records."""

        try:
            with get_engine(self.path).connect() as connection:
                return int(
                    connection.execute(
                        select(func.count()).select_from(CachedRecordModel)
                    ).scalar_one()
                )
        except SQLAlchemyError as exc:
            raise CacheStoreError(f"Failed to count records in {self.path}: {exc}") from exc

    def is_populated(self) -> bool:
        return self.count() > 0

    def populate(self, raw_path: Path) -> int:
        """Import every line of ``raw_path`` unless the store already has rows.

        Returns the number of imported records (``0`` when the import was
        skipped). A malformed line aborts the whole import with
        :class:`~wikidict.errors.RecordParseError` and nothing is committed.
        """

        with _populate_lock(self.path):
            existing = self.count()
            if existing:
                logger.debug(
                    "Record cache already initialized for %s (%d rows)",
                    self.edition,
                    existing,
                    extra={"event": "record_cache.populate.skip", "edition": self.edition},
                )
                return 0

            logger.info(
                "Record cache empty for %s, importing %s",
                self.edition,
                raw_path,
                extra={"event": "record_cache.populate.start", "edition": self.edition},
            )
            start = time.perf_counter()
            imported = 0
            try:
                with begin_connection(self.path) as connection:
                    batch: List[Dict[str, object]] = []
                    for _line_number, entry in iter_jsonl_entries(Path(raw_path)):
                        batch.append({"lang": entry.lang_code, "entry": encode_entry(entry)})
                        if len(batch) >= INSERT_BATCH_SIZE:
                            connection.execute(insert(CachedRecordModel), batch)
                            imported += len(batch)
                            batch = []
                    if batch:
                        connection.execute(insert(CachedRecordModel), batch)
                        imported += len(batch)
            except SQLAlchemyError as exc:
                raise CacheStoreError(
                    f"Failed to import {raw_path} into {self.path}: {exc}"
                ) from exc

            logger.info(
                "Imported %d records for %s",
                imported,
                self.edition,
                extra={
                    "event": "record_cache.populate.complete",
                    "edition": self.edition,
                    "duration_ms": round((time.perf_counter() - start) * 1000.0, 2),
                },
            )
            return imported

    def fetch_by_language(self, language: str) -> Iterator[WordEntry]:
        """Yield every cached record whose language code is ``language``.

        Records come back in import order. A blob that fails to decode raises
        :class:`~wikidict.errors.CacheCorruptionError`.
        """

        statement = (
            select(CachedRecordModel.entry)
            .where(CachedRecordModel.lang == language)
            .order_by(CachedRecordModel.id)
        )
        try:
            with get_engine(self.path).connect() as connection:
                result = connection.execution_options(yield_per=FETCH_BATCH_SIZE).execute(
                    statement
                )
                for blob in result.scalars():
                    yield decode_entry(blob)
        except SQLAlchemyError as exc:
            raise CacheStoreError(
                f"Failed to read {language!r} records from {self.path}: {exc}"
            ) from exc

    def languages(self) -> List[str]:
        """Return the distinct language codes present in the store."""

        statement = select(CachedRecordModel.lang).distinct().order_by(CachedRecordModel.lang)
        try:
            with get_engine(self.path).connect() as connection:
                return list(connection.execute(statement).scalars())
        except SQLAlchemyError as exc:
            raise CacheStoreError(f"Failed to list languages in {self.path}: {exc}") from exc


__all__ = ["DB_FILENAME_TEMPLATE", "RecordStore", "resolve_store_path"]
