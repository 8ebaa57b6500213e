"""Record cache: populate-once semantics and language-partitioned reads."""

from __future__ import annotations

import gzip

import pytest
from sqlalchemy import insert

from tests.helpers.records import make_entry, write_jsonl
from wikidict.database import CachedRecordModel, begin_connection
from wikidict.errors import CacheCorruptionError, RecordParseError
from wikidict.record_cache import (
    CachedRecordSource,
    RecordStore,
    decode_entry,
    encode_entry,
    iter_jsonl_entries,
    resolve_store_path,
)


def _dump(tmp_path):
    return write_jsonl(
        tmp_path / "kaikki" / "en-extract.jsonl",
        [
            make_entry("cat", "en"),
            make_entry("chat", "fr"),
            make_entry("dog", "en"),
            make_entry("Hund", "de"),
            make_entry("mouse", "en"),
        ],
    )


def test_populate_imports_every_line(tmp_path):
    store = RecordStore.open("en", tmp_path / "db")

    imported = store.populate(_dump(tmp_path))

    assert imported == 5
    assert store.count() == 5
    assert store.path == resolve_store_path("en", tmp_path / "db")
    assert store.path.name == "wiktextract_en.db"


def test_populate_is_a_noop_once_rows_exist(tmp_path):
    store = RecordStore.open("en", tmp_path / "db")
    raw = _dump(tmp_path)
    store.populate(raw)

    # Even a different dump is ignored once the store has rows.
    other = write_jsonl(tmp_path / "other.jsonl", [make_entry("bird", "en")])

    assert store.populate(raw) == 0
    assert store.populate(other) == 0
    assert store.count() == 5


def test_populate_failure_leaves_store_empty(tmp_path):
    raw = tmp_path / "broken.jsonl"
    good = make_entry("cat", "en").model_dump_json()
    raw.write_text(f"{good}\n{good}\n{{not json\n", encoding="utf-8")
    store = RecordStore.open("en", tmp_path / "db")

    with pytest.raises(RecordParseError) as excinfo:
        store.populate(raw)

    assert excinfo.value.line_number == 3
    assert store.count() == 0
    assert not store.is_populated()


def test_fetch_by_language_keeps_import_order(tmp_path):
    store = RecordStore.open("en", tmp_path / "db")
    store.populate(_dump(tmp_path))

    words = [entry.word for entry in store.fetch_by_language("en")]

    assert words == ["cat", "dog", "mouse"]
    assert [entry.word for entry in store.fetch_by_language("ja")] == []
    assert store.languages() == ["de", "en", "fr"]


def test_fetch_reports_corrupted_blobs(tmp_path):
    store = RecordStore.open("en", tmp_path / "db")
    with begin_connection(store.path) as connection:
        connection.execute(insert(CachedRecordModel), [{"lang": "en", "entry": b"garbage"}])

    with pytest.raises(CacheCorruptionError):
        list(store.fetch_by_language("en"))


def test_codec_preserves_translations():
    entry = make_entry(
        "cat",
        "en",
        translations=[{"code": "fr", "word": "chat", "sense": "animal"}],
        sounds=[{"ipa": "/kæt/"}],
    )

    decoded = decode_entry(encode_entry(entry))

    assert decoded == entry
    assert decoded.translations[0].lang_code == "fr"


def test_iter_jsonl_reads_gzip_and_skips_blank_lines(tmp_path):
    path = tmp_path / "en-extract.jsonl.gz"
    line = make_entry("cat", "en").model_dump_json()
    with gzip.open(path, "wt", encoding="utf-8") as handle:
        handle.write(f"{line}\n\n{line}\n")

    rows = list(iter_jsonl_entries(path))

    assert [number for number, _ in rows] == [1, 3]


def test_cached_source_reuses_one_store_per_edition(tmp_path):
    source = CachedRecordSource(tmp_path / "db")
    source.store("en").populate(_dump(tmp_path))

    assert source.store("en") is source.store("en")
    assert [entry.word for entry in source.records("en", "de")] == ["Hund"]
