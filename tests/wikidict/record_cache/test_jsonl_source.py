from __future__ import annotations

from tests.helpers.records import make_entry, write_jsonl
from wikidict.record_cache import JsonlRecordSource


def test_jsonl_source_filters_by_language(tmp_path):
    raw = write_jsonl(
        tmp_path / "de-extract.jsonl",
        [make_entry("Katze", "de"), make_entry("cat", "en"), make_entry("Hund", "de")],
    )
    located = []

    def locate(edition):
        located.append(edition)
        return raw

    source = JsonlRecordSource(locate)

    assert [entry.word for entry in source.records("de", "de")] == ["Katze", "Hund"]
    assert located == ["de"]
