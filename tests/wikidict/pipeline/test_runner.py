"""Single-request builds against an in-memory record source."""

from __future__ import annotations

import json

import pytest

from tests.helpers.records import CollectingWriter, InMemoryRecordSource, make_entry, tr
from wikidict.config_manager import FilterRule
from wikidict.dictionaries import get_dictionary
from wikidict.diagnostics import Diagnostics
from wikidict.dictionaries.base import DictRequest
from wikidict.errors import ConfigurationError, PipelineError
from wikidict.pipeline.runner import build_dictionary, check_request


def _foo(ipa="/fu/"):
    return make_entry("foo", "fr", sounds=[{"ipa": ipa}])


def test_glossary_build_writes_one_archive(settings):
    records = InMemoryRecordSource(
        {
            "en": [
                make_entry("cat", "en", translations=[tr("fr", "chat")]),
                make_entry("dog", "en", translations=[tr("de", "Hund")]),
                make_entry("chat", "fr", translations=[tr("fr", "chat")]),
            ]
        }
    )
    writer = CollectingWriter()

    result = build_dictionary(
        get_dictionary("glossary"),
        DictRequest(("en",), "en", "fr"),
        settings=settings,
        records=records,
        writer=writer,
    )

    assert records.calls == [("en", "en")]
    assert result.scanned == 2
    assert result.emitted == 1
    assert list(writer.written) == ["wty-en-fr-gloss"]
    assert writer.rows("wty-en-fr-gloss")[0][:2] == ["cat", "cat"]


def test_merged_build_deduplicates_across_editions(settings):
    records = InMemoryRecordSource({"en": [_foo()], "de": [_foo(" /fu/ ")]})
    writer = CollectingWriter()

    result = build_dictionary(
        get_dictionary("ipa-merged"),
        DictRequest(("en", "de"), "fr", "fr"),
        settings=settings,
        records=records,
        writer=writer,
    )

    assert result.buckets == 1
    rows = writer.rows("wty-fr-fr-ipa-merged")
    assert rows == [["foo", "ipa", {"reading": "foo", "transcriptions": [{"ipa": "/fu/", "tags": []}]}]]


def test_per_edition_build_keeps_one_bucket_per_edition(settings):
    records = InMemoryRecordSource({"en": [_foo()]})
    writer = CollectingWriter()

    result = build_dictionary(
        get_dictionary("ipa"),
        DictRequest(("en",), "fr", "en"),
        settings=settings,
        records=records,
        writer=writer,
    )

    assert result.buckets == 1
    assert list(writer.written) == ["wty-fr-en-ipa"]


def test_empty_buckets_produce_no_output(settings):
    writer = CollectingWriter()

    result = build_dictionary(
        get_dictionary("glossary"),
        DictRequest(("en",), "en", "fr"),
        settings=settings,
        records=InMemoryRecordSource({"en": [make_entry("cat", "en")]}),
        writer=writer,
    )

    assert writer.written == {}
    assert result.written == []


def test_filters_and_first_limit_accepted_records(settings):
    records = InMemoryRecordSource(
        {
            "en": [
                make_entry(word, "en", pos=pos, translations=[tr("fr", word.upper())])
                for word, pos in [("a", "noun"), ("b", "verb"), ("c", "noun"), ("d", "noun")]
            ]
        }
    )
    tuned = settings.model_copy(
        update={"rejects": [FilterRule(field="pos", value="verb")], "first": 2}
    )
    writer = CollectingWriter()

    result = build_dictionary(
        get_dictionary("glossary"),
        DictRequest(("en",), "en", "fr"),
        settings=tuned,
        records=records,
        writer=writer,
    )

    assert result.accepted == 2
    assert [row[0] for row in writer.rows("wty-en-fr-gloss")] == ["a", "c"]


def test_skip_output_and_save_temps(settings):
    tuned = settings.model_copy(update={"skip_output": True, "save_temps": True})
    writer = CollectingWriter()

    build_dictionary(
        get_dictionary("ipa"),
        DictRequest(("en",), "fr", "en"),
        settings=tuned,
        records=InMemoryRecordSource({"en": [_foo()]}),
        writer=writer,
    )

    assert writer.written == {}
    tidy = tuned.data_dir / "temp" / "wty-fr-en-ipa" / "tidy.jsonl"
    lines = tidy.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[0])[0] == "foo"


def test_pretty_tidy_dump_is_indented(settings):
    tuned = settings.model_copy(update={"skip_output": True, "save_temps": True, "pretty": True})

    build_dictionary(
        get_dictionary("ipa"),
        DictRequest(("en",), "fr", "en"),
        settings=tuned,
        records=InMemoryRecordSource({"en": [_foo()]}),
        writer=CollectingWriter(),
    )

    text = (tuned.data_dir / "temp" / "wty-fr-en-ipa" / "tidy.jsonl").read_text(encoding="utf-8")
    assert text.startswith("[\n  ")
    assert json.loads(text)[0] == "foo"


def test_diagnostics_report_rejected_pos(settings):
    tuned = settings.model_copy(update={"write_diagnostics": True})

    build_dictionary(
        get_dictionary("glossary"),
        DictRequest(("en",), "en", "fr"),
        settings=tuned,
        records=InMemoryRecordSource(
            {"en": [make_entry("x", "en", pos="mystery", translations=[tr("fr", "y")])]}
        ),
        writer=CollectingWriter(),
    )

    report = json.loads(
        (tuned.data_dir / "diagnostics" / "wty-en-fr-gloss" / "tags.json").read_text("utf-8")
    )
    assert report["rejected"] == {"mystery": [1, "x"]}


def test_tags_are_not_inspected_without_diagnostics(settings, monkeypatch):
    observed = []
    monkeypatch.setattr(
        Diagnostics, "observe_pos", lambda self, pos, word: observed.append((pos, word))
    )

    build_dictionary(
        get_dictionary("glossary"),
        DictRequest(("en",), "en", "fr"),
        settings=settings,
        records=InMemoryRecordSource(
            {"en": [make_entry("x", "en", pos="mystery", translations=[tr("fr", "y")])]}
        ),
        writer=CollectingWriter(),
    )

    assert observed == []
    assert not (settings.data_dir / "diagnostics").exists()


def test_failures_carry_the_combination(settings):
    class BrokenSource:
        def records(self, edition, language):
            raise OSError("disk gone")

    with pytest.raises(PipelineError) as excinfo:
        build_dictionary(
            get_dictionary("ipa"),
            DictRequest(("de",), "de", "de"),
            settings=settings,
            records=BrokenSource(),
        )

    assert excinfo.value.identity == "ipa-de-de-de"
    assert isinstance(excinfo.value.cause, OSError)


@pytest.mark.parametrize(
    "kind, request_",
    [
        ("glossary", DictRequest(("en",), "en", "en")),
        ("glossary", DictRequest(("xx",), "xx", "en")),
        ("ipa", DictRequest(("en",), "zz", "en")),
        ("ipa", DictRequest((), "en", "en")),
    ],
)
def test_check_request_refuses_invalid_requests(kind, request_):
    with pytest.raises(ConfigurationError):
        check_request(get_dictionary(kind), request_)
