"""Extended glossary: two foreign languages paired through pivot editions."""

from __future__ import annotations

from tests.helpers.records import make_entry, tr
from wikidict.config_manager import WikidictSettings
from wikidict.dictionaries import GlossaryExtendedDictionary
from wikidict.dictionaries.glossary_extended import ExtendedItem, pair_translations
from wikidict.languages import Langs
from wikidict.pipeline.keys import EditionScope


def _gibraltar():
    return make_entry(
        "Gibraltar",
        "en",
        pos="name",
        translations=[
            tr("sq", "Gjibraltar", "rock"),
            tr("sq", "Gjibraltari", "rock"),
            tr("grc", "Ἡράκλειαι στῆλαι", "rock"),
            tr("grc", "Κάλπη", "rock"),
            tr("fr", "Gibraltar", "rock"),
        ],
    )


def test_each_target_word_is_defined_by_every_source_word():
    irs = []

    GlossaryExtendedDictionary().process(Langs("en", "sq", "grc"), _gibraltar(), irs)

    assert irs == [
        ExtendedItem("Ἡράκλειαι στῆλαι", "name", "en", ["Gjibraltar", "Gjibraltari"]),
        ExtendedItem("Κάλπη", "name", "en", ["Gjibraltar", "Gjibraltari"]),
    ]


def test_senses_missing_one_side_are_dropped():
    entry = make_entry(
        "pivot",
        "en",
        translations=[tr("sq", "a", "one"), tr("grc", "b", "two")],
    )

    assert pair_translations(entry, "sq", "grc") == {}


def test_postprocess_merges_lemmas_as_a_set_keeping_first_metadata():
    irs = [
        ExtendedItem("λ", "n", "en", ["a", "b"]),
        ExtendedItem("μ", "v", "en", ["c"]),
        ExtendedItem("λ", "v", "de", ["b", "d"]),
    ]

    GlossaryExtendedDictionary().postprocess(irs)

    assert irs == [
        ExtendedItem("λ", "n", "en", ["a", "b", "d"]),
        ExtendedItem("μ", "v", "en", ["c"]),
    ]


def test_emit_builds_unread_term_rows():
    irs = [ExtendedItem("λ", "n", "en", ["a"])]

    labelled = GlossaryExtendedDictionary().emit(
        Langs("all", "sq", "grc"), WikidictSettings(), irs
    )

    assert labelled[0].label == "term"
    assert labelled[0].entries[0].to_row()[:4] == ["λ", "", "n", "n"]


def test_keep_requires_translations_and_streams_the_pivot_language():
    dictionary = GlossaryExtendedDictionary()

    assert dictionary.edition_scope is EditionScope.ALL
    assert dictionary.memory_heavy
    assert dictionary.fetch_language(Langs("de", "sq", "grc")) == "de"
    assert dictionary.keep("sq", _gibraltar())
    assert not dictionary.keep("sq", make_entry("bare", "en"))


def test_release_requests_span_every_pivot_except_the_self_marker():
    requests = GlossaryExtendedDictionary().release_requests(["en", "simple", "de"], ["sq", "grc"])

    assert {request.editions for request in requests} == {("en", "de")}
    assert len(requests) == 4
