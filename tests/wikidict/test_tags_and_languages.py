from __future__ import annotations

import pytest

from tests.helpers.records import make_entry
from wikidict.errors import ConfigurationError
from wikidict.languages import (
    ALL_EDITIONS,
    EDITIONS,
    SELF_MARKER,
    language_name,
    validate_edition,
    validate_editions,
)
from wikidict.models.yomitan import Transcription
from wikidict.tags import find_short_pos, get_ipas, get_reading


def test_short_pos_lookup():
    assert find_short_pos("noun") == "n"
    assert find_short_pos("verb") == "v"
    assert find_short_pos("mystery") is None


def test_reading_comes_from_tagged_forms():
    entry = make_entry("漢字", "ja", forms=[{"form": "かんじ", "tags": ["hiragana"]}])

    assert get_reading("en", "ja", entry) == "かんじ"
    assert get_reading("en", "en", make_entry("cat", "en")) is None


def test_ipas_are_distinct_and_ordered():
    entry = make_entry(
        "tomato",
        "en",
        sounds=[{"ipa": "/təˈmeɪtoʊ/", "tags": ["US"]}, {"ipa": "/təˈmɑːtəʊ/"}, {"ipa": "/təˈmeɪtoʊ/", "tags": ["US"]}],
    )

    assert get_ipas(entry) == [
        Transcription("/təˈmeɪtoʊ/", ("US",)),
        Transcription("/təˈmɑːtəʊ/"),
    ]


def test_edition_validation():
    assert SELF_MARKER in EDITIONS
    assert ALL_EDITIONS not in EDITIONS
    assert validate_edition(" EN ") == "en"
    assert validate_editions(["en", "de", "en"]) == ["en", "de"]
    with pytest.raises(ConfigurationError):
        validate_edition("xx")


def test_language_names():
    assert language_name("grc") == "Ancient Greek"
    with pytest.raises(ConfigurationError):
        language_name("xx")
