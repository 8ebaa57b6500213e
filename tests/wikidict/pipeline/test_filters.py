from __future__ import annotations

import pytest

from tests.helpers.records import make_entry
from wikidict.config_manager import FilterRule
from wikidict.pipeline import rejected


def test_no_rules_accepts_everything():
    assert not rejected(make_entry("cat", "en"))


def test_filters_must_all_match():
    filters = [FilterRule.parse("pos=noun"), FilterRule.parse("word=cat")]

    assert not rejected(make_entry("cat", "en"), filters)
    assert rejected(make_entry("dog", "en"), filters)


def test_any_reject_rule_drops_the_entry():
    rejects = [FilterRule.parse("lang_code=fr"), FilterRule.parse("pos,verb")]

    assert rejected(make_entry("chat", "fr"), rejects=rejects)
    assert rejected(make_entry("run", "en", pos="verb"), rejects=rejects)
    assert not rejected(make_entry("cat", "en"), rejects=rejects)


@pytest.mark.parametrize("raw", ["pos", "gloss=x"])
def test_invalid_rules_are_refused(raw):
    with pytest.raises(ValueError):
        FilterRule.parse(raw)
