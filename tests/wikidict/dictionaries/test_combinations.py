"""Which (edition, source, target) combinations each kind accepts."""

from __future__ import annotations

import pytest

from wikidict.dictionaries import (
    GlossaryDictionary,
    GlossaryExtendedDictionary,
    IpaDictionary,
    IpaMergedDictionary,
    available_kinds,
    get_dictionary,
)
from wikidict.errors import ConfigurationError


@pytest.mark.parametrize(
    "dictionary, combination, expected",
    [
        (GlossaryDictionary(), ("en", "en", "fr"), True),
        (GlossaryDictionary(), ("en", "en", "en"), False),
        (GlossaryDictionary(), ("simple", "simple", "simple"), False),
        (GlossaryExtendedDictionary(), ("all", "sq", "grc"), True),
        (GlossaryExtendedDictionary(), ("all", "sq", "sq"), False),
        (IpaDictionary(), ("en", "en", "en"), True),
        (IpaDictionary(), ("simple", "simple", "simple"), True),
        (IpaDictionary(), ("simple", "en", "en"), False),
        (IpaDictionary(), ("en", "simple", "en"), False),
        (IpaMergedDictionary(), ("simple", "simple", "simple"), False),
        (IpaMergedDictionary(), ("all", "fr", "fr"), True),
    ],
)
def test_accepts_combination(dictionary, combination, expected):
    assert dictionary.accepts_combination(*combination) is expected


def test_registry_lists_every_kind():
    assert available_kinds() == ["glossary", "glossary-extended", "ipa", "ipa-merged"]
    assert get_dictionary("ipa").name == "ipa"


def test_unknown_kind_raises_configuration_error():
    with pytest.raises(ConfigurationError):
        get_dictionary("thesaurus")
