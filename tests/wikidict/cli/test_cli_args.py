from __future__ import annotations

import pytest

from wikidict.cli import args
from wikidict.cli.orchestrator import build_request
from wikidict.config_manager import FilterRule
from wikidict.errors import ConfigurationError


def test_build_flags_become_settings_overrides():
    parsed = args.parse_cli_args(
        [
            "glossary",
            "en",
            "fr",
            "--filter",
            "pos=noun",
            "--reject",
            "word=cat",
            "--first",
            "10",
            "--no-cache",
            "--skip-output",
        ]
    )

    overrides = args.settings_overrides(parsed)

    assert parsed.command == "glossary"
    assert overrides == {
        "filters": [FilterRule(field="pos", value="noun")],
        "rejects": [FilterRule(field="word", value="cat")],
        "first": 10,
        "use_cache": False,
        "skip_output": True,
    }


def test_unset_flags_do_not_override_configuration():
    parsed = args.parse_cli_args(["cache", "en", "de"])

    assert parsed.editions == ["en", "de"]
    assert args.settings_overrides(parsed) == {}


def test_bad_filter_field_is_a_usage_error():
    with pytest.raises(SystemExit):
        args.parse_cli_args(["glossary", "en", "fr", "--filter", "gloss=x"])


def test_release_lists_are_comma_separated():
    parsed = args.parse_cli_args(["release", "--editions", "en,de", "--kinds", "ipa"])

    assert parsed.editions == ["en", "de"]
    assert parsed.kinds == ["ipa"]
    assert parsed.languages is None


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["glossary", "en", "fr"], "en-en-fr"),
        (["glossary-extended", "de", "sq", "grc"], "de-sq-grc"),
        (["glossary-extended", "all", "sq", "grc"], "all-sq-grc"),
        (["ipa", "fr", "en"], "en-fr-en"),
        (["ipa-merged", "fr", "--editions", "en,de"], "all-fr-fr"),
    ],
)
def test_build_request_maps_positionals(argv, expected):
    assert str(build_request(args.parse_cli_args(argv))) == expected


def test_build_request_rejects_unknown_codes():
    with pytest.raises(ConfigurationError):
        build_request(args.parse_cli_args(["glossary", "en", "xx"]))
