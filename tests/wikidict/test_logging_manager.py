from __future__ import annotations

import json
import logging

from wikidict import logging_manager as log_mgr


def _record(message="hello", **extra):
    record = logging.LogRecord("wikidict.test", logging.INFO, __file__, 1, message, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_context_is_stamped_on_records():
    context_filter = log_mgr.LogContextFilter()
    record = _record()

    with log_mgr.log_context(dictionary="ipa", edition="en", source="fr", target="en"):
        context_filter.filter(record)

    payload = json.loads(log_mgr.JSONLogFormatter().format(record))
    assert payload["dictionary"] == "ipa"
    assert payload["edition"] == "en"
    assert payload["source"] == "fr"
    assert payload["message"] == "hello"
    assert log_mgr.get_log_context() == {}


def test_nested_contexts_restore_outer_values():
    with log_mgr.log_context(dictionary="gloss"):
        with log_mgr.log_context(edition="de"):
            assert log_mgr.get_log_context() == {"dictionary": "gloss", "edition": "de"}
        assert log_mgr.get_log_context() == {"dictionary": "gloss"}


def test_context_is_restored_when_the_block_raises():
    with log_mgr.log_context(dictionary="gloss"):
        try:
            with log_mgr.log_context(edition="de", source=None):
                assert log_mgr.get_log_context() == {"dictionary": "gloss", "edition": "de"}
                raise ValueError("boom")
        except ValueError:
            pass
        assert log_mgr.get_log_context() == {"dictionary": "gloss"}


def test_only_the_context_manager_is_public():
    assert not hasattr(log_mgr, "push_log_context")
    assert not hasattr(log_mgr, "pop_log_context")


def test_debug_flag_adjusts_level():
    try:
        assert log_mgr.configure_logging_level(debug_enabled=True) == logging.DEBUG
        assert log_mgr.get_logger().level == logging.DEBUG
    finally:
        log_mgr.configure_logging_level(debug_enabled=False)
