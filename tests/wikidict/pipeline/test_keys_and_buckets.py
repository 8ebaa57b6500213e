from __future__ import annotations

from wikidict.languages import Langs
from wikidict.pipeline import AggregationKey, EditionScope, IrBucketMap, resolve_aggregation_key


def test_one_scope_keeps_the_edition():
    key = resolve_aggregation_key(EditionScope.ONE, Langs("de", "de", "en"))

    assert key == AggregationKey(EditionScope.ONE, "de", "de", "en")
    assert str(key) == "de-de-en"
    assert key.to_langs() == Langs("de", "de", "en")


def test_all_scope_collapses_editions_into_one_bucket():
    first = resolve_aggregation_key(EditionScope.ALL, Langs("en", "fr", "fr"))
    second = resolve_aggregation_key(EditionScope.ALL, Langs("de", "fr", "fr"))

    assert first == second
    assert first.edition is None
    assert first.to_langs() == Langs("all", "fr", "fr")


def test_buckets_are_created_once_and_drained_in_order():
    buckets = IrBucketMap(list)
    a = resolve_aggregation_key(EditionScope.ONE, Langs("en", "en", "fr"))
    b = resolve_aggregation_key(EditionScope.ONE, Langs("de", "de", "fr"))

    buckets.bucket(a).append(1)
    buckets.bucket(b).append(2)
    buckets.bucket(a).append(3)

    assert len(buckets) == 2
    assert a in buckets
    assert list(buckets.drain()) == [(a, [1, 3]), (b, [2])]
    assert len(buckets) == 0
