"""Shared building blocks of the dictionary build pipeline.

The per-combination build lives in :mod:`wikidict.pipeline.runner` and the
release fan-out in :mod:`wikidict.pipeline.scheduler`.
"""

from .buckets import IrBucketMap
from .filters import matches, rejected
from .keys import AggregationKey, EditionScope, resolve_aggregation_key

__all__ = [
    "AggregationKey",
    "EditionScope",
    "IrBucketMap",
    "matches",
    "rejected",
    "resolve_aggregation_key",
]
