"""Keyed IR buckets owned by one dictionary build."""

from __future__ import annotations

from typing import Callable, Dict, Generic, Iterator, List, Tuple, TypeVar

from .keys import AggregationKey

IR = TypeVar("IR")


class IrBucketMap(Generic[IR]):
    """Own every IR bucket of a build.

    Buckets are created on first access and handed back one at a time by
    :meth:`drain`, which removes each bucket from the map before yielding it.
    """

    def __init__(self, factory: Callable[[], IR]) -> None:
        self._factory = factory
        self._buckets: Dict[AggregationKey, IR] = {}

    def bucket(self, key: AggregationKey) -> IR:
        ir = self._buckets.get(key)
        if ir is None:
            ir = self._factory()
            self._buckets[key] = ir
        return ir

    def keys(self) -> List[AggregationKey]:
        return list(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, key: object) -> bool:
        return key in self._buckets

    def drain(self) -> Iterator[Tuple[AggregationKey, IR]]:
        """Yield and remove buckets in creation order."""

        while self._buckets:
            key = next(iter(self._buckets))
            yield key, self._buckets.pop(key)


__all__ = ["IrBucketMap"]
