"""Aggregation keys: which IR bucket a (edition, source, target) lands in."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from ..languages import ALL_EDITIONS, Langs


class EditionScope(enum.Enum):
    """Whether a bucket belongs to one edition or spans all of them."""

    ONE = "one"
    ALL = "all"


@dataclass(frozen=True)
class AggregationKey:
    scope: EditionScope
    edition: Optional[str]
    source: str
    target: str

    def to_langs(self) -> Langs:
        """Return the triple handed to emission for this bucket."""

        return Langs(edition=self.edition_label, source=self.source, target=self.target)

    @property
    def edition_label(self) -> str:
        if self.scope is EditionScope.ONE and self.edition:
            return self.edition
        return ALL_EDITIONS

    def __str__(self) -> str:
        return f"{self.edition_label}-{self.source}-{self.target}"


def resolve_aggregation_key(scope: EditionScope, langs: Langs) -> AggregationKey:
    """Map an iteration triple to its bucket identity.

    With :attr:`EditionScope.ALL` the edition is dropped from the key, so every
    edition's output for the same (source, target) pair shares one bucket.
    """

    if scope is EditionScope.ALL:
        return AggregationKey(EditionScope.ALL, None, langs.source, langs.target)
    return AggregationKey(EditionScope.ONE, langs.edition, langs.source, langs.target)


__all__ = ["AggregationKey", "EditionScope", "resolve_aggregation_key"]
