"""The contract every dictionary kind implements.

A dictionary kind plugs five operations into the shared build pipeline:

``keep``
    decide whether a record is considered at all;
``preprocess``
    optionally rewrite the record in place (or seed the IR bucket);
``process``
    turn one record into zero or more IR items appended to the bucket;
``postprocess``
    reduce a finished bucket in place (merge, deduplicate, sort);
``emit``
    project a finished bucket into labelled Yomitan entries.

Kinds are stateless and shared between worker threads; everything mutable
lives in the IR bucket handed to each call.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import ClassVar, Generic, List, Optional, Sequence, Tuple, TypeVar

from ..config_manager.settings import WikidictSettings
from ..diagnostics import Diagnostics
from ..languages import ALL_EDITIONS, SELF_MARKER, Langs
from ..models.wiktextract import WordEntry
from ..models.yomitan import LabelledEntries
from ..pipeline.keys import EditionScope

IR = TypeVar("IR")


@dataclass(frozen=True)
class DictRequest:
    """One unit of work: the editions to scan and the language pair to build."""

    editions: Tuple[str, ...]
    source: str
    target: str

    @property
    def edition_label(self) -> str:
        if len(self.editions) == 1:
            return self.editions[0]
        return ALL_EDITIONS

    def __str__(self) -> str:
        return f"{self.edition_label}-{self.source}-{self.target}"


class Dictionary(abc.ABC, Generic[IR]):
    """Base class for dictionary kinds."""

    name: ClassVar[str]
    edition_scope: ClassVar[EditionScope] = EditionScope.ONE
    # Reject pairs whose source and target are the same language.
    cross_language: ClassVar[bool] = False
    # Accept the all-self-marker combination (simple, simple, simple).
    allows_self_marker: ClassVar[bool] = False
    # Run under ``heavy_max_workers`` during a release.
    memory_heavy: ClassVar[bool] = False

    def new_ir(self) -> List[IR]:
        return []

    def fetch_language(self, langs: Langs) -> str:
        """Language partition of the edition's records to stream."""

        return langs.source

    def keep(self, source: str, entry: WordEntry) -> bool:
        return entry.lang_code == source

    def preprocess(
        self,
        langs: Langs,
        entry: WordEntry,
        settings: WikidictSettings,
        irs: List[IR],
    ) -> None:
        """Rewrite ``entry`` before :meth:`process` sees it. No-op by default."""

    @abc.abstractmethod
    def process(self, langs: Langs, entry: WordEntry, irs: List[IR]) -> None:
        """Append the IR items derived from ``entry`` to ``irs``."""

    def postprocess(self, irs: List[IR]) -> None:
        """Reduce a complete bucket in place. No-op by default."""

    @abc.abstractmethod
    def emit(
        self, langs: Langs, settings: WikidictSettings, irs: List[IR]
    ) -> List[LabelledEntries]:
        """Project a post-processed bucket into labelled output entries."""

    def inspect_tags(self, entry: WordEntry, diagnostics: Diagnostics) -> None:
        """Report the tags of a kept record to ``diagnostics``. No-op by default."""

    def accepts_combination(self, edition: str, source: str, target: str) -> bool:
        """Return whether (edition, source, target) is a meaningful build."""

        marked = [code == SELF_MARKER for code in (edition, source, target)]
        if any(marked):
            return all(marked) and self.allows_self_marker
        if self.cross_language and source == target:
            return False
        return True

    @abc.abstractmethod
    def release_requests(
        self, editions: Sequence[str], languages: Sequence[str]
    ) -> List[DictRequest]:
        """Return this kind's share of the release matrix, before validity checks."""

    def worker_ceiling(self, settings: WikidictSettings) -> Optional[int]:
        return settings.heavy_max_workers if self.memory_heavy else None

    def dict_name(self, settings: WikidictSettings, source: str, target: str) -> str:
        return f"{settings.dict_prefix}-{source}-{target}-{self.name}"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


__all__ = ["DictRequest", "Dictionary"]
