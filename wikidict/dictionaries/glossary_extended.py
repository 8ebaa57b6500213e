"""Extended glossary: pair two foreign languages through a pivot edition.

Every edition's own-language words are used as pivots. For the English word
*Gibraltar* with Albanian translations ``Gjibraltar, Gjibraltari`` and Ancient
Greek translations ``Ἡράκλειαι στῆλαι, Κάλπη``, an ``sq -> grc`` build
yields one item per target-side word, defined by every source-side word::

    Ἡράκλειαι στῆλαι  -> Gjibraltar, Gjibraltari
    Κάλπη             -> Gjibraltar, Gjibraltari

Items from all editions share one bucket and are merged per lemma.
"""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Sequence, Tuple

from ..config_manager.settings import WikidictSettings
from ..diagnostics import Diagnostics
from ..languages import SELF_MARKER, Langs
from ..models.wiktextract import WordEntry
from ..models.yomitan import TERM_LABEL, LabelledEntries, TermBank
from ..pipeline.keys import EditionScope
from .base import DictRequest, Dictionary
from .glossary import short_pos


class ExtendedItem(NamedTuple):
    lemma: str
    pos: str
    edition: str
    translations: List[str]


def pair_translations(
    entry: WordEntry, source: str, target: str
) -> Dict[str, Tuple[List[str], List[str]]]:
    """Return ``sense -> (target words, source words)`` for senses with both sides."""

    by_sense: Dict[str, Tuple[List[str], List[str]]] = {}
    for translation in entry.non_trivial_translations():
        if translation.lang_code == target:
            by_sense.setdefault(translation.sense, ([], []))[0].append(translation.word)
        if translation.lang_code == source:
            by_sense.setdefault(translation.sense, ([], []))[1].append(translation.word)
    return {
        sense: (targets, sources)
        for sense, (targets, sources) in by_sense.items()
        if targets and sources
    }


class GlossaryExtendedDictionary(Dictionary[ExtendedItem]):
    name = "gloss-all"
    edition_scope = EditionScope.ALL
    cross_language = True
    memory_heavy = True

    def fetch_language(self, langs: Langs) -> str:
        return langs.edition

    def keep(self, source: str, entry: WordEntry) -> bool:
        return any(True for _ in entry.non_trivial_translations())

    def process(self, langs: Langs, entry: WordEntry, irs: List[ExtendedItem]) -> None:
        paired = pair_translations(entry, langs.source, langs.target)
        if not paired:
            return

        pos = short_pos(entry.pos)
        for targets, sources in paired.values():
            for lemma in targets:
                irs.append(ExtendedItem(lemma, pos, langs.edition, list(sources)))

    def postprocess(self, irs: List[ExtendedItem]) -> None:
        # Edition is not part of the grouping key: the first item seen for a
        # lemma decides its pos and edition.
        merged: Dict[str, Tuple[str, str, Dict[str, None]]] = {}
        for item in irs:
            slot = merged.get(item.lemma)
            if slot is None:
                slot = (item.pos, item.edition, {})
                merged[item.lemma] = slot
            slot[2].update(dict.fromkeys(item.translations))

        irs[:] = [
            ExtendedItem(lemma, pos, edition, list(translations))
            for lemma, (pos, edition, translations) in merged.items()
        ]

    def emit(
        self, langs: Langs, settings: WikidictSettings, irs: List[ExtendedItem]
    ) -> List[LabelledEntries]:
        entries = [
            TermBank(
                term=item.lemma,
                reading="",
                definition_tags=item.pos,
                rules=item.pos,
                definitions=list(item.translations),
            )
            for item in irs
        ]
        return [LabelledEntries(TERM_LABEL, entries)]

    def inspect_tags(self, entry: WordEntry, diagnostics: Diagnostics) -> None:
        diagnostics.observe_pos(entry.pos, entry.word)

    def release_requests(
        self, editions: Sequence[str], languages: Sequence[str]
    ) -> List[DictRequest]:
        pivots = tuple(edition for edition in editions if edition != SELF_MARKER)
        if not pivots:
            return []
        return [
            DictRequest(pivots, source, target)
            for source in languages
            for target in languages
        ]


__all__ = ["ExtendedItem", "GlossaryExtendedDictionary", "pair_translations"]
