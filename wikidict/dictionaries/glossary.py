"""Glossary: translations of the edition's own words into a target language."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..config_manager.settings import WikidictSettings
from ..diagnostics import Diagnostics
from ..languages import Langs
from ..models.wiktextract import WordEntry
from ..models.yomitan import (
    TERM_LABEL,
    Definition,
    LabelledEntries,
    TermBank,
    structured_definition,
    wrap,
)
from ..tags import find_short_pos, get_reading
from .base import DictRequest, Dictionary


def group_translations(entry: WordEntry, target: str) -> Dict[Optional[str], List[str]]:
    """Group the words translating ``entry`` into ``target`` by sense label.

    Translations without a sense label are grouped under ``None``.
    """

    grouped: Dict[Optional[str], List[str]] = {}
    for translation in entry.non_trivial_translations():
        if translation.lang_code != target:
            continue
        sense = translation.sense or None
        grouped.setdefault(sense, []).append(translation.word)
    return grouped


def build_definitions(grouped: Dict[Optional[str], List[str]]) -> List[Definition]:
    definitions: List[Definition] = []
    for sense, words in grouped.items():
        if sense is None:
            definitions.extend(words)
            continue
        content = [
            wrap("span", sense),
            wrap("ul", [wrap("li", word) for word in words]),
        ]
        definitions.append(structured_definition(wrap("div", content)))
    return definitions


def short_pos(pos: str) -> str:
    return find_short_pos(pos) or pos


class GlossaryDictionary(Dictionary[TermBank]):
    name = "gloss"
    cross_language = True

    def process(self, langs: Langs, entry: WordEntry, irs: List[TermBank]) -> None:
        grouped = group_translations(entry, langs.target)
        if not grouped:
            return

        reading = get_reading(langs.edition, langs.source, entry) or entry.word
        pos = short_pos(entry.pos)
        irs.append(
            TermBank(
                term=entry.word,
                reading=reading,
                definition_tags=pos,
                rules=pos,
                definitions=build_definitions(grouped),
            )
        )

    def emit(
        self, langs: Langs, settings: WikidictSettings, irs: List[TermBank]
    ) -> List[LabelledEntries]:
        return [LabelledEntries(TERM_LABEL, list(irs))]

    def inspect_tags(self, entry: WordEntry, diagnostics: Diagnostics) -> None:
        diagnostics.observe_pos(entry.pos, entry.word)

    def release_requests(
        self, editions: Sequence[str], languages: Sequence[str]
    ) -> List[DictRequest]:
        return [
            DictRequest((edition,), edition, target)
            for edition in editions
            for target in languages
        ]


__all__ = ["GlossaryDictionary", "build_definitions", "group_translations", "short_pos"]
