"""Phonetic transcription dictionaries (IPA term meta banks)."""

from __future__ import annotations

import unicodedata
from typing import List, Sequence, Tuple

from ..config_manager.settings import WikidictSettings
from ..languages import SELF_MARKER, Langs
from ..models.wiktextract import Sound, WordEntry
from ..models.yomitan import (
    TERM_META_LABEL,
    LabelledEntries,
    PhoneticTranscription,
    TermPhoneticTranscription,
)
from ..pipeline.keys import EditionScope
from ..tags import get_ipas, get_reading
from .base import DictRequest, Dictionary

IpaItem = Tuple[str, PhoneticTranscription]


def normalize_sounds(entry: WordEntry) -> None:
    """NFC-normalize and trim IPA strings in place, dropping empty ones."""

    sounds: List[Sound] = []
    for sound in entry.sounds:
        ipa = unicodedata.normalize("NFC", sound.ipa).strip()
        if not ipa:
            continue
        sound.ipa = ipa
        sounds.append(sound)
    entry.sounds = sounds


class IpaDictionary(Dictionary[IpaItem]):
    """IPA of one language's words, as found in one edition."""

    name = "ipa"
    allows_self_marker = True

    def preprocess(
        self,
        langs: Langs,
        entry: WordEntry,
        settings: WikidictSettings,
        irs: List[IpaItem],
    ) -> None:
        normalize_sounds(entry)

    def process(self, langs: Langs, entry: WordEntry, irs: List[IpaItem]) -> None:
        ipas = get_ipas(entry)
        if not ipas:
            return

        reading = get_reading(langs.edition, langs.source, entry) or entry.word
        irs.append((entry.word, PhoneticTranscription(reading, tuple(ipas))))

    def emit(
        self, langs: Langs, settings: WikidictSettings, irs: List[IpaItem]
    ) -> List[LabelledEntries]:
        entries = [
            TermPhoneticTranscription(lemma, transcription) for lemma, transcription in irs
        ]
        return [LabelledEntries(TERM_META_LABEL, entries)]

    def release_requests(
        self, editions: Sequence[str], languages: Sequence[str]
    ) -> List[DictRequest]:
        return [
            DictRequest((edition,), source, edition)
            for edition in editions
            for source in languages
        ]


class IpaMergedDictionary(IpaDictionary):
    """IPA of one language's words, merged across every edition."""

    name = "ipa-merged"
    edition_scope = EditionScope.ALL
    allows_self_marker = False

    def postprocess(self, irs: List[IpaItem]) -> None:
        unique = list(dict.fromkeys(irs))
        # Stable: equal lemmas keep their first-seen order.
        unique.sort(key=lambda item: item[0])
        irs[:] = unique

    def release_requests(
        self, editions: Sequence[str], languages: Sequence[str]
    ) -> List[DictRequest]:
        merged = tuple(edition for edition in editions if edition != SELF_MARKER)
        return [DictRequest(merged, edition, edition) for edition in merged]


__all__ = ["IpaDictionary", "IpaItem", "IpaMergedDictionary", "normalize_sounds"]
