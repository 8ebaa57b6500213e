"""Lookup tables for part-of-speech tags, readings and IPA transcriptions."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .models.wiktextract import WordEntry
from .models.yomitan import Transcription

# Yomitan part-of-speech tags keyed by the wiktextract ``pos`` value.
SHORT_POS: Dict[str, str] = {
    "abbrev": "abbv",
    "adj": "adj",
    "adj_noun": "adj",
    "adj_verb": "adj",
    "adnominal": "adn",
    "adv": "adv",
    "affix": "affix",
    "article": "art",
    "character": "char",
    "circumfix": "affix",
    "classifier": "cls",
    "conj": "conj",
    "contraction": "contr",
    "counter": "ctr",
    "det": "det",
    "infix": "affix",
    "interfix": "affix",
    "intj": "intj",
    "name": "name",
    "noun": "n",
    "num": "num",
    "particle": "part",
    "phrase": "phr",
    "postp": "postp",
    "prefix": "pref",
    "prep": "prep",
    "prep_phrase": "phr",
    "pron": "pron",
    "proverb": "prov",
    "punct": "punct",
    "suffix": "suf",
    "symbol": "sym",
    "verb": "v",
}

# Form tags holding a phonetic reading, per source language.
READING_FORM_TAGS: Dict[str, Tuple[str, ...]] = {
    "ja": ("hiragana", "kana"),
    "zh": ("Pinyin", "pinyin"),
    "ko": ("hangeul",),
}


def find_short_pos(pos: str) -> Optional[str]:
    """Return the short tag for ``pos``, or ``None`` when it is not tabulated."""

    return SHORT_POS.get(pos)


def get_reading(edition: str, source: str, entry: WordEntry) -> Optional[str]:
    """Return the reading of ``entry`` when its language writes one separately.

    Every edition stores readings as tagged forms, so ``edition`` is unused.
    """

    wanted = READING_FORM_TAGS.get(source)
    if not wanted:
        return None
    for form in entry.forms:
        if not form.form or form.form == entry.word:
            continue
        if any(tag in wanted for tag in form.tags):
            return form.form
    return None


def get_ipas(entry: WordEntry) -> List[Transcription]:
    """Collect the distinct IPA transcriptions of ``entry`` in order."""

    seen: Dict[Transcription, None] = {}
    for sound in entry.sounds:
        ipa = sound.ipa.strip()
        if not ipa:
            continue
        seen.setdefault(Transcription(ipa=ipa, tags=tuple(sound.tags)), None)
    return list(seen)


__all__ = ["READING_FORM_TAGS", "SHORT_POS", "find_short_pos", "get_ipas", "get_reading"]
