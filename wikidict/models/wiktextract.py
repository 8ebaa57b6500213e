"""Pydantic models for wiktextract word entries.

Only the fields the dictionary builders read are modelled; every other key of
the raw JSON object is ignored when parsing.
"""

from __future__ import annotations

from typing import Iterator, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class _WiktextractModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Translation(_WiktextractModel):
    """A cross-reference from a word to its translation in another language."""

    lang_code: str = Field(default="", validation_alias=AliasChoices("lang_code", "code"))
    sense: str = ""
    word: str = ""
    roman: str = ""
    tags: List[str] = Field(default_factory=list)


class Sound(_WiktextractModel):
    ipa: str = ""
    tags: List[str] = Field(default_factory=list)


class Form(_WiktextractModel):
    form: str = ""
    tags: List[str] = Field(default_factory=list)


class Sense(_WiktextractModel):
    glosses: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


class WordEntry(_WiktextractModel):
    """One line of a wiktextract dump."""

    word: str = ""
    pos: str = ""
    lang: str = ""
    lang_code: str = ""
    senses: List[Sense] = Field(default_factory=list)
    translations: List[Translation] = Field(default_factory=list)
    sounds: List[Sound] = Field(default_factory=list)
    forms: List[Form] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    def non_trivial_translations(self) -> Iterator[Translation]:
        """Yield translations that actually carry a translated word."""

        for translation in self.translations:
            if translation.word.strip():
                yield translation

    def field_value(self, field: str) -> str:
        """Return the string value of a filterable top-level field."""

        return str(getattr(self, field, "") or "")


__all__ = ["Form", "Sense", "Sound", "Translation", "WordEntry"]
