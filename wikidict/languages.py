"""Language and edition registry.

An *edition* is one language-specific extraction of Wiktionary (the English
Wiktionary, the German Wiktionary, ...). Every edition is also a language, so
edition codes are a subset of :data:`LANGUAGES`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .errors import ConfigurationError

# Simple English Wiktionary. It only ever pairs with itself.
SELF_MARKER = "simple"

LANGUAGES: Dict[str, str] = {
    "afb": "Gulf Arabic",
    "ar": "Arabic",
    "bg": "Bulgarian",
    "ca": "Catalan",
    "cs": "Czech",
    "cy": "Welsh",
    "da": "Danish",
    "de": "German",
    "el": "Greek",
    "en": "English",
    "eo": "Esperanto",
    "es": "Spanish",
    "et": "Estonian",
    "fa": "Persian",
    "fi": "Finnish",
    "fr": "French",
    "ga": "Irish",
    "grc": "Ancient Greek",
    "he": "Hebrew",
    "hi": "Hindi",
    "hu": "Hungarian",
    "hy": "Armenian",
    "id": "Indonesian",
    "is": "Icelandic",
    "it": "Italian",
    "ja": "Japanese",
    "ka": "Georgian",
    "ko": "Korean",
    "ku": "Kurdish",
    "la": "Latin",
    "lt": "Lithuanian",
    "lv": "Latvian",
    "ms": "Malay",
    "nl": "Dutch",
    "no": "Norwegian",
    "pl": "Polish",
    "pt": "Portuguese",
    "ro": "Romanian",
    "ru": "Russian",
    "sh": "Serbo-Croatian",
    "simple": "Simple English",
    "sq": "Albanian",
    "sv": "Swedish",
    "th": "Thai",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "vi": "Vietnamese",
    "zh": "Chinese",
}

EDITIONS: Tuple[str, ...] = (
    "cs",
    "de",
    "el",
    "en",
    "es",
    "fr",
    "id",
    "it",
    "ja",
    "ko",
    "ku",
    "ms",
    "nl",
    "pl",
    "pt",
    "ru",
    "simple",
    "th",
    "tr",
    "zh",
)

# Marker edition used for aggregation keys that span every edition.
ALL_EDITIONS = "all"


@dataclass(frozen=True)
class Langs:
    """One (edition, source, target) iteration triple."""

    edition: str
    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.edition}-{self.source}-{self.target}"


def is_language(code: str) -> bool:
    return code in LANGUAGES


def is_edition(code: str) -> bool:
    return code in EDITIONS


def language_name(code: str) -> str:
    try:
        return LANGUAGES[code]
    except KeyError:
        raise ConfigurationError(f"Unknown language code: {code!r}") from None


def validate_language(code: str) -> str:
    normalized = (code or "").strip().lower()
    if normalized not in LANGUAGES:
        raise ConfigurationError(f"Unknown language code: {code!r}")
    return normalized


def validate_edition(code: str) -> str:
    normalized = (code or "").strip().lower()
    if normalized not in EDITIONS:
        supported = ", ".join(EDITIONS)
        raise ConfigurationError(
            f"Unsupported edition: {code!r} (supported editions: {supported})"
        )
    return normalized


def validate_editions(codes: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for code in codes:
        edition = validate_edition(code)
        if edition not in seen:
            seen.append(edition)
    return seen


def all_languages() -> List[str]:
    return sorted(LANGUAGES)


__all__ = [
    "ALL_EDITIONS",
    "EDITIONS",
    "LANGUAGES",
    "Langs",
    "SELF_MARKER",
    "all_languages",
    "is_edition",
    "is_language",
    "language_name",
    "validate_edition",
    "validate_editions",
    "validate_language",
]
