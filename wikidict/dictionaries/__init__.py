"""Dictionary kinds and their registry."""

from __future__ import annotations

from typing import Dict, List

from ..errors import ConfigurationError
from .base import DictRequest, Dictionary
from .glossary import GlossaryDictionary
from .glossary_extended import GlossaryExtendedDictionary
from .ipa import IpaDictionary, IpaMergedDictionary

DICTIONARIES: Dict[str, Dictionary] = {
    "glossary": GlossaryDictionary(),
    "glossary-extended": GlossaryExtendedDictionary(),
    "ipa": IpaDictionary(),
    "ipa-merged": IpaMergedDictionary(),
}


def get_dictionary(kind: str) -> Dictionary:
    try:
        return DICTIONARIES[kind]
    except KeyError:
        known = ", ".join(sorted(DICTIONARIES))
        raise ConfigurationError(f"Unknown dictionary kind {kind!r} (known: {known})") from None


def available_kinds() -> List[str]:
    return list(DICTIONARIES)


__all__ = [
    "DICTIONARIES",
    "DictRequest",
    "Dictionary",
    "GlossaryDictionary",
    "GlossaryExtendedDictionary",
    "IpaDictionary",
    "IpaMergedDictionary",
    "available_kinds",
    "get_dictionary",
]
