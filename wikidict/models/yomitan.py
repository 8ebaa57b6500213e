"""Output records in the Yomitan dictionary format (version 3)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Sequence, Tuple, Union

# A definition is either plain text or a structured-content block.
Definition = Union[str, Dict[str, Any]]
Node = Union[str, Dict[str, Any], List[Any]]

TERM_LABEL = "term"
TERM_META_LABEL = "term_meta"


def wrap(tag: str, content: Node, *, data_class: str = "") -> Dict[str, Any]:
    """Wrap ``content`` in a structured-content element."""

    node: Dict[str, Any] = {"tag": tag, "content": content}
    if data_class:
        node["data"] = {"content": data_class}
    return node


def structured_definition(content: Node) -> Dict[str, Any]:
    return {"type": "structured-content", "content": content}


@dataclass(slots=True)
class TermBank:
    """A term bank row: the head word and its definitions."""

    term: str
    reading: str
    definition_tags: str
    rules: str
    definitions: List[Definition] = field(default_factory=list)

    def to_row(self, sequence: int = 0) -> List[Any]:
        return [
            self.term,
            self.reading,
            self.definition_tags,
            self.rules,
            0,
            self.definitions,
            sequence,
            "",
        ]


@dataclass(frozen=True, slots=True)
class Transcription:
    ipa: str
    tags: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"ipa": self.ipa, "tags": list(self.tags)}


@dataclass(frozen=True, slots=True)
class PhoneticTranscription:
    """A reading with the IPA transcriptions attached to it."""

    reading: str
    transcriptions: Tuple[Transcription, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reading": self.reading,
            "transcriptions": [item.to_dict() for item in self.transcriptions],
        }


@dataclass(frozen=True, slots=True)
class TermPhoneticTranscription:
    """A term meta bank row carrying IPA data."""

    term: str
    transcription: PhoneticTranscription
    mode: str = "ipa"

    def to_row(self, sequence: int = 0) -> List[Any]:  # noqa: ARG002 - meta rows are unsequenced
        return [self.term, self.mode, self.transcription.to_dict()]


YomitanEntry = Union[TermBank, TermPhoneticTranscription]


class LabelledEntries(NamedTuple):
    """Entries destined for one output artifact category."""

    label: str
    entries: List[YomitanEntry]


def count_entries(labelled: Sequence[LabelledEntries]) -> int:
    return sum(len(item.entries) for item in labelled)


__all__ = [
    "Definition",
    "LabelledEntries",
    "Node",
    "PhoneticTranscription",
    "TERM_LABEL",
    "TERM_META_LABEL",
    "TermBank",
    "TermPhoneticTranscription",
    "Transcription",
    "YomitanEntry",
    "count_entries",
    "structured_definition",
    "wrap",
]
