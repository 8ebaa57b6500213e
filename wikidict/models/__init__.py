"""Input (wiktextract) and output (Yomitan) data models."""

from .wiktextract import Form, Sense, Sound, Translation, WordEntry
from .yomitan import (
    LabelledEntries,
    PhoneticTranscription,
    TermBank,
    TermPhoneticTranscription,
    Transcription,
    YomitanEntry,
    structured_definition,
    wrap,
)

__all__ = [
    "Form",
    "LabelledEntries",
    "PhoneticTranscription",
    "Sense",
    "Sound",
    "TermBank",
    "TermPhoneticTranscription",
    "Transcription",
    "Translation",
    "WordEntry",
    "YomitanEntry",
    "structured_definition",
    "wrap",
]
