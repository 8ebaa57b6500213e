"""Compact binary encoding of word entries for the record cache."""

from __future__ import annotations

import zlib

from pydantic import ValidationError

from ..errors import CacheCorruptionError
from ..models.wiktextract import WordEntry

COMPRESSION_LEVEL = 6


def encode_entry(entry: WordEntry) -> bytes:
    """Serialize ``entry`` to a compressed JSON blob, omitting default fields."""

    payload = entry.model_dump_json(exclude_defaults=True)
    return zlib.compress(payload.encode("utf-8"), COMPRESSION_LEVEL)


def decode_entry(blob: bytes) -> WordEntry:
    """Rebuild a :class:`WordEntry` from a blob written by :func:`encode_entry`."""

    try:
        return WordEntry.model_validate_json(zlib.decompress(blob))
    except (zlib.error, ValidationError) as exc:
        raise CacheCorruptionError(f"Failed to decode cached record: {exc}") from exc


__all__ = ["decode_entry", "encode_entry"]
