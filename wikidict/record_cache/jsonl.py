"""Streaming reader for line-delimited wiktextract dumps."""

from __future__ import annotations

import gzip
from pathlib import Path
from typing import Iterator, TextIO, Tuple

from pydantic import ValidationError

from ..errors import CacheStoreError, RecordParseError
from ..models.wiktextract import WordEntry


def _open_text(path: Path) -> TextIO:
    if path.suffix == ".gz":
        return gzip.open(path, "rt", encoding="utf-8")
    return open(path, "r", encoding="utf-8")


def iter_jsonl_entries(path: Path) -> Iterator[Tuple[int, WordEntry]]:
    """Yield ``(line_number, entry)`` for every line of a wiktextract dump.

    Blank lines are skipped. Raises :class:`RecordParseError` on the first
    line that does not decode, including bytes that are not UTF-8 and
    truncated or invalid gzip streams, and :class:`CacheStoreError` when the
    file cannot be read at all.
    """

    path = Path(path)
    line_number = 0
    try:
        with _open_text(path) as handle:
            for line_number, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                try:
                    entry = WordEntry.model_validate_json(line)
                except ValidationError as exc:
                    raise RecordParseError(path, line_number, cause=exc) from exc
                yield line_number, entry
    except (UnicodeDecodeError, EOFError, gzip.BadGzipFile) as exc:
        raise RecordParseError(path, line_number + 1, cause=exc) from exc
    except OSError as exc:
        raise CacheStoreError(f"Failed to read dataset {path}: {exc}") from exc


__all__ = ["iter_jsonl_entries"]
