"""Tag diagnostics collected while building a dictionary."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .tags import find_short_pos

DIAGNOSTICS_FILENAME = "tags.json"

# tag -> words in which the tag was encountered
Counter = Dict[str, List[str]]


class Diagnostics:
    """Record which tags were recognised and which word triggered each one."""

    def __init__(self) -> None:
        self.accepted_tags: Counter = {}
        self.rejected_tags: Counter = {}

    def increment_accepted_tag(self, tag: str, word: str) -> None:
        self.accepted_tags.setdefault(tag, []).append(word)

    def increment_rejected_tag(self, tag: str, word: str) -> None:
        self.rejected_tags.setdefault(tag, []).append(word)

    def observe_pos(self, pos: str, word: str) -> None:
        if not pos:
            return
        if find_short_pos(pos) is None:
            self.increment_rejected_tag(pos, word)
        else:
            self.increment_accepted_tag(pos, word)

    def is_empty(self) -> bool:
        return not self.accepted_tags and not self.rejected_tags

    def summary(self) -> Dict[str, Dict[str, Tuple[int, str]]]:
        return {
            "rejected": _count_and_sort(self.rejected_tags),
            "accepted": _count_and_sort(self.accepted_tags),
        }

    def write(self, directory: Path, *, pretty: bool = True) -> Optional[Path]:
        """Write ``tags.json`` into ``directory``; nothing is written when empty."""

        if self.is_empty():
            return None
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / DIAGNOSTICS_FILENAME
        path.write_text(
            json.dumps(self.summary(), ensure_ascii=False, indent=2 if pretty else None),
            encoding="utf-8",
        )
        return path


def _count_and_sort(counter: Counter) -> Dict[str, Tuple[int, str]]:
    """Map each tag to ``(count, first word)``, most frequent first."""

    rows = [(tag, (len(words), words[0])) for tag, words in counter.items() if words]
    rows.sort(key=lambda row: row[1][0], reverse=True)
    return dict(rows)


__all__ = ["DIAGNOSTICS_FILENAME", "Diagnostics"]
