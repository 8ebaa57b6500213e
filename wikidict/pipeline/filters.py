"""Global filter and reject rules shared by every dictionary kind."""

from __future__ import annotations

from typing import Sequence

from ..config_manager.settings import FilterRule
from ..models.wiktextract import WordEntry


def matches(entry: WordEntry, rule: FilterRule) -> bool:
    return entry.field_value(rule.field) == rule.value


def rejected(
    entry: WordEntry,
    filters: Sequence[FilterRule] = (),
    rejects: Sequence[FilterRule] = (),
) -> bool:
    """Return ``True`` when ``entry`` must be dropped before any kind sees it.

    An entry is dropped if it matches any reject rule, or fails any filter rule.
    """

    if any(matches(entry, rule) for rule in rejects):
        return True
    return not all(matches(entry, rule) for rule in filters)


__all__ = ["matches", "rejected"]
