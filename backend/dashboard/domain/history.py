"""
Version history ledger.

An ordered, size-bounded list of saved content snapshots, newest first.
Every operation returns a new ledger so a change can be staged and only
committed once the backend has accepted it.
"""
from __future__ import annotations

import copy
from typing import Iterable, Iterator, List, Optional, Tuple

from dashboard.config import HISTORY_LIMIT
from dashboard.utils.versioning import (
    VERSION_META_KEY,
    max_version,
    next_version,
    now_millis,
    version_meta,
    version_of,
)


class HistoryLedger:
    def __init__(self, entries: Iterable[dict] = (), limit: int = HISTORY_LIMIT):
        self._limit = limit
        self._entries: Tuple[dict, ...] = tuple(entries)[:limit]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[dict]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> dict:
        return self._entries[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, HistoryLedger):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"HistoryLedger(versions={self.versions()!r})"

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def head(self) -> Optional[dict]:
        return self._entries[0] if self._entries else None

    def versions(self) -> List[str]:
        return [version_of(entry) for entry in self._entries]

    def max_version(self) -> int:
        return max_version(self._entries)

    def next_version(self, floor: int = 0) -> str:
        return next_version(self._entries, floor)

    def prepend(self, entry: dict) -> "HistoryLedger":
        """Newest entry first; the oldest entries fall off past the limit."""
        return HistoryLedger((entry, *self._entries), self._limit)

    def without(self, index: int) -> Tuple["HistoryLedger", dict]:
        """Ledger minus the entry at `index`, plus the removed entry."""
        if not -len(self._entries) <= index < len(self._entries):
            raise IndexError(f"No history entry at index {index}")
        entries = list(self._entries)
        removed = entries.pop(index)
        return HistoryLedger(entries, self._limit), removed

    def annotated(self, index: int, *, name: str, note: str) -> "HistoryLedger":
        """Ledger whose entry at `index` carries a new name and note."""
        entries = list(self._entries)
        entry = entries[index]
        meta = version_meta(entry) or {}
        entries[index] = {
            **entry,
            VERSION_META_KEY: {
                **meta,
                "name": name,
                "note": note,
                "version": meta.get("version") or "",
                "timestamp": meta.get("timestamp") or now_millis(),
            },
        }
        return HistoryLedger(entries, self._limit)

    def to_list(self) -> List[dict]:
        """Independent copy suitable for serialization."""
        return copy.deepcopy(list(self._entries))
