"""Application filters – SavedFilter snapshots and their store."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from activity_search.application.filters.values import FilterValue
from activity_search.kernel.time import Clock, SystemClock

__all__ = ["SavedFilter", "SavedFilterStore"]


@dataclasses.dataclass(frozen=True)
class SavedFilter:
    """Named, frozen copy of a complete filter state."""
    id: str
    name: str
    filters: Mapping[str, FilterValue]
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form for consumers that persist snapshots themselves."""
        return {
            "id": self.id,
            "name": self.name,
            "filters": {key: value.to_raw() for key, value in self.filters.items()},
            "created_at": self.created_at.isoformat(),
        }


class SavedFilterStore:
    """In-memory, most-recent-first list of :class:`SavedFilter` entries.

    Entries live as long as the store; there is no expiry and names are not
    de-duplicated.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or SystemClock()
        self._entries: list[SavedFilter] = []

    @property
    def entries(self) -> list[SavedFilter]:
        return list(self._entries)

    def save(self, name: str, state: Mapping[str, FilterValue]) -> SavedFilter:
        entry = SavedFilter(
            id=self._next_id(),
            name=name,
            filters=MappingProxyType(dict(state)),
            created_at=self._clock.now(),
        )
        self._entries.insert(0, entry)
        return entry

    def get(self, saved_id: str) -> SavedFilter | None:
        for entry in self._entries:
            if entry.id == saved_id:
                return entry
        return None

    def delete(self, saved_id: str) -> bool:
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.id != saved_id]
        return len(self._entries) != before

    def _next_id(self) -> str:
        base = f"filter_{int(self._clock.timestamp() * 1000)}"
        taken = {e.id for e in self._entries}
        candidate, suffix = base, 1
        while candidate in taken:
            suffix += 1
            candidate = f"{base}_{suffix}"
        return candidate

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SavedFilter]:
        return iter(list(self._entries))
