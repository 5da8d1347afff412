"""
In-memory storage for wonders.

``WonderStore`` keeps live records in a dictionary keyed by id and
guards every operation with a single lock, so concurrent requests never
observe a half-applied mutation or receive the same id twice.  Ids are
assigned monotonically and never reused within the lifetime of a store,
even after the record holding them is deleted.

Lookups that find nothing return ``None`` (or ``False`` for mutations)
instead of raising; the service layer decides how to report them.
"""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional


@dataclass(frozen=True)
class WonderRecord:
    """A single wonder as held by the store."""

    name: str
    country: str = ""
    era: str = ""
    type: str = ""
    description: str = ""
    discovery_year: int = 0
    id: int = 0


class WonderStore:
    """Thread-safe keyed collection of ``WonderRecord`` objects."""

    def __init__(
        self,
        records: Optional[Iterable[WonderRecord]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Create a store, optionally pre-populated.

        Records with a positive id keep it; the rest are assigned ids
        above the largest pre-existing one.  ``rng`` is used by
        :meth:`pick_random` and may be seeded for reproducible tests.
        """
        self._lock = threading.Lock()
        self._records: Dict[int, WonderRecord] = {}
        self._rng = rng or random.Random()
        initial = list(records or ())
        self._last_id = max((r.id for r in initial if r.id > 0), default=0)
        for record in initial:
            if record.id > 0:
                if record.id in self._records:
                    raise ValueError(f"Duplicate wonder id {record.id}")
                self._records[record.id] = record
            else:
                self._last_id += 1
                self._records[self._last_id] = replace(record, id=self._last_id)

    def insert(self, record: WonderRecord) -> int:
        """Store a copy of ``record`` under a new id and return the id."""
        with self._lock:
            self._last_id += 1
            self._records[self._last_id] = replace(record, id=self._last_id)
            return self._last_id

    def get(self, wonder_id: int) -> Optional[WonderRecord]:
        with self._lock:
            return self._records.get(wonder_id)

    def list(self) -> List[WonderRecord]:
        """Return all live records in insertion order."""
        with self._lock:
            return list(self._records.values())

    def update(self, wonder_id: int, fields: WonderRecord) -> bool:
        """Overwrite every mutable field of a record.

        The id of ``fields`` is ignored.  Returns ``False`` if no record
        exists with ``wonder_id``.
        """
        with self._lock:
            if wonder_id not in self._records:
                return False
            self._records[wonder_id] = replace(fields, id=wonder_id)
            return True

    def delete(self, wonder_id: int) -> bool:
        with self._lock:
            return self._records.pop(wonder_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def is_empty(self) -> bool:
        return self.count() == 0

    def pick_random(self) -> Optional[WonderRecord]:
        """Return a uniformly chosen live record, or ``None`` if empty."""
        with self._lock:
            if not self._records:
                return None
            return self._rng.choice(list(self._records.values()))
