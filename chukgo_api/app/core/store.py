"""
In‑memory entity store.

The ``EntityStore`` keeps one mapping per entity kind from id to
record, and one monotonically increasing id counter per kind.  Records
are plain dictionaries; services convert them to Pydantic schemas at
the API boundary.  A store is an explicit object: the application
creates one in ``create_app`` and hands it to routes through the
``get_store`` dependency, and tests build a fresh store per case.

Lookups that miss return ``None`` rather than raising.  Asking for an
entity kind the store does not know is a programming error and raises
``KeyError``.  There is no delete operation for any kind.
"""

import copy
from typing import Any, Dict, List, Optional

from fastapi import Request


USERS = "users"
COACHES = "coaches"
LESSON_TYPES = "lesson_types"
SKILL_LEVELS = "skill_levels"
LESSONS = "lessons"
BOOKINGS = "bookings"
REVIEWS = "reviews"
SCHEDULES = "schedules"
INQUIRIES = "inquiries"
COMPANY_INFO = "company_info"

ENTITY_KINDS = (
    USERS,
    COACHES,
    LESSON_TYPES,
    SKILL_LEVELS,
    LESSONS,
    BOOKINGS,
    REVIEWS,
    SCHEDULES,
    INQUIRIES,
    COMPANY_INFO,
)

Record = Dict[str, Any]


class EntityStore:
    """Process‑memory tables keyed by auto‑incrementing integer ids."""

    def __init__(self) -> None:
        self._tables: Dict[str, Dict[int, Record]] = {kind: {} for kind in ENTITY_KINDS}
        self._next_ids: Dict[str, int] = {kind: 1 for kind in ENTITY_KINDS}

    def _table(self, kind: str) -> Dict[int, Record]:
        try:
            return self._tables[kind]
        except KeyError:
            raise KeyError(f"Unknown entity kind: {kind!r}") from None

    def get(self, kind: str, entity_id: int) -> Optional[Record]:
        """Return a copy of the record or ``None`` if the id is unknown."""
        record = self._table(kind).get(entity_id)
        if record is None:
            return None
        return copy.deepcopy(record)

    def insert(self, kind: str, record: Record) -> Record:
        """Store a copy of ``record`` under the next id for ``kind``.

        Any ``id`` key in the input is ignored; ids are only ever
        assigned here and never reused.
        """
        table = self._table(kind)
        entity_id = self._next_ids[kind]
        self._next_ids[kind] = entity_id + 1
        stored = copy.deepcopy(record)
        stored["id"] = entity_id
        table[entity_id] = stored
        return copy.deepcopy(stored)

    def update(self, kind: str, entity_id: int, partial: Record) -> Optional[Record]:
        """Shallow‑merge ``partial`` over an existing record.

        Returns the updated record, or ``None`` when the id does not
        exist.  Never creates a record and never changes the id.
        """
        table = self._table(kind)
        existing = table.get(entity_id)
        if existing is None:
            return None
        merged = {**existing, **copy.deepcopy(partial), "id": entity_id}
        table[entity_id] = merged
        return copy.deepcopy(merged)

    def list(self, kind: str) -> List[Record]:
        """Return copies of all records of ``kind`` in insertion order."""
        return [copy.deepcopy(record) for record in self._table(kind).values()]

    def count(self, kind: str) -> int:
        return len(self._table(kind))


def get_store(request: Request) -> EntityStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store
