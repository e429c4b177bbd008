"""
Business logic for lesson bookings.

Bookings link a user to a lesson on a given date.  There is no
availability or conflict check: two bookings for the same lesson and
date are both accepted.  ``status`` is a free‑form string and
``update_booking_status`` overwrites it without checking transitions.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.store import BOOKINGS, EntityStore
from ..schemas.booking import BookingCreate, BookingRead

logger = logging.getLogger(__name__)


class BookingService:
    """Service for managing bookings."""

    @classmethod
    async def create_booking(cls, store: EntityStore, user_id: int, data: BookingCreate) -> BookingRead:
        """Store a booking for ``user_id`` and stamp ``created_at``."""
        record = data.model_dump()
        record.update(user_id=user_id, created_at=datetime.now(timezone.utc))
        stored = store.insert(BOOKINGS, record)
        logger.info(
            "Created booking %s for lesson %s by user %s", stored["id"], data.lesson_id, user_id
        )
        return BookingRead.model_validate(stored)

    @classmethod
    async def get_booking(cls, store: EntityStore, booking_id: int) -> Optional[BookingRead]:
        record = store.get(BOOKINGS, booking_id)
        return BookingRead.model_validate(record) if record else None

    @classmethod
    async def get_bookings_by_user(cls, store: EntityStore, user_id: int) -> List[BookingRead]:
        return [BookingRead.model_validate(r) for r in store.list(BOOKINGS) if r["user_id"] == user_id]

    @classmethod
    async def get_bookings_by_lesson(cls, store: EntityStore, lesson_id: int) -> List[BookingRead]:
        return [BookingRead.model_validate(r) for r in store.list(BOOKINGS) if r["lesson_id"] == lesson_id]

    @classmethod
    async def update_booking_status(cls, store: EntityStore, booking_id: int, status: str) -> Optional[BookingRead]:
        """Overwrite the status; returns ``None`` if the booking is unknown."""
        updated = store.update(BOOKINGS, booking_id, {"status": status})
        if updated is None:
            return None
        logger.info("Booking %s status set to %s", booking_id, status)
        return BookingRead.model_validate(updated)
