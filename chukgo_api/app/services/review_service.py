"""
Business logic for reviews.

Reviews belong to a lesson.  Creating one recomputes the owning
coach's ``rating`` and ``review_count`` from scratch over every review
of every lesson that coach owns.  The rating is stored as the mean
star value times ten, rounded half up (4.5 stars -> 45).  If the
lesson or its coach cannot be found, the review is still stored and
no coach is updated.
"""

import logging
import math
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ..core.store import COACHES, LESSONS, REVIEWS, EntityStore
from ..schemas.review import ReviewCreate, ReviewRead
from .lesson_service import LessonService

logger = logging.getLogger(__name__)


def scaled_mean_rating(ratings: Sequence[int]) -> Optional[int]:
    """Mean of 1–5 star ratings times ten, rounded half up.

    Returns ``None`` for an empty sequence.
    """
    if not ratings:
        return None
    return int(math.floor(sum(ratings) / len(ratings) * 10 + 0.5))


class ReviewService:
    """Service for lesson reviews and the coach rating they drive."""

    @classmethod
    async def get_review(cls, store: EntityStore, review_id: int) -> Optional[ReviewRead]:
        record = store.get(REVIEWS, review_id)
        return ReviewRead.model_validate(record) if record else None

    @classmethod
    async def get_reviews_by_lesson(cls, store: EntityStore, lesson_id: int) -> List[ReviewRead]:
        return [ReviewRead.model_validate(r) for r in store.list(REVIEWS) if r["lesson_id"] == lesson_id]

    @classmethod
    async def get_reviews_by_coach(cls, store: EntityStore, coach_id: int) -> List[ReviewRead]:
        """All reviews on any lesson owned by ``coach_id``."""
        lesson_ids = {lesson.id for lesson in await LessonService.get_lessons_by_coach(store, coach_id)}
        return [ReviewRead.model_validate(r) for r in store.list(REVIEWS) if r["lesson_id"] in lesson_ids]

    @classmethod
    async def create_review(cls, store: EntityStore, user_id: int, data: ReviewCreate) -> ReviewRead:
        record = data.model_dump()
        record.update(user_id=user_id, created_at=datetime.now(timezone.utc))
        stored = store.insert(REVIEWS, record)
        logger.info(
            "User %s submitted review %s for lesson %s", user_id, stored["id"], data.lesson_id
        )
        await cls._refresh_coach_rating(store, data.lesson_id)
        return ReviewRead.model_validate(stored)

    @classmethod
    async def _refresh_coach_rating(cls, store: EntityStore, lesson_id: int) -> None:
        lesson = store.get(LESSONS, lesson_id)
        if lesson is None:
            logger.debug("Lesson %s not found; coach rating left unchanged", lesson_id)
            return
        coach = store.get(COACHES, lesson["coach_id"])
        if coach is None:
            logger.debug("Coach %s not found; rating left unchanged", lesson["coach_id"])
            return
        reviews = await cls.get_reviews_by_coach(store, coach["id"])
        rating = scaled_mean_rating([review.rating for review in reviews])
        store.update(COACHES, coach["id"], {"rating": rating, "review_count": len(reviews)})
        logger.info(
            "Coach %s rating recomputed: %s over %s reviews", coach["id"], rating, len(reviews)
        )
