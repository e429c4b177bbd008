"""
Business logic for lessons.

``get_lesson_with_details`` builds the denormalized lesson view by
following ``coach_id`` (through the coach to its user), and the
optional ``lesson_type_id`` and ``skill_level_id``.  A broken coach
chain makes the whole view absent; a missing lesson type or skill
level only leaves that field empty.  List queries silently drop
lessons whose view cannot be built.
"""

import logging
from typing import Iterable, List, Optional

from ..core.store import LESSONS, EntityStore
from ..schemas.lesson import LessonCreate, LessonRead, LessonWithDetails
from .catalog_service import CatalogService
from .coach_service import CoachService

logger = logging.getLogger(__name__)

# Location value the region picker sends for "all regions".
ALL_REGIONS = "모든 지역"


class LessonService:
    """Service for lessons and lesson queries."""

    @classmethod
    async def get_lesson(cls, store: EntityStore, lesson_id: int) -> Optional[LessonRead]:
        record = store.get(LESSONS, lesson_id)
        return LessonRead.model_validate(record) if record else None

    @classmethod
    async def get_lesson_with_details(cls, store: EntityStore, lesson_id: int) -> Optional[LessonWithDetails]:
        lesson = store.get(LESSONS, lesson_id)
        if lesson is None:
            return None
        coach = await CoachService.get_coach_with_user(store, lesson["coach_id"])
        if coach is None:
            return None
        lesson_type = None
        if lesson.get("lesson_type_id"):
            lesson_type = await CatalogService.get_lesson_type(store, lesson["lesson_type_id"])
        skill_level = None
        if lesson.get("skill_level_id"):
            skill_level = await CatalogService.get_skill_level(store, lesson["skill_level_id"])
        return LessonWithDetails.model_validate(
            {**lesson, "coach": coach, "lesson_type": lesson_type, "skill_level": skill_level}
        )

    @classmethod
    async def _with_details(cls, store: EntityStore, lesson_ids: Iterable[int]) -> List[LessonWithDetails]:
        detailed: List[LessonWithDetails] = []
        for lesson_id in lesson_ids:
            lesson = await cls.get_lesson_with_details(store, lesson_id)
            if lesson:
                detailed.append(lesson)
        return detailed

    @classmethod
    async def list_lessons(cls, store: EntityStore) -> List[LessonRead]:
        return [LessonRead.model_validate(r) for r in store.list(LESSONS)]

    @classmethod
    async def get_lessons_by_coach(cls, store: EntityStore, coach_id: int) -> List[LessonRead]:
        return [LessonRead.model_validate(r) for r in store.list(LESSONS) if r["coach_id"] == coach_id]

    @classmethod
    async def get_recommended_lessons(cls, store: EntityStore, limit: int) -> List[LessonWithDetails]:
        """The first ``limit`` displayable lessons in store order.

        There is no ranking: "recommended" is a plain truncation.
        """
        detailed = await cls._with_details(store, (r["id"] for r in store.list(LESSONS)))
        return detailed[: max(limit, 0)]

    @classmethod
    async def search_lessons(
        cls,
        store: EntityStore,
        location: Optional[str] = None,
        lesson_type_id: Optional[int] = None,
        skill_level_id: Optional[int] = None,
    ) -> List[LessonWithDetails]:
        """Filter lessons, then expand the survivors to detailed views.

        Filters are combined with AND and only applied when given:
        ``location`` is a case‑sensitive substring test (empty or
        ``ALL_REGIONS`` means no filter), the id filters are exact
        matches and ignored when zero or negative.
        """
        lessons = store.list(LESSONS)

        if location and location != ALL_REGIONS:
            lessons = [lesson for lesson in lessons if location in (lesson.get("location") or "")]
        if lesson_type_id and lesson_type_id > 0:
            lessons = [lesson for lesson in lessons if lesson.get("lesson_type_id") == lesson_type_id]
        if skill_level_id and skill_level_id > 0:
            lessons = [lesson for lesson in lessons if lesson.get("skill_level_id") == skill_level_id]

        return await cls._with_details(store, (lesson["id"] for lesson in lessons))

    @classmethod
    async def create_lesson(cls, store: EntityStore, coach_id: int, data: LessonCreate) -> LessonRead:
        record = data.model_dump()
        record["coach_id"] = coach_id
        stored = store.insert(LESSONS, record)
        logger.info("Created lesson %s for coach %s", stored["id"], coach_id)
        return LessonRead.model_validate(stored)
