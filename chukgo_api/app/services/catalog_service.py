"""
Read access to the lesson type and skill level lookup tables.

Both tables are filled once when the store is seeded and are read‑only
afterwards; the ``create_*`` methods exist for seeding.
"""

from typing import List, Optional

from ..core.store import LESSON_TYPES, SKILL_LEVELS, EntityStore
from ..schemas.catalog import LessonTypeRead, SkillLevelRead


class CatalogService:
    @classmethod
    async def get_lesson_types(cls, store: EntityStore) -> List[LessonTypeRead]:
        return [LessonTypeRead.model_validate(r) for r in store.list(LESSON_TYPES)]

    @classmethod
    async def get_lesson_type(cls, store: EntityStore, lesson_type_id: int) -> Optional[LessonTypeRead]:
        record = store.get(LESSON_TYPES, lesson_type_id)
        return LessonTypeRead.model_validate(record) if record else None

    @classmethod
    async def create_lesson_type(cls, store: EntityStore, name: str, description: Optional[str] = None) -> LessonTypeRead:
        return LessonTypeRead.model_validate(store.insert(LESSON_TYPES, {"name": name, "description": description}))

    @classmethod
    async def get_skill_levels(cls, store: EntityStore) -> List[SkillLevelRead]:
        return [SkillLevelRead.model_validate(r) for r in store.list(SKILL_LEVELS)]

    @classmethod
    async def get_skill_level(cls, store: EntityStore, skill_level_id: int) -> Optional[SkillLevelRead]:
        record = store.get(SKILL_LEVELS, skill_level_id)
        return SkillLevelRead.model_validate(record) if record else None

    @classmethod
    async def create_skill_level(cls, store: EntityStore, name: str, description: Optional[str] = None) -> SkillLevelRead:
        return SkillLevelRead.model_validate(store.insert(SKILL_LEVELS, {"name": name, "description": description}))
