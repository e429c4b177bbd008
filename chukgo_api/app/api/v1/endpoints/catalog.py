"""Read‑only endpoints for the lesson type and skill level lookup tables."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from chukgo_api.app.core.store import EntityStore, get_store
from chukgo_api.app.schemas.catalog import LessonTypeRead, SkillLevelRead
from chukgo_api.app.services.catalog_service import CatalogService


router = APIRouter()


@router.get("/lesson-types", response_model=List[LessonTypeRead])
async def list_lesson_types(store: EntityStore = Depends(get_store)) -> List[LessonTypeRead]:
    return await CatalogService.get_lesson_types(store)


@router.get("/lesson-types/{lesson_type_id}", response_model=LessonTypeRead)
async def get_lesson_type(lesson_type_id: int, store: EntityStore = Depends(get_store)) -> LessonTypeRead:
    lesson_type = await CatalogService.get_lesson_type(store, lesson_type_id)
    if not lesson_type:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lesson type not found")
    return lesson_type


@router.get("/skill-levels", response_model=List[SkillLevelRead])
async def list_skill_levels(store: EntityStore = Depends(get_store)) -> List[SkillLevelRead]:
    return await CatalogService.get_skill_levels(store)


@router.get("/skill-levels/{skill_level_id}", response_model=SkillLevelRead)
async def get_skill_level(skill_level_id: int, store: EntityStore = Depends(get_store)) -> SkillLevelRead:
    skill_level = await CatalogService.get_skill_level(store, skill_level_id)
    if not skill_level:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Skill level not found")
    return skill_level
