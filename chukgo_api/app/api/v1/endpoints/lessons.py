"""
Lesson endpoints for API v1.

Lessons are public: the raw list, the recommended lessons shown on the
home page, the lesson search and the detailed lesson page.  Coaches
publish lessons under their own coach profile and may see who booked
them.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from chukgo_api.app.core.config import settings
from chukgo_api.app.core.security import get_current_user, require_coach
from chukgo_api.app.core.store import EntityStore, get_store
from chukgo_api.app.schemas.booking import BookingRead
from chukgo_api.app.schemas.lesson import LessonCreate, LessonRead, LessonWithDetails
from chukgo_api.app.schemas.review import ReviewRead
from chukgo_api.app.services.booking_service import BookingService
from chukgo_api.app.services.coach_service import CoachService
from chukgo_api.app.services.lesson_service import LessonService
from chukgo_api.app.services.review_service import ReviewService


router = APIRouter()


@router.get("", response_model=List[LessonRead])
async def list_lessons(store: EntityStore = Depends(get_store)) -> List[LessonRead]:
    return await LessonService.list_lessons(store)


@router.get("/recommended", response_model=List[LessonWithDetails])
async def recommended_lessons(
    limit: Optional[int] = Query(None, ge=1, le=100),
    store: EntityStore = Depends(get_store),
) -> List[LessonWithDetails]:
    return await LessonService.get_recommended_lessons(store, limit or settings.default_recommended_lessons)


@router.get("/search", response_model=List[LessonWithDetails])
async def search_lessons(
    location: Optional[str] = Query(None, examples=["서울"]),
    lesson_type_id: Optional[int] = Query(None),
    skill_level_id: Optional[int] = Query(None),
    store: EntityStore = Depends(get_store),
) -> List[LessonWithDetails]:
    """Search lessons.

    - **location**: substring of the lesson location; ``모든 지역`` means any.
    - **lesson_type_id**, **skill_level_id**: exact matches, ignored when 0.
    """
    return await LessonService.search_lessons(
        store,
        location=location,
        lesson_type_id=lesson_type_id,
        skill_level_id=skill_level_id,
    )


@router.post("", response_model=LessonRead, status_code=status.HTTP_201_CREATED)
async def create_lesson(
    data: LessonCreate,
    current_user: Dict[str, Any] = Depends(require_coach),
    store: EntityStore = Depends(get_store),
) -> LessonRead:
    """Publish a lesson owned by the caller's coach profile."""
    coach = await CoachService.get_coach_by_user(store, current_user["id"])
    if not coach:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Coach profile required")
    return await LessonService.create_lesson(store, coach.id, data)


@router.get("/{lesson_id}", response_model=LessonWithDetails)
async def get_lesson(lesson_id: int, store: EntityStore = Depends(get_store)) -> LessonWithDetails:
    lesson = await LessonService.get_lesson_with_details(store, lesson_id)
    if not lesson:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lesson not found")
    return lesson


@router.get("/{lesson_id}/reviews", response_model=List[ReviewRead])
async def lesson_reviews(lesson_id: int, store: EntityStore = Depends(get_store)) -> List[ReviewRead]:
    return await ReviewService.get_reviews_by_lesson(store, lesson_id)


@router.get("/{lesson_id}/bookings", response_model=List[BookingRead])
async def lesson_bookings(
    lesson_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> List[BookingRead]:
    """Bookings of a lesson, visible to the coach who owns it and to admins."""
    lesson = await LessonService.get_lesson(store, lesson_id)
    if not lesson:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lesson not found")
    if not current_user.get("is_admin"):
        coach = await CoachService.get_coach_by_user(store, current_user["id"])
        if not coach or coach.id != lesson.coach_id:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not the coach of this lesson")
    return await BookingService.get_bookings_by_lesson(store, lesson_id)
