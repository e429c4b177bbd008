"""
API endpoints for coaches.

Anyone can browse coaches: the finder listing with its filters, the
top rated coaches for the home page and a coach's profile, lessons,
reviews and schedule.  An authenticated user becomes a coach by
creating a coach profile.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from chukgo_api.app.core.config import settings
from chukgo_api.app.core.security import get_current_user
from chukgo_api.app.core.store import EntityStore, get_store
from chukgo_api.app.schemas.coach import CoachCreate, CoachRead, CoachWithUser
from chukgo_api.app.schemas.lesson import LessonRead
from chukgo_api.app.schemas.review import ReviewRead
from chukgo_api.app.schemas.schedule import ScheduleRead
from chukgo_api.app.services.coach_service import CoachService
from chukgo_api.app.services.lesson_service import LessonService
from chukgo_api.app.services.review_service import ReviewService
from chukgo_api.app.services.schedule_service import ScheduleService
from chukgo_api.app.services.user_service import UserService


router = APIRouter()


@router.get("", response_model=List[CoachWithUser], summary="List and filter coaches")
async def list_coaches(
    q: Optional[str] = Query(None, description="Free text over name, specializations, location, bio, certifications"),
    province: Optional[str] = Query(None, examples=["서울"]),
    district: Optional[str] = Query(None, examples=["강남구"]),
    specialization: Optional[List[str]] = Query(None),
    min_rate: Optional[int] = Query(None, ge=0),
    max_rate: Optional[int] = Query(None, ge=0),
    min_rating: Optional[int] = Query(None, ge=0, le=50, description="Stars × 10"),
    sort_by: str = Query("rating", description="rating, reviews, price_low or price_high"),
    store: EntityStore = Depends(get_store),
) -> List[CoachWithUser]:
    return await CoachService.search_coaches(
        store,
        query=q,
        province=province,
        district=district,
        specializations=specialization,
        min_rate=min_rate,
        max_rate=max_rate,
        min_rating=min_rating,
        sort_by=sort_by,
    )


@router.get("/top", response_model=List[CoachWithUser], summary="Top rated coaches")
async def top_coaches(
    limit: Optional[int] = Query(None, ge=1, le=100),
    store: EntityStore = Depends(get_store),
) -> List[CoachWithUser]:
    return await CoachService.get_top_coaches(store, limit or settings.default_top_coaches)


@router.post(
    "",
    response_model=CoachRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register the current user as a coach",
)
async def create_coach(
    data: CoachCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> CoachRead:
    try:
        coach = await CoachService.create_coach(store, current_user["id"], data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    await UserService.mark_coach(store, current_user["id"])
    return coach


@router.get("/{coach_id}", response_model=CoachWithUser, summary="Coach profile")
async def get_coach(coach_id: int, store: EntityStore = Depends(get_store)) -> CoachWithUser:
    coach = await CoachService.get_coach_with_user(store, coach_id)
    if not coach:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Coach not found")
    return coach


@router.get("/{coach_id}/lessons", response_model=List[LessonRead])
async def coach_lessons(coach_id: int, store: EntityStore = Depends(get_store)) -> List[LessonRead]:
    return await LessonService.get_lessons_by_coach(store, coach_id)


@router.get("/{coach_id}/reviews", response_model=List[ReviewRead])
async def coach_reviews(coach_id: int, store: EntityStore = Depends(get_store)) -> List[ReviewRead]:
    return await ReviewService.get_reviews_by_coach(store, coach_id)


@router.get("/{coach_id}/schedules", response_model=List[ScheduleRead])
async def coach_schedules(coach_id: int, store: EntityStore = Depends(get_store)) -> List[ScheduleRead]:
    return await ScheduleService.get_schedules_by_coach(store, coach_id)
