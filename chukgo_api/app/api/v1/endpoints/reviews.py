"""Review endpoints.  Posting a review refreshes the coach's rating."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from chukgo_api.app.core.security import get_current_user
from chukgo_api.app.core.store import EntityStore, get_store
from chukgo_api.app.schemas.review import ReviewCreate, ReviewRead
from chukgo_api.app.services.lesson_service import LessonService
from chukgo_api.app.services.review_service import ReviewService


router = APIRouter()


@router.post("", response_model=ReviewRead, status_code=status.HTTP_201_CREATED)
async def create_review(
    data: ReviewCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> ReviewRead:
    if not await LessonService.get_lesson(store, data.lesson_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lesson not found")
    return await ReviewService.create_review(store, current_user["id"], data)


@router.get("/{review_id}", response_model=ReviewRead)
async def get_review(review_id: int, store: EntityStore = Depends(get_store)) -> ReviewRead:
    review = await ReviewService.get_review(store, review_id)
    if not review:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")
    return review
