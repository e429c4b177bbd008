"""
Booking endpoints for API v1.

Authenticated users book lessons for themselves and list their own
bookings.  A booking's status can be changed by the user who made it,
by the coach who owns the lesson and by administrators.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from chukgo_api.app.core.security import get_current_user
from chukgo_api.app.core.store import EntityStore, get_store
from chukgo_api.app.schemas.booking import BookingCreate, BookingRead, BookingStatusUpdate
from chukgo_api.app.services.booking_service import BookingService
from chukgo_api.app.services.coach_service import CoachService
from chukgo_api.app.services.lesson_service import LessonService


router = APIRouter()


async def _is_lesson_coach(store: EntityStore, user_id: int, lesson_id: int) -> bool:
    lesson = await LessonService.get_lesson(store, lesson_id)
    if not lesson:
        return False
    coach = await CoachService.get_coach_by_user(store, user_id)
    return bool(coach) and coach.id == lesson.coach_id


@router.post("", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
async def create_booking(
    data: BookingCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> BookingRead:
    """Book a lesson for the current user.

    No availability check is made; overlapping bookings are accepted.
    """
    if not await LessonService.get_lesson(store, data.lesson_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lesson not found")
    return await BookingService.create_booking(store, current_user["id"], data)


@router.get("/me", response_model=List[BookingRead])
async def my_bookings(
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> List[BookingRead]:
    return await BookingService.get_bookings_by_user(store, current_user["id"])


@router.get("/{booking_id}", response_model=BookingRead)
async def get_booking(
    booking_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> BookingRead:
    booking = await BookingService.get_booking(store, booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    if booking.user_id != current_user["id"] and not current_user.get("is_admin"):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not your booking")
    return booking


@router.put("/{booking_id}/status", response_model=BookingRead)
async def update_booking_status(
    booking_id: int,
    data: BookingStatusUpdate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> BookingRead:
    """Overwrite the booking status.  Any non-empty value is accepted."""
    booking = await BookingService.get_booking(store, booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    allowed = (
        booking.user_id == current_user["id"]
        or current_user.get("is_admin")
        or await _is_lesson_coach(store, current_user["id"], booking.lesson_id)
    )
    if not allowed:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to change this booking")
    updated = await BookingService.update_booking_status(store, booking_id, data.status)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return updated
