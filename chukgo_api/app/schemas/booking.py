"""
Pydantic models for lesson bookings.

``status`` is a free‑form string.  ``pending`` is the default and the
values the client uses are ``pending``, ``confirmed``, ``completed``
and ``cancelled``, but no transition rules are enforced.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class BookingCreate(BaseModel):
    """Schema for booking a lesson as the current user."""

    lesson_id: int = Field(..., gt=0)
    schedule_date: datetime
    status: str = Field("pending", min_length=1)


class BookingStatusUpdate(BaseModel):
    status: str = Field(..., min_length=1, examples=["confirmed"])


class BookingRead(BaseModel):
    id: int
    user_id: int
    lesson_id: int
    schedule_date: datetime
    status: str
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
