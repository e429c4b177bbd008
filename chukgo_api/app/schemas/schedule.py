"""Pydantic models for coach availability slots."""

from pydantic import BaseModel, Field

_HHMM = r"^([01]\d|2[0-3]):[0-5]\d$"


class ScheduleCreate(BaseModel):
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Sunday, 1 = Monday, ...")
    start_time: str = Field(..., pattern=_HHMM, examples=["18:00"])
    end_time: str = Field(..., pattern=_HHMM, examples=["20:00"])
    is_available: bool = True


class ScheduleRead(BaseModel):
    id: int
    coach_id: int
    day_of_week: int
    start_time: str
    end_time: str
    is_available: bool = True

    model_config = {"from_attributes": True}
