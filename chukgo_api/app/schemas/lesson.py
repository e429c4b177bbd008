"""
Pydantic models for lessons.

``LessonWithDetails`` is the denormalized view used by the lesson
pages: the lesson with its coach (and the coach's user) and the
optional lesson type and skill level resolved inline.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .catalog import LessonTypeRead, SkillLevelRead
from .coach import CoachWithUser


class LessonCreate(BaseModel):
    """Schema for a coach publishing a new lesson."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    lesson_type_id: Optional[int] = Field(None, gt=0)
    skill_level_id: Optional[int] = Field(None, gt=0)
    location: str = Field(..., min_length=1, examples=["서울 강남구"])
    group_size: int = Field(..., ge=1)
    duration: int = Field(..., ge=1, description="Length of one session in minutes")
    price: int = Field(..., ge=0, description="Price in KRW")
    image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class LessonRead(BaseModel):
    id: int
    coach_id: int
    title: str
    description: str
    lesson_type_id: Optional[int] = None
    skill_level_id: Optional[int] = None
    location: str
    group_size: int
    duration: int
    price: int
    image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    model_config = {
        "from_attributes": True,
    }


class LessonWithDetails(LessonRead):
    coach: CoachWithUser
    lesson_type: Optional[LessonTypeRead] = None
    skill_level: Optional[SkillLevelRead] = None
