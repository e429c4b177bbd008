"""Pydantic models for the lesson type and skill level lookup tables."""

from typing import Optional

from pydantic import BaseModel


class LessonTypeRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    model_config = {"from_attributes": True}


class SkillLevelRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    model_config = {"from_attributes": True}
