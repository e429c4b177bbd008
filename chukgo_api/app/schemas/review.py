"""
Pydantic schemas for lesson reviews.

Students rate a lesson from 1 to 5 stars.  Creating a review updates
the rating and review count of the coach who owns the lesson.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ReviewCreate(BaseModel):
    """Schema for creating a new review."""

    lesson_id: int = Field(..., gt=0, description="Identifier of the lesson being reviewed")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: str = Field(..., description="Review text, 10 to 1000 characters")
    tags: List[str] = Field(default_factory=list)

    @field_validator("comment")
    @classmethod
    def sanitize_comment(cls, v: str) -> str:
        """Trim whitespace from the comment and enforce its length bounds."""
        v = v.strip()
        if len(v) < 10:
            raise ValueError("Comment must be at least 10 characters")
        if len(v) > 1000:
            raise ValueError("Comment must be 1000 characters or fewer")
        return v


class ReviewRead(BaseModel):
    """Schema for reading a review from the API."""

    id: int
    user_id: int
    lesson_id: int
    rating: int
    comment: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
