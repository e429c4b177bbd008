"""
Pydantic models for coach profiles.

``rating`` is the persisted stars×10 integer (0–50); the API returns
it unchanged and clients divide by ten for display.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .user import UserRead


class CoachCreate(BaseModel):
    """Schema for registering the current user as a coach."""

    specializations: List[str] = Field(default_factory=list, examples=[["개인 레슨", "유소년"]])
    experience: Optional[str] = None
    certifications: Optional[str] = None
    location: str = Field(..., min_length=1, examples=["서울 강남구"])
    hourly_rate: int = Field(..., ge=0, examples=[50000])


class CoachRead(BaseModel):
    id: int
    user_id: int
    specializations: List[str] = Field(default_factory=list)
    experience: Optional[str] = None
    certifications: Optional[str] = None
    location: str
    hourly_rate: int
    rating: Optional[int] = None
    review_count: int = 0

    model_config = {
        "from_attributes": True,
    }


class CoachWithUser(CoachRead):
    """A coach together with the account it belongs to."""

    user: UserRead
