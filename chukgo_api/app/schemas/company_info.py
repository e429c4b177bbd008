"""
Pydantic schemas for company information pages.

Administrators maintain a handful of static pages (vision, history,
core values, team and link pages) that are shown on the public site.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

_SECTION = r"^(vision|history|values|team|link)$"


class CompanyInfoCreate(BaseModel):
    section: str = Field(..., pattern=_SECTION)
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=10)


class CompanyInfoUpdate(BaseModel):
    """All fields are optional; only provided values are updated."""

    section: Optional[str] = Field(None, pattern=_SECTION)
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=10)


class CompanyInfoRead(BaseModel):
    id: int
    section: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
