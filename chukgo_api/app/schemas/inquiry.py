"""
Pydantic schemas for the contact form.

Submitted forms are stored as inquiries for administrators to review.
The field rules match the ones shown to users on the contact page.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class ContactForm(BaseModel):
    name: str = Field(..., min_length=2)
    email: EmailStr
    phone: Optional[str] = Field(None, min_length=10)
    subject: str = Field(..., min_length=3)
    message: str = Field(..., min_length=10)


class InquiryRead(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    created_at: datetime
    resolved: bool = False

    model_config = {"from_attributes": True}


class ContactResponse(BaseModel):
    success: bool = True
    inquiry: InquiryRead
