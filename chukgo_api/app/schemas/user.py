"""
Pydantic models for user accounts and authentication payloads.

A user is either a student or a coach (``is_coach``); administrators
carry ``is_admin``.  Accounts created through a social provider have
``social_provider``/``social_id`` set and no password until the user
chooses one.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    email: Optional[str] = Field(None, examples=["student1@example.com"])
    full_name: Optional[str] = Field(None, examples=["이영준"])
    phone: Optional[str] = None
    profile_image: Optional[str] = None
    bio: Optional[str] = None


class UserCreate(UserBase):
    """Schema for registering a user with a username and password."""

    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)
    email: str = Field(..., examples=["student1@example.com"])
    full_name: str = Field(..., min_length=1)


class UserUpdate(BaseModel):
    """Profile fields a user may change; omitted fields stay as they are."""

    email: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    profile_image: Optional[str] = None
    bio: Optional[str] = None


class UserRead(UserBase):
    """Schema for reading a user from the API.  Never includes the password."""

    id: int
    username: str
    is_coach: bool = False
    is_admin: bool = False
    social_provider: Optional[str] = None
    social_id: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class LoginRequest(BaseModel):
    username: str
    password: str


class SocialLoginRequest(BaseModel):
    """Payload sent by the client after the provider redirect completes."""

    social_id: str = Field(..., min_length=1)
    email: Optional[str] = None
    full_name: Optional[str] = None
    profile_image: Optional[str] = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
    # True while a social account still lacks an email or full name.
    needs_profile: bool = False
