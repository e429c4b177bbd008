"""
Authentication endpoints.

Users register with a username and password or arrive through a
social provider (Kakao, Naver).  Every successful call returns a
bearer token to be sent as ``Authorization: Bearer <token>``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from chukgo_api.app.core.security import create_user_token, get_current_user
from chukgo_api.app.core.store import EntityStore, get_store
from chukgo_api.app.schemas.user import (
    LoginRequest,
    SocialLoginRequest,
    TokenResponse,
    UserCreate,
    UserRead,
    UserUpdate,
)
from chukgo_api.app.services.user_service import UserService, needs_profile


router = APIRouter()


def _token_response(user: UserRead) -> TokenResponse:
    return TokenResponse(
        access_token=create_user_token(user.id),
        user=user,
        needs_profile=needs_profile(user),
    )


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
)
async def register(data: UserCreate, store: EntityStore = Depends(get_store)) -> TokenResponse:
    try:
        user = await UserService.create_user(store, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _token_response(user)


@router.post("/login", response_model=TokenResponse, summary="Log in with username and password")
async def login(data: LoginRequest, store: EntityStore = Depends(get_store)) -> TokenResponse:
    try:
        user = await UserService.authenticate(store, data.username, data.password)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
    return _token_response(user)


@router.post("/social/{provider}", response_model=TokenResponse, summary="Log in through a social provider")
async def social_login(
    provider: str,
    data: SocialLoginRequest,
    store: EntityStore = Depends(get_store),
) -> TokenResponse:
    """Find or create the account linked to ``provider``/``social_id``.

    ``needs_profile`` in the response tells the client to show the
    profile completion form before continuing.
    """
    try:
        user, _created = await UserService.social_login(store, provider, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _token_response(user)


@router.get("/me", response_model=UserRead, summary="Current user")
async def read_me(current_user: Dict[str, Any] = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(current_user)


@router.patch("/me", response_model=UserRead, summary="Update or complete the current profile")
async def update_me(
    data: UserUpdate,
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: EntityStore = Depends(get_store),
) -> UserRead:
    user = await UserService.update_profile(store, current_user["id"], data)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
