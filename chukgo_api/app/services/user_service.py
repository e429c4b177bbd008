"""
Business logic for users.

The ``UserService`` registers accounts, authenticates them and handles
first‑touch creation of accounts coming from social login providers.
Passwords are stored as PBKDF2 hashes; read models never expose them.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from ..core.security import hash_password, verify_password
from ..core.store import USERS, EntityStore
from ..schemas.user import SocialLoginRequest, UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

SOCIAL_PROVIDERS = ("kakao", "naver")


def _find_record(store: EntityStore, predicate: Callable[[Dict[str, Any]], bool]) -> Optional[Dict[str, Any]]:
    for record in store.list(USERS):
        if predicate(record):
            return record
    return None


def needs_profile(user: UserRead) -> bool:
    """Whether a social account still has to provide an email and a name."""
    return bool(user.social_provider) and not (user.email and user.full_name)


class UserService:
    """Service for user accounts."""

    @classmethod
    async def get_user(cls, store: EntityStore, user_id: int) -> Optional[UserRead]:
        record = store.get(USERS, user_id)
        return UserRead.model_validate(record) if record else None

    @classmethod
    async def get_user_by_username(cls, store: EntityStore, username: str) -> Optional[UserRead]:
        record = _find_record(store, lambda u: u["username"] == username)
        return UserRead.model_validate(record) if record else None

    @classmethod
    async def get_user_by_social(cls, store: EntityStore, provider: str, social_id: str) -> Optional[UserRead]:
        record = _find_record(
            store,
            lambda u: u.get("social_provider") == provider and u.get("social_id") == social_id,
        )
        return UserRead.model_validate(record) if record else None

    @classmethod
    async def create_user(
        cls,
        store: EntityStore,
        data: UserCreate,
        *,
        is_coach: bool = False,
        is_admin: bool = False,
    ) -> UserRead:
        """Register a new account.

        Usernames are unique within the store; a duplicate raises
        ``ValueError``.  The password is hashed before it is stored.
        """
        if await cls.get_user_by_username(store, data.username):
            raise ValueError(f"Username {data.username} is already taken")
        record = data.model_dump(exclude={"password"})
        record.update(
            password=hash_password(data.password),
            is_coach=is_coach,
            is_admin=is_admin,
            social_provider=None,
            social_id=None,
        )
        stored = store.insert(USERS, record)
        logger.info("Registered user %s (%s)", stored["id"], data.username)
        return UserRead.model_validate(stored)

    @classmethod
    async def authenticate(cls, store: EntityStore, username: str, password: str) -> UserRead:
        """Return the user for valid credentials, else raise ``ValueError``."""
        record = _find_record(store, lambda u: u["username"] == username)
        if record is None or not verify_password(password, record.get("password")):
            logger.info("Failed login for %s", username)
            raise ValueError("Invalid username or password")
        return UserRead.model_validate(record)

    @classmethod
    async def social_login(
        cls,
        store: EntityStore,
        provider: str,
        data: SocialLoginRequest,
    ) -> Tuple[UserRead, bool]:
        """Find or create the account linked to a provider identity.

        Returns the user and whether it was created by this call.  New
        accounts get the username ``"<provider>_<social_id>"`` (with a
        ``_2``, ``_3``, ... suffix when that name is already taken) and no
        password; profile fields the provider shared are copied over.
        """
        if provider not in SOCIAL_PROVIDERS:
            raise ValueError(f"Unsupported social provider: {provider}")
        existing = await cls.get_user_by_social(store, provider, data.social_id)
        if existing:
            return existing, False
        record = {
            "username": await cls._free_username(store, f"{provider}_{data.social_id}"),
            "password": None,
            "email": data.email,
            "full_name": data.full_name,
            "phone": None,
            "profile_image": data.profile_image,
            "bio": None,
            "is_coach": False,
            "is_admin": False,
            "social_provider": provider,
            "social_id": data.social_id,
        }
        stored = store.insert(USERS, record)
        logger.info("Created %s account %s for social id %s", provider, stored["id"], data.social_id)
        return UserRead.model_validate(stored), True

    @classmethod
    async def _free_username(cls, store: EntityStore, base: str) -> str:
        username, suffix = base, 1
        while await cls.get_user_by_username(store, username):
            suffix += 1
            username = f"{base}_{suffix}"
        return username

    @classmethod
    async def update_profile(cls, store: EntityStore, user_id: int, data: UserUpdate) -> Optional[UserRead]:
        updated = store.update(USERS, user_id, data.model_dump(exclude_unset=True))
        return UserRead.model_validate(updated) if updated else None

    @classmethod
    async def mark_coach(cls, store: EntityStore, user_id: int) -> Optional[UserRead]:
        updated = store.update(USERS, user_id, {"is_coach": True})
        return UserRead.model_validate(updated) if updated else None

    @classmethod
    async def ensure_admin(cls, store: EntityStore, username: str, password: str, email: str) -> UserRead:
        """Create the administrator account unless the username exists."""
        existing = await cls.get_user_by_username(store, username)
        if existing:
            return existing
        return await cls.create_user(
            store,
            UserCreate(username=username, password=password, email=email, full_name="축고 관리자"),
            is_admin=True,
        )
