from collections.abc import AsyncGenerator
from typing import Dict

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from chukgo_api.app.core.config import settings
from chukgo_api.app.core.security import create_user_token
from chukgo_api.app.core.seed import seed_store
from chukgo_api.app.core.store import EntityStore
from chukgo_api.app.main import create_app
from chukgo_api.app.services.user_service import UserService

# Ids produced by ``seed_store`` followed by the admin account.
KIM_USER_ID, LEE_USER_ID, PARK_USER_ID = 1, 2, 3
STUDENT_ID = 4
ADMIN_ID = 5


def auth_headers(user_id: int) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_user_token(user_id)}"}


@pytest.fixture
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture
async def seeded_store() -> EntityStore:
    store = EntityStore()
    await seed_store(store)
    await UserService.ensure_admin(
        store, settings.admin_username, settings.admin_password, settings.admin_email
    )
    return store


@pytest.fixture
def app(seeded_store: EntityStore) -> FastAPI:
    return create_app(seeded_store)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
