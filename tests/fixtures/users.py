from __future__ import annotations

from typing import Awaitable, Callable, Dict, Tuple

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from moviecatalog.core.security import create_access_token
from moviecatalog.db.models.user import User
from tests.utils.factory import DEFAULT_PASSWORD, create_user


def auth_headers(user: User) -> Dict[str, str]:
    """Bearer header for `user` signed with the test settings."""
    token = create_access_token(user.id, user.email)
    return {"Authorization": f"Bearer {token}"}


# ──────────────────────────────────────────────────────────────
# 🧪 Factory: Create Test User
# ──────────────────────────────────────────────────────────────
@pytest.fixture
def create_test_user(db_session: AsyncSession) -> Callable[..., Awaitable[User]]:
    async def _create(**kwargs) -> User:
        return await create_user(db_session, **kwargs)

    return _create


# ──────────────────────────────────────────────────────────────
# 🔑 User + Authorization header
# ──────────────────────────────────────────────────────────────
@pytest.fixture
async def user_with_token(create_test_user) -> Tuple[User, Dict[str, str]]:
    user = await create_test_user(password=DEFAULT_PASSWORD)
    return user, auth_headers(user)


@pytest.fixture
async def other_user_with_token(create_test_user) -> Tuple[User, Dict[str, str]]:
    user = await create_test_user(password=DEFAULT_PASSWORD)
    return user, auth_headers(user)
