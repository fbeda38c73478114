"""
User service
============

Account persistence and credential checks on top of an `AsyncSession`.

Key behaviors
-------------
- **Normalized email** (trimmed, lower-cased) for storage and lookups.
- Passwords are hashed by the entity (`User.set_password`); a length
  violation raises before anything is added to the session.
- **Race-safe** `find_or_create` via the unique email constraint and
  IntegrityError recovery.
- Not-found results are `None`; callers decide on the HTTP status.
"""

from typing import Optional
from uuid import UUID

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from moviecatalog.db.models import User
from moviecatalog.schemas.user import CreateUserDto, LoginUserDto
from moviecatalog.utils.common import parse_object_id


# ─────────────────────────────────────────────────────────────
# 🔧 Helpers
# ─────────────────────────────────────────────────────────────
def _norm_email(email: str) -> str:
    return (email or "").strip().lower()


class UserService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    # ─────────────────────────────────────────────────────────
    # 📝 Create
    # ─────────────────────────────────────────────────────────
    async def create(self, dto: CreateUserDto, salt: str) -> User:
        """Persist a new user with a salted password hash.

        Raises:
            InvalidPasswordLengthError: password outside 6..12 characters.
            IntegrityError: the email is already taken.
        """
        user = User(
            email=_norm_email(dto.email),
            name=dto.name,
            avatar_uri=dto.avatar_uri or "",
        )
        user.set_password(dto.password, salt)

        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise
        logger.info(f"New user created: {user.email}")
        return user

    # ─────────────────────────────────────────────────────────
    # 🔎 Lookups
    # ─────────────────────────────────────────────────────────
    async def find_by_id(self, user_id: UUID | str) -> Optional[User]:
        uid = parse_object_id(user_id)
        if uid is None:
            return None
        return await self.db.get(User, uid)

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == _norm_email(email))
        return (await self.db.execute(stmt)).scalar_one_or_none()

    async def find_or_create(self, dto: CreateUserDto, salt: str) -> User:
        """Return the user registered under `dto.email`, creating it if needed."""
        existing = await self.find_by_email(dto.email)
        if existing is not None:
            return existing
        try:
            return await self.create(dto, salt)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same email
            existing = await self.find_by_email(dto.email)
            if existing is None:
                raise
            return existing

    # ─────────────────────────────────────────────────────────
    # 🔐 Credentials
    # ─────────────────────────────────────────────────────────
    async def verify_user(self, dto: LoginUserDto, salt: str) -> Optional[User]:
        """Return the user when email and password match, else None."""
        user = await self.find_by_email(dto.email)
        if user is None:
            return None
        if user.verify_password(dto.password, salt):
            return user
        logger.info(f"Password mismatch for {user.email}")
        return None
