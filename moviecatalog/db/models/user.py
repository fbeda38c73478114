from __future__ import annotations

"""
👤 What To Watch · User (accounts & auth)
=========================================

Account entity storing login credentials and the public profile fields shown
next to movies and comments.

Design highlights
-----------------
• **Case-insensitive uniqueness** for email (stored lower-cased).
• The raw password never touches the row; `set_password` stores a salted
  hash and `verify_password` checks against it.
"""

from sqlalchemy import CheckConstraint, Column, String

from moviecatalog.core.exceptions import InvalidPasswordLengthError
from moviecatalog.core.security import get_password_hash, verify_password as _verify_hash
from moviecatalog.db.base_class import Base, TimestampMixin, UUIDPKMixin

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 12
MAX_NAME_LENGTH = 15


# ──────────────────────────────────────────────────────────────────────────────
# User Model
# ──────────────────────────────────────────────────────────────────────────────

class User(UUIDPKMixin, TimestampMixin, Base):
    """Registered user. Created on registration; never hard-deleted."""

    __tablename__ = "users"

    # ── Identity & Authentication ─────────────────────────────────────────────
    email = Column(String(255), nullable=False, unique=True)
    name = Column(String(MAX_NAME_LENGTH), nullable=False)
    avatar_uri = Column(String(512), nullable=False, default="", server_default="")

    hashed_password = Column(String, nullable=False, doc="Salted PBKDF2 hash of the password")

    __mapper_args__ = {"eager_defaults": True}

    # ── Constraints ──────────────────────────────────────────────────────────
    __table_args__ = (
        CheckConstraint("length(email) > 0", name="email_not_blank"),
        CheckConstraint(f"length(name) BETWEEN 1 AND {MAX_NAME_LENGTH}", name="name_length"),
    )

    # ── Password handling ────────────────────────────────────────────────────
    def set_password(self, password: str, salt: str) -> None:
        """Hash and store `password`.

        Raises:
            InvalidPasswordLengthError: if the password is shorter than 6 or
                longer than 12 characters. Nothing is stored in that case.
        """
        if not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
            raise InvalidPasswordLengthError(MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH)
        self.hashed_password = get_password_hash(password, salt)

    def verify_password(self, password: str, salt: str) -> bool:
        return _verify_hash(password, salt, self.hashed_password or "")
