# moviecatalog/core/security.py
from __future__ import annotations

"""
What To Watch · Authentication & Security Helpers
=================================================
- Salted password hashing (Passlib); the configured `SALT` is mixed in as a
  pepper on top of the per-hash salt Passlib generates.
- Access token creation (iss-less HS JWT with iat/nbf/jti).
- Decoding lives in `moviecatalog.core.jwt`.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from jose import jwt
from loguru import logger
from passlib.context import CryptContext

from moviecatalog.core.config import Settings, settings as default_settings

# ───────────────────────────────────────────────
# 🔐 Security Constants and Setup
# ───────────────────────────────────────────────
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


# ───────────────────────────────────────────────
# 🔐 Password Hashing Utilities
# ───────────────────────────────────────────────
def _peppered(password: str, salt: str) -> str:
    return f"{salt}{password}"


def get_password_hash(password: str, salt: str) -> str:
    """Return a salted hash of `password` peppered with `salt`."""
    return pwd_context.hash(_peppered(password, salt))


def verify_password(plain_password: str, salt: str, hashed_password: str) -> bool:
    """Constant-time verify of a plaintext password against a stored hash."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(_peppered(plain_password, salt), hashed_password)
    except ValueError:
        # Unrecognized hash format
        return False


# ───────────────────────────────────────────────
# 🪪 JWT · Access Token Generation
# ───────────────────────────────────────────────
def create_access_token(
    user_id: UUID | str,
    email: str,
    expires_delta: Optional[timedelta] = None,
    *,
    settings: Settings = default_settings,
) -> str:
    """Create a signed **access token** carrying the user id and email."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

    payload: Dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
        "iat": now,
        "nbf": now,
        "jti": str(uuid4()),
        "token_type": "access",
    }
    token = jwt.encode(payload, settings.JWT_SECRET_KEY.get_secret_value(), algorithm=settings.JWT_ALGORITHM)
    logger.debug(f"Issued access token for user {user_id}")
    return token


__all__ = [
    "pwd_context",
    "get_password_hash",
    "verify_password",
    "create_access_token",
]
