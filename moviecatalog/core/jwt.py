# moviecatalog/core/jwt.py
from __future__ import annotations

"""
What To Watch · JWT helpers
===========================
- `decode_token` with signature/expiry checks and required claims
- Case-insensitive Bearer token extraction from a `Request`

Notes
-----
- Token *creation* lives in `moviecatalog.core.security`.
- Every failure surfaces as `UnauthorizedError` (401) so callers only need
  to attach their component name.
"""

from typing import Any, Dict, Optional, Sequence

from fastapi import Request
from jose import ExpiredSignatureError, JWTError, jwt
from loguru import logger

from moviecatalog.core.config import Settings, settings as default_settings
from moviecatalog.core.exceptions import UnauthorizedError


# ─────────────────────────────────────────────────────────────
# 🔓 Decode JWT Token
# ─────────────────────────────────────────────────────────────
def decode_token(
    token: str,
    *,
    expected_types: Optional[Sequence[str]] = ("access",),
    settings: Settings = default_settings,
    component: Optional[str] = None,
) -> Dict[str, Any]:
    """Decode and validate a JWT.

    Security checks
    ---------------
    1) Verify signature and standard claims (exp/nbf/iat)
    2) Require `sub` and `jti`
    3) Optional `token_type` membership

    Raises
    ------
    UnauthorizedError
        For invalid/expired tokens, missing claims or a type mismatch.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
        )
    except ExpiredSignatureError:
        logger.info("Token expired.")
        raise UnauthorizedError("Token has expired.", component)
    except JWTError as e:
        logger.warning(f"JWT decoding failed: {e}")
        raise UnauthorizedError("Invalid token.", component)

    if not payload.get("sub"):
        logger.warning("Missing sub in token payload.")
        raise UnauthorizedError("Token missing user ID.", component)

    if not payload.get("jti"):
        logger.warning("Missing JTI in token.")
        raise UnauthorizedError("Token missing JTI.", component)

    if expected_types is not None and payload.get("token_type") not in set(expected_types):
        logger.warning(
            f"Token type mismatch: got '{payload.get('token_type')}', expected one of {list(expected_types)}"
        )
        raise UnauthorizedError("Invalid token type.", component)

    return payload


# ─────────────────────────────────────────────────────────────
# 📥 Extract Bearer Token from Authorization Header
# ─────────────────────────────────────────────────────────────
def get_bearer_token(request: Request, *, component: Optional[str] = None) -> str:
    """Extract a Bearer token from the `Authorization` header (case-insensitive)."""
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise UnauthorizedError("Missing Authorization header.", component)

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.warning("Malformed Authorization header")
        raise UnauthorizedError("Invalid Authorization scheme.", component)

    token = parts[1].strip()
    if not token:
        raise UnauthorizedError("Empty token.", component)
    return token


__all__ = ["decode_token", "get_bearer_token"]
