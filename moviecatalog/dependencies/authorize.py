from __future__ import annotations

"""
Authorization guard (bearer JWT)
--------------------------------
- `authorize`: route dependency; decodes the bearer token and places the
  token user (`id`, `email`) on `request.state.user`. Failure → **401**.
- `current_user(request)`: read that identity inside a handler.

Uses the centralized JWT helpers; does not hit the DB.
"""

from fastapi import Request
from pydantic import ValidationError as PydanticValidationError

from moviecatalog.core.config import settings as default_settings
from moviecatalog.core.exceptions import UnauthorizedError
from moviecatalog.core.jwt import decode_token, get_bearer_token
from moviecatalog.schemas.user import TokenUser

COMPONENT = "AuthorizeMiddleware"


async def authorize(request: Request) -> None:
    token = get_bearer_token(request, component=COMPONENT)
    settings = getattr(request.app.state, "settings", default_settings)
    payload = decode_token(token, settings=settings, component=COMPONENT)
    try:
        request.state.user = TokenUser(id=payload["sub"], email=payload.get("email") or "")
    except PydanticValidationError:
        raise UnauthorizedError("Invalid token subject.", COMPONENT)


def current_user(request: Request) -> TokenUser:
    user = getattr(request.state, "user", None)
    if user is None:
        raise UnauthorizedError("Unauthorized", COMPONENT)
    return user
