"""
🧭 What To Watch • Router Aggregator
====================================

    from moviecatalog.api.routers import build_router
    app.include_router(build_router(settings), prefix=settings.API_PREFIX)
"""

from fastapi import APIRouter

from moviecatalog.core.config import Settings

from .movies import MovieController
from .users import UserController


def build_router(settings: Settings) -> APIRouter:
    """Compose every controller's router into one `APIRouter`."""
    r = APIRouter()
    r.include_router(UserController(settings).router)
    r.include_router(MovieController(settings).router)
    return r


__all__ = ["build_router", "UserController", "MovieController"]
