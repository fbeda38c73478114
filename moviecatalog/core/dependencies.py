# moviecatalog/core/dependencies.py
from __future__ import annotations

"""
Service providers · What To Watch
=================================

Explicit wiring of services for FastAPI routes: each provider receives the
request-scoped `AsyncSession` (from `get_async_db`) and the catalog limits
from the app's `Settings` (`app.state.settings`), and returns a ready-to-use
service.

Tests swap the database by overriding `get_async_db` only; every provider
below picks the override up automatically.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from moviecatalog.core.config import Settings, settings as default_settings
from moviecatalog.db.session import get_async_db
from moviecatalog.services import CommentService, MovieService, ToWatchService, UserService

__all__ = [
    "get_user_service",
    "get_movie_service",
    "get_comment_service",
    "get_to_watch_service",
]


def _app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", default_settings)


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    return UserService(db)


def get_movie_service(request: Request, db: AsyncSession = Depends(get_async_db)) -> MovieService:
    return MovieService(db, default_movie_count=_app_settings(request).DEFAULT_MOVIE_COUNT)


def get_comment_service(
    request: Request,
    db: AsyncSession = Depends(get_async_db),
    movie_service: MovieService = Depends(get_movie_service),
) -> CommentService:
    return CommentService(db, movie_service, max_comment_count=_app_settings(request).MAX_COMMENT_COUNT)


def get_to_watch_service(db: AsyncSession = Depends(get_async_db)) -> ToWatchService:
    return ToWatchService(db)
