"""
To-watch service
================

Per-user list of saved movies. Add and remove are idempotent: the boolean
result only reports whether anything changed. The composite primary key
(user_id, movie_id) keeps a movie from appearing twice, even when two adds
race.
"""

from typing import List
from uuid import UUID

from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from moviecatalog.db.models import Movie, ToWatchItem
from moviecatalog.utils.common import parse_object_id


class ToWatchService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_to_watch(self, user_id: UUID | str) -> List[Movie]:
        """Movies on the user's list, most recently added first."""
        uid = parse_object_id(user_id)
        if uid is None:
            return []
        stmt = (
            select(Movie)
            .join(ToWatchItem, ToWatchItem.movie_id == Movie.id)
            .where(ToWatchItem.user_id == uid)
            .order_by(ToWatchItem.created_at.desc())
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def add_to_to_watch(self, user_id: UUID | str, movie_id: UUID | str) -> bool:
        """Add a movie to the list. Returns False when it was already there."""
        uid, mid = parse_object_id(user_id), parse_object_id(movie_id)
        if await self.db.get(ToWatchItem, (uid, mid)) is not None:
            return False

        self.db.add(ToWatchItem(user_id=uid, movie_id=mid))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info(f"Movie {mid} already in to-watch list of {uid}")
            return False
        logger.info(f"Movie {mid} added to to-watch list of {uid}")
        return True

    async def delete_from_to_watch(self, user_id: UUID | str, movie_id: UUID | str) -> bool:
        """Remove a movie from the list. Returns False when it was not there."""
        uid, mid = parse_object_id(user_id), parse_object_id(movie_id)
        result = await self.db.execute(
            delete(ToWatchItem).where(ToWatchItem.user_id == uid, ToWatchItem.movie_id == mid)
        )
        await self.db.commit()
        removed = (result.rowcount or 0) > 0
        if removed:
            logger.info(f"Movie {mid} removed from to-watch list of {uid}")
        return removed
