"""
Movie service
=============

CRUD over the `movies` table plus the catalog queries the API needs
(newest-first listing, genre filter) and the derived rating refresh.

Notes
-----
- Ids arrive as strings from paths/bodies; anything that does not parse as
  a UUID is treated as "not found".
- Reads after writes go through `_load` with `populate_existing` so the
  returned entity (and its eagerly-loaded `user`) reflects the database.
"""

from typing import List, Optional
from uuid import UUID

from loguru import logger
from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from moviecatalog.db.models import Comment, Movie, ToWatchItem
from moviecatalog.schemas.enums import Genre
from moviecatalog.schemas.movie import CreateMovieDto, UpdateMovieDto
from moviecatalog.utils.common import parse_object_id

DEFAULT_MOVIE_COUNT = 60


class MovieService:
    def __init__(self, db: AsyncSession, default_movie_count: int = DEFAULT_MOVIE_COUNT) -> None:
        self.db = db
        self.default_movie_count = default_movie_count

    async def _load(self, movie_id: UUID) -> Optional[Movie]:
        stmt = (
            select(Movie)
            .where(Movie.id == movie_id)
            .execution_options(populate_existing=True)
        )
        return (await self.db.execute(stmt)).scalar_one_or_none()

    # ─────────────────────────────────────────────────────────
    # 📝 Create
    # ─────────────────────────────────────────────────────────
    async def create(self, user_id: UUID | str, dto: CreateMovieDto) -> Movie:
        """Persist a movie owned by `user_id`.

        Raises:
            IntegrityError: the owner does not exist (FK violation).
        """
        movie = Movie(**dto.model_dump(), user_id=parse_object_id(user_id))
        self.db.add(movie)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise
        logger.info(f"New movie created: {movie.title}")
        return await self._load(movie.id)

    # ─────────────────────────────────────────────────────────
    # 🔎 Reads
    # ─────────────────────────────────────────────────────────
    async def find_by_id(self, movie_id: UUID | str) -> Optional[Movie]:
        mid = parse_object_id(movie_id)
        if mid is None:
            return None
        return await self._load(mid)

    async def get_all(self, limit: Optional[int] = None) -> List[Movie]:
        stmt = (
            select(Movie)
            .order_by(Movie.published_at.desc())
            .limit(limit or self.default_movie_count)
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def find_by_genre(self, genre: Genre | str, limit: Optional[int] = None) -> List[Movie]:
        stmt = (
            select(Movie)
            .where(Movie.genre == Genre(genre))
            .order_by(Movie.published_at.desc())
            .limit(limit or self.default_movie_count)
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def exists(self, movie_id: UUID | str) -> bool:
        mid = parse_object_id(movie_id)
        if mid is None:
            return False
        stmt = select(Movie.id).where(Movie.id == mid)
        return (await self.db.execute(stmt)).scalar_one_or_none() is not None

    # ─────────────────────────────────────────────────────────
    # ✏️ Update / Delete
    # ─────────────────────────────────────────────────────────
    async def update(self, movie_id: UUID | str, user_id: UUID | str, dto: UpdateMovieDto) -> Optional[Movie]:
        """Apply the fields sent in `dto` to a movie owned by `user_id`.

        Returns None when the movie does not exist or belongs to someone else.
        """
        movie = await self.find_by_id(movie_id)
        if movie is None or movie.user_id != parse_object_id(user_id):
            return None

        for field, value in dto.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(movie, field, value)
        await self.db.commit()
        logger.info(f"Movie {movie.id} updated")
        return await self._load(movie.id)

    async def delete_by_id(self, movie_id: UUID | str) -> bool:
        """Delete a movie together with its comments and to-watch entries."""
        mid = parse_object_id(movie_id)
        if mid is None:
            return False

        await self.db.execute(delete(Comment).where(Comment.movie_id == mid))
        await self.db.execute(delete(ToWatchItem).where(ToWatchItem.movie_id == mid))
        result = await self.db.execute(delete(Movie).where(Movie.id == mid))
        await self.db.commit()

        deleted = (result.rowcount or 0) > 0
        if deleted:
            logger.info(f"Movie {mid} deleted")
        return deleted

    # ─────────────────────────────────────────────────────────
    # ⭐ Derived rating
    # ─────────────────────────────────────────────────────────
    async def refresh_rating(self, movie_id: UUID | str, *, commit: bool = True) -> Optional[Movie]:
        """Recompute `comments_count` and `rating` from the movie's comments.

        With `commit=False` the UPDATE stays in the caller's transaction and
        nothing is reloaded; the caller commits (or rolls back) both writes.
        """
        mid = parse_object_id(movie_id)
        if mid is None:
            return None

        stmt = select(func.count(Comment.id), func.avg(Comment.rating)).where(Comment.movie_id == mid)
        count, average = (await self.db.execute(stmt)).one()
        rating = round(float(average), 1) if average is not None else 0.0

        await self.db.execute(
            update(Movie)
            .where(Movie.id == mid)
            .values(comments_count=count, rating=rating)
        )
        if not commit:
            return None
        await self.db.commit()
        return await self._load(mid)
