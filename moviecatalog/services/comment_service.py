"""
Comment service: create comments and list them per movie (newest first).
Every new comment refreshes the movie's derived rating.
"""

from typing import List
from uuid import UUID

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from moviecatalog.db.models import Comment
from moviecatalog.schemas.comment import CreateCommentDto
from moviecatalog.services.movie_service import MovieService
from moviecatalog.utils.common import parse_object_id

MAX_COMMENT_COUNT = 50


class CommentService:
    def __init__(
        self,
        db: AsyncSession,
        movie_service: MovieService,
        max_comment_count: int = MAX_COMMENT_COUNT,
    ) -> None:
        self.db = db
        self.movie_service = movie_service
        self.max_comment_count = max_comment_count

    async def create(self, movie_id: UUID | str, user_id: UUID | str, dto: CreateCommentDto) -> Comment:
        """Insert a comment and refresh the movie's derived rating in one transaction."""
        comment = Comment(
            text=dto.text,
            rating=dto.rating,
            movie_id=parse_object_id(movie_id),
            user_id=parse_object_id(user_id),
        )
        self.db.add(comment)
        try:
            await self.db.flush()
            await self.movie_service.refresh_rating(comment.movie_id, commit=False)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        logger.info(f"New comment {comment.id} on movie {comment.movie_id}")

        stmt = (
            select(Comment)
            .where(Comment.id == comment.id)
            .execution_options(populate_existing=True)
        )
        return (await self.db.execute(stmt)).scalar_one()

    async def find_by_movie_id(self, movie_id: UUID | str) -> List[Comment]:
        mid = parse_object_id(movie_id)
        if mid is None:
            return []
        stmt = (
            select(Comment)
            .where(Comment.movie_id == mid)
            .order_by(Comment.created_at.desc())
            .limit(self.max_comment_count)
        )
        return list((await self.db.execute(stmt)).scalars().all())
