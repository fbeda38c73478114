from __future__ import annotations

"""
💬 What To Watch · Comment (user review of a movie)

`created_at` doubles as the comment date shown to clients.
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.orm import relationship

from moviecatalog.db.base_class import Base, TimestampMixin, UUIDPKMixin


class Comment(UUIDPKMixin, TimestampMixin, Base):
    __tablename__ = "comments"

    text = Column(String(1024), nullable=False)
    rating = Column(Integer, nullable=False)

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    movie_id = Column(Uuid(as_uuid=True), ForeignKey("movies.id", ondelete="CASCADE"), nullable=False, index=True)

    __mapper_args__ = {"eager_defaults": True}

    __table_args__ = (
        CheckConstraint("length(\"text\") >= 5", name="text_min_length"),
        CheckConstraint("rating >= 1 AND rating <= 10", name="rating_range"),
        Index("ix_comments_movie_created", "movie_id", "created_at"),
    )

    user = relationship("User", lazy="selectin")
