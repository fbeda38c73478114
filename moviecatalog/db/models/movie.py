from __future__ import annotations

"""
🎬 What To Watch · Movie (catalog entry)
========================================

A catalog movie owned by the user who published it.

• `rating` and `comments_count` are **derived**: they are recomputed from the
  movie's comments after each new comment (see `MovieService.refresh_rating`).
• `actors` is a JSON array of names (non-empty).
• Comments and to-watch entries are removed together with the movie by
  `MovieService.delete_by_id`; the FKs cascade as well on PostgreSQL.
"""

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Uuid,
    text,
)
from sqlalchemy.orm import relationship

from moviecatalog.db.base_class import Base, TimestampMixin, UUIDPKMixin
from moviecatalog.schemas.enums import Genre


class Movie(UUIDPKMixin, TimestampMixin, Base):
    __tablename__ = "movies"

    # ── Descriptive ─────────────────────────────────────────────────────────
    title = Column(String(100), nullable=False)
    description = Column(String(1024), nullable=False)
    published_at = Column(DateTime(timezone=True), nullable=False)
    genre = Column(
        Enum(
            Genre,
            name="movie_genre",
            native_enum=False,
            length=20,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    release_year = Column(Integer, nullable=False)
    director = Column(String(50), nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    actors = Column(JSON, nullable=False, default=list)

    # ── Derived from comments ───────────────────────────────────────────────
    rating = Column(Float, nullable=False, default=0, server_default=text("0"))
    comments_count = Column(Integer, nullable=False, default=0, server_default=text("0"))

    # ── Media ───────────────────────────────────────────────────────────────
    preview_video_uri = Column(String(512), nullable=False)
    video_uri = Column(String(512), nullable=False)
    poster_uri = Column(String(512), nullable=False)
    background_image_uri = Column(String(512), nullable=False)
    background_color = Column(String(32), nullable=False)

    # ── Ownership ───────────────────────────────────────────────────────────
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Publisher; the only user allowed to edit the movie.",
    )

    __mapper_args__ = {"eager_defaults": True}

    __table_args__ = (
        CheckConstraint("length(title) >= 2", name="title_min_length"),
        CheckConstraint("length(description) >= 20", name="description_min_length"),
        CheckConstraint("length(director) >= 2", name="director_min_length"),
        CheckConstraint("duration_minutes > 0", name="duration_positive"),
        CheckConstraint("rating >= 0 AND rating <= 10", name="rating_range"),
        CheckConstraint("comments_count >= 0", name="comments_count_non_negative"),
        Index("ix_movies_published_at", "published_at"),
        Index("ix_movies_genre_published_at", "genre", "published_at"),
    )

    # ── Relationships ───────────────────────────────────────────────────────
    user = relationship("User", lazy="selectin")
