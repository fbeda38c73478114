from __future__ import annotations

"""
🔖 What To Watch · ToWatchItem (user ↔ movie bookmark)
=====================================================

**Composite PK** (user_id, movie_id): a movie appears at most once in a
user's to-watch list.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Uuid, func

from moviecatalog.db.base_class import Base, utcnow


class ToWatchItem(Base):
    __tablename__ = "to_watch_items"

    # ── Composite identity ──────────────────────────────────────────────────
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        doc="Owner of the list entry.",
    )
    movie_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("movies.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
        doc="Bookmarked movie.",
    )

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_to_watch_items_user_created", "user_id", "created_at"),
    )
