"""
What To Watch · SQLAlchemy Base registry
========================================

Import-only module: pulls in every model so `Base.metadata` is complete for
Alembic autogeneration and `create_all`.
"""

from moviecatalog.db.base_class import Base
from moviecatalog.db.models import Comment, Movie, ToWatchItem, User

__all__ = ["Base", "User", "Movie", "Comment", "ToWatchItem"]
