"""
What To Watch · ORM models
==========================

Import all ORM models so their tables are registered on `Base.metadata`
and string-based relationship targets resolve.
"""

from moviecatalog.db.base_class import Base

from .user import User
from .movie import Movie
from .comment import Comment
from .to_watch import ToWatchItem

__all__ = ["Base", "User", "Movie", "Comment", "ToWatchItem"]
