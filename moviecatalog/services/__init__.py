from moviecatalog.services.comment_service import CommentService
from moviecatalog.services.movie_service import MovieService
from moviecatalog.services.to_watch_service import ToWatchService
from moviecatalog.services.user_service import UserService

__all__ = ["UserService", "MovieService", "CommentService", "ToWatchService"]
