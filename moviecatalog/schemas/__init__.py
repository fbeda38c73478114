from moviecatalog.schemas.comment import CommentResponse, CreateCommentDto
from moviecatalog.schemas.enums import Genre
from moviecatalog.schemas.movie import (
    CreateMovieDto,
    MovieListItemResponse,
    MovieResponse,
    UpdateMovieDto,
)
from moviecatalog.schemas.to_watch import AddToToWatchDto, DeleteFromToWatchDto
from moviecatalog.schemas.user import (
    CreateUserDto,
    LoggedUserResponse,
    LoginUserDto,
    TokenUser,
    UserResponse,
)

__all__ = [
    "Genre",
    "CreateUserDto",
    "LoginUserDto",
    "TokenUser",
    "UserResponse",
    "LoggedUserResponse",
    "CreateMovieDto",
    "UpdateMovieDto",
    "MovieListItemResponse",
    "MovieResponse",
    "CreateCommentDto",
    "CommentResponse",
    "AddToToWatchDto",
    "DeleteFromToWatchDto",
]
