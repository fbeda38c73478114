# ╔══════════════════════════════════════════════════════════════════════════╗
# ║ What To Watch · Movies API                                               ║
# ╠──────────────────────────────────────────────────────────────────────────╣
# ║  - GET    /movies                 → Catalog (query: genre, limit)        ║
# ║  - POST   /movies                 → Publish a movie (201)                ║
# ║  - GET    /movies/promo           → Promo movie                          ║
# ║  - GET    /movies/to-watch        → Current user's to-watch list         ║
# ║  - POST   /movies/to-watch        → Add to to-watch (204, idempotent)    ║
# ║  - DELETE /movies/to-watch        → Remove from to-watch (204)           ║
# ║  - GET    /movies/{id}/comments   → Comments, newest first               ║
# ║  - POST   /movies/{id}/comments   → Add comment (201)                    ║
# ║  - GET    /movies/{id}            → Movie details                        ║
# ║  - PUT    /movies/{id}            → Update own movie                     ║
# ║  - DELETE /movies/{id}            → Delete movie (204)                   ║
# ╠──────────────────────────────────────────────────────────────────────────╣
# ║ Static paths (/promo, /to-watch) are registered before /{id}.            ║
# ╚══════════════════════════════════════════════════════════════════════════╝
"""
Movie catalog, comments and to-watch endpoints.
"""

from typing import Optional

from fastapi import Depends, Query, Request, Response, status
from sqlalchemy.exc import IntegrityError

from moviecatalog.api.controller import Controller, HttpMethod
from moviecatalog.core.config import Settings
from moviecatalog.core.dependencies import (
    get_comment_service,
    get_movie_service,
    get_to_watch_service,
)
from moviecatalog.core.exceptions import HttpError
from moviecatalog.dependencies import (
    authorize,
    current_user,
    document_exists,
    validate_dto,
    validate_object_id,
)
from moviecatalog.schemas.comment import CommentResponse, CreateCommentDto
from moviecatalog.schemas.enums import Genre
from moviecatalog.schemas.movie import (
    CreateMovieDto,
    MovieListItemResponse,
    MovieResponse,
    UpdateMovieDto,
)
from moviecatalog.schemas.to_watch import AddToToWatchDto, DeleteFromToWatchDto
from moviecatalog.services import CommentService, MovieService, ToWatchService
from moviecatalog.utils.common import fill_dto

COMPONENT = "MovieController"


class MovieController(Controller):
    prefix = "/movies"
    tags = ("movies",)

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)

        movie_exists = document_exists(get_movie_service, "Movie", "id")

        self.add_route("", HttpMethod.GET, self.index)
        self.add_route("", HttpMethod.POST, self.create, [authorize, validate_dto(CreateMovieDto)],
                       status_code=status.HTTP_201_CREATED)
        self.add_route("/promo", HttpMethod.GET, self.show_promo)

        self.add_route("/to-watch", HttpMethod.GET, self.get_to_watch, [authorize])
        self.add_route("/to-watch", HttpMethod.POST, self.add_to_watch,
                       [authorize, validate_dto(AddToToWatchDto)],
                       status_code=status.HTTP_204_NO_CONTENT)
        self.add_route("/to-watch", HttpMethod.DELETE, self.delete_from_to_watch,
                       [authorize, validate_dto(DeleteFromToWatchDto)],
                       status_code=status.HTTP_204_NO_CONTENT)

        self.add_route("/{id}/comments", HttpMethod.GET, self.get_comments,
                       [validate_object_id("id"), movie_exists])
        self.add_route("/{id}/comments", HttpMethod.POST, self.create_comment,
                       [authorize, validate_object_id("id"), validate_dto(CreateCommentDto), movie_exists],
                       status_code=status.HTTP_201_CREATED)

        self.add_route("/{id}", HttpMethod.GET, self.show, [validate_object_id("id")])
        self.add_route("/{id}", HttpMethod.PUT, self.update,
                       [authorize, validate_object_id("id"), validate_dto(UpdateMovieDto), movie_exists])
        self.add_route("/{id}", HttpMethod.DELETE, self.delete,
                       [authorize, validate_object_id("id"), movie_exists],
                       status_code=status.HTTP_204_NO_CONTENT)

    # ─────────────────────────────────────────────────────────────
    # 🎬 Catalog
    # ─────────────────────────────────────────────────────────────
    async def index(
        self,
        genre: Optional[Genre] = Query(None),
        limit: Optional[int] = Query(None, ge=1, le=500),
        movies: MovieService = Depends(get_movie_service),
    ) -> Response:
        if genre is not None:
            result = await movies.find_by_genre(genre, limit)
        else:
            result = await movies.get_all(limit)
        return self.ok(fill_dto(MovieListItemResponse, result))

    async def create(self, request: Request, movies: MovieService = Depends(get_movie_service)) -> Response:
        dto: CreateMovieDto = request.state.dto
        try:
            movie = await movies.create(current_user(request).id, dto)
        except IntegrityError:
            # token outlived its user
            raise HttpError(status.HTTP_401_UNAUTHORIZED, "Unauthorized", COMPONENT)
        return self.created(fill_dto(MovieResponse, movie))

    async def show_promo(self, movies: MovieService = Depends(get_movie_service)) -> Response:
        promo_id = self.settings.PROMO_MOVIE_ID
        movie = await movies.find_by_id(promo_id) if promo_id else None
        if movie is None:
            raise HttpError(status.HTTP_404_NOT_FOUND, "Promo movie not found.", COMPONENT)
        return self.ok(fill_dto(MovieResponse, movie))

    async def show(self, id: str, movies: MovieService = Depends(get_movie_service)) -> Response:
        movie = await movies.find_by_id(id)
        if movie is None:
            raise HttpError(status.HTTP_404_NOT_FOUND, f"Movie with id {id} not found.", COMPONENT)
        return self.ok(fill_dto(MovieResponse, movie))

    async def update(self, id: str, request: Request, movies: MovieService = Depends(get_movie_service)) -> Response:
        dto: UpdateMovieDto = request.state.dto
        movie = await movies.update(id, current_user(request).id, dto)
        if movie is None:
            raise HttpError(
                status.HTTP_404_NOT_FOUND,
                f"Movie with id {id} not found among your movies.",
                COMPONENT,
            )
        return self.ok(fill_dto(MovieResponse, movie))

    async def delete(self, id: str, movies: MovieService = Depends(get_movie_service)) -> Response:
        await movies.delete_by_id(id)
        return self.no_content()

    # ─────────────────────────────────────────────────────────────
    # 💬 Comments
    # ─────────────────────────────────────────────────────────────
    async def get_comments(self, id: str, comments: CommentService = Depends(get_comment_service)) -> Response:
        result = await comments.find_by_movie_id(id)
        return self.ok(fill_dto(CommentResponse, result))

    async def create_comment(
        self,
        id: str,
        request: Request,
        comments: CommentService = Depends(get_comment_service),
    ) -> Response:
        dto: CreateCommentDto = request.state.dto
        try:
            comment = await comments.create(id, current_user(request).id, dto)
        except IntegrityError:
            # movie deleted after the existence check, or the token outlived its user
            if not await comments.movie_service.exists(id):
                raise HttpError(status.HTTP_404_NOT_FOUND, f"Movie with id {id} not found.", COMPONENT)
            raise HttpError(status.HTTP_401_UNAUTHORIZED, "Unauthorized", COMPONENT)
        return self.created(fill_dto(CommentResponse, comment))

    # ─────────────────────────────────────────────────────────────
    # 🔖 To-watch
    # ─────────────────────────────────────────────────────────────
    async def get_to_watch(
        self,
        request: Request,
        to_watch: ToWatchService = Depends(get_to_watch_service),
    ) -> Response:
        result = await to_watch.get_to_watch(current_user(request).id)
        return self.ok(fill_dto(MovieListItemResponse, result))

    async def add_to_watch(
        self,
        request: Request,
        movies: MovieService = Depends(get_movie_service),
        to_watch: ToWatchService = Depends(get_to_watch_service),
    ) -> Response:
        dto: AddToToWatchDto = request.state.dto
        if not await movies.exists(dto.movie_id):
            raise HttpError(status.HTTP_404_NOT_FOUND, f"Movie with id {dto.movie_id} not found.", COMPONENT)

        await to_watch.add_to_to_watch(current_user(request).id, dto.movie_id)
        return self.no_content()

    async def delete_from_to_watch(
        self,
        request: Request,
        movies: MovieService = Depends(get_movie_service),
        to_watch: ToWatchService = Depends(get_to_watch_service),
    ) -> Response:
        dto: DeleteFromToWatchDto = request.state.dto
        if not await movies.exists(dto.movie_id):
            raise HttpError(status.HTTP_404_NOT_FOUND, f"Movie with id {dto.movie_id} not found.", COMPONENT)

        await to_watch.delete_from_to_watch(current_user(request).id, dto.movie_id)
        return self.no_content()
