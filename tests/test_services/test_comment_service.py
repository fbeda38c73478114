import pytest
from sqlalchemy import func, select

from moviecatalog.db.models import Comment, Movie
from moviecatalog.schemas.comment import CreateCommentDto
from moviecatalog.services import CommentService, MovieService


def _service(db_session, **kwargs) -> CommentService:
    return CommentService(db_session, MovieService(db_session), **kwargs)


@pytest.mark.anyio
async def test_create_updates_movie_rating(db_session, create_test_user, create_test_movie):
    author = await create_test_user()
    movie = await create_test_movie(author)
    service = _service(db_session)

    comment = await service.create(movie.id, author.id, CreateCommentDto(text="Loved every minute", rating=10))
    await service.create(movie.id, author.id, CreateCommentDto(text="Second viewing was weaker", rating=5))

    assert comment.user.id == author.id
    assert comment.movie_id == movie.id

    refreshed = await MovieService(db_session).find_by_id(movie.id)
    assert refreshed.comments_count == 2
    assert refreshed.rating == 7.5


@pytest.mark.anyio
async def test_find_by_movie_id_newest_first_and_capped(db_session, create_test_user, create_test_movie):
    author = await create_test_user()
    movie = await create_test_movie(author)
    other = await create_test_movie(author)
    service = _service(db_session, max_comment_count=2)

    texts = ["first comment", "second comment", "third comment"]
    for text in texts:
        await service.create(movie.id, author.id, CreateCommentDto(text=text, rating=6))
    await service.create(other.id, author.id, CreateCommentDto(text="elsewhere", rating=6))

    result = await service.find_by_movie_id(movie.id)

    assert [c.text for c in result] == ["third comment", "second comment"]


@pytest.mark.anyio
async def test_find_by_movie_id_malformed(db_session):
    assert await _service(db_session).find_by_movie_id("nope") == []


class _FailingRatingService(MovieService):
    async def refresh_rating(self, movie_id, *, commit=True):
        raise RuntimeError("rating aggregate failed")


@pytest.mark.anyio
async def test_create_rolls_back_when_rating_refresh_fails(db_session, create_test_user, create_test_movie):
    author = await create_test_user()
    movie = await create_test_movie(author)
    movie_id, author_id = movie.id, author.id
    service = CommentService(db_session, _FailingRatingService(db_session))

    with pytest.raises(RuntimeError):
        await service.create(movie_id, author_id, CreateCommentDto(text="Never saved at all", rating=8))

    comments = (await db_session.execute(select(func.count(Comment.id)))).scalar_one()
    count = (await db_session.execute(select(Movie.comments_count).where(Movie.id == movie_id))).scalar_one()
    assert comments == 0
    assert count == 0
