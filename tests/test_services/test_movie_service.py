from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from moviecatalog.db.models import Comment, ToWatchItem
from moviecatalog.schemas.enums import Genre
from moviecatalog.schemas.movie import CreateMovieDto, UpdateMovieDto
from moviecatalog.services import MovieService
from tests.utils.factory import movie_payload


def _published(days_ago: int) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=days_ago)).isoformat()


@pytest.mark.anyio
async def test_create_and_find_by_id(db_session, create_test_user):
    owner = await create_test_user()
    service = MovieService(db_session)

    movie = await service.create(owner.id, CreateMovieDto(**movie_payload(title="Arrival", genre="scifi")))
    found = await service.find_by_id(str(movie.id))

    assert found is not None
    assert found.title == "Arrival"
    assert found.genre == Genre.SCIFI
    assert found.rating == 0
    assert found.comments_count == 0
    assert found.user.id == owner.id


@pytest.mark.anyio
async def test_find_by_id_missing_or_malformed(db_session):
    service = MovieService(db_session)

    assert await service.find_by_id(uuid4()) is None
    assert await service.find_by_id("definitely-not-a-uuid") is None


@pytest.mark.anyio
async def test_get_all_newest_first_with_limit(db_session, create_test_user, create_test_movie):
    owner = await create_test_user()
    old = await create_test_movie(owner, published_at=_published(30))
    new = await create_test_movie(owner, published_at=_published(1))
    mid = await create_test_movie(owner, published_at=_published(10))

    service = MovieService(db_session, default_movie_count=2)

    assert [m.id for m in await service.get_all()] == [new.id, mid.id]
    assert [m.id for m in await service.get_all(limit=3)] == [new.id, mid.id, old.id]


@pytest.mark.anyio
async def test_find_by_genre(db_session, create_test_user, create_test_movie):
    owner = await create_test_user()
    comedy = await create_test_movie(owner, genre="comedy")
    await create_test_movie(owner, genre="horror")

    result = await MovieService(db_session).find_by_genre("comedy")

    assert [m.id for m in result] == [comedy.id]


@pytest.mark.anyio
async def test_update_only_by_owner(db_session, create_test_user, create_test_movie):
    owner = await create_test_user()
    stranger = await create_test_user()
    movie = await create_test_movie(owner, title="Before")
    service = MovieService(db_session)

    denied = await service.update(movie.id, stranger.id, UpdateMovieDto(title="Hijacked"))
    assert denied is None
    assert (await service.find_by_id(movie.id)).title == "Before"

    updated = await service.update(movie.id, owner.id, UpdateMovieDto(title="After", duration_minutes=99))
    assert updated.title == "After"
    assert updated.duration_minutes == 99
    assert updated.director == movie.director


@pytest.mark.anyio
async def test_delete_by_id_removes_comments_and_to_watch(db_session, create_test_user, create_test_movie):
    owner = await create_test_user()
    movie = await create_test_movie(owner)
    db_session.add(Comment(text="Great movie!", rating=9, user_id=owner.id, movie_id=movie.id))
    db_session.add(ToWatchItem(user_id=owner.id, movie_id=movie.id))
    await db_session.commit()
    service = MovieService(db_session)

    assert await service.delete_by_id(movie.id) is True
    assert await service.exists(movie.id) is False
    assert (await db_session.execute(select(func.count(Comment.id)))).scalar_one() == 0
    assert (await db_session.execute(select(func.count()).select_from(ToWatchItem))).scalar_one() == 0

    assert await service.delete_by_id(movie.id) is False


@pytest.mark.anyio
async def test_exists(db_session, create_test_user, create_test_movie):
    movie = await create_test_movie(await create_test_user())
    service = MovieService(db_session)

    assert await service.exists(movie.id) is True
    assert await service.exists(str(movie.id)) is True
    assert await service.exists(uuid4()) is False
    assert await service.exists("123") is False


@pytest.mark.anyio
async def test_refresh_rating_averages_comments(db_session, create_test_user, create_test_movie):
    owner = await create_test_user()
    movie = await create_test_movie(owner)
    for rating in (7, 8, 8):
        db_session.add(Comment(text="Worth a watch", rating=rating, user_id=owner.id, movie_id=movie.id))
    await db_session.commit()

    refreshed = await MovieService(db_session).refresh_rating(movie.id)

    assert refreshed.comments_count == 3
    assert refreshed.rating == 7.7
