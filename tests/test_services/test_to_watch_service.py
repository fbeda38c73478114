import pytest
from sqlalchemy import func, select

from moviecatalog.db.models import ToWatchItem
from moviecatalog.services import ToWatchService


@pytest.mark.anyio
async def test_add_is_idempotent(db_session, create_test_user, create_test_movie):
    user = await create_test_user()
    movie = await create_test_movie(user)
    service = ToWatchService(db_session)

    assert await service.add_to_to_watch(user.id, movie.id) is True
    assert await service.add_to_to_watch(str(user.id), str(movie.id)) is False

    movies = await service.get_to_watch(user.id)
    assert [m.id for m in movies] == [movie.id]
    count = (await db_session.execute(select(func.count()).select_from(ToWatchItem))).scalar_one()
    assert count == 1


@pytest.mark.anyio
async def test_delete_is_idempotent(db_session, create_test_user, create_test_movie):
    user = await create_test_user()
    movie = await create_test_movie(user)
    service = ToWatchService(db_session)

    assert await service.delete_from_to_watch(user.id, movie.id) is False
    await service.add_to_to_watch(user.id, movie.id)
    assert await service.delete_from_to_watch(user.id, movie.id) is True
    assert await service.delete_from_to_watch(user.id, movie.id) is False
    assert await service.get_to_watch(user.id) == []


@pytest.mark.anyio
async def test_lists_are_per_user_and_most_recent_first(db_session, create_test_user, create_test_movie):
    alice = await create_test_user()
    bob = await create_test_user()
    first = await create_test_movie(alice)
    second = await create_test_movie(alice)
    service = ToWatchService(db_session)

    await service.add_to_to_watch(alice.id, first.id)
    await service.add_to_to_watch(alice.id, second.id)
    await service.add_to_to_watch(bob.id, first.id)

    assert [m.id for m in await service.get_to_watch(alice.id)] == [second.id, first.id]
    assert [m.id for m in await service.get_to_watch(bob.id)] == [first.id]
