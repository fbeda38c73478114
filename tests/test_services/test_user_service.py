import pytest
from sqlalchemy import func, select

from moviecatalog.core.config import settings
from moviecatalog.core.exceptions import InvalidPasswordLengthError
from moviecatalog.db.models import User
from moviecatalog.schemas.user import CreateUserDto, LoginUserDto
from moviecatalog.services import UserService


def _dto(**overrides) -> CreateUserDto:
    data = {"email": "Keanu@Example.com", "name": "Keanu", "password": "matrix99", "avatar_uri": None}
    data.update(overrides)
    # Bypass field validation so the entity rule itself is exercised
    return CreateUserDto.model_construct(**data)


async def _user_count(db_session) -> int:
    return (await db_session.execute(select(func.count(User.id)))).scalar_one()


@pytest.mark.anyio
async def test_create_hashes_password_and_normalizes_email(db_session):
    service = UserService(db_session)

    user = await service.create(_dto(), settings.salt)

    assert user.id is not None
    assert user.email == "keanu@example.com"
    assert user.avatar_uri == ""
    assert user.hashed_password != "matrix99"
    assert user.verify_password("matrix99", settings.salt)
    assert not user.verify_password("matrix99", "another-salt")


@pytest.mark.anyio
@pytest.mark.parametrize("password", ["", "12345", "1234567890123"])
async def test_create_rejects_password_length_before_persisting(db_session, password):
    service = UserService(db_session)

    with pytest.raises(InvalidPasswordLengthError):
        await service.create(_dto(password=password), settings.salt)

    assert not db_session.new
    assert await _user_count(db_session) == 0


@pytest.mark.anyio
@pytest.mark.parametrize("password", ["123456", "123456789012"])
async def test_create_accepts_password_length_bounds(db_session, password):
    user = await UserService(db_session).create(_dto(password=password), settings.salt)
    assert user.verify_password(password, settings.salt)


@pytest.mark.anyio
async def test_find_or_create_is_idempotent(db_session):
    service = UserService(db_session)

    first = await service.find_or_create(_dto(), settings.salt)
    second = await service.find_or_create(_dto(email="KEANU@example.com", name="Other"), settings.salt)

    assert first.id == second.id
    assert second.name == "Keanu"
    assert await _user_count(db_session) == 1


@pytest.mark.anyio
async def test_find_by_email_is_case_insensitive(db_session, create_test_user):
    user = await create_test_user(email="neo@example.com")

    found = await UserService(db_session).find_by_email("  NEO@Example.COM ")

    assert found is not None and found.id == user.id


@pytest.mark.anyio
async def test_find_by_id(db_session, create_test_user):
    user = await create_test_user()
    service = UserService(db_session)

    assert (await service.find_by_id(user.id)).email == user.email
    assert (await service.find_by_id(str(user.id))).id == user.id
    assert await service.find_by_id("not-an-id") is None


@pytest.mark.anyio
async def test_verify_user(db_session, create_test_user):
    user = await create_test_user(email="trinity@example.com", password="followme")
    service = UserService(db_session)

    ok = await service.verify_user(LoginUserDto(email="trinity@example.com", password="followme"), settings.salt)
    wrong = await service.verify_user(LoginUserDto(email="trinity@example.com", password="nope123"), settings.salt)
    unknown = await service.verify_user(LoginUserDto(email="smith@example.com", password="followme"), settings.salt)

    assert ok is not None and ok.id == user.id
    assert wrong is None
    assert unknown is None
