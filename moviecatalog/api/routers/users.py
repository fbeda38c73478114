# ╔══════════════════════════════════════════════════════════════════════════╗
# ║ What To Watch · Users API                                                ║
# ╠──────────────────────────────────────────────────────────────────────────╣
# ║  - POST   /users/register   → Create account (201)                       ║
# ║  - POST   /users/login      → Exchange credentials for a token (200)     ║
# ║  - GET    /users/login      → Resolve the token's user (200)             ║
# ╚══════════════════════════════════════════════════════════════════════════╝
"""
User registration and authentication endpoints.
"""

from fastapi import Depends, Request, Response, status
from sqlalchemy.exc import IntegrityError

from moviecatalog.api.controller import Controller, HttpMethod
from moviecatalog.core.config import Settings
from moviecatalog.core.dependencies import get_user_service
from moviecatalog.core.exceptions import HttpError
from moviecatalog.core.security import create_access_token
from moviecatalog.dependencies import authorize, current_user, validate_dto
from moviecatalog.schemas.user import (
    CreateUserDto,
    LoggedUserResponse,
    LoginUserDto,
    UserResponse,
)
from moviecatalog.services import UserService
from moviecatalog.utils.common import fill_dto

COMPONENT = "UserController"


class UserController(Controller):
    prefix = "/users"
    tags = ("users",)

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)

        self.add_route("/register", HttpMethod.POST, self.create, [validate_dto(CreateUserDto)],
                       status_code=status.HTTP_201_CREATED)
        self.add_route("/login", HttpMethod.POST, self.login, [validate_dto(LoginUserDto)])
        self.add_route("/login", HttpMethod.GET, self.check_authenticate, [authorize])

    async def create(self, request: Request, users: UserService = Depends(get_user_service)) -> Response:
        dto: CreateUserDto = request.state.dto

        if await users.find_by_email(dto.email) is not None:
            raise HttpError(status.HTTP_409_CONFLICT, f"User with email «{dto.email}» exists.", COMPONENT)

        try:
            user = await users.create(dto, self.settings.salt)
        except IntegrityError:
            raise HttpError(status.HTTP_409_CONFLICT, f"User with email «{dto.email}» exists.", COMPONENT)

        return self.created(fill_dto(UserResponse, user))

    async def login(self, request: Request, users: UserService = Depends(get_user_service)) -> Response:
        dto: LoginUserDto = request.state.dto

        user = await users.verify_user(dto, self.settings.salt)
        if user is None:
            raise HttpError(status.HTTP_401_UNAUTHORIZED, "Unauthorized", COMPONENT)

        token = create_access_token(user.id, user.email, settings=self.settings)
        return self.ok(LoggedUserResponse(
            token=token,
            email=user.email,
            name=user.name,
            avatar_uri=user.avatar_uri or "",
        ))

    async def check_authenticate(self, request: Request, users: UserService = Depends(get_user_service)) -> Response:
        token_user = current_user(request)

        user = await users.find_by_id(token_user.id)
        if user is None:
            raise HttpError(status.HTTP_401_UNAUTHORIZED, "Unauthorized", COMPONENT)

        return self.ok(fill_dto(UserResponse, user))
