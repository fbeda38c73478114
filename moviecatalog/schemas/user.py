from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, constr

# Image files only; any non-blank path ending in .jpg/.png
AVATAR_URI_PATTERN = r"^\S+\.(jpg|png)$"


# ──────────────── Registration ────────────────
class CreateUserDto(BaseModel):
    email: EmailStr
    name: constr(strip_whitespace=True, min_length=1, max_length=15)
    password: constr(min_length=6, max_length=12)
    avatar_uri: Optional[constr(pattern=AVATAR_URI_PATTERN)] = None


# ──────────────── Login ────────────────
class LoginUserDto(BaseModel):
    email: EmailStr
    password: constr(min_length=1)


# ──────────────── Responses ────────────────
class UserResponse(BaseModel):
    """Public user projection; never carries the password hash."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    name: str
    avatar_uri: str = ""


class LoggedUserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    token: str
    email: str
    name: str
    avatar_uri: str = ""


# ──────────────── Token identity ────────────────
class TokenUser(BaseModel):
    """Identity carried by an access token (`sub` → id)."""
    id: UUID
    email: str
