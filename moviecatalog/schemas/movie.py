from __future__ import annotations

"""
Movie DTOs & response projections.

`UpdateMovieDto` mirrors `CreateMovieDto` with every field optional; only the
fields a client actually sends are applied (`model_dump(exclude_unset=True)`).
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, conlist, constr

from moviecatalog.schemas.enums import Genre
from moviecatalog.schemas.user import UserResponse

JPG_URI_PATTERN = r"^\S+\.jpg$"

Title = constr(strip_whitespace=True, min_length=2, max_length=100)
Description = constr(strip_whitespace=True, min_length=20, max_length=1024)
Director = constr(strip_whitespace=True, min_length=2, max_length=50)
Uri = constr(strip_whitespace=True, min_length=1, max_length=512)
JpgUri = constr(pattern=JPG_URI_PATTERN, max_length=512)
Actors = conlist(constr(strip_whitespace=True, min_length=1), min_length=1)


# ──────────────── Requests ────────────────
class CreateMovieDto(BaseModel):
    title: Title
    description: Description
    published_at: datetime
    genre: Genre
    release_year: int = Field(..., ge=1888, le=2100)
    preview_video_uri: Uri
    video_uri: Uri
    actors: Actors
    director: Director
    duration_minutes: int = Field(..., gt=0)
    poster_uri: JpgUri
    background_image_uri: JpgUri
    background_color: constr(strip_whitespace=True, min_length=1, max_length=32)


class UpdateMovieDto(BaseModel):
    title: Optional[Title] = None
    description: Optional[Description] = None
    published_at: Optional[datetime] = None
    genre: Optional[Genre] = None
    release_year: Optional[int] = Field(None, ge=1888, le=2100)
    preview_video_uri: Optional[Uri] = None
    video_uri: Optional[Uri] = None
    actors: Optional[Actors] = None
    director: Optional[Director] = None
    duration_minutes: Optional[int] = Field(None, gt=0)
    poster_uri: Optional[JpgUri] = None
    background_image_uri: Optional[JpgUri] = None
    background_color: Optional[constr(strip_whitespace=True, min_length=1, max_length=32)] = None


# ──────────────── Responses ────────────────
class MovieListItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    published_at: datetime
    genre: Genre
    preview_video_uri: str
    poster_uri: str
    comments_count: int
    user: UserResponse


class MovieResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    published_at: datetime
    genre: Genre
    release_year: int
    rating: float
    comments_count: int
    preview_video_uri: str
    video_uri: str
    actors: List[str]
    director: str
    duration_minutes: int
    poster_uri: str
    background_image_uri: str
    background_color: str
    user: UserResponse
