from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, constr

from moviecatalog.schemas.user import UserResponse


class CreateCommentDto(BaseModel):
    text: constr(strip_whitespace=True, min_length=5, max_length=1024)
    rating: int = Field(..., ge=1, le=10)


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    text: str
    rating: int
    # Entities expose the comment date as `created_at`
    date: datetime = Field(validation_alias=AliasChoices("created_at", "date"))
    user: UserResponse
