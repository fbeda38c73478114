from uuid import UUID

from pydantic import BaseModel


class AddToToWatchDto(BaseModel):
    movie_id: UUID


class DeleteFromToWatchDto(BaseModel):
    movie_id: UUID
