"""Ordered pre-handler checks attached to routes as FastAPI dependencies."""

from moviecatalog.dependencies.authorize import authorize, current_user
from moviecatalog.dependencies.document_exists import document_exists
from moviecatalog.dependencies.validate_dto import validate_dto
from moviecatalog.dependencies.validate_object_id import validate_object_id

__all__ = [
    "validate_object_id",
    "validate_dto",
    "document_exists",
    "authorize",
    "current_user",
]
