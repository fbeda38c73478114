from __future__ import annotations

"""
What To Watch · Common helpers
==============================

- `fill_dto`: project an entity (or list of entities) into a response model
- `parse_object_id`: lenient UUID parsing for ids coming from paths/bodies
"""

from typing import Any, Iterable, List, Optional, Type, TypeVar, Union, overload
from uuid import UUID

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


@overload
def fill_dto(dto_cls: Type[T], source: List[Any]) -> List[T]: ...
@overload
def fill_dto(dto_cls: Type[T], source: Any) -> T: ...


def fill_dto(dto_cls: Type[T], source: Union[Any, Iterable[Any]]) -> Union[T, List[T]]:
    """Build `dto_cls` from ORM attributes; lists map element-wise.

    Only the fields declared on `dto_cls` are read, so anything else the
    entity carries (e.g. `hashed_password`) never reaches the response.
    """
    if isinstance(source, (list, tuple)):
        return [dto_cls.model_validate(item, from_attributes=True) for item in source]
    return dto_cls.model_validate(source, from_attributes=True)


def parse_object_id(value: Any) -> Optional[UUID]:
    """Return `value` as a UUID, or None when it does not have the id shape."""
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        return None
    try:
        return UUID(value)
    except ValueError:
        return None


__all__ = ["fill_dto", "parse_object_id"]
