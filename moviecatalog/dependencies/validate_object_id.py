from __future__ import annotations

"""
Object-id guard
---------------
`validate_object_id("id")` returns a route dependency that rejects a path
parameter which is not a UUID with **400**, before any lookup happens.
"""

from typing import Awaitable, Callable

from fastapi import Request, status

from moviecatalog.core.exceptions import HttpError
from moviecatalog.utils.common import parse_object_id

COMPONENT = "ValidateObjectIdMiddleware"


def validate_object_id(param: str) -> Callable[[Request], Awaitable[None]]:
    async def _validate_object_id(request: Request) -> None:
        value = request.path_params.get(param)
        if parse_object_id(value) is None:
            raise HttpError(status.HTTP_400_BAD_REQUEST, f"{value} is invalid ObjectID", COMPONENT)

    return _validate_object_id
