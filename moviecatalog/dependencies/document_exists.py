from __future__ import annotations

"""
Document existence guard
------------------------
`document_exists(get_movie_service, "Movie", "id")` returns a route dependency
that asks the service whether the referenced document exists and fails with
**404** when it does not. The service must expose `async exists(id) -> bool`.
"""

from typing import Any, Awaitable, Callable

from fastapi import Depends, Request, status

from moviecatalog.core.exceptions import HttpError

COMPONENT = "DocumentExistsMiddleware"


def document_exists(
    service_provider: Callable[..., Any],
    entity_name: str,
    param: str,
) -> Callable[..., Awaitable[None]]:
    async def _document_exists(request: Request, service: Any = Depends(service_provider)) -> None:
        document_id = request.path_params.get(param)
        if not await service.exists(document_id):
            raise HttpError(
                status.HTTP_404_NOT_FOUND,
                f"{entity_name} with {document_id} not found.",
                COMPONENT,
            )

    return _document_exists
