from __future__ import annotations

"""
🧭 What To Watch • Controller base
==================================

A controller owns one `APIRouter` and declares its route table at
construction time:

    self.add_route("/{id}", HttpMethod.GET, self.show, [validate_object_id("id")])

Middlewares are plain FastAPI dependency callables. They run in list order
before the handler, and the first one that raises ends the request.

Handlers are bound methods that return one of the response helpers below.
"""

from enum import Enum
from typing import Any, Callable, Optional, Sequence

from fastapi import APIRouter, Depends, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from loguru import logger

from moviecatalog.core.config import Settings


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Controller:
    """Base class: route registration plus 200/201/204 response helpers."""

    prefix: str = ""
    tags: Sequence[str] = ()

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.router = APIRouter(prefix=self.prefix, tags=list(self.tags))

    # ─────────────────────────────────────────────────────────────
    # 🧩 Route table
    # ─────────────────────────────────────────────────────────────
    def add_route(
        self,
        path: str,
        method: HttpMethod,
        handler: Callable[..., Any],
        middlewares: Sequence[Callable[..., Any]] = (),
        *,
        status_code: Optional[int] = None,
    ) -> None:
        self.router.add_api_route(
            path,
            handler,
            methods=[method.value],
            dependencies=[Depends(middleware) for middleware in middlewares],
            status_code=status_code,
            response_model=None,
        )
        logger.info(f"Route registered: {method.value} {self.prefix}{path}")

    # ─────────────────────────────────────────────────────────────
    # 📤 Responses
    # ─────────────────────────────────────────────────────────────
    def send(self, status_code: int, data: Any) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=jsonable_encoder(data))

    def ok(self, data: Any) -> JSONResponse:
        return self.send(status.HTTP_200_OK, data)

    def created(self, data: Any) -> JSONResponse:
        return self.send(status.HTTP_201_CREATED, data)

    def no_content(self) -> Response:
        return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["Controller", "HttpMethod"]
