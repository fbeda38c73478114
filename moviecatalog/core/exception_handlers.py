from __future__ import annotations

"""
Problem+JSON exception handlers (RFC 7807).

`install_exception_handlers(app)` is called by the app factory. Every error
leaves the service as `application/problem+json` with a stable schema:

    {"type", "title", "detail", "status", "instance"}

plus `component` when the raiser is known and `errors` for validation
failures (`[{"property", "value", "messages"}]`).
"""

from collections import OrderedDict
from typing import Any, Dict, Iterable, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviecatalog.core.exceptions import (
    AppException,
    DomainRuleError,
    ValidationError,
    ValidationErrorField,
)
from moviecatalog.middleware.request_id import get_request_id

PROBLEM_JSON = "application/problem+json"


def _problem(
    title: str,
    detail: str,
    status_code: int,
    request: Request,
    *,
    component: Optional[str] = None,
    errors: Optional[List[Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {
        "type": "about:blank",
        "title": title,
        "detail": detail,
        "status": status_code,
        "instance": str(request.url),
    }
    if component:
        content["component"] = component
    request_id = get_request_id(request)
    if request_id:
        content["request_id"] = request_id
    if errors is not None:
        content["errors"] = jsonable_encoder(errors)
    return JSONResponse(
        status_code=status_code,
        content=content,
        media_type=PROBLEM_JSON,
        headers=headers,
    )


def collect_violations(errors: Iterable[Dict[str, Any]], *, skip_loc_prefix: bool = False) -> List[ValidationErrorField]:
    """Group pydantic error dicts into one entry per property.

    `skip_loc_prefix` drops the leading `body`/`query`/`path` segment that
    FastAPI adds to request-level validation errors.
    """
    grouped: "OrderedDict[str, ValidationErrorField]" = OrderedDict()
    for err in errors:
        loc = list(err.get("loc") or ())
        if skip_loc_prefix and loc and loc[0] in {"body", "query", "path", "header", "cookie"}:
            loc = loc[1:]
        prop = ".".join(str(p) for p in loc) or "body"
        value = None if err.get("type") == "missing" else err.get("input")
        entry = grouped.get(prop)
        if entry is None:
            entry = ValidationErrorField(prop, value, [])
            grouped[prop] = entry
        entry["messages"].append(err.get("msg", "Invalid value"))
    return list(grouped.values())


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.error(f"[{exc.component or 'App'}]: {exc.status_code} - {exc.message}")
    title = "Validation error" if isinstance(exc, ValidationError) else exc.__class__.__name__
    errors = exc.details if isinstance(exc, ValidationError) else None
    return _problem(
        title,
        exc.message,
        exc.status_code,
        request,
        component=exc.component,
        errors=errors,
        headers=getattr(exc, "headers", None),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # type: ignore
    title = exc.__class__.__name__.replace("Exception", "").strip() or "Error"
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem(title, detail, exc.status_code, request, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:  # type: ignore
    errors = collect_violations(exc.errors(), skip_loc_prefix=True)
    logger.error(f"[RequestValidation]: 400 - {request.method} {request.url.path}")
    return _problem(
        "Validation error",
        "Validation error",
        status.HTTP_400_BAD_REQUEST,
        request,
        errors=errors,
    )


async def domain_exception_handler(request: Request, exc: DomainRuleError) -> JSONResponse:
    logger.error(f"[DomainRule]: 400 - {exc}")
    return _problem("Bad Request", str(exc), status.HTTP_400_BAD_REQUEST, request)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # type: ignore
    # Hide internals; the stack trace goes to the log sink only.
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
    return _problem(
        "Internal Server Error",
        "An unexpected error occurred.",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        request,
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Register all handlers on `app` (most specific first)."""
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainRuleError, domain_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, global_exception_handler)  # type: ignore[arg-type]


__all__ = [
    "app_exception_handler",
    "http_exception_handler",
    "validation_exception_handler",
    "domain_exception_handler",
    "global_exception_handler",
    "collect_violations",
    "install_exception_handlers",
]
