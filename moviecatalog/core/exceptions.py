# moviecatalog/core/exceptions.py
from __future__ import annotations

"""
What To Watch · Application Exceptions
======================================
A small, consistent layer on top of FastAPI/Starlette's `HTTPException` that
lets us attach the originating component and structured details, and render
them through `moviecatalog.core.exception_handlers`.

Key ideas
---------
- One base `AppException` that carries `message`, `component`, `details`.
- `HttpError` is what controllers and middlewares raise for 4xx outcomes.
- `ValidationError` aggregates every failing DTO field in one response.
- Domain rule violations (`DomainRuleError`) are plain exceptions raised by
  entities/services; the top-level handler maps them to 400.

Usage
-----
    raise HttpError(status.HTTP_404_NOT_FOUND, "Movie not found", "MovieController")
"""

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status

__all__ = [
    "AppException",
    "HttpError",
    "ValidationError",
    "ValidationErrorField",
    "UnauthorizedError",
    "DomainRuleError",
    "InvalidPasswordLengthError",
]


# ──────────────────────────────────────────────────────────────
# 📦 Core: AppException
# ──────────────────────────────────────────────────────────────
class AppException(HTTPException):
    """Base application-level HTTP exception with optional metadata.

    Attributes
    -----------
    status_code : int
        HTTP status code (400/401/404/409/...).
    message : str
        Human-readable error message (serialized as `detail` as well).
    component : str | None
        Name of the controller/middleware that raised the error.
    details : list | dict | None
        Machine-readable details (e.g., validation violations).
    """

    def __init__(
        self,
        *,
        status_code: int,
        message: str,
        component: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.message: str = message
        self.component: Optional[str] = component
        self.details: Optional[Any] = details

    def __str__(self) -> str:
        prefix = f"[{self.component}] " if self.component else ""
        return f"{prefix}{self.status_code}: {self.message}"


class HttpError(AppException):
    """Typed HTTP error: status code, message and originating component."""

    def __init__(self, status_code: int, message: str, component: Optional[str] = None) -> None:
        super().__init__(status_code=status_code, message=message, component=component)


# ──────────────────────────────────────────────────────────────
# 🧾 Validation
# ──────────────────────────────────────────────────────────────
class ValidationErrorField(Dict[str, Any]):
    """One failing field: `{"property", "value", "messages"}`."""

    def __init__(self, property: str, value: Any, messages: List[str]) -> None:
        super().__init__(property=property, value=value, messages=list(messages))


class ValidationError(AppException):
    """Raised by DTO validation with every violation collected in `details`."""

    def __init__(
        self,
        message: str,
        details: List[ValidationErrorField],
        component: Optional[str] = "ValidateDtoMiddleware",
    ) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=message,
            component=component,
            details=details,
        )


# ──────────────────────────────────────────────────────────────
# 🔑 Auth
# ──────────────────────────────────────────────────────────────
class UnauthorizedError(AppException):
    """Raised for missing, invalid or expired bearer tokens (401)."""

    def __init__(self, message: str = "Unauthorized", component: Optional[str] = None) -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=message,
            component=component,
            headers={"WWW-Authenticate": "Bearer"},
        )


# ──────────────────────────────────────────────────────────────
# 🧱 Domain rules (not HTTP-aware)
# ──────────────────────────────────────────────────────────────
class DomainRuleError(Exception):
    """Base class for entity/service rule violations."""


class InvalidPasswordLengthError(DomainRuleError, ValueError):
    def __init__(self, min_length: int, max_length: int) -> None:
        super().__init__(
            f"Password length must be between {min_length} and {max_length} characters"
        )
        self.min_length = min_length
        self.max_length = max_length
