from __future__ import annotations

"""
DTO validation guard
--------------------
`validate_dto(Dto)` returns a route dependency that parses the JSON body,
validates it against `Dto` and stores the instance on `request.state.dto`.

Every failing field is reported at once as a `ValidationError` (400) whose
details are `[{"property", "value", "messages"}]`.
"""

from typing import Awaitable, Callable, Type

from fastapi import Request
from loguru import logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from moviecatalog.core.exception_handlers import collect_violations
from moviecatalog.core.exceptions import ValidationError, ValidationErrorField


def validate_dto(dto_cls: Type[BaseModel]) -> Callable[[Request], Awaitable[None]]:
    async def _validate_dto(request: Request) -> None:
        try:
            body = await request.json()
        except ValueError:
            raise ValidationError(
                f"Validation error: \"{request.url.path}\"",
                [ValidationErrorField("body", None, ["Request body must be a valid JSON document"])],
            )

        try:
            request.state.dto = dto_cls.model_validate(body)
        except PydanticValidationError as exc:
            details = collect_violations(exc.errors())
            logger.debug(f"{dto_cls.__name__} rejected: {[d['property'] for d in details]}")
            raise ValidationError(f"Validation error: \"{request.url.path}\"", details)

    return _validate_dto
