"""Exception handlers producing a uniform error body."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from restful_backend.api.models import ErrorResponse, FieldViolation
from restful_backend.shared import UserNotFoundError, ValidationError

log = logging.getLogger(__name__)


def _details(request: Request) -> str:
    return f"uri={request.url.path}"


def _error_response(
    request: Request,
    status_code: int,
    message: str,
    errors: list[FieldViolation] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc).isoformat(),
        message=message,
        details=_details(request),
        errors=errors,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _violations(exc: RequestValidationError) -> list[FieldViolation]:
    violations = []
    for error in exc.errors():
        # drop the "body"/"path" prefix from the location
        loc = [str(part) for part in error.get("loc", ())[1:]]
        violations.append(FieldViolation(field=".".join(loc), message=error.get("msg", "")))
    return violations


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(UserNotFoundError)
    async def _not_found_handler(request: Request, exc: UserNotFoundError):
        return _error_response(request, status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(ValidationError)
    async def _validation_error_handler(request: Request, exc: ValidationError):
        return _error_response(request, status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(request: Request, exc: RequestValidationError):
        violations = _violations(exc)
        first = violations[0].message if violations else "invalid request"
        message = f"Total errors: {len(violations)}. First error: {first}"
        return _error_response(request, status.HTTP_400_BAD_REQUEST, message, violations)

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        response = _error_response(request, exc.status_code, str(exc.detail or "HTTP error"))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(
            request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
        )


__all__ = ["register_exception_handlers"]
