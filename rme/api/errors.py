"""Error envelopes for ServiceError, request validation, HTTP errors and crashes."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rme.api.responses import ErrorCode, error
from rme.services import (
    ConflictError,
    NotFoundError,
    ServiceError,
    StorageError,
    ValidationError,
)

log = structlog.get_logger("rme.api")

_STATUS_MAP: dict[type[ServiceError], tuple[int, ErrorCode]] = {
    ValidationError: (400, ErrorCode.BAD_REQUEST),
    NotFoundError: (404, ErrorCode.NOT_FOUND),
    ConflictError: (409, ErrorCode.CONFLICT),
    StorageError: (500, ErrorCode.INTERNAL_ERROR),
}


def _code_for_status(status: int) -> ErrorCode:
    if status >= 500:
        return ErrorCode.INTERNAL_ERROR
    if status == 404:
        return ErrorCode.NOT_FOUND
    if status == 409:
        return ErrorCode.CONFLICT
    return ErrorCode.BAD_REQUEST


async def _service_error_handler(_request: Request, exc: ServiceError) -> JSONResponse:
    status, code = 500, ErrorCode.INTERNAL_ERROR
    for cls in type(exc).__mro__:
        if cls in _STATUS_MAP:
            status, code = _STATUS_MAP[cls]
            break
    return error(status, code, str(exc)).to_response()


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = []
    for err in exc.errors():
        loc = " → ".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}")
    return error(400, ErrorCode.BAD_REQUEST, "; ".join(messages)).to_response()


async def _http_error_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error(exc.status_code, _code_for_status(exc.status_code), str(exc.detail))
    return response.to_response(headers=getattr(exc, "headers", None))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error("unhandled exception", path=request.url.path, exc_info=exc)
    return error(500, ErrorCode.INTERNAL_ERROR, "Internal server error").to_response()


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app."""
    app.add_exception_handler(ServiceError, _service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)
