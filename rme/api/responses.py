"""Response envelopes shared by every endpoint.

Success::

    {"success": true, "status": 200, "message": "...", "data": {...}, "timestamp": "..."}

Paginated responses add a ``pagination`` object; errors replace ``message``
and ``data`` with ``error: {code, details}``.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from starlette.responses import Response

from rme.core.pagination import PaginationMeta

T = TypeVar("T")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _timestamp() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class ErrorCode(str, Enum):
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorDetail(BaseModel):
    code: ErrorCode
    details: str | None = None


class PageInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    current_page: int
    per_page: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    status: int
    message: str
    data: T
    timestamp: str = Field(default_factory=_timestamp)


class PaginatedResponse(BaseModel, Generic[T]):
    success: bool = True
    status: int
    message: str
    data: list[T]
    pagination: PageInfo
    timestamp: str = Field(default_factory=_timestamp)


class ErrorResponse(BaseModel):
    success: bool = False
    status: int
    error: ErrorDetail
    timestamp: str = Field(default_factory=_timestamp)

    def to_response(self, headers: dict[str, str] | None = None) -> JSONResponse:
        return JSONResponse(
            status_code=self.status, content=self.model_dump(mode="json"), headers=headers
        )


def success(status: int, message: str, data: T) -> ApiResponse[T]:
    return ApiResponse(status=status, message=message, data=data)


def paginated(status: int, message: str, data: list[T], meta: PaginationMeta) -> PaginatedResponse[T]:
    """Wrap one page. *data* keeps the order the query returned."""
    return PaginatedResponse(
        status=status,
        message=message,
        data=data,
        pagination=PageInfo.model_validate(meta),
    )


def error(status: int, code: ErrorCode, details: str | None = None) -> ErrorResponse:
    return ErrorResponse(status=status, error=ErrorDetail(code=code, details=details))


def no_content() -> Response:
    """204 with an empty body, used for deletions."""
    return Response(status_code=204)
