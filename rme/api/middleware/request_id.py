"""Request ID middleware — per-request log context and access logging."""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

log = structlog.get_logger("rme.access")

HEADER = "X-Request-ID"


def _client_request_id(request: Request) -> str | None:
    """Accept the caller's id only when it is a well-formed UUID."""
    raw = request.headers.get(HEADER)
    if not raw:
        return None
    try:
        return str(uuid.UUID(raw))
    except ValueError:
        return None


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Bind request_id/method/path into structlog contextvars for the request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _client_request_id(request) or str(uuid.uuid4())
        tokens = structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        started = time.perf_counter()
        try:
            log.info("request started")
            response = await call_next(request)
            log.info(
                "request completed",
                status_code=response.status_code,
                duration_ms=_elapsed_ms(started),
            )
            response.headers[HEADER] = request_id
            return response
        except Exception:
            log.exception("request failed", duration_ms=_elapsed_ms(started))
            raise
        finally:
            structlog.contextvars.reset_contextvars(**tokens)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)
