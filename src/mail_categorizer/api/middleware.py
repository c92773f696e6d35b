"""Request-id tracing for the categorization API."""

import time
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128

# Probe and scrape endpoints log at debug level
QUIET_PATHS = frozenset({"/health", "/metrics"})


def resolve_request_id(incoming: str | None) -> str:
    """Reuse the caller's request id when it is usable, else mint one."""
    if incoming and incoming.strip() and len(incoming) <= MAX_REQUEST_ID_LENGTH:
        return incoming.strip()
    return uuid.uuid4().hex


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Bind ``request_id`` and ``path`` into the structlog context.

    Every log line emitted while the request is handled (including the
    categorizer's provider and fallback events) carries the request id, and
    the id is echoed in the ``X-Request-ID`` response header.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        path = request.url.path
        log = logger.debug if path in QUIET_PATHS else logger.info

        structlog.contextvars.bind_contextvars(request_id=request_id, path=path)
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error while serving request",
                method=request.method,
                elapsed_ms=int((time.perf_counter() - started) * 1000),
            )
            raise
        else:
            log(
                "Request served",
                method=request.method,
                status_code=response.status_code,
                elapsed_ms=int((time.perf_counter() - started) * 1000),
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id", "path")
