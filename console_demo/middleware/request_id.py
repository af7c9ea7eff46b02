"""
Console Demo API - Request ID Middleware
=========================================

What:  Assigns each request a short correlation ID and returns it in the
       X-Request-ID response header.
How:   Reuses a client-supplied X-Request-ID when it is a plain token
       (letters, digits, '.', '_', '-', at most 64 chars), otherwise
       generates one. The value is stored in a ContextVar for loggers and
       exception handlers, and in request.state for route handlers.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

MAX_REQUEST_ID_LENGTH = 64
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,%d}" % MAX_REQUEST_ID_LENGTH)


def _new_request_id() -> str:
    # 8 hex chars is enough to correlate log lines for one process
    return str(uuid.uuid4())[:8]


def resolve_request_id(supplied: str | None) -> str:
    """Return the client's ID if it is safe to log verbatim, else a fresh one."""
    if supplied and _REQUEST_ID_PATTERN.fullmatch(supplied):
        return supplied
    return _new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get("X-Request-ID"))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid

        return response
