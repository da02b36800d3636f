"""FastAPI middleware for request tracing."""

import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_ID_HEADER = "X-Trace-ID"


class TraceIDMiddleware(BaseHTTPMiddleware):
    """Assign a trace ID to every request.

    - Reads X-Trace-ID from request headers, or generates a UUID if missing
    - Stores it on ``request.state.trace_id`` for error responses
    - Binds trace_id to structlog context (auto-included in all logs)
    - Adds X-Trace-ID to response headers

    The same ID ends up in the log lines and in the ``trace_id`` field of
    any error envelope, so a client report can be matched to the logs.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        trace_id = request.headers.get(TRACE_ID_HEADER) or str(uuid.uuid4())
        request.state.trace_id = trace_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(trace_id=trace_id)

        response = await call_next(request)
        response.headers[TRACE_ID_HEADER] = trace_id
        return response


def get_trace_id(request: Request) -> str:
    """Return the request's trace ID, falling back to the header or a new UUID."""
    trace_id = getattr(request.state, "trace_id", None)
    if trace_id is None:
        trace_id = request.headers.get(TRACE_ID_HEADER) or str(uuid.uuid4())
        request.state.trace_id = trace_id
    return trace_id
