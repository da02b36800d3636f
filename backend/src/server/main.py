from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from server.config import settings
from server.db.session import shutdown
from server.dependencies import DB, TraceID
from server.errors.builder import error_response
from server.errors.capability import ResponseError
from server.errors.codes import ErrorCode
from server.logging import error_fields, get_logger
from server.middleware import TRACE_ID_HEADER, TraceIDMiddleware, get_trace_id
from server.routers import templates, users
from server.services.health import HealthCheckError, check_database

logger = get_logger(__name__)


class UnhandledError(ResponseError, Exception):
    """Stand-in for an exception no router converted. Exposes nothing about it."""

    def error_code(self) -> ErrorCode:
        return ErrorCode.InternalServerError

    def user_message(self) -> str:
        return "Internal server error"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Code after yield runs on shutdown: close database connections."""
    yield
    await shutdown()


app = FastAPI(lifespan=lifespan)
app.add_middleware(TraceIDMiddleware)
app.include_router(templates.router)
app.include_router(users.router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a safe error response.

    - Logs full exception with traceback (includes trace_id from context)
    - Returns the generic InternalServerError envelope (no stack traces leaked)
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    trace_id = get_trace_id(request)
    response = error_response(trace_id, UnhandledError(), include_details=False)
    # Runs outside TraceIDMiddleware, so the header is not added for us
    response.headers[TRACE_ID_HEADER] = trace_id
    return response


@app.get("/health", response_model=None)
async def health(db: DB, trace_id: TraceID) -> dict[str, str] | JSONResponse:
    """Health check endpoint — verifies database connectivity.

    Returns 200 OK only if the database responds to a ping query.
    """
    try:
        await check_database(db)
    except HealthCheckError as e:
        logger.error("health_check_failed", **error_fields(e))
        return error_response(trace_id, e, include_details=settings.expose_error_details)
    return {"status": "ok"}
