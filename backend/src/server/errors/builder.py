"""Turn ResponseError values into API error responses.

The builder only re-packages an error that already happened: it reads the
current time and queries the error's capability methods. Logging and
trace-id generation belong to the caller.
"""

from datetime import UTC, datetime

from fastapi.responses import JSONResponse

from server.errors.capability import ResponseError
from server.errors.codes import known_code
from server.schemas.error import ApiError, ApiErrorResponse


def build_api_error(
    trace_id: str,
    err: ResponseError,
    *,
    include_details: bool = True,
) -> ApiError:
    """Assemble the ApiError for ``err``.

    Args:
        trace_id: Caller-supplied correlation id, copied verbatim.
        err: The failed operation's error.
        include_details: When False, ``details`` is left out (e.g. in
            deployments that must not expose diagnostics).

    Categories outside ErrorCode are reported as InternalServerError.
    Exceptions raised by the error's own methods propagate unchanged.
    """
    timestamp = datetime.now(UTC)
    details = err.technical_details() if include_details else None
    return ApiError(
        trace_id=trace_id,
        timestamp=timestamp,
        code=known_code(err.error_code()),
        status=int(err.status_code()),
        message=err.user_message(),
        description=err.technical_description() or None,
        details=details or None,
    )


def error_response(
    trace_id: str,
    err: ResponseError,
    *,
    include_details: bool = True,
) -> JSONResponse:
    """Build the JSON error response for ``err``.

    The HTTP status always equals the ``status`` field of the body.
    """
    api_error = build_api_error(trace_id, err, include_details=include_details)
    return JSONResponse(
        status_code=api_error.status,
        content=ApiErrorResponse(error=api_error).to_body(),
    )
