"""Error categories and their default HTTP statuses.

ErrorCode is the categorical taxonomy every service error reports.
STATUS_MAP translates a category into the status a response carries
unless the error overrides it. The table is built once at import and
exposed read-only.
"""

from enum import StrEnum
from http import HTTPStatus
from types import MappingProxyType
from typing import Mapping


class ErrorCode(StrEnum):
    """Error category. The value is the name sent to clients."""

    NotFound = "NotFound"
    BadRequest = "BadRequest"
    UnAuthorized = "UnAuthorized"
    Forbidden = "Forbidden"
    Conflict = "Conflict"
    RateLimitExceeded = "RateLimitExceeded"
    InternalServerError = "InternalServerError"


STATUS_MAP: Mapping[ErrorCode, HTTPStatus] = MappingProxyType(
    {
        ErrorCode.NotFound: HTTPStatus.NOT_FOUND,
        ErrorCode.BadRequest: HTTPStatus.BAD_REQUEST,
        ErrorCode.UnAuthorized: HTTPStatus.UNAUTHORIZED,
        ErrorCode.Forbidden: HTTPStatus.FORBIDDEN,
        ErrorCode.Conflict: HTTPStatus.CONFLICT,
        ErrorCode.RateLimitExceeded: HTTPStatus.TOO_MANY_REQUESTS,
        ErrorCode.InternalServerError: HTTPStatus.INTERNAL_SERVER_ERROR,
    }
)


def default_status(code: ErrorCode) -> HTTPStatus:
    """Return the default status for ``code``.

    Categories missing from the table fall back to 500 instead of raising.
    """
    return STATUS_MAP.get(code, HTTPStatus.INTERNAL_SERVER_ERROR)


def known_code(code: ErrorCode) -> ErrorCode:
    """Return ``code`` as an ErrorCode member, or InternalServerError if it isn't one.

    Values equal to a member's name (e.g. a plain "NotFound") resolve to that member.
    """
    if isinstance(code, ErrorCode):
        return code
    try:
        return ErrorCode(code)
    except ValueError:
        return ErrorCode.InternalServerError
