"""Wrapping errors that delegate to an inner ResponseError.

A wrapper forwards every operation to the error it wraps. Subclasses
override individual operations by redefining them; nothing is unwrapped
implicitly, so each override is visible in the subclass body.
"""

from http import HTTPStatus

from server.errors.capability import ResponseError
from server.errors.codes import ErrorCode, default_status


class DelegatingError(ResponseError, Exception):
    """Exception that presents itself exactly like ``inner``."""

    def __init__(self, inner: ResponseError) -> None:
        self.inner = inner
        super().__init__(str(inner))
        if isinstance(inner, BaseException):
            self.__cause__ = inner

    def error_code(self) -> ErrorCode:
        return self.inner.error_code()

    def status_code(self) -> HTTPStatus:
        return self.inner.status_code()

    def user_message(self) -> str:
        return self.inner.user_message()

    def technical_description(self) -> str | None:
        return self.inner.technical_description()

    def technical_details(self) -> str | None:
        return self.inner.technical_details()


class RateLimitExceededError(DelegatingError):
    """Request rejected by a rate limit while ``inner`` was being reported.

    Reports the RateLimitExceeded category and a retry message, and keeps
    the inner error's technical description and details.
    """

    def __init__(self, inner: ResponseError, retry_after: int | None = None) -> None:
        self.retry_after = retry_after
        super().__init__(inner)

    def error_code(self) -> ErrorCode:
        return ErrorCode.RateLimitExceeded

    def status_code(self) -> HTTPStatus:
        return default_status(self.error_code())

    def user_message(self) -> str:
        if self.retry_after is None:
            return "Too many requests, please try again later"
        return f"Too many requests, please try again in {self.retry_after} seconds"
