"""The ResponseError capability.

Any error type becomes convertible into an API error response by mixing in
ResponseError and implementing ``error_code()``. The other four operations
have defaults that each type may override independently:

    class TemplateNotFoundError(ResponseError, Exception):
        def error_code(self) -> ErrorCode:
            return ErrorCode.NotFound

        def user_message(self) -> str:
            return "The requested template could not be found"

All operations must be pure: no I/O and no mutation of the error.
"""

from abc import ABC, abstractmethod
from http import HTTPStatus

from server.errors.codes import ErrorCode, default_status


class ResponseError(ABC):
    """Mixin declaring how an error is presented to API clients.

    Carries no state, so it composes with any exception or plain class.
    """

    __slots__ = ()

    @abstractmethod
    def error_code(self) -> ErrorCode:
        """Categorize the error."""

    def status_code(self) -> HTTPStatus:
        """Transport status. Defaults to the category's status."""
        return default_status(self.error_code())

    def user_message(self) -> str:
        """Message safe to show to end users.

        Defaults to ``str(self)``; override when that text contains
        identifiers or other internals.
        """
        return str(self)

    def technical_description(self) -> str | None:
        """Context for developers and operators, e.g. the missing ID."""
        return None

    def technical_details(self) -> str | None:
        """Full diagnostic content for debugging tooling.

        Defaults to the exception chain (``raise ... from ...`` causes and
        implicit contexts), one ``ClassName: message`` line per link, or
        ``None`` when there is no chain.
        """
        if not isinstance(self, BaseException):
            return None
        return format_exception_chain(self)


def format_exception_chain(exc: BaseException) -> str | None:
    """Render the causes of ``exc`` one per line, nearest cause first."""
    lines: list[str] = []
    seen = {id(exc)}
    current = exc.__cause__ or (None if exc.__suppress_context__ else exc.__context__)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        message = str(current)
        name = type(current).__name__
        lines.append(f"{name}: {message}" if message else name)
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__suppress_context__:
            current = None
        else:
            current = current.__context__
    return "\n".join(lines) or None
