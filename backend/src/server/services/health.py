"""Database health check."""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from server.errors.capability import ResponseError
from server.errors.codes import ErrorCode


class HealthCheckError(ResponseError, Exception):
    """Raised when a dependency does not answer.

    Only the category is defined; message and details come from the
    defaults (``str(self)`` and the exception chain).
    """

    def error_code(self) -> ErrorCode:
        return ErrorCode.InternalServerError


async def check_database(db: AsyncSession) -> None:
    """Ping the database with ``SELECT 1``."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        raise HealthCheckError("Service is temporarily unavailable") from exc
