"""User business logic and its errors."""

import re
from http import HTTPStatus

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from server.errors.capability import ResponseError
from server.errors.codes import ErrorCode
from server.models import User
from server.repositories.user import add_user, get_user, get_user_by_email

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class UserError(ResponseError, Exception):
    """Base class for all user service errors."""


class UserNotFoundError(UserError):
    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User not found with ID: {user_id}")

    def error_code(self) -> ErrorCode:
        return ErrorCode.NotFound

    def user_message(self) -> str:
        return "The requested user could not be found"

    def technical_description(self) -> str | None:
        return f"User with ID '{self.user_id}' was not found in the database"

    def technical_details(self) -> str | None:
        return (
            f"User lookup failed for ID: {self.user_id}. Query on table 'users' by primary key "
            "returned no results. The user may have been deleted or the ID is incorrect."
        )


class InvalidEmailError(UserError):
    """Raised when an email address is malformed.

    Categorized as BadRequest but answered with 422, the status FastAPI
    uses for other payload validation failures.
    """

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Invalid email format: {email}")

    def error_code(self) -> ErrorCode:
        return ErrorCode.BadRequest

    def status_code(self) -> HTTPStatus:
        return HTTPStatus.UNPROCESSABLE_ENTITY

    def user_message(self) -> str:
        return "Please provide a valid email address"

    def technical_description(self) -> str | None:
        return f"Email '{self.email}' does not match required format"

    def technical_details(self) -> str | None:
        return (
            f"Email validation failed for: {self.email}. Expected format: user@domain.com. "
            f"Validation regex: {EMAIL_PATTERN.pattern}"
        )


class UserAlreadyExistsError(UserError):
    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("User already exists")

    def error_code(self) -> ErrorCode:
        return ErrorCode.Conflict

    def technical_description(self) -> str | None:
        return "User creation failed - email address already registered"

    def technical_details(self) -> str | None:
        return f"Unique constraint on users.email rejected '{self.email}'"


class UserStoreError(UserError):
    """Raised when the database fails underneath a user operation."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Database connection failed: {reason}")

    def error_code(self) -> ErrorCode:
        return ErrorCode.InternalServerError

    def user_message(self) -> str:
        return "Unable to process your request at this time"

    def technical_description(self) -> str | None:
        return f"Database operation failed: {self.reason}"


async def get(db: AsyncSession, user_id: str) -> User:
    """Fetch one user or raise UserNotFoundError."""
    try:
        user = await get_user(db, user_id)
    except SQLAlchemyError as exc:
        raise UserStoreError("user lookup failed") from exc
    if user is None:
        raise UserNotFoundError(user_id)
    return user


async def create(db: AsyncSession, email: str, name: str) -> User:
    """Register a new user.

    Emails are stored lowercased, so the unique constraint on users.email
    rejects addresses that differ only in case, even under concurrent inserts.
    """
    email = email.strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise InvalidEmailError(email)

    try:
        if await get_user_by_email(db, email) is not None:
            raise UserAlreadyExistsError(email)
        return await add_user(db, email, name)
    except IntegrityError as exc:
        await db.rollback()
        raise UserAlreadyExistsError(email) from exc
    except SQLAlchemyError as exc:
        await db.rollback()
        raise UserStoreError("user insert failed") from exc
