"""Template business logic and its errors.

Every failure is raised as a TemplateError. Each error type reports a
user-safe message, and the technical description and details are kept
for operators. Routers turn them into the standard error envelope.
"""

import re

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from server.errors.capability import ResponseError
from server.errors.codes import ErrorCode
from server.models import Template
from server.repositories.template import add_template, get_template, get_template_by_name

NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 _.-]*$")


class TemplateError(ResponseError, Exception):
    """Base class for all template service errors."""


class TemplateNotFoundError(TemplateError):
    """Raised when no template has the requested ID."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template not found with ID: {template_id}")

    def error_code(self) -> ErrorCode:
        return ErrorCode.NotFound

    def user_message(self) -> str:
        return "The requested template could not be found"

    def technical_description(self) -> str | None:
        return f"Template with ID '{self.template_id}' was not found in the database"

    def technical_details(self) -> str | None:
        return (
            f"Template lookup failed for ID: {self.template_id}. Database query returned "
            "no results. The template may have been deleted or the ID is incorrect."
        )


class TemplateValidationError(TemplateError):
    """Raised when a create request passes schema checks but breaks a template rule."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__("Invalid request data")

    def error_code(self) -> ErrorCode:
        return ErrorCode.BadRequest

    def technical_description(self) -> str | None:
        return f"Request validation failed - {self.reason}"


class TemplateAlreadyExistsError(TemplateError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template name already taken: {name}")

    def error_code(self) -> ErrorCode:
        return ErrorCode.Conflict

    def user_message(self) -> str:
        return "A template with this name already exists"

    def technical_description(self) -> str | None:
        return f"Template name '{self.name}' is already taken"


class TemplateStoreError(TemplateError):
    """Raised when the database fails underneath a template operation.

    Raise it ``from`` the driver error so the chain shows up in the details.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__("Internal server error occurred")

    def error_code(self) -> ErrorCode:
        return ErrorCode.InternalServerError

    def technical_description(self) -> str | None:
        return f"Database operation failed: {self.reason}"


async def get(db: AsyncSession, template_id: str) -> Template:
    """Fetch one template or raise TemplateNotFoundError."""
    try:
        template = await get_template(db, template_id)
    except SQLAlchemyError as exc:
        raise TemplateStoreError("template lookup failed") from exc
    if template is None:
        raise TemplateNotFoundError(template_id)
    return template


async def create(db: AsyncSession, name: str, description: str, content: str) -> Template:
    """Validate and store a new template.

    Names must start with a letter or digit, content must not be blank,
    and names are unique.
    """
    name = name.strip()
    if not NAME_PATTERN.match(name):
        raise TemplateValidationError(f"name '{name}' contains unsupported characters")
    if not content.strip():
        raise TemplateValidationError("content must not be blank")

    try:
        if await get_template_by_name(db, name) is not None:
            raise TemplateAlreadyExistsError(name)
        return await add_template(db, name, description, content)
    except IntegrityError as exc:
        # Lost a race with a concurrent insert of the same name
        await db.rollback()
        raise TemplateAlreadyExistsError(name) from exc
    except SQLAlchemyError as exc:
        await db.rollback()
        raise TemplateStoreError("template insert failed") from exc
