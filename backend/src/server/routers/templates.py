"""Template endpoints."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from server.config import settings
from server.dependencies import DB, TraceID
from server.errors.builder import error_response
from server.logging import error_fields, get_logger
from server.schemas.response import SuccessResponse
from server.schemas.template import TemplateCreate, TemplateResponse
from server.services import template as template_service
from server.services.template import TemplateError

logger = get_logger(__name__)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("/{template_id}", response_model=SuccessResponse[TemplateResponse], status_code=200)
async def get_template(
    template_id: str, db: DB, trace_id: TraceID
) -> SuccessResponse[TemplateResponse] | JSONResponse:
    """Fetch one template by ID."""
    try:
        template = await template_service.get(db, template_id)
    except TemplateError as e:
        logger.error("template_get_failed", template_id=template_id, **error_fields(e))
        return error_response(trace_id, e, include_details=settings.expose_error_details)
    return SuccessResponse[TemplateResponse](data=TemplateResponse.model_validate(template))


@router.post("", response_model=SuccessResponse[TemplateResponse], status_code=201)
async def create_template(
    payload: TemplateCreate, db: DB, trace_id: TraceID
) -> SuccessResponse[TemplateResponse] | JSONResponse:
    """Create a template."""
    try:
        template = await template_service.create(
            db, payload.name, payload.description, payload.content
        )
    except TemplateError as e:
        logger.error("template_create_failed", template_name=payload.name, **error_fields(e))
        return error_response(trace_id, e, include_details=settings.expose_error_details)
    return SuccessResponse[TemplateResponse](data=TemplateResponse.model_validate(template))
