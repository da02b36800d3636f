"""User endpoints."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from server.config import settings
from server.dependencies import DB, TraceID
from server.errors.builder import error_response
from server.logging import error_fields, get_logger
from server.schemas.response import SuccessResponse
from server.schemas.user import UserCreate, UserResponse
from server.services import user as user_service
from server.services.user import UserError

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=SuccessResponse[UserResponse], status_code=200)
async def get_user(
    user_id: str, db: DB, trace_id: TraceID
) -> SuccessResponse[UserResponse] | JSONResponse:
    try:
        user = await user_service.get(db, user_id)
    except UserError as e:
        logger.error("user_get_failed", user_id=user_id, **error_fields(e))
        return error_response(trace_id, e, include_details=settings.expose_error_details)
    return SuccessResponse[UserResponse](data=UserResponse.model_validate(user))


@router.post("", response_model=SuccessResponse[UserResponse], status_code=201)
async def create_user(
    payload: UserCreate, db: DB, trace_id: TraceID
) -> SuccessResponse[UserResponse] | JSONResponse:
    try:
        user = await user_service.create(db, payload.email, payload.name)
    except UserError as e:
        logger.error("user_create_failed", user_email=payload.email, **error_fields(e))
        return error_response(trace_id, e, include_details=settings.expose_error_details)
    return SuccessResponse[UserResponse](data=UserResponse.model_validate(user))
