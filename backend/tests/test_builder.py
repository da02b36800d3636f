"""Unit tests for assembling ApiError values and JSON error responses."""

import json
from datetime import UTC, datetime
from enum import StrEnum

import pytest

from server.errors.builder import build_api_error, error_response
from server.errors.capability import ResponseError
from server.errors.codes import ErrorCode
from server.schemas.error import ApiErrorResponse
from server.services.template import TemplateNotFoundError, TemplateValidationError
from server.services.user import InvalidEmailError


class BareError(ResponseError, Exception):
    def error_code(self) -> ErrorCode:
        return ErrorCode.UnAuthorized


class EmptyDescriptionError(BareError):
    def technical_description(self) -> str | None:
        return ""


class BrokenMessageError(BareError):
    def user_message(self) -> str:
        raise RuntimeError("message lookup crashed")


class FutureCode(StrEnum):
    Teapot = "Teapot"


class FutureCategoryError(ResponseError, Exception):
    """Reports a category this release does not know yet."""

    def error_code(self) -> ErrorCode:
        return FutureCode.Teapot  # type: ignore[return-value]


@pytest.mark.parametrize("trace_id", ["template.get", "", "3f1c2a9e-0000-4000-8000-000000000000"])
def test_trace_id_is_copied_verbatim(trace_id: str) -> None:
    assert build_api_error(trace_id, BareError("Authentication required")).trace_id == trace_id


def test_timestamp_is_captured_at_build_time() -> None:
    before = datetime.now(UTC)
    api_error = build_api_error("t", BareError("Authentication required"))
    after = datetime.now(UTC)

    assert api_error.timestamp.tzinfo is not None
    assert before <= api_error.timestamp <= after


def test_fields_come_from_the_capability() -> None:
    api_error = build_api_error("t", TemplateNotFoundError("abc123"))

    assert api_error.code == ErrorCode.NotFound
    assert api_error.status == 404
    assert api_error.message == "The requested template could not be found"
    assert api_error.description == "Template with ID 'abc123' was not found in the database"
    assert api_error.details is not None and "abc123" in api_error.details


def test_absent_tiers_are_none() -> None:
    api_error = build_api_error("t", BareError("Authentication required"))

    assert api_error.status == 401
    assert api_error.message == "Authentication required"
    assert api_error.description is None
    assert api_error.details is None


def test_empty_strings_are_treated_as_absent() -> None:
    api_error = build_api_error("t", EmptyDescriptionError("Authentication required"))
    assert api_error.description is None


def test_include_details_false_drops_details_only() -> None:
    api_error = build_api_error("t", TemplateNotFoundError("abc123"), include_details=False)

    assert api_error.details is None
    assert api_error.description is not None


def test_capability_failure_propagates() -> None:
    with pytest.raises(RuntimeError, match="message lookup crashed"):
        build_api_error("t", BrokenMessageError())


def test_response_status_matches_body_status() -> None:
    response = error_response("t", InvalidEmailError("nope"))
    body = json.loads(response.body)

    assert response.status_code == 422
    assert body["error"]["status"] == 422
    assert body["error"]["code"] == "BadRequest"
    assert response.headers["content-type"] == "application/json"


def test_envelope_shape() -> None:
    body = json.loads(error_response("trace-9", BareError("Authentication required")).body)

    assert body["success"] is False
    assert set(body["error"]) == {"trace_id", "timestamp", "code", "status", "message"}
    assert body["error"]["trace_id"] == "trace-9"
    assert body["error"]["code"] == "UnAuthorized"
    datetime.fromisoformat(body["error"]["timestamp"])


def test_envelope_round_trip() -> None:
    original = build_api_error("t", TemplateValidationError("content must not be blank"))
    body = json.loads(json.dumps(ApiErrorResponse(error=original).to_body()))

    parsed = ApiErrorResponse.model_validate(body).error

    assert parsed.code == original.code
    assert parsed.status == original.status
    assert parsed.message == original.message
    assert parsed.description == original.description
    assert parsed.details == original.details
    assert parsed.timestamp == original.timestamp


def test_unknown_category_falls_back_to_internal_server_error() -> None:
    response = error_response("t-teapot", FutureCategoryError("Brewing failed"))
    body = json.loads(response.body)

    assert response.status_code == 500
    assert body["success"] is False
    assert body["error"]["code"] == "InternalServerError"
    assert body["error"]["status"] == 500
    assert body["error"]["message"] == "Brewing failed"
    assert body["error"]["trace_id"] == "t-teapot"
