"""Unit tests for ErrorCode and the default status table."""

from enum import StrEnum
from http import HTTPStatus

import pytest

from server.errors.codes import STATUS_MAP, ErrorCode, default_status, known_code


@pytest.mark.parametrize(
    "code, status",
    [
        (ErrorCode.NotFound, 404),
        (ErrorCode.BadRequest, 400),
        (ErrorCode.UnAuthorized, 401),
        (ErrorCode.Forbidden, 403),
        (ErrorCode.Conflict, 409),
        (ErrorCode.RateLimitExceeded, 429),
        (ErrorCode.InternalServerError, 500),
    ],
)
def test_default_status(code: ErrorCode, status: int) -> None:
    assert default_status(code) == status


def test_every_code_has_an_entry() -> None:
    assert set(STATUS_MAP) == set(ErrorCode)


def test_code_value_is_variant_name() -> None:
    for code in ErrorCode:
        assert code.value == code.name


def test_unmapped_code_falls_back_to_internal_server_error() -> None:
    class FutureCode(StrEnum):
        Teapot = "Teapot"

    assert default_status(FutureCode.Teapot) == HTTPStatus.INTERNAL_SERVER_ERROR  # type: ignore[arg-type]


def test_status_map_is_read_only() -> None:
    with pytest.raises(TypeError):
        STATUS_MAP[ErrorCode.NotFound] = HTTPStatus.GONE  # type: ignore[index]
    assert default_status(ErrorCode.NotFound) == HTTPStatus.NOT_FOUND


def test_known_code_resolves_members_and_names() -> None:
    class FutureCode(StrEnum):
        Teapot = "Teapot"

    assert known_code(ErrorCode.Conflict) is ErrorCode.Conflict
    assert known_code("NotFound") is ErrorCode.NotFound  # type: ignore[arg-type]
    assert known_code(FutureCode.Teapot) is ErrorCode.InternalServerError  # type: ignore[arg-type]
