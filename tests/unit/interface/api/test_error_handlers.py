"""Unit tests for API error handlers."""

import json

import pytest
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from guestbook.interface.api.error_handlers import (
    error_response,
    http_exception_handler,
    persistence_error_handler,
    request_validation_handler,
    unhandled_error_handler,
)
from guestbook.persistence.error import PersistenceError, storage_errors


def make_request(method: str = "GET", path: str = "/api/comments") -> Request:
    """Build a bare request for calling handlers directly."""
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "headers": [],
            "query_string": b"",
        }
    )


def body_of(response) -> dict:
    return json.loads(response.body)


class TestErrorHandlers:
    """Every handler should answer with an {"error": message} body."""

    @pytest.mark.asyncio
    async def test_http_exception_keeps_status_and_detail(self):
        response = await http_exception_handler(
            make_request(),
            StarletteHTTPException(status_code=404, detail="Comment not found: x"),
        )

        assert response.status_code == 404
        assert body_of(response) == {"error": "Comment not found: x"}

    @pytest.mark.asyncio
    async def test_request_validation_is_bad_request(self):
        response = await request_validation_handler(
            make_request("POST"),
            RequestValidationError([{"loc": ("body",), "msg": "bad", "type": "x"}]),
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert body_of(response) == {"error": "Invalid request body"}

    @pytest.mark.asyncio
    async def test_persistence_error_is_server_error(self):
        error = PersistenceError("find_all comments", RuntimeError("down"))

        response = await persistence_error_handler(make_request(), error)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert body_of(response) == {"error": "Storage is unavailable"}

    @pytest.mark.asyncio
    async def test_unhandled_error_hides_details(self):
        response = await unhandled_error_handler(
            make_request(), RuntimeError("secret stack detail")
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert body_of(response) == {"error": "Internal server error"}


class TestStorageErrors:
    """Tests for the storage_errors context manager."""

    def test_sqlalchemy_errors_become_persistence_errors(self):
        with pytest.raises(PersistenceError) as exc_info:
            with storage_errors("count comments"):
                raise OperationalError("SELECT 1", {}, Exception("refused"))

        assert exc_info.value.operation == "count comments"
        assert "count comments failed" in str(exc_info.value)

    def test_other_errors_pass_through(self):
        with pytest.raises(KeyError):
            with storage_errors("count comments"):
                raise KeyError("id")


class TestErrorResponse:
    def test_headers_are_forwarded(self):
        response = error_response(405, "Method Not Allowed", headers={"Allow": "GET"})

        assert response.headers["allow"] == "GET"
        assert body_of(response) == {"error": "Method Not Allowed"}
