"""
Result and Exception Unit Tests
"""

import pytest

from teamwork_api.client.result import Failure, Success, not_implemented
from teamwork_api.exceptions import (
    ErrorKind,
    NetworkErrorCode,
    ResponseError,
    TeamworkError,
    TransportError,
    ValidationError,
    ConfigError,
)


class TestSuccess:

    def test_unwrap_returns_data(self):
        result = Success({"projects": []})
        assert result.ok is True
        assert result.unwrap() == {"projects": []}

    def test_to_dict(self):
        assert Success([1]).to_dict() == {"ok": True, "data": [1]}


class TestFailure:

    def test_response_failure_unwrap_raises(self):
        """Should raise ResponseError carrying status and body"""
        failure = Failure(
            kind=ErrorKind.RESPONSE_ERROR,
            message="Status: 404",
            status_code=404,
            data={"error": "not found"},
        )

        with pytest.raises(ResponseError) as exc_info:
            failure.unwrap()

        error = exc_info.value
        assert error.status_code == 404
        assert error.details == {"error": "not found"}
        assert error.kind == ErrorKind.RESPONSE_ERROR
        assert "404" in str(error)

    def test_transport_failure_unwrap_raises(self):
        failure = Failure(
            kind=ErrorKind.TRANSPORT_ERROR,
            message="Request timed out",
            code=NetworkErrorCode.TIMEOUT.value,
        )

        with pytest.raises(TransportError) as exc_info:
            failure.unwrap()

        assert exc_info.value.network_code == "NET01"
        assert exc_info.value.status_code is None

    def test_to_dict(self):
        failure = Failure(
            kind=ErrorKind.RESPONSE_ERROR, message="Status: 500", status_code=500
        )
        assert failure.to_dict() == {
            "ok": False,
            "kind": "response-error",
            "message": "Status: 500",
            "status_code": 500,
            "code": None,
            "data": None,
        }

    def test_not_implemented(self):
        failure = not_implemented("get_tasks")
        assert failure.ok is False
        assert failure.kind == ErrorKind.NOT_IMPLEMENTED
        assert failure.status_code is None


class TestExceptions:

    def test_hierarchy(self):
        assert issubclass(ResponseError, TeamworkError)
        assert issubclass(TransportError, TeamworkError)
        assert issubclass(ValidationError, ConfigError)

    def test_transport_factories(self):
        assert TransportError.timeout().network_code == NetworkErrorCode.TIMEOUT.value
        assert TransportError.connection_error().network_code == "NET02"
        assert TransportError.ssl_error().network_code == "NET04"

    def test_get_description(self):
        error = ResponseError("Status: 403", status_code=403)
        assert error.get_description() == "[response-error] Status: 403 (HTTP 403)"

    def test_to_dict(self):
        error = TransportError.connection_error("refused")
        data = error.to_dict()
        assert data["name"] == "TransportError"
        assert data["kind"] == "transport-error"
        assert data["code"] == "NET02"
        assert data["message"] == "refused"
