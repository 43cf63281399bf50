"""Unit tests for the cross-origin policy."""

import pytest
import pytest_check
from pytest_mock import MockerFixture
from starlette.requests import HTTPConnection

from src.api.middleware.cors import (
    ALLOW_HEADERS_VALUE,
    ALLOW_METHODS_VALUE,
    apply_cors_headers,
    resolve_origin,
)
from src.api.middleware.pipeline import OutgoingResponse
from src.core.exceptions import HeadersAlreadySentError

EXPECTED_ALLOW_HEADERS = (
    "Origin, X-Requested-With, Content-Type, X-Content-Type, "
    "Authentication, Authorization, X-Access-Token, Accept"
)


@pytest.mark.unit
class TestResolveOrigin:
    """Test cases for resolve_origin."""

    def test_single_origin(self, make_request) -> None:
        """Test a single Origin header is returned as is."""
        request = make_request([("Origin", "https://a.example")])

        assert resolve_origin(request) == "https://a.example"

    def test_missing_origin_is_empty(self, make_request) -> None:
        """Test a missing Origin header gives an empty string."""
        assert resolve_origin(make_request()) == ""

    def test_multiple_origins_are_space_joined_in_order(self, make_request) -> None:
        """Test repeated Origin headers are joined with one space."""
        request = make_request(
            [("Origin", "https://a.example"), ("Origin", "https://b.example")]
        )

        assert resolve_origin(request) == "https://a.example https://b.example"


@pytest.mark.unit
class TestApplyCorsHeaders:
    """Test cases for apply_cors_headers."""

    def test_fixed_header_values(self) -> None:
        """Test the advertised methods and headers."""
        assert ALLOW_METHODS_VALUE == "GET, OPTIONS, POST, DELETE, PUT"
        assert ALLOW_HEADERS_VALUE == EXPECTED_ALLOW_HEADERS

    @pytest.mark.parametrize("method", ["GET", "OPTIONS", "POST", "DELETE", "PUT", "PATCH"])
    def test_sets_all_headers_for_every_method(
        self, make_request, outgoing_response: OutgoingResponse, method: str
    ) -> None:
        """Test the same five headers are set regardless of method."""
        request = make_request([("Origin", "https://a.example")], method=method)

        apply_cors_headers(request, outgoing_response)

        assert outgoing_response.headers == {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "https://a.example",
            "Access-Control-Allow-Methods": "GET, OPTIONS, POST, DELETE, PUT",
            "Access-Control-Allow-Headers": EXPECTED_ALLOW_HEADERS,
            "Access-Control-Allow-Credentials": "true",
        }

    def test_missing_origin_sets_empty_value(
        self, make_request, outgoing_response: OutgoingResponse
    ) -> None:
        """Test the allow-origin header is present but empty without Origin."""
        apply_cors_headers(make_request(), outgoing_response)

        with pytest_check.check:
            assert outgoing_response.get_header("Access-Control-Allow-Origin") == ""
        with pytest_check.check:
            assert "Access-Control-Allow-Origin" in outgoing_response.headers

    def test_multi_valued_origin(
        self, make_request, outgoing_response: OutgoingResponse
    ) -> None:
        """Test a multi-valued Origin is reflected space-joined."""
        request = make_request(
            [("Origin", "https://a.example"), ("Origin", "https://b.example")]
        )

        apply_cors_headers(request, outgoing_response)

        assert (
            outgoing_response.get_header("access-control-allow-origin")
            == "https://a.example https://b.example"
        )

    def test_no_response_is_a_no_op(self, mocker: MockerFixture) -> None:
        """Test nothing is read or written without a response."""
        request = mocker.Mock(spec=HTTPConnection)

        apply_cors_headers(request, None)
        apply_cors_headers(request)

        assert request.mock_calls == []

    def test_websocket_connection_without_response(
        self, websocket_connection: HTTPConnection
    ) -> None:
        """Test connections that never get a response do not fail."""
        apply_cors_headers(websocket_connection, None)

    def test_repeated_application_is_idempotent(
        self, make_request, outgoing_response: OutgoingResponse
    ) -> None:
        """Test applying twice leaves exactly one value per header."""
        request = make_request([("Origin", "https://a.example")])

        apply_cors_headers(request, outgoing_response)
        first = outgoing_response.headers
        apply_cors_headers(request, outgoing_response)

        assert outgoing_response.headers == first

    def test_header_failures_propagate(
        self, make_request, outgoing_response: OutgoingResponse
    ) -> None:
        """Test errors while setting headers are not swallowed."""
        outgoing_response.merge_into([])

        with pytest.raises(HeadersAlreadySentError):
            apply_cors_headers(make_request(), outgoing_response)
