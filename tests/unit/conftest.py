"""Shared fixtures for unit tests."""

from collections.abc import Callable

import pytest
from starlette.requests import HTTPConnection, Request

from src.api.middleware.pipeline import OutgoingResponse
from src.core.config import Settings

type RequestFactory = Callable[..., Request]


@pytest.fixture
def settings() -> Settings:
    """Provide Settings built from defaults only.

    Returns:
        Settings: Settings that ignore any .env file.
    """
    return Settings(_env_file=None)


@pytest.fixture
def make_request() -> RequestFactory:
    """Build real Starlette requests from raw header pairs.

    Returns:
        RequestFactory: Factory accepting headers, method, path and query.
    """

    def factory(
        headers: list[tuple[str, str]] | None = None,
        *,
        method: str = "GET",
        path: str = "/public/health",
        query: str = "",
    ) -> Request:
        scope = {
            "type": "http",
            "method": method,
            "scheme": "http",
            "server": ("testserver", 80),
            "root_path": "",
            "path": path,
            "query_string": query.encode("latin-1"),
            "headers": [
                (key.lower().encode("latin-1"), value.encode("latin-1"))
                for key, value in headers or []
            ],
        }
        return Request(scope)

    return factory


@pytest.fixture
def websocket_connection() -> HTTPConnection:
    """Provide a websocket connection, which never has an HTTP response.

    Returns:
        HTTPConnection: Connection for a websocket scope.
    """
    return HTTPConnection(
        {
            "type": "websocket",
            "scheme": "ws",
            "server": ("testserver", 80),
            "root_path": "",
            "path": "/saml/events",
            "query_string": b"",
            "headers": [(b"host", b"testserver")],
        }
    )


@pytest.fixture
def outgoing_response() -> OutgoingResponse:
    """Provide an empty response header sink.

    Returns:
        OutgoingResponse: Fresh sink with no headers.
    """
    return OutgoingResponse()
