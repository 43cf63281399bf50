"""Cross-origin policy applied to every response.

The requesting origin is reflected back verbatim together with
``Access-Control-Allow-Credentials: true``. That grants any origin
credentialed access; it is kept for compatibility with existing clients and
must not be narrowed without confirming who relies on it.
"""

from starlette.requests import HTTPConnection

from src.api.constants import (
    CORS_ALLOWED_HEADERS,
    CORS_ALLOWED_METHODS,
    JSON_CONTENT_TYPE,
    ORIGIN_HEADER,
)
from src.api.middleware.pipeline import OutgoingResponse

ALLOW_METHODS_VALUE = ", ".join(CORS_ALLOWED_METHODS)
ALLOW_HEADERS_VALUE = ", ".join(CORS_ALLOWED_HEADERS)


def resolve_origin(request: HTTPConnection) -> str:
    """Return the requesting origin as a single header value.

    Multiple Origin headers are joined with a single space in the order they
    were received; a missing header gives an empty string.

    Args:
        request: The incoming request.

    Returns:
        str: The origin to reflect.
    """
    return " ".join(request.headers.getlist(ORIGIN_HEADER))


def apply_cors_headers(
    request: HTTPConnection, response: OutgoingResponse | None = None
) -> None:
    """Set the cross-origin headers on the response.

    Does nothing when there is no response. Errors raised while setting the
    headers are not caught.

    Args:
        request: The incoming request.
        response: Header sink of the outgoing response, if any.
    """
    if response is None:
        return

    response.set_header("Content-Type", JSON_CONTENT_TYPE)
    response.set_header("Access-Control-Allow-Origin", resolve_origin(request))
    response.set_header("Access-Control-Allow-Methods", ALLOW_METHODS_VALUE)
    response.set_header("Access-Control-Allow-Headers", ALLOW_HEADERS_VALUE)
    response.set_header("Access-Control-Allow-Credentials", "true")
