"""Per-request traffic logging.

Runs first for every request, before the cross-origin headers and before
controller dispatch. Logging is best-effort: a failure while describing the
request is noted at TRACE level and never interrupts request processing.
"""

from collections.abc import Collection

from loguru import logger
from starlette.requests import HTTPConnection

from src.api.constants import CONTENT_LENGTH_HEADER, WEBSOCKET_METHOD
from src.api.middleware.pipeline import OutgoingResponse
from src.core.constants import REDACTED, SENSITIVE_HEADERS


def _original_url(request: HTTPConnection) -> str:
    url = request.url
    return f"{url.path}?{url.query}" if url.query else url.path


def _loggable_headers(
    request: HTTPConnection, sensitive_headers: Collection[str]
) -> dict[str, str]:
    """Collect request headers with sensitive values redacted.

    Repeated headers are joined with ``", "`` so no value is lost.
    """
    sensitive = {header.lower() for header in sensitive_headers}
    headers: dict[str, str] = {}
    for key in request.headers:
        if key in sensitive:
            headers[key] = REDACTED
        else:
            headers[key] = ", ".join(request.headers.getlist(key))
    return headers


def log_request_information(
    request: HTTPConnection,
    response: OutgoingResponse | None = None,
    *,
    sensitive_headers: Collection[str] = SENSITIVE_HEADERS,
) -> None:
    """Log one summary line plus size and header diagnostics for a request.

    Args:
        request: The incoming request.
        response: Unused; accepted so the function fits the request handler
            chain.
        sensitive_headers: Header names whose values are logged as
            ``REDACTED``.
    """
    try:
        logger.info(
            "{}://{}: {} -- {}",
            request.url.scheme,
            request.headers.get("host", ""),
            request.scope.get("method", WEBSOCKET_METHOD),
            _original_url(request),
        )
        logger.debug(
            "Expected content-size: {}", request.headers.get(CONTENT_LENGTH_HEADER)
        )
        logger.debug(
            "Incoming request with the following headers:\n{}",
            _loggable_headers(request, sensitive_headers),
        )
    except Exception as e:  # noqa: BLE001 - logging must never block a request
        logger.trace(f"Failed to log request information: {e}")
