"""Ordered request pipeline wrapped around controller dispatch.

``RequestPipelineMiddleware`` is a pure ASGI middleware so that it sees every
connection, not only plain HTTP requests:

- **http**: request handlers receive the request and an ``OutgoingResponse``
  header sink; the collected headers are merged into the response start
  message, before any body is written.
- **websocket**: request handlers run with no response object.
- **lifespan**: passed through untouched.

Anything raised by a request handler or by the dispatched application is
handed to each error handler in order and then re-raised, leaving the error
response to the server's defaults.
"""

from collections.abc import Sequence

from starlette.requests import HTTPConnection, Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from src.core.exceptions import HeadersAlreadySentError
from src.core.types import ErrorHandler, RequestHandler

type RawHeaders = list[tuple[bytes, bytes]]


class OutgoingResponse:
    """Header sink handed to request handlers before dispatch.

    Header names are case-insensitive and the last write wins. Once the
    response has started, the sink is closed and writes raise
    ``HeadersAlreadySentError``.
    """

    def __init__(self) -> None:
        self._headers: dict[str, tuple[str, str]] = {}
        self._started = False

    @property
    def headers_sent(self) -> bool:
        """Whether the response start has already been emitted."""
        return self._started

    @property
    def headers(self) -> dict[str, str]:
        """Pending headers keyed by the name they were last set with."""
        return dict(self._headers.values())

    def set_header(self, name: str, value: str) -> None:
        """Set a header, replacing any earlier value for the same name.

        Args:
            name: Header name (case-insensitive).
            value: Header value.

        Raises:
            HeadersAlreadySentError: If the response has already started.
        """
        if self._started:
            raise HeadersAlreadySentError(name)
        self._headers[name.lower()] = (name, value)

    def get_header(self, name: str) -> str | None:
        """Return the pending value for a header, if any."""
        entry = self._headers.get(name.lower())
        return entry[1] if entry else None

    def merge_into(self, raw_headers: RawHeaders) -> RawHeaders:
        """Merge pending headers into a response start and close the sink.

        Headers already present were written by the controller after the
        pipeline ran, so they are kept as they are.

        Args:
            raw_headers: Encoded headers of the response start message.

        Returns:
            RawHeaders: The response headers followed by the pending ones.
        """
        present = {key.lower() for key, _ in raw_headers}
        merged = list(raw_headers)
        for key, (_, value) in self._headers.items():
            encoded_key = key.encode("latin-1")
            if encoded_key not in present:
                merged.append((encoded_key, value.encode("latin-1")))
        self._started = True
        return merged


class RequestPipelineMiddleware:
    """Runs request handlers before dispatch and error handlers on failure.

    Args:
        app: The ASGI application to wrap.
        request_handlers: Invoked in order for every request before dispatch.
        error_handlers: Invoked in order with any failure, before re-raising.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        request_handlers: Sequence[RequestHandler] = (),
        error_handlers: Sequence[ErrorHandler] = (),
    ) -> None:
        self.app = app
        self.request_handlers = tuple(request_handlers)
        self.error_handlers = tuple(error_handlers)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            request: HTTPConnection = Request(scope, receive)
            response: OutgoingResponse | None = OutgoingResponse()
        elif scope["type"] == "websocket":
            request = HTTPConnection(scope)
            response = None
        else:
            await self.app(scope, receive, send)
            return

        async def send_wrapper(message: Message) -> None:
            if response is not None and message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                message = {**message, "headers": response.merge_into(headers)}
            await send(message)

        try:
            for handler in self.request_handlers:
                handler(request, response)
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            for error_handler in self.error_handlers:
                error_handler(exc)
            raise
