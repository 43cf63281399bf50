"""Type aliases for the request pipeline and its collaborators.

The pipeline treats its handlers as plain callables so that controllers,
middleware and tests can supply any function with the right shape.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from starlette.requests import HTTPConnection

    from src.api.middleware.pipeline import OutgoingResponse

# ASGI scope type for middleware implementations
# Following ASGI spec: https://asgi.readthedocs.io/en/latest/specs/www.html
type AsgiScope = dict[str, Any]

# Runs before controller dispatch; the response is None for scopes that
# never produce an HTTP response (websockets)
type RequestHandler = Callable[["HTTPConnection", "OutgoingResponse | None"], None]

# Receives any failure raised while a request is processed
type ErrorHandler = Callable[[object], None]

# Logger callback handed to the application, print-style positional arguments
type LogFunction = Callable[..., None]
