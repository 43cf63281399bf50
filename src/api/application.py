"""Application assembly on top of FastAPI and uvicorn.

``RestApplicationBuilder`` collects the pieces of the application as explicit
ordered lists: controllers, request handlers that run before dispatch, error
handlers, and a logger callback. ``build()`` freezes them into a
``RestApplication``; nothing can be added or removed afterwards.

``RestApplication.start()`` serves the app with uvicorn. Uvicorn's own signal
capture is disabled so the process-wide shutdown handlers installed by the
server stay in force while it is listening.
"""

from collections.abc import AsyncGenerator, Generator
from contextlib import asynccontextmanager, contextmanager
from typing import Self

import uvicorn
from fastapi import FastAPI

from src.api.controllers.base import Controller
from src.api.middleware.pipeline import RequestPipelineMiddleware
from src.api.utils.responses import ORJSONResponse
from src.core.constants import DEFAULT_PORT
from src.core.exceptions import ApplicationBuildError
from src.core.logging import UVICORN_LOG_CONFIG, log_message
from src.core.types import ErrorHandler, LogFunction, RequestHandler


class _UvicornServer(uvicorn.Server):
    """Uvicorn server that leaves process signal handling to its owner."""

    @contextmanager
    def capture_signals(self) -> Generator[None]:
        yield


class RestApplication:
    """A fully assembled application with a fixed composition.

    Use ``RestApplicationBuilder`` to create one.
    """

    def __init__(
        self,
        *,
        controllers: tuple[Controller, ...],
        request_handlers: tuple[RequestHandler, ...],
        error_handlers: tuple[ErrorHandler, ...],
        log_fn: LogFunction,
        host: str,
        port: int,
        title: str,
        version: str,
    ) -> None:
        self.controllers = controllers
        self.request_handlers = request_handlers
        self.error_handlers = error_handlers
        self.host = host
        self.port = port
        self._log = log_fn
        self._app = self._create_app(title, version)

    def _create_app(self, title: str, version: str) -> FastAPI:
        application = FastAPI(
            title=title,
            version=version,
            default_response_class=ORJSONResponse,
            lifespan=self._lifespan,
        )

        for controller in self.controllers:
            controller.register(application)
            self._log("Registered controller", controller.name, "at", controller.prefix)

        application.add_middleware(
            RequestPipelineMiddleware,
            request_handlers=self.request_handlers,
            error_handlers=self.error_handlers,
        )
        return application

    @asynccontextmanager
    async def _lifespan(self, app_instance: FastAPI) -> AsyncGenerator[None]:
        """Log application startup and shutdown.

        Args:
            app_instance: The FastAPI application instance.

        Yields:
            None: Nothing is yielded, this is just a lifespan context.
        """
        self._log(
            f"Application startup complete - {app_instance.title} "
            f"v{app_instance.version}"
        )
        self._log(f"Listening on http://{self.host}:{self.port}")

        yield

        self._log("Application shutdown complete")

    def get_app(self) -> FastAPI:
        """Return the underlying ASGI application."""
        return self._app

    def start(self) -> None:
        """Serve the application until the process is stopped.

        Startup failures such as an already bound port are raised by uvicorn
        unchanged.
        """
        config = uvicorn.Config(
            self._app,
            host=self.host,
            port=self.port,
            log_config=UVICORN_LOG_CONFIG,
        )
        _UvicornServer(config).run()


class RestApplicationBuilder:
    """Collects the ordered composition of a ``RestApplication``.

    Args:
        title: Application title reported in logs and OpenAPI.
        version: Application version.

    Example:
        >>> application = (
        ...     RestApplicationBuilder(title="auth-server", version="1.0.0")
        ...     .with_port(9004)
        ...     .add_controller(controller)
        ...     .add_request_handler(log_request_information)
        ...     .add_error_handler(report_error)
        ...     .build()
        ... )
    """

    def __init__(self, *, title: str, version: str) -> None:
        self._title = title
        self._version = version
        self._host = "0.0.0.0"  # nosec B104
        self._port = DEFAULT_PORT
        self._log: LogFunction = log_message
        self._controllers: list[Controller] = []
        self._request_handlers: list[RequestHandler] = []
        self._error_handlers: list[ErrorHandler] = []
        self._built = False

    def with_host(self, host: str) -> Self:
        """Set the interface to bind."""
        self._host = host
        return self

    def with_port(self, port: int) -> Self:
        """Set the port to listen on."""
        self._port = port
        return self

    def with_logger(self, log_fn: LogFunction) -> Self:
        """Set the callback used for the application's own log lines."""
        self._log = log_fn
        return self

    def add_controller(self, controller: Controller) -> Self:
        """Append a controller; registration follows insertion order."""
        self._controllers.append(controller)
        return self

    def add_request_handler(self, handler: RequestHandler) -> Self:
        """Append a handler run for every request before dispatch."""
        self._request_handlers.append(handler)
        return self

    def add_error_handler(self, handler: ErrorHandler) -> Self:
        """Append a handler run with every unhandled failure."""
        self._error_handlers.append(handler)
        return self

    def build(self) -> RestApplication:
        """Freeze the composition into an application.

        Returns:
            RestApplication: The assembled application.

        Raises:
            ApplicationBuildError: If the builder was already used, no
                controller was added, or two controllers share a prefix.
        """
        if self._built:
            raise ApplicationBuildError("Application has already been built")
        if not self._controllers:
            raise ApplicationBuildError("At least one controller is required")

        prefixes = [controller.prefix for controller in self._controllers]
        duplicates = sorted({prefix for prefix in prefixes if prefixes.count(prefix) > 1})
        if duplicates:
            msg = f"Controllers must own disjoint prefixes, duplicated: {duplicates}"
            raise ApplicationBuildError(msg)

        self._built = True
        return RestApplication(
            controllers=tuple(self._controllers),
            request_handlers=tuple(self._request_handlers),
            error_handlers=tuple(self._error_handlers),
            log_fn=self._log,
            host=self._host,
            port=self._port,
            title=self._title,
            version=self._version,
        )
