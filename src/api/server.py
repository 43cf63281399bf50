"""Auth server orchestration.

``Server`` owns the resolved configuration, assembles the application and
controls the process lifecycle:

1. Construction resolves settings, configures logging and builds the
   application with a fixed composition: controllers in registry order,
   request logging then CORS headers before every dispatch, and error
   reporting for unhandled failures.
2. ``start()`` installs the signal-driven shutdown coordinator and then
   starts listening on the configured port.
"""

import sys
from functools import partial

from fastapi import FastAPI

from src.api.application import RestApplication, RestApplicationBuilder
from src.api.controllers import CONTROLLERS
from src.api.middleware.cors import apply_cors_headers
from src.api.middleware.error_reporting import report_error
from src.api.middleware.request_logging import log_request_information
from src.core.config import Settings, get_settings
from src.core.logging import log_message, setup_logging
from src.core.shutdown import ExitFunction, ShutdownCoordinator


class Server:
    """Top-level orchestrator of the auth server front-end.

    Args:
        settings: Optional settings instance. If not provided, will use
            get_settings().
        exit_fn: Process exit function handed to the shutdown coordinator.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        exit_fn: ExitFunction = sys.exit,
    ) -> None:
        self._settings = settings if settings is not None else get_settings()
        setup_logging(self._settings)
        self._exit_fn = exit_fn
        self._shutdown: ShutdownCoordinator | None = None
        self._application = self._build_application()

    @property
    def port(self) -> int:
        """Port the server listens on."""
        return self._settings.port

    @property
    def domain(self) -> str:
        """Public URL of this instance."""
        return self._settings.domain

    @property
    def application(self) -> RestApplication:
        """The assembled application."""
        return self._application

    @property
    def shutdown(self) -> ShutdownCoordinator | None:
        """The shutdown coordinator, once start() has installed it."""
        return self._shutdown

    def _build_application(self) -> RestApplication:
        builder = (
            RestApplicationBuilder(
                title=self._settings.app_name, version=self._settings.app_version
            )
            .with_host(self._settings.api_host)
            .with_port(self.port)
            .with_logger(log_message)
        )

        for controller_class in CONTROLLERS:
            builder.add_controller(controller_class(self._settings))

        log_requests = partial(
            log_request_information,
            sensitive_headers=self._settings.log_config.sensitive_headers,
        )

        return (
            builder.add_request_handler(log_requests)
            .add_request_handler(apply_cors_headers)
            .add_error_handler(report_error)
            .build()
        )

    def _init(self) -> None:
        self._shutdown = ShutdownCoordinator(exit_fn=self._exit_fn)
        self._shutdown.install()

    def start(self) -> None:
        """Install the shutdown handlers, then begin accepting connections."""
        self._init()
        self._application.start()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the fully assembled ASGI application without serving it.

    Args:
        settings: Optional settings instance. If not provided, will use
            get_settings().

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    return Server(settings).application.get_app()
