"""Signal-driven process shutdown.

The coordinator owns one subscription per termination signal. Any of them
logs a notice and exits the process with status 0 straight away: there is no
draining of in-flight requests and no difference between signal kinds.
"""

import signal
import sys
from collections.abc import Callable
from enum import Enum
from types import FrameType

from loguru import logger

type ExitFunction = Callable[[int], object]
type SignalHandler = Callable[[int, FrameType | None], object] | int | None

EXIT_STATUS = 0


class SignalKind(Enum):
    """Termination signals the coordinator subscribes to."""

    HANG_UP = signal.SIGHUP
    INTERRUPT = signal.SIGINT
    TERMINATE = signal.SIGTERM

    @property
    def signal_name(self) -> str:
        """Conventional name of the signal, e.g. ``SIGTERM``."""
        return self.value.name


class ShutdownCoordinator:
    """Maps termination signals to an immediate process exit.

    Args:
        exit_fn: Called with the exit status once a signal arrives.
            Defaults to ``sys.exit``; tests pass a recorder instead.
    """

    def __init__(self, exit_fn: ExitFunction = sys.exit) -> None:
        self._exit = exit_fn
        self._previous: dict[SignalKind, SignalHandler] = {}

    @property
    def installed(self) -> bool:
        """Whether the signal handlers are currently in place."""
        return bool(self._previous)

    def install(self) -> None:
        """Subscribe a handler for every SignalKind, remembering the old ones."""
        logger.info("Registering signal handlers")
        for kind in SignalKind:
            self._previous[kind] = signal.signal(kind.value, self._make_handler(kind))

    def uninstall(self) -> None:
        """Restore the handlers that were active before install()."""
        for kind, handler in self._previous.items():
            signal.signal(kind.value, handler)
        self._previous.clear()

    def _make_handler(self, kind: SignalKind) -> Callable[[int, FrameType | None], None]:
        def handle(signum: int, frame: FrameType | None) -> None:
            self.on_signal(kind)

        return handle

    def on_signal(self, kind: SignalKind) -> None:
        """Log the received signal and terminate the process.

        Args:
            kind: The signal that fired.
        """
        logger.info("{} received, shutting down", kind.signal_name)
        self._exit(EXIT_STATUS)
