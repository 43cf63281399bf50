"""Exception hierarchy for the auth server front-end.

Only misuse of the application wiring is modelled here. Configuration
problems degrade to defaults and controller failures are reported through the
error handler chain, so neither has an exception type of its own.
"""

from enum import Enum


class ErrorCode(Enum):
    """Standardized error codes for the auth server front-end."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""

    APPLICATION_BUILD_ERROR = "APPLICATION_BUILD_ERROR"
    """The application was assembled from an invalid composition."""

    HEADERS_ALREADY_SENT = "HEADERS_ALREADY_SENT"
    """A response header was written after the response had started."""


class ServiceError(Exception):
    """Base exception class for all application exceptions.

    Args:
        message: Human-readable error message
        error_code: Unique identifier for the error type
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code.value

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(error_code={self.error_code!r}, "
            f"message={self.message!r})"
        )


class ApplicationBuildError(ServiceError):
    """Raised when the controller or handler composition is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.APPLICATION_BUILD_ERROR)


class HeadersAlreadySentError(ServiceError):
    """Raised when a header is set on a response that has already started."""

    def __init__(self, header: str) -> None:
        super().__init__(
            f"Cannot set header {header!r} after the response has started",
            ErrorCode.HEADERS_ALREADY_SENT,
        )
        self.header = header
