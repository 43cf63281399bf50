"""Terminal sink for failures raised while handling a request.

A failure is first classified at the boundary: either it can describe itself
as text (``HasText``) or it cannot (``Opaque``). Only the former is logged.
The reporter never raises, never retries and never touches the response.
"""

from dataclasses import dataclass

from loguru import logger


@dataclass(frozen=True, slots=True)
class HasText:
    """A failure with a textual representation."""

    text: str


@dataclass(frozen=True, slots=True)
class Opaque:
    """A failure that cannot be turned into text."""


type ErrorDescription = HasText | Opaque


def describe_error(error: object) -> ErrorDescription:
    """Classify a failure by whether it can be rendered as text.

    Every value renders through ``str()`` except a bare ``object()``, which
    carries no information, and values whose ``__str__`` raises. Numbers,
    containers and dataclass instances render with their default text.

    Args:
        error: Any failure value.

    Returns:
        ErrorDescription: ``HasText`` with the rendered text, or ``Opaque``.
    """
    if type(error) is object:
        return Opaque()
    try:
        return HasText(str(error))
    except Exception:  # noqa: BLE001 - a broken __str__ makes the value opaque
        return Opaque()


def report_error(error: object | None) -> None:
    """Log the textual form of a failure, if it has one.

    Args:
        error: The failure to report; ``None`` is ignored.
    """
    if error is None:
        return
    description = describe_error(error)
    if isinstance(description, HasText):
        logger.error(description.text)
