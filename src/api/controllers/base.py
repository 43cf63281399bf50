"""Base class for route-owning controllers."""

from abc import ABC, abstractmethod
from typing import ClassVar

from fastapi import APIRouter, FastAPI

from src.core.config import Settings


class Controller(ABC):
    """A unit that owns the routes under one path prefix.

    Controllers register themselves with the application; nothing else routes
    on their behalf.

    Args:
        settings: Application settings.
    """

    prefix: ClassVar[str]

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @property
    def name(self) -> str:
        """Controller name used in logs and OpenAPI tags."""
        return type(self).__name__

    @abstractmethod
    def build_router(self) -> APIRouter:
        """Create the router holding this controller's endpoints."""

    def register(self, app: FastAPI) -> None:
        """Attach this controller's routes to the application.

        Args:
            app: The FastAPI application to extend.
        """
        app.include_router(self.build_router(), prefix=self.prefix, tags=[self.name])
