"""Unauthenticated endpoints: health and instance information."""

from fastapi import APIRouter

from src.api.controllers.base import Controller


class PublicController(Controller):
    """Routes open to any caller."""

    prefix = "/public"

    def build_router(self) -> APIRouter:
        router = APIRouter()
        settings = self.settings

        @router.get("/health")
        async def health() -> dict[str, str]:
            """Health check endpoint for container orchestration.

            Returns:
                dict[str, str]: The service status.
            """
            return {"status": "healthy"}

        @router.get("/info")
        async def info() -> dict[str, str]:
            """Get application information.

            Returns:
                dict[str, str]: Name, version, environment and public domain.
            """
            return {
                "app_name": settings.app_name,
                "version": settings.app_version,
                "environment": settings.environment,
                "domain": settings.domain,
            }

        return router
