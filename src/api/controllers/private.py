"""Endpoints for service-to-service calls."""

from fastapi import APIRouter

from src.api.controllers.base import Controller


class PrivateController(Controller):
    """Routes reachable only from inside the deployment."""

    prefix = "/private"

    def build_router(self) -> APIRouter:
        router = APIRouter()

        @router.get("/status")
        async def status() -> dict[str, str]:
            return {"controller": "private", "status": "ok"}

        return router
