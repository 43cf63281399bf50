"""Endpoints behind token authentication."""

from fastapi import APIRouter

from src.api.controllers.base import Controller


class SecureController(Controller):
    """Routes for authenticated callers."""

    prefix = "/secure"

    def build_router(self) -> APIRouter:
        router = APIRouter()

        @router.get("/status")
        async def status() -> dict[str, str]:
            """Report that the secure area is reachable."""
            return {"controller": "secure", "status": "ok"}

        return router
